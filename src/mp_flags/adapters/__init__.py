"""Adapters – concrete sources backed by external services."""
