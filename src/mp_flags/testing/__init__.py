"""Testing – doubles for the flag sources."""
