"""AWS adapters – AppConfig remote source, DynamoDB override store (requires 'aiobotocore' extra)."""
from mp_flags.adapters.aws.appconfig import AppConfigRemoteSource
from mp_flags.adapters.aws.dynamodb import DynamoTenantOverrideSource

__all__ = ["AppConfigRemoteSource", "DynamoTenantOverrideSource"]
