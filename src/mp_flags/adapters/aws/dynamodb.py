"""AWS adapters – DynamoTenantOverrideSource."""
from __future__ import annotations

from typing import Any

from mp_flags.adapters.aws import _session
from mp_flags.config import FlagConfig

__all__ = ["DynamoTenantOverrideSource"]


class DynamoTenantOverrideSource:
    """TenantOverrideSource backed by a DynamoDB table.

    Items are keyed by the string attribute ``flagKey`` (the bare flag key
    or ``{flag}:tenant:{tenant_id}``) and carry the override in ``value``
    as a string, boolean or number attribute.
    """

    def __init__(self, config: FlagConfig, *, session: Any | None = None) -> None:
        self._config = config
        self._session = session

    async def get(self, key: str) -> str | None:
        session = self._session or _session.get_session()
        async with session.create_client("dynamodb", region_name=self._config.region) as client:
            resp = await client.get_item(
                TableName=self._config.dynamo_table_name,
                Key={"flagKey": {"S": key}},
            )
        item = resp.get("Item")
        if not item or "value" not in item:
            return None
        attr = item["value"]
        if "S" in attr:
            return attr["S"]
        if "BOOL" in attr:
            return "true" if attr["BOOL"] else "false"
        if "N" in attr:
            return attr["N"]
        return None
