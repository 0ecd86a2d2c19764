"""AWS adapters – AppConfigRemoteSource."""
from __future__ import annotations

import asyncio
import json
import time
import weakref
from typing import Any

from mp_flags.adapters.aws import _session
from mp_flags.config import FlagConfig
from mp_flags.kernel.errors import SerializationError

__all__ = ["AppConfigRemoteSource", "normalise_value"]

_DEFAULT_POLL_INTERVAL = 60.0


def normalise_value(value: Any) -> str | None:
    """Render a JSON scalar the way the rest of the chain expects it."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, sort_keys=True)


class AppConfigRemoteSource:
    """RemoteConfigSource backed by an AWS AppConfig freeform JSON profile.

    A configuration session is started on first use and the latest
    document is polled no more often than AppConfig asks for
    (``NextPollIntervalInSeconds``). Flag lookups between polls are served
    from the last document. An empty ``Configuration`` in a poll response
    means "unchanged" and keeps the previous document.

    The next token and poll deadline are only stored once a response has
    been read and decoded; a failed poll drops the session so the next
    ``fetch`` starts a new one and receives the full document again.
    The poll lock is per event loop, so one source can be shared by
    resolvers driven from several ``asyncio.run`` calls.
    """

    def __init__(self, config: FlagConfig, *, session: Any | None = None) -> None:
        self._config = config
        self._session = session
        self._token: str | None = None
        self._document: dict[str, Any] = {}
        self._next_poll_at = 0.0
        self._locks: weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, asyncio.Lock] = (
            weakref.WeakKeyDictionary()
        )

    async def fetch(self, key: str) -> str | None:
        if time.monotonic() >= self._next_poll_at:
            async with self._poll_lock():
                if time.monotonic() >= self._next_poll_at:
                    await self._poll()
        return normalise_value(self._document.get(key))

    def _poll_lock(self) -> asyncio.Lock:
        loop = asyncio.get_running_loop()
        lock = self._locks.get(loop)
        if lock is None:
            lock = self._locks[loop] = asyncio.Lock()
        return lock

    async def _poll(self) -> None:
        session = self._session or _session.get_session()
        async with session.create_client("appconfigdata", region_name=self._config.region) as client:
            try:
                token = self._token
                if token is None:
                    started = await client.start_configuration_session(
                        ApplicationIdentifier=self._config.app_config_application,
                        EnvironmentIdentifier=self._config.app_config_environment,
                        ConfigurationProfileIdentifier=self._config.app_config_profile,
                    )
                    token = started["InitialConfigurationToken"]
                resp = await client.get_latest_configuration(ConfigurationToken=token)
                # the body streams from the client's connection, read it before closing
                payload = resp.get("Configuration")
                raw = await payload.read() if payload is not None else b""
                document = self._decode(raw) if raw else None
            except Exception:
                # expired or rejected token, or an unreadable response
                self._token = None
                raise
        if document is not None:
            self._document = document
        self._token = resp["NextPollConfigurationToken"]
        self._next_poll_at = time.monotonic() + float(
            resp.get("NextPollIntervalInSeconds", _DEFAULT_POLL_INTERVAL)
        )

    def _decode(self, raw: bytes) -> dict[str, Any]:
        try:
            document = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise SerializationError(
                "AppConfig profile is not valid JSON", payload_type="appconfig", cause=exc
            ) from exc
        if not isinstance(document, dict):
            raise SerializationError(
                f"AppConfig profile must be a JSON object, got {type(document).__name__}",
                payload_type="appconfig",
            )
        return document
