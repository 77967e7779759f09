"""Async client for the Eight Sleep cloud API."""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import aiohttp

from eightsleep.adapter.power_state import PowerState
from eightsleep.const import (
    APP_API_URL,
    CLIENT_API_URL,
    REQUEST_TIMEOUT,
    SESSION_REFRESH_BUFFER,
    USER_AGENT,
)
from eightsleep.exceptions import (
    AuthenticationException,
    RemoteCallException,
    RemoteConnectionException,
)
from eightsleep.models import CurrentDevice, DeviceStatus, UserTemperature

_LOGGER = logging.getLogger(__name__)


class EightSleepClient:
    """Client shared by both sides of a bed. Owns the login session."""

    def __init__(
        self,
        email: str,
        password: str,
        session: aiohttp.ClientSession | None = None,
    ):
        self._email = email
        self._password = password
        self._session = session
        self._owns_session = session is None
        self._token: str | None = None
        self._token_expiry: datetime | None = None
        self._user_id: str | None = None

    @property
    def user_id(self) -> str | None:
        return self._user_id

    @property
    def is_logged_in(self) -> bool:
        if self._token is None or self._token_expiry is None:
            return False

        refresh_at = self._token_expiry - timedelta(seconds=SESSION_REFRESH_BUFFER)
        return datetime.now(timezone.utc) < refresh_at

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the HTTP session if it was created by the client."""

        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def async_login(self) -> None:
        """Log in with email and password and keep the session token."""

        result = await self._send(
            "POST",
            f"{CLIENT_API_URL}/login",
            {"email": self._email, "password": self._password},
        )

        try:
            session = result["session"]
            self._token = session["token"]
            self._user_id = session["userId"]
            self._token_expiry = datetime.fromisoformat(session["expirationDate"])
        except (KeyError, TypeError, ValueError) as ex:
            raise AuthenticationException(f"Unexpected login response: {ex}") from ex

        if self._token_expiry.tzinfo is None:
            self._token_expiry = self._token_expiry.replace(tzinfo=timezone.utc)

        _LOGGER.debug("Logged in to Eight Sleep as %s", self._user_id)

    async def _ensure_token(self) -> str:
        if not self.is_logged_in:
            await self.async_login()

        assert self._token is not None
        return self._token

    async def _send(
        self,
        method: str,
        url: str,
        json_data: dict[str, Any] | None = None,
        token: str | None = None,
    ) -> Any:
        session = await self._ensure_session()

        headers = {
            "content-type": "application/json",
            "user-agent": USER_AGENT,
        }
        if token is not None:
            headers["session-token"] = token

        try:
            async with session.request(
                method,
                url,
                headers=headers,
                json=json_data,
                timeout=aiohttp.ClientTimeout(total=REQUEST_TIMEOUT),
            ) as resp:
                if resp.status == 401:
                    self._token = None
                    raise AuthenticationException(
                        f"Eight Sleep rejected the credentials for {method} {url}"
                    )

                if resp.status >= 400:
                    text = await resp.text()
                    raise RemoteCallException(
                        f"{method} {url} failed ({resp.status}): {text}"
                    )

                return await resp.json()
        except aiohttp.ClientError as ex:
            raise RemoteConnectionException(f"Connection error: {ex}") from ex
        except asyncio.TimeoutError as ex:
            raise RemoteConnectionException(f"{method} {url} timed out") from ex

    async def _request(
        self, method: str, url: str, json_data: dict[str, Any] | None = None
    ) -> Any:
        token = await self._ensure_token()
        return await self._send(method, url, json_data, token=token)

    async def async_get_me(self) -> dict[str, Any]:
        """Return the profile of the logged in account."""

        return await self._request("GET", f"{CLIENT_API_URL}/users/me")

    async def async_get_current_device(self) -> CurrentDevice:
        """Return the bed and side assigned to the logged in account."""

        return CurrentDevice.from_response(await self.async_get_me())

    async def async_get_device(self, device_id: str) -> DeviceStatus:
        """Return the status of both sides of a bed."""

        response = await self._request("GET", f"{CLIENT_API_URL}/devices/{device_id}")
        return DeviceStatus.from_response(response)

    async def async_get_user_temperature(self, user_id: str) -> UserTemperature:
        """Return the temperature settings of a user."""

        response = await self._request(
            "GET", f"{APP_API_URL}/users/{user_id}/temperature"
        )
        return UserTemperature.from_response(response)

    async def async_set_user_temperature(
        self,
        user_id: str,
        current_level: int | None = None,
        power: PowerState | None = None,
    ) -> UserTemperature:
        """Update the temperature settings of a user and return what was committed."""

        payload: dict[str, Any] = {}

        if current_level is not None:
            payload["currentLevel"] = current_level

        if power is not None:
            payload["currentState"] = power.encode()

        if not payload:
            raise ValueError("Nothing to update")

        response = await self._request(
            "PUT", f"{APP_API_URL}/users/{user_id}/temperature", payload
        )
        return UserTemperature.from_response(response)
