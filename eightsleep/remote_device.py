"""Side scoped access to the bed through the Eight Sleep cloud."""

import logging
from abc import ABC, abstractmethod

from eightsleep.adapter.power_state import PowerState
from eightsleep.client import EightSleepClient
from eightsleep.const import Side
from eightsleep.exceptions import RemoteCallException

_LOGGER = logging.getLogger(__name__)


class RemoteDevice(ABC):
    """Operations the thermostat needs from the bed."""

    @abstractmethod
    async def current_level(self, side: Side) -> int:
        """Return the measured level of a side."""

    @abstractmethod
    async def is_on(self, side: Side) -> bool:
        """Return whether a side is powered on."""

    @abstractmethod
    async def target_level(self, side: Side) -> int:
        """Return the target level of a side."""

    @abstractmethod
    async def set_target_level(self, side: Side, level: int) -> int:
        """Request a new target level and return the level committed by the bed."""

    @abstractmethod
    async def power_on(self, side: Side) -> None:
        """Turn a side on."""

    @abstractmethod
    async def power_off(self, side: Side) -> None:
        """Turn a side off."""


class EightSleepRemoteDevice(RemoteDevice):
    """RemoteDevice backed by the Eight Sleep cloud API.

    The measured level of both sides comes from the device endpoint, everything
    else from the temperature endpoint of the user sleeping on the side.
    """

    def __init__(
        self,
        client: EightSleepClient,
        device_id: str,
        user_ids: dict[Side, str | None],
    ):
        self._client = client
        self._device_id = device_id
        self._user_ids = user_ids

    def _user_id(self, side: Side) -> str:
        user_id = self._user_ids.get(side)

        if user_id is None:
            raise RemoteCallException(f"No user assigned to the {side.value} side")

        return user_id

    async def current_level(self, side: Side) -> int:
        device_status = await self._client.async_get_device(self._device_id)
        return device_status.side(side).current_level

    async def is_on(self, side: Side) -> bool:
        user_temperature = await self._client.async_get_user_temperature(
            self._user_id(side)
        )
        return user_temperature.is_on

    async def target_level(self, side: Side) -> int:
        user_temperature = await self._client.async_get_user_temperature(
            self._user_id(side)
        )
        return user_temperature.current_level

    async def set_target_level(self, side: Side, level: int) -> int:
        user_temperature = await self._client.async_set_user_temperature(
            self._user_id(side), current_level=level
        )
        return user_temperature.current_level

    async def power_on(self, side: Side) -> None:
        _LOGGER.warning("Turning on device -> %s", self._user_id(side))
        await self._client.async_set_user_temperature(
            self._user_id(side), power=PowerState(True)
        )

    async def power_off(self, side: Side) -> None:
        _LOGGER.warning("Turning off device -> %s", self._user_id(side))
        await self._client.async_set_user_temperature(
            self._user_id(side), power=PowerState(False)
        )
