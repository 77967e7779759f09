"""
Reconciles the state of one side of an Eight Sleep bed.

All temperatures in Celsius.

Values are pulled from the bed on demand; there is no background polling.
Writes adopt the value committed by the bed, which is authoritative.
"""

import asyncio
import logging
from typing import Callable

from eightsleep.adapter.bed_temperature import BedTemperature
from eightsleep.const import (
    TEMPERATURE_TOLERANCE,
    CurrentMode,
    Side,
    TargetMode,
    TemperatureDisplayUnits,
)
from eightsleep.models import RemoteValueMismatch, ThermostatState
from eightsleep.remote_device import RemoteDevice
from eightsleep.temperature_mapper import (
    celsius_to_level,
    format_celsius,
    level_to_celsius,
)
from eightsleep.thermostat_config import ThermostatConfig

_LOGGER = logging.getLogger(__name__)


def temperatures_are_equal(current: float, target: float) -> bool:
    """Compare temperatures allowing for the error of a level round trip."""

    return abs(target - current) <= TEMPERATURE_TOLERANCE


def derive_current_mode(
    current_temperature: float,
    target_temperature: float,
    target_mode: TargetMode,
) -> CurrentMode:
    """Return the displayed mode. OFF is shown as idle while the side is on."""

    if target_mode == TargetMode.OFF:
        return CurrentMode.OFF

    if temperatures_are_equal(current_temperature, target_temperature):
        return CurrentMode.OFF

    if current_temperature < target_temperature:
        return CurrentMode.HEAT

    return CurrentMode.COOL


class Thermostat:
    """Representation of one side of an Eight Sleep bed."""

    def __init__(
        self,
        thermostat_config: ThermostatConfig,
        remote_device: RemoteDevice,
    ):
        """Initialize the thermostat."""

        self.thermostat_config = thermostat_config
        self.state = ThermostatState()
        self._remote = remote_device
        self._on_update_callbacks: list[Callable[[CurrentMode], None]] = []
        self._on_mismatch_callbacks: list[Callable[[RemoteValueMismatch], None]] = []

    @property
    def side(self) -> Side:
        return self.thermostat_config.side

    @property
    def name(self) -> str:
        return self.thermostat_config.name

    def register_update_callback(self, on_update: Callable[[CurrentMode], None]) -> None:
        """Register a callback function that will be called when the current mode is recomputed."""

        self._on_update_callbacks.append(on_update)

    def register_mismatch_callback(
        self, on_mismatch: Callable[[RemoteValueMismatch], None]
    ) -> None:
        """Register a callback function that will be called when the bed commits another value than requested."""

        self._on_mismatch_callbacks.append(on_mismatch)

    async def async_fetch_current_temperature(self) -> float:
        """Query the measured temperature of the side."""

        level = await self._remote.current_level(self.side)
        current_temperature = BedTemperature.decode(level).value
        self.state.current_temperature = current_temperature
        return current_temperature

    async def async_fetch_target_mode(self) -> TargetMode:
        """Query whether the side is powered on."""

        is_on = await self._remote.is_on(self.side)
        target_mode = TargetMode.AUTO if is_on else TargetMode.OFF
        self.state.target_mode = target_mode
        return target_mode

    async def async_fetch_target_temperature(self) -> float:
        """Query the target temperature of the side."""

        level = await self._remote.target_level(self.side)
        target_temperature = BedTemperature.decode(level).value
        self.state.target_temperature = target_temperature
        return target_temperature

    async def async_fetch_aggregate_state(self) -> CurrentMode:
        """Refresh all values of the side and return the current mode."""

        await asyncio.gather(
            self.async_fetch_current_temperature(),
            self.async_fetch_target_mode(),
            self.async_fetch_target_temperature(),
        )
        return self.update_current_mode()

    async def async_set_target_temperature(self, temperature: float) -> float:
        """Set a new target temperature and return the one committed by the bed."""

        target_temperature = format_celsius(temperature)
        result = celsius_to_level(target_temperature)

        if not result.is_valid:
            _LOGGER.error(
                "[%s] Something went wrong calculating new bed temp: %s",
                self.name,
                result.level,
            )
            return self.state.target_temperature

        committed_level = await self._remote.set_target_level(self.side, result.level)
        committed_temperature = level_to_celsius(committed_level)
        self.state.target_temperature = committed_temperature

        if (
            committed_level != result.level
            or committed_temperature != target_temperature
        ):
            self._on_mismatch(
                RemoteValueMismatch(
                    side=self.side,
                    requested_level=result.level,
                    requested_temperature=target_temperature,
                    committed_level=committed_level,
                    committed_temperature=committed_temperature,
                )
            )

        self.update_current_mode()
        return committed_temperature

    async def async_set_target_mode(self, target_mode: TargetMode) -> None:
        """Turn the side on or off."""

        if self.state.target_mode != target_mode:
            match target_mode:
                case TargetMode.AUTO:
                    await self._remote.power_on(self.side)
                case TargetMode.OFF:
                    await self._remote.power_off(self.side)

        self.state.target_mode = target_mode
        self.update_current_mode()

    @property
    def display_units(self) -> TemperatureDisplayUnits:
        return self.state.display_units

    def set_display_units(self, display_units: TemperatureDisplayUnits) -> None:
        self.state.display_units = display_units

    def derive_current_mode(self) -> CurrentMode:
        return derive_current_mode(
            self.state.current_temperature,
            self.state.target_temperature,
            self.state.target_mode,
        )

    def update_current_mode(self) -> CurrentMode:
        """Recompute the current mode and notify listeners."""

        current_mode = self.derive_current_mode()
        self.state.current_mode = current_mode

        _LOGGER.debug("[%s] Update CurrentState: %s", self.name, current_mode.name)

        for callback in self._on_update_callbacks:
            callback(current_mode)

        return current_mode

    def _on_mismatch(self, mismatch: RemoteValueMismatch) -> None:
        _LOGGER.error("[%s] Local/remote temp mismatch. %s", self.name, mismatch)

        for callback in self._on_mismatch_callbacks:
            callback(mismatch)
