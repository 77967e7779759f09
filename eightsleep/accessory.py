"""Characteristic get/set handlers for one side of the bed."""

import logging

from eightsleep.const import (
    MAX_TEMP_C,
    MIN_STEP,
    MIN_TEMP_C,
    CurrentMode,
    TargetMode,
    TemperatureDisplayUnits,
)
from eightsleep.exceptions import DeviceUnresponsiveException
from eightsleep.thermostat import Thermostat

_LOGGER = logging.getLogger(__name__)


class ThermostatAccessory:
    """Exposes a Thermostat through the thermostat characteristics.

    Every handler fails with DeviceUnresponsiveException while the bed is
    flagged as not responding, before anything is sent to the bed.
    """

    min_temp = MIN_TEMP_C
    max_temp = MAX_TEMP_C
    min_step = MIN_STEP
    current_mode_values = (CurrentMode.OFF, CurrentMode.HEAT, CurrentMode.COOL)
    target_mode_values = (TargetMode.OFF, TargetMode.AUTO)

    def __init__(self, thermostat: Thermostat, is_not_responding: bool = False):
        self.thermostat = thermostat
        self.is_not_responding = is_not_responding

        _LOGGER.debug(
            "[%s] created accessory for the %s side",
            thermostat.name,
            thermostat.side.value,
        )

    @property
    def name(self) -> str:
        return self.thermostat.name

    def ensure_device_responsiveness(self) -> None:
        if self.is_not_responding:
            raise DeviceUnresponsiveException(f"{self.name} is not responding")

    async def async_get_current_mode(self) -> CurrentMode:
        self.ensure_device_responsiveness()
        current_mode = await self.thermostat.async_fetch_aggregate_state()
        _LOGGER.debug("[%s] GET CurrentHeatingCoolingState %s", self.name, current_mode)
        return current_mode

    async def async_get_current_temperature(self) -> float:
        self.ensure_device_responsiveness()
        current_temperature = await self.thermostat.async_fetch_current_temperature()
        _LOGGER.debug("[%s] GET CurrentTemperature %s", self.name, current_temperature)
        return current_temperature

    async def async_get_target_temperature(self) -> float:
        self.ensure_device_responsiveness()
        target_temperature = await self.thermostat.async_fetch_target_temperature()
        _LOGGER.debug("[%s] GET TargetTemperature %s", self.name, target_temperature)
        return target_temperature

    async def async_set_target_temperature(self, temperature: float) -> float:
        self.ensure_device_responsiveness()
        target_temperature = await self.thermostat.async_set_target_temperature(
            temperature
        )
        _LOGGER.debug("[%s] SET TargetTemperature: %s", self.name, target_temperature)
        return target_temperature

    async def async_get_target_mode(self) -> TargetMode:
        self.ensure_device_responsiveness()
        target_mode = await self.thermostat.async_fetch_target_mode()
        _LOGGER.debug("[%s] GET TargetHeatingCoolingState %s", self.name, target_mode)
        return target_mode

    async def async_set_target_mode(self, target_mode: int) -> None:
        self.ensure_device_responsiveness()

        if target_mode not in self.target_mode_values:
            raise ValueError(f"Unsupported target heating/cooling state {target_mode}")

        await self.thermostat.async_set_target_mode(TargetMode(target_mode))
        _LOGGER.debug("[%s] SET TargetHeatingCoolingState: %s", self.name, target_mode)

    async def async_get_display_units(self) -> TemperatureDisplayUnits:
        self.ensure_device_responsiveness()
        display_units = self.thermostat.display_units
        _LOGGER.debug("[%s] GET TemperatureDisplayUnits %s", self.name, display_units)
        return display_units

    async def async_set_display_units(self, display_units: int) -> None:
        self.ensure_device_responsiveness()
        self.thermostat.set_display_units(TemperatureDisplayUnits(display_units))
        _LOGGER.debug("[%s] SET TemperatureDisplayUnits: %s", self.name, display_units)
