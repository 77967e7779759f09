"""Platform for Eight Sleep climate entities."""

import asyncio
import logging
from datetime import timedelta
from typing import Callable

from eightsleep import ThermostatAccessory
from eightsleep.const import CurrentMode, TargetMode, TemperatureDisplayUnits
from eightsleep.exceptions import DeviceUnresponsiveException, RemoteCallException
from homeassistant.components.climate import ClimateEntity, HVACMode
from homeassistant.components.climate.const import (
    ATTR_HVAC_MODE,
    ClimateEntityFeature,
    HVACAction,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import ATTR_TEMPERATURE, UnitOfTemperature
from homeassistant.core import HomeAssistant, callback
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.entity import Entity, EntityPlatformState
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.event import async_call_later

from .const import (
    CURRENT_MODE_TO_HA_ACTION,
    DEVICE_MODEL,
    DOMAIN,
    HA_TO_TARGET_MODE,
    MANUFACTURER,
    TARGET_MODE_TO_HA_HVAC,
)
from .entity import EightSleepEntity
from .models import EightSleepConfig, EightSleepConfigEntry

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Called when an entry is setup."""

    eight_sleep_config_entry: EightSleepConfigEntry = hass.data[DOMAIN][
        config_entry.entry_id
    ]
    eight_sleep_config = eight_sleep_config_entry.eight_sleep_config

    entities_to_add: list[Entity] = [
        EightSleepClimate(eight_sleep_config, accessory)
        for accessory in eight_sleep_config_entry.accessories
    ]

    async_add_entities(
        entities_to_add,
        update_before_add=False,
    )


class EightSleepClimate(EightSleepEntity, ClimateEntity):
    """Climate entity to represent one side of an Eight Sleep bed."""

    def __init__(
        self, eight_sleep_config: EightSleepConfig, accessory: ThermostatAccessory
    ):
        super().__init__(eight_sleep_config, accessory)

        self._thermostat.register_update_callback(self._on_updated)
        self._is_available = not accessory.is_not_responding
        self._cancel_timer: Callable[[], None] | None = None
        self._attr_has_entity_name = True
        self._attr_name = None
        self._attr_supported_features = (
            ClimateEntityFeature.TARGET_TEMPERATURE
            | ClimateEntityFeature.TURN_ON
            | ClimateEntityFeature.TURN_OFF
        )
        self._attr_temperature_unit = UnitOfTemperature.CELSIUS
        self._attr_target_temperature_step = accessory.min_step
        self._attr_hvac_modes = list(HA_TO_TARGET_MODE.keys())
        self._attr_min_temp = accessory.min_temp
        self._attr_max_temp = accessory.max_temp
        self._attr_unique_id = self._thermostat.thermostat_config.unique_id
        self._attr_should_poll = False

        _LOGGER.debug(
            f"[{self._thermostat.name}] created climate entity",
        )

    async def async_added_to_hass(self) -> None:
        asyncio.get_event_loop().create_task(self._async_scan_loop())

    async def async_will_remove_from_hass(self) -> None:
        if self._cancel_timer:
            self._cancel_timer()

    async def _async_scan_loop(self, now=None) -> None:
        await self.async_scan()

        if self._platform_state != EntityPlatformState.REMOVED:
            delay = timedelta(minutes=self._eight_sleep_config.scan_interval)
            self._cancel_timer = async_call_later(
                self.hass, delay, self._async_scan_loop
            )

    @callback
    def _on_updated(self, current_mode: CurrentMode) -> None:
        self._is_available = True

        if self.entity_id is None:
            _LOGGER.warning(
                f"[{self._thermostat.name}] Updated but the entity is not loaded",
            )
            return

        self.async_write_ha_state()

    @property
    def available(self) -> bool:
        return self._is_available

    @property
    def hvac_action(self) -> HVACAction | None:
        if self._thermostat.state.target_mode == TargetMode.OFF:
            return HVACAction.OFF

        return CURRENT_MODE_TO_HA_ACTION[self._thermostat.state.current_mode]

    @property
    def hvac_mode(self) -> HVACMode | None:
        return TARGET_MODE_TO_HA_HVAC[self._thermostat.state.target_mode]

    @property
    def current_temperature(self) -> float | None:
        return self._thermostat.state.current_temperature

    @property
    def target_temperature(self) -> float | None:
        return self._thermostat.state.target_temperature

    @property
    def extra_state_attributes(self) -> dict[str, str]:
        display_units = self._thermostat.display_units
        return {
            "side": self._thermostat.side.value,
            "display_units": (
                UnitOfTemperature.FAHRENHEIT
                if display_units == TemperatureDisplayUnits.FAHRENHEIT
                else UnitOfTemperature.CELSIUS
            ),
        }

    async def async_set_temperature(self, **kwargs) -> None:
        # The mode is changed first so a side that is turned on heads to the new temperature.
        if (hvac_mode := kwargs.get(ATTR_HVAC_MODE)) is not None:
            await self.async_set_hvac_mode(hvac_mode)

        temperature = kwargs.get(ATTR_TEMPERATURE)

        if temperature is None:
            return

        try:
            await self._accessory.async_set_target_temperature(temperature)
        except (DeviceUnresponsiveException, RemoteCallException) as ex:
            raise HomeAssistantError(
                f"[{self._thermostat.name}] Failed setting temperature: {ex}"
            ) from ex

    async def async_set_hvac_mode(self, hvac_mode: HVACMode) -> None:
        if hvac_mode not in HA_TO_TARGET_MODE:
            raise HomeAssistantError(f"Unsupported HVAC mode {hvac_mode}")

        try:
            await self._accessory.async_set_target_mode(HA_TO_TARGET_MODE[hvac_mode])
        except (DeviceUnresponsiveException, RemoteCallException) as ex:
            raise HomeAssistantError(
                f"[{self._thermostat.name}] Failed setting HVAC mode: {ex}"
            ) from ex

    async def async_turn_on(self) -> None:
        await self.async_set_hvac_mode(HVACMode.HEAT_COOL)

    async def async_turn_off(self) -> None:
        await self.async_set_hvac_mode(HVACMode.OFF)

    @property
    def device_info(self) -> DeviceInfo:
        config = self._thermostat.thermostat_config
        return DeviceInfo(
            name=self._thermostat.name,
            manufacturer=MANUFACTURER,
            model=DEVICE_MODEL,
            identifiers={(DOMAIN, config.unique_id)},
            serial_number=config.unique_id,
        )

    async def async_scan(self) -> None:
        """Update the data from the bed."""

        try:
            await self._accessory.async_get_current_mode()
        except DeviceUnresponsiveException:
            self._is_available = False
            self.async_write_ha_state()
        except RemoteCallException as ex:
            self._is_available = False
            self.async_write_ha_state()
            _LOGGER.error(
                f"[{self._thermostat.name}] Error updating: {ex}",
            )
