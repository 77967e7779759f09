"""Constants for the Eight Sleep thermostat integration."""

from eightsleep.const import CurrentMode, TargetMode
from homeassistant.components.climate import HVACAction, HVACMode

DOMAIN = "eightsleep_thermostat"

MANUFACTURER = "Eight Sleep"
DEVICE_MODEL = "Pod Pro"

TARGET_MODE_TO_HA_HVAC: dict[TargetMode, HVACMode] = {
    TargetMode.OFF: HVACMode.OFF,
    TargetMode.AUTO: HVACMode.HEAT_COOL,
}

HA_TO_TARGET_MODE: dict[HVACMode, TargetMode] = {
    HVACMode.OFF: TargetMode.OFF,
    HVACMode.HEAT_COOL: TargetMode.AUTO,
}

CURRENT_MODE_TO_HA_ACTION: dict[CurrentMode, HVACAction] = {
    CurrentMode.OFF: HVACAction.IDLE,
    CurrentMode.HEAT: HVACAction.HEATING,
    CurrentMode.COOL: HVACAction.COOLING,
}

DEFAULT_SCAN_INTERVAL = 1  # minutes
