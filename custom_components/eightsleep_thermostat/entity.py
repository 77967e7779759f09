from eightsleep import ThermostatAccessory

from .models import EightSleepConfig


class EightSleepEntity:
    """Base class for all Eight Sleep entities."""

    def __init__(
        self, eight_sleep_config: EightSleepConfig, accessory: ThermostatAccessory
    ):
        self._eight_sleep_config = eight_sleep_config
        self._accessory = accessory
        self._thermostat = accessory.thermostat
