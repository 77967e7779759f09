from eightsleep.accessory import ThermostatAccessory
from eightsleep.client import EightSleepClient
from eightsleep.thermostat import Thermostat

__all__ = ["EightSleepClient", "Thermostat", "ThermostatAccessory"]
