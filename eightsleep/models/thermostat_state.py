from dataclasses import dataclass

from eightsleep.const import CurrentMode, TargetMode, TemperatureDisplayUnits


@dataclass
class ThermostatState:
    """Last known values of one side of the bed.

    `current_mode` is recomputed from the other fields after every change.
    """

    current_temperature: float = 0
    target_temperature: float = 0
    target_mode: TargetMode = TargetMode.OFF
    current_mode: CurrentMode = CurrentMode.OFF
    display_units: TemperatureDisplayUnits = TemperatureDisplayUnits.FAHRENHEIT
