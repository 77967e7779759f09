from dataclasses import dataclass, field

from eightsleep import EightSleepClient, ThermostatAccessory


@dataclass
class EightSleepConfig:
    email: str
    scan_interval: float


@dataclass
class EightSleepConfigEntry:
    eight_sleep_config: EightSleepConfig
    client: EightSleepClient
    accessories: list[ThermostatAccessory] = field(default_factory=list)
