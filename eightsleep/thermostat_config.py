from dataclasses import dataclass

from eightsleep.const import Side


@dataclass
class ThermostatConfig:
    device_id: str
    side: Side
    name: str
    unique_id: str
    user_id: str | None = None
