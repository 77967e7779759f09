from dataclasses import dataclass
from typing import Any, Self

from eightsleep.adapter.power_state import PowerState
from eightsleep.models.base_model import BaseModel


@dataclass
class UserTemperature(BaseModel):
    current_level: int
    current_device_level: int
    power: PowerState

    @property
    def is_on(self) -> bool:
        return self.power.value

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(
            current_level=int(data["currentLevel"]),
            current_device_level=int(
                data.get("currentDeviceLevel", data["currentLevel"])
            ),
            power=PowerState.decode(data.get("currentState", {})),
        )
