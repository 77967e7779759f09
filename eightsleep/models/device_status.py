from dataclasses import dataclass
from typing import Any, Self

from eightsleep.adapter.bed_temperature import BedTemperature
from eightsleep.const import Side
from eightsleep.models.base_model import BaseModel


@dataclass
class SideStatus:
    current_level: int
    target_level: int
    is_heating: bool
    heating_duration: int
    user_id: str | None = None

    @property
    def current_temperature(self) -> BedTemperature:
        return BedTemperature.decode(self.current_level)

    @classmethod
    def from_dict(cls, data: dict[str, Any], side: Side) -> Self:
        prefix = side.value
        return cls(
            current_level=int(data.get(f"{prefix}HeatingLevel", 0)),
            target_level=int(data.get(f"{prefix}TargetHeatingLevel", 0)),
            is_heating=bool(data.get(f"{prefix}NowHeating", False)),
            heating_duration=int(data.get(f"{prefix}HeatingDuration", 0)),
            user_id=data.get(f"{prefix}UserId"),
        )


@dataclass
class DeviceStatus(BaseModel):
    device_id: str
    left: SideStatus
    right: SideStatus
    has_water: bool = True
    is_priming: bool = False
    needs_priming: bool = False

    def side(self, side: Side) -> SideStatus:
        match side:
            case Side.LEFT:
                return self.left
            case Side.RIGHT:
                return self.right

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(
            device_id=data["deviceId"],
            left=SideStatus.from_dict(data, Side.LEFT),
            right=SideStatus.from_dict(data, Side.RIGHT),
            has_water=bool(data.get("hasWater", True)),
            is_priming=bool(data.get("priming", False)),
            needs_priming=bool(data.get("needsPriming", False)),
        )

    @classmethod
    def response_key(cls) -> str | None:
        return "result"
