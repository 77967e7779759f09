from dataclasses import dataclass
from typing import Any, Self

from eightsleep.const import Side
from eightsleep.models.base_model import BaseModel


@dataclass
class CurrentDevice(BaseModel):
    """The bed and side assigned to the logged in account."""

    user_id: str
    device_id: str
    side: Side

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        current_device = data["currentDevice"]
        return cls(
            user_id=data["userId"],
            device_id=current_device["id"],
            side=Side(current_device["side"]),
        )

    @classmethod
    def response_key(cls) -> str | None:
        return "user"
