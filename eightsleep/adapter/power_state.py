from typing import Any

from eightsleep.adapter.base_adapter import BaseAdapter
from eightsleep.const import PowerStateType


class PowerState(BaseAdapter[bool, dict[str, Any]]):
    """Adapter to encode and decode the `currentState` object of a side."""

    @classmethod
    def _encode(cls, value: bool) -> dict[str, Any]:
        state_type = PowerStateType.SMART if value else PowerStateType.OFF
        return {"type": state_type.value}

    @classmethod
    def _decode(cls, value: dict[str, Any]) -> bool:
        return value.get("type", PowerStateType.OFF.value) != PowerStateType.OFF.value
