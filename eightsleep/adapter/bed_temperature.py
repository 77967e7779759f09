from eightsleep.adapter.base_adapter import BaseAdapter
from eightsleep.temperature_mapper import celsius_to_level, level_to_celsius


class BedTemperature(BaseAdapter[float, int]):
    """Adapter to encode and decode temperatures as device levels."""

    @classmethod
    def _encode(cls, value: float) -> int:
        return celsius_to_level(value).unwrap()

    @classmethod
    def _decode(cls, value: int) -> float:
        return level_to_celsius(value)
