from dataclasses import dataclass

from eightsleep.const import Side


@dataclass(frozen=True)
class RemoteValueMismatch:
    """A write committed by the device differs from the requested one."""

    side: Side
    requested_level: int
    requested_temperature: float
    committed_level: int
    committed_temperature: float

    def __str__(self) -> str:
        return (
            f"Expected: {self.requested_temperature}°C / {self.requested_level} level, "
            f"but got: {self.committed_temperature}°C / {self.committed_level} level"
        )
