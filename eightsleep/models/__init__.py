from eightsleep.models.base_model import BaseModel
from eightsleep.models.current_device import CurrentDevice
from eightsleep.models.device_status import DeviceStatus, SideStatus
from eightsleep.models.remote_value_mismatch import RemoteValueMismatch
from eightsleep.models.thermostat_state import ThermostatState
from eightsleep.models.user_temperature import UserTemperature

__all__ = [
    "BaseModel",
    "CurrentDevice",
    "DeviceStatus",
    "RemoteValueMismatch",
    "SideStatus",
    "ThermostatState",
    "UserTemperature",
]
