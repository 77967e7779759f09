import pytest

from eightsleep.adapter.bed_temperature import BedTemperature
from eightsleep.const import Side
from eightsleep.models import CurrentDevice, DeviceStatus, UserTemperature
from eightsleep.models.remote_value_mismatch import RemoteValueMismatch
from tests.mock_client import (
    DEVICE_ID,
    LEFT_USER_ID,
    RIGHT_USER_ID,
    mock_device,
    mock_me,
    mock_user_temperature,
)


def test_device_status_from_response():
    device_status = DeviceStatus.from_response(mock_device)

    assert device_status.device_id == DEVICE_ID
    assert device_status.has_water
    assert not device_status.is_priming
    assert device_status.side(Side.LEFT).user_id == LEFT_USER_ID
    assert device_status.side(Side.LEFT).is_heating
    assert device_status.side(Side.LEFT).heating_duration == 3600
    assert device_status.side(Side.RIGHT).user_id == RIGHT_USER_ID
    assert device_status.side(Side.RIGHT).target_level == 10


def test_side_status_current_temperature():
    device_status = DeviceStatus.from_response(mock_device)

    assert device_status.left.current_temperature == BedTemperature.decode(-50)


def test_device_status_without_guest():
    data = {"deviceId": DEVICE_ID, "leftUserId": LEFT_USER_ID}

    device_status = DeviceStatus.from_dict(data)

    assert device_status.right.user_id is None
    assert device_status.right.current_level == 0


def test_user_temperature_from_response():
    user_temperature = UserTemperature.from_response(mock_user_temperature(-30, "off"))

    assert user_temperature.current_level == -30
    assert user_temperature.current_device_level == -30
    assert not user_temperature.is_on


def test_user_temperature_without_device_level():
    user_temperature = UserTemperature.from_dict(
        {"currentLevel": 12, "currentState": {"type": "smart"}}
    )

    assert user_temperature.current_device_level == 12
    assert user_temperature.is_on


def test_current_device_from_response():
    current_device = CurrentDevice.from_response(mock_me)

    assert current_device == CurrentDevice(
        user_id=LEFT_USER_ID, device_id=DEVICE_ID, side=Side.LEFT
    )


def test_current_device_unknown_side():
    with pytest.raises(ValueError):
        CurrentDevice.from_dict(
            {"userId": LEFT_USER_ID, "currentDevice": {"id": DEVICE_ID, "side": "top"}}
        )


def test_remote_value_mismatch_str():
    mismatch = RemoteValueMismatch(
        side=Side.LEFT,
        requested_level=-14,
        requested_temperature=23.89,
        committed_level=-13,
        committed_temperature=23.89,
    )

    assert str(mismatch) == (
        "Expected: 23.89°C / -14 level, but got: 23.89°C / -13 level"
    )
