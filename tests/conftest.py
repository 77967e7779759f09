import pytest

from eightsleep.accessory import ThermostatAccessory
from eightsleep.client import EightSleepClient
from eightsleep.const import Side
from eightsleep.thermostat import Thermostat
from eightsleep.thermostat_config import ThermostatConfig
from tests.mock_client import (
    DEVICE_ID,
    LEFT_USER_ID,
    MockRemoteDevice,
    MockSession,
    mock_cloud,
)


@pytest.fixture(scope="function")
def mock_remote_device() -> MockRemoteDevice:
    return MockRemoteDevice()


@pytest.fixture(scope="function")
def mock_thermostat(mock_remote_device: MockRemoteDevice) -> Thermostat:
    return Thermostat(
        ThermostatConfig(
            device_id=DEVICE_ID,
            side=Side.LEFT,
            name="My Bed",
            unique_id=f"{DEVICE_ID}:LEFT",
            user_id=LEFT_USER_ID,
        ),
        mock_remote_device,
    )


@pytest.fixture(scope="function")
def mock_accessory(mock_thermostat: Thermostat) -> ThermostatAccessory:
    return ThermostatAccessory(mock_thermostat)


@pytest.fixture(scope="function")
def mock_session() -> MockSession:
    return mock_cloud()


@pytest.fixture(scope="function")
def mock_client(mock_session: MockSession) -> EightSleepClient:
    return EightSleepClient(
        "sleeper@example.com",
        "secret",
        session=mock_session,  # type: ignore
    )
