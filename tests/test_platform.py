import pytest

from eightsleep.client import EightSleepClient
from eightsleep.const import GUEST_BED_NAME, MY_BED_NAME, Side
from eightsleep.models import CurrentDevice, DeviceStatus
from eightsleep.platform import async_discover_accessories, build_thermostat_configs
from tests.mock_client import (
    DEVICE_ID,
    DEVICE_URL,
    LEFT_USER_ID,
    RIGHT_USER_ID,
    MockSession,
    mock_device,
)


def test_build_thermostat_configs():
    current_device = CurrentDevice(
        user_id=RIGHT_USER_ID, device_id=DEVICE_ID, side=Side.RIGHT
    )

    configs = build_thermostat_configs(
        current_device, DeviceStatus.from_response(mock_device)
    )

    assert [(config.side, config.name) for config in configs] == [
        (Side.LEFT, GUEST_BED_NAME),
        (Side.RIGHT, MY_BED_NAME),
    ]
    assert [config.unique_id for config in configs] == [
        f"{DEVICE_ID}:LEFT",
        f"{DEVICE_ID}:RIGHT",
    ]
    assert [config.user_id for config in configs] == [LEFT_USER_ID, RIGHT_USER_ID]


@pytest.mark.asyncio
async def test_discover_accessories(mock_client: EightSleepClient):
    accessories = await async_discover_accessories(mock_client)

    assert [accessory.name for accessory in accessories] == [MY_BED_NAME, GUEST_BED_NAME]
    assert not any(accessory.is_not_responding for accessory in accessories)

    left, right = accessories
    await left.async_set_target_temperature(30.0)

    assert left.thermostat.state.target_temperature == 30.0
    assert right.thermostat.state.target_temperature == 0


@pytest.mark.asyncio
async def test_discover_accessories_without_guest(
    mock_client: EightSleepClient, mock_session: MockSession
):
    result = dict(mock_device["result"])
    del result["rightUserId"]
    mock_session.add_route("GET", DEVICE_URL, {"result": result})

    accessories = await async_discover_accessories(mock_client)

    assert [accessory.is_not_responding for accessory in accessories] == [False, True]
