import pytest

from eightsleep.accessory import ThermostatAccessory
from eightsleep.const import (
    MAX_TEMP_C,
    MIN_STEP,
    MIN_TEMP_C,
    CurrentMode,
    Side,
    TargetMode,
    TemperatureDisplayUnits,
)
from eightsleep.exceptions import DeviceUnresponsiveException
from tests.mock_client import MockRemoteDevice


def test_characteristic_properties(mock_accessory: ThermostatAccessory):
    assert mock_accessory.min_temp == MIN_TEMP_C
    assert mock_accessory.max_temp == MAX_TEMP_C
    assert mock_accessory.min_step == MIN_STEP
    assert mock_accessory.target_mode_values == (TargetMode.OFF, TargetMode.AUTO)
    assert CurrentMode.HEAT in mock_accessory.current_mode_values


@pytest.mark.asyncio
async def test_get_current_mode(
    mock_accessory: ThermostatAccessory, mock_remote_device: MockRemoteDevice
):
    mock_remote_device.current_levels[Side.LEFT] = -50
    mock_remote_device.target_levels[Side.LEFT] = 50
    mock_remote_device.powered[Side.LEFT] = True

    assert await mock_accessory.async_get_current_mode() == CurrentMode.HEAT


@pytest.mark.asyncio
async def test_get_temperatures(
    mock_accessory: ThermostatAccessory, mock_remote_device: MockRemoteDevice
):
    mock_remote_device.current_levels[Side.LEFT] = -100
    mock_remote_device.target_levels[Side.LEFT] = 100

    assert await mock_accessory.async_get_current_temperature() == 10.0
    assert await mock_accessory.async_get_target_temperature() == 45.0


@pytest.mark.asyncio
async def test_set_target_temperature(
    mock_accessory: ThermostatAccessory, mock_remote_device: MockRemoteDevice
):
    assert await mock_accessory.async_set_target_temperature(45.1) == 45.0
    assert mock_remote_device.target_levels[Side.LEFT] == 100


@pytest.mark.asyncio
async def test_target_mode(
    mock_accessory: ThermostatAccessory, mock_remote_device: MockRemoteDevice
):
    await mock_accessory.async_set_target_mode(3)

    assert mock_remote_device.powered[Side.LEFT]
    assert await mock_accessory.async_get_target_mode() == TargetMode.AUTO


@pytest.mark.asyncio
async def test_set_unsupported_target_mode(
    mock_accessory: ThermostatAccessory, mock_remote_device: MockRemoteDevice
):
    with pytest.raises(ValueError):
        await mock_accessory.async_set_target_mode(1)

    assert mock_remote_device.calls == []


@pytest.mark.asyncio
async def test_display_units(
    mock_accessory: ThermostatAccessory, mock_remote_device: MockRemoteDevice
):
    assert (
        await mock_accessory.async_get_display_units()
        == TemperatureDisplayUnits.FAHRENHEIT
    )

    await mock_accessory.async_set_display_units(0)

    assert (
        await mock_accessory.async_get_display_units()
        == TemperatureDisplayUnits.CELSIUS
    )
    assert mock_remote_device.calls == []


@pytest.mark.asyncio
async def test_unresponsive_device_fails_every_handler(
    mock_accessory: ThermostatAccessory, mock_remote_device: MockRemoteDevice
):
    mock_accessory.is_not_responding = True

    handlers = [
        mock_accessory.async_get_current_mode(),
        mock_accessory.async_get_current_temperature(),
        mock_accessory.async_get_target_temperature(),
        mock_accessory.async_set_target_temperature(20.0),
        mock_accessory.async_get_target_mode(),
        mock_accessory.async_set_target_mode(3),
        mock_accessory.async_get_display_units(),
        mock_accessory.async_set_display_units(0),
    ]

    for handler in handlers:
        with pytest.raises(DeviceUnresponsiveException):
            await handler

    assert mock_remote_device.calls == []
    assert mock_accessory.thermostat.display_units == TemperatureDisplayUnits.FAHRENHEIT
