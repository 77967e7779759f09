"""Discovery of the two sides of the bed assigned to an account."""

import logging

from eightsleep.accessory import ThermostatAccessory
from eightsleep.client import EightSleepClient
from eightsleep.const import GUEST_BED_NAME, MY_BED_NAME, Side
from eightsleep.models import CurrentDevice, DeviceStatus
from eightsleep.remote_device import EightSleepRemoteDevice
from eightsleep.thermostat import Thermostat
from eightsleep.thermostat_config import ThermostatConfig

_LOGGER = logging.getLogger(__name__)


def build_thermostat_configs(
    current_device: CurrentDevice, device_status: DeviceStatus
) -> list[ThermostatConfig]:
    """Return one config per side, naming the account owner's side "My Bed"."""

    return [
        ThermostatConfig(
            device_id=current_device.device_id,
            side=side,
            name=MY_BED_NAME if side == current_device.side else GUEST_BED_NAME,
            unique_id=f"{current_device.device_id}:{side.name}",
            user_id=device_status.side(side).user_id,
        )
        for side in Side
    ]


async def async_discover_accessories(
    client: EightSleepClient,
) -> list[ThermostatAccessory]:
    """Log in and create an accessory for each side of the account's bed."""

    current_device = await client.async_get_current_device()
    device_status = await client.async_get_device(current_device.device_id)
    configs = build_thermostat_configs(current_device, device_status)

    remote_device = EightSleepRemoteDevice(
        client,
        current_device.device_id,
        {config.side: config.user_id for config in configs},
    )

    accessories: list[ThermostatAccessory] = []

    for config in configs:
        if config.user_id is None:
            _LOGGER.warning(
                "No user assigned to the %s side of %s, marking %s as not responding",
                config.side.value,
                config.device_id,
                config.name,
            )

        thermostat = Thermostat(config, remote_device)
        accessories.append(
            ThermostatAccessory(thermostat, is_not_responding=config.user_id is None)
        )

    return accessories
