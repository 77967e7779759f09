"""Support for Eight Sleep Pod thermostats."""

import logging
from typing import Any

from eightsleep import EightSleepClient
from eightsleep.exceptions import AuthenticationException, RemoteCallException
from eightsleep.platform import async_discover_accessories
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import (
    CONF_EMAIL,
    CONF_PASSWORD,
    CONF_SCAN_INTERVAL,
    Platform,
)
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import ConfigEntryAuthFailed, ConfigEntryNotReady
from homeassistant.helpers.aiohttp_client import async_get_clientsession

from .const import DEFAULT_SCAN_INTERVAL, DOMAIN
from .models import EightSleepConfig, EightSleepConfigEntry

_LOGGER = logging.getLogger(__name__)

PLATFORMS = [Platform.CLIMATE]


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Called when an entry is setup."""

    email: str = entry.data[CONF_EMAIL]
    password: str = entry.data[CONF_PASSWORD]
    scan_interval: float = entry.options.get(CONF_SCAN_INTERVAL, DEFAULT_SCAN_INTERVAL)

    eight_sleep_config = EightSleepConfig(email=email, scan_interval=scan_interval)

    client = EightSleepClient(email, password, session=async_get_clientsession(hass))

    try:
        accessories = await async_discover_accessories(client)
    except AuthenticationException as ex:
        raise ConfigEntryAuthFailed(f"Could not login to Eight Sleep: {ex}") from ex
    except RemoteCallException as ex:
        _LOGGER.error(
            "There was a problem connecting to Eight Sleep, plugin will not be loaded: %s",
            ex,
        )
        raise ConfigEntryNotReady(str(ex)) from ex

    eight_sleep_config_entry = EightSleepConfigEntry(
        eight_sleep_config=eight_sleep_config,
        client=client,
        accessories=accessories,
    )

    domain_data: dict[str, Any] = hass.data.setdefault(DOMAIN, {})
    domain_data[entry.entry_id] = eight_sleep_config_entry

    entry.async_on_unload(entry.add_update_listener(update_listener))
    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)

    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Called when an entry is unloaded."""

    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)

    if unload_ok:
        eight_sleep_config_entry: EightSleepConfigEntry = hass.data[DOMAIN].pop(
            entry.entry_id
        )
        await eight_sleep_config_entry.client.close()

    return unload_ok


async def update_listener(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Called when an entry is updated."""

    await hass.config_entries.async_reload(entry.entry_id)
