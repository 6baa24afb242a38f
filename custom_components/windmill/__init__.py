"""Windmill air purifier integration setup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .accessory import AirPurifierAccessory
from .client import BlynkClient
from .const import BASE_URL, CONF_TOKEN, DEFAULT_NAME, DOMAIN, PLATFORMS
from .exceptions import AuthenticationError, TransportError
from .models import AccessoryConfig
from .purifier import AirPurifierService

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant

LOGGER = logging.getLogger(__name__)


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up a Windmill air purifier from a config entry."""
    # Home Assistant is imported here so the device layer loads without it
    from homeassistant.const import CONF_NAME
    from homeassistant.exceptions import ConfigEntryAuthFailed, ConfigEntryNotReady
    from homeassistant.helpers.aiohttp_client import async_get_clientsession

    hass.data.setdefault(DOMAIN, {})

    config = AccessoryConfig(
        name=entry.data.get(CONF_NAME, DEFAULT_NAME),
        token=entry.data[CONF_TOKEN],
    )
    client = BlynkClient(BASE_URL, config.token, session=async_get_clientsession(hass))
    purifier = AirPurifierService(client, LOGGER)
    accessory = AirPurifierAccessory(config, purifier, LOGGER)

    try:
        await purifier.get_power()
    except AuthenticationError as err:
        raise ConfigEntryAuthFailed(str(err)) from err
    except TransportError as err:
        raise ConfigEntryNotReady(str(err)) from err

    hass.data[DOMAIN][entry.entry_id] = accessory

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    if unload_ok:
        hass.data[DOMAIN].pop(entry.entry_id, None)
    return unload_ok
