"""Button entities for the Windmill air purifier."""

from __future__ import annotations

import logging

from homeassistant.components.button import ButtonDeviceClass, ButtonEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import EntityCategory
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .accessory import AirPurifierAccessory
from .const import DOMAIN
from .entity import WindmillEntity
from .exceptions import TransportError

LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback
) -> None:
    """Set up button entities."""
    accessory: AirPurifierAccessory = hass.data[DOMAIN][entry.entry_id]
    async_add_entities([WindmillIdentifyButton(accessory, entry)])


class WindmillIdentifyButton(WindmillEntity, ButtonEntity):
    """Blink the purifier by toggling its power for a few seconds."""

    _attr_device_class = ButtonDeviceClass.IDENTIFY
    _attr_entity_category = EntityCategory.DIAGNOSTIC
    _attr_should_poll = False

    def __init__(self, accessory: AirPurifierAccessory, entry: ConfigEntry) -> None:
        """Initialize identify button."""
        super().__init__(accessory, entry, "identify")

    async def async_press(self) -> None:
        """Handle button press."""
        LOGGER.debug("Identify pressed for %s", self.accessory.name)
        try:
            await self.accessory.identify()
        except TransportError as err:
            raise HomeAssistantError(f"Failed to identify {self.accessory.name}: {err}") from err
