"""Base entity for Windmill air purifier entities."""

from __future__ import annotations

import logging
from typing import Any, Optional

from homeassistant.config_entries import ConfigEntry
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.entity import Entity

from .accessory import AirPurifierAccessory, Characteristic
from .const import DOMAIN, MANUFACTURER, MODEL
from .exceptions import TransportError

LOGGER = logging.getLogger(__name__)


def get_device_info(accessory: AirPurifierAccessory, entry: ConfigEntry) -> DeviceInfo:
    """Get device info for the purifier."""
    return DeviceInfo(
        identifiers={(DOMAIN, entry.entry_id)},
        name=accessory.name,
        manufacturer=MANUFACTURER,
        model=MODEL,
    )


class WindmillEntity(Entity):
    """Polling entity backed by accessory characteristics.

    Every update reads the cloud through the characteristic hooks, so the
    entity state is the only copy of device state held by Home Assistant.
    """

    _attr_has_entity_name = True
    _attr_should_poll = True

    def __init__(self, accessory: AirPurifierAccessory, entry: ConfigEntry, key: str) -> None:
        """Initialize the entity."""
        self.accessory = accessory
        # entry_id survives reauth; the entry unique_id follows the token
        self._attr_unique_id = f"{entry.entry_id}_{key}"
        self._attr_device_info = get_device_info(accessory, entry)

    async def _async_read(self, characteristic: Characteristic) -> Optional[Any]:
        """Read a characteristic, marking the entity unavailable on failure."""
        try:
            value = await characteristic.get()
        except TransportError as err:
            if self._attr_available:
                LOGGER.error("Failed to read %s for %s: %s", characteristic.name, self.accessory.name, err)
            self._attr_available = False
            return None

        if not self._attr_available:
            LOGGER.info("%s is reachable again", self.accessory.name)
        self._attr_available = True
        return value

    async def _async_read_all(self, *characteristics: Characteristic) -> Optional[list[Any]]:
        """Read several characteristics, or return None once any of them fails.

        Stops at the first failure so a later success in the same update
        cannot mark the entity available again.
        """
        values = []
        for characteristic in characteristics:
            value = await self._async_read(characteristic)
            if value is None:
                return None
            values.append(value)
        return values

    async def _async_write(self, characteristic: Characteristic, value: Any) -> None:
        """Write a characteristic, surfacing failures to the caller."""
        try:
            await characteristic.set(value)
        except TransportError as err:
            raise HomeAssistantError(
                f"Failed to set {characteristic.name} on {self.accessory.name}: {err}"
            ) from err
