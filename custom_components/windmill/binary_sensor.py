"""Binary sensor entities for the Windmill air purifier."""

from __future__ import annotations

from homeassistant.components.binary_sensor import (
    BinarySensorDeviceClass,
    BinarySensorEntity,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .accessory import AirPurifierAccessory
from .const import DEFAULT_SCAN_INTERVAL, DOMAIN
from .entity import WindmillEntity
from .models import FilterChangeIndication

SCAN_INTERVAL = DEFAULT_SCAN_INTERVAL


async def async_setup_entry(
    hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback
) -> None:
    """Set up binary sensors."""
    accessory: AirPurifierAccessory = hass.data[DOMAIN][entry.entry_id]
    async_add_entities([WindmillFilterChangeSensor(accessory, entry)], update_before_add=True)


class WindmillFilterChangeSensor(WindmillEntity, BinarySensorEntity):
    """On when the filter needs replacing."""

    _attr_name = "Filter change needed"
    _attr_device_class = BinarySensorDeviceClass.PROBLEM
    _attr_icon = "mdi:air-filter"

    def __init__(self, accessory: AirPurifierAccessory, entry: ConfigEntry) -> None:
        """Initialize filter change sensor."""
        super().__init__(accessory, entry, "filter_change")
        self._characteristic = accessory.filter_maintenance_service.get_characteristic(
            "FilterChangeIndication"
        )

    async def async_update(self) -> None:
        """Read the filter change indication."""
        value = await self._async_read(self._characteristic)
        if value is None:
            self._attr_is_on = None
        else:
            self._attr_is_on = value == FilterChangeIndication.CHANGE_FILTER
