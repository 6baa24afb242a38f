"""Select entity for the Windmill air purifier mode."""

from __future__ import annotations

from homeassistant.components.select import SelectEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .accessory import AirPurifierAccessory, Characteristic
from .const import DEFAULT_SCAN_INTERVAL, DOMAIN
from .entity import WindmillEntity
from .models import AirPurifierMode

MODE_OPTIONS = [mode.value for mode in AirPurifierMode]

SCAN_INTERVAL = DEFAULT_SCAN_INTERVAL


async def async_setup_entry(
    hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback
) -> None:
    """Set up select entities."""
    accessory: AirPurifierAccessory = hass.data[DOMAIN][entry.entry_id]
    async_add_entities([WindmillModeSelect(accessory, entry)], update_before_add=True)


class WindmillModeSelect(WindmillEntity, SelectEntity):
    """Direct choice of the purifier mode.

    The fan entity reaches the same modes through rotation speed bands; this
    select exposes them by name.
    """

    _attr_name = "Mode"
    _attr_options = MODE_OPTIONS
    _attr_icon = "mdi:fan"

    def __init__(self, accessory: AirPurifierAccessory, entry: ConfigEntry) -> None:
        """Initialize mode select."""
        super().__init__(accessory, entry, "mode")
        # No accessory service carries the mode by name, so bind one here
        self._characteristic = Characteristic(
            "Mode",
            on_get=accessory.purifier.get_mode,
            on_set=accessory.purifier.set_mode,
        )

    async def async_update(self) -> None:
        """Read the current mode."""
        mode = await self._async_read(self._characteristic)
        if mode is None:
            return
        self._attr_current_option = mode.value if isinstance(mode, AirPurifierMode) else None

    async def async_select_option(self, option: str) -> None:
        """Change the purifier mode."""
        await self._async_write(self._characteristic, AirPurifierMode(option))
