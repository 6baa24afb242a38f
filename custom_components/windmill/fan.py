"""Fan entity for the Windmill air purifier."""

from __future__ import annotations

import logging
from typing import Any, Optional

from homeassistant.components.fan import FanEntity, FanEntityFeature
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .accessory import AirPurifierAccessory
from .const import DEFAULT_SCAN_INTERVAL, DOMAIN
from .entity import WindmillEntity
from .models import Active, TargetAirPurifierState

LOGGER = logging.getLogger(__name__)

PRESET_MODE_AUTO = "Auto"

SCAN_INTERVAL = DEFAULT_SCAN_INTERVAL


async def async_setup_entry(
    hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback
) -> None:
    """Set up the purifier fan."""
    accessory: AirPurifierAccessory = hass.data[DOMAIN][entry.entry_id]
    async_add_entities([WindmillAirPurifierFan(accessory, entry)], update_before_add=True)


class WindmillAirPurifierFan(WindmillEntity, FanEntity):
    """Power, rotation speed and Auto (Eco) mode of the purifier.

    Rotation speed selects a manual mode by band; the Auto preset selects Eco.
    """

    _attr_name = None
    _attr_preset_modes = [PRESET_MODE_AUTO]
    _attr_supported_features = (
        FanEntityFeature.SET_SPEED
        | FanEntityFeature.PRESET_MODE
        | FanEntityFeature.TURN_ON
        | FanEntityFeature.TURN_OFF
    )

    def __init__(self, accessory: AirPurifierAccessory, entry: ConfigEntry) -> None:
        """Initialize the fan."""
        super().__init__(accessory, entry, "fan")
        service = accessory.air_purifier_service
        self._active = service.get_characteristic("Active")
        self._rotation_speed = service.get_characteristic("RotationSpeed")
        self._target_state = service.get_characteristic("TargetAirPurifierState")
        self._is_on: Optional[bool] = None

    @property
    def is_on(self) -> Optional[bool]:
        """Return True if the purifier is powered."""
        return self._is_on

    async def async_update(self) -> None:
        """Poll power, speed and target state."""
        values = await self._async_read_all(
            self._active, self._rotation_speed, self._target_state
        )
        if values is None:
            return

        active, speed, target = values
        self._is_on = active == Active.ACTIVE
        self._attr_percentage = speed
        self._attr_preset_mode = (
            PRESET_MODE_AUTO if target == TargetAirPurifierState.AUTO else None
        )

    async def async_turn_on(
        self,
        percentage: Optional[int] = None,
        preset_mode: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        """Turn the purifier on, optionally at a speed or preset."""
        if preset_mode is not None:
            await self._async_write(self._active, Active.ACTIVE)
            await self.async_set_preset_mode(preset_mode)
        elif percentage is not None:
            await self.async_set_percentage(percentage)
        else:
            await self._async_write(self._active, Active.ACTIVE)

    async def async_turn_off(self, **kwargs: Any) -> None:
        """Turn the purifier off."""
        await self._async_write(self._active, Active.INACTIVE)

    async def async_set_percentage(self, percentage: int) -> None:
        """Set rotation speed; 0 turns the purifier off."""
        LOGGER.debug("Setting %s rotation speed to %s", self.accessory.name, percentage)
        await self._async_write(self._rotation_speed, percentage)

    async def async_set_preset_mode(self, preset_mode: str) -> None:
        """Switch to Auto, which runs the purifier in Eco mode."""
        if preset_mode != PRESET_MODE_AUTO:
            LOGGER.warning("Unsupported preset mode %s", preset_mode)
            return
        await self._async_write(self._target_state, TargetAirPurifierState.AUTO)
