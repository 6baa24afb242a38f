"""Switch entities for the Windmill air purifier."""

from __future__ import annotations

from typing import Any

from homeassistant.components.switch import SwitchDeviceClass, SwitchEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import EntityCategory
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .accessory import AirPurifierAccessory, Characteristic
from .const import DEFAULT_SCAN_INTERVAL, DOMAIN
from .entity import WindmillEntity
from .models import LockPhysicalControls

SCAN_INTERVAL = DEFAULT_SCAN_INTERVAL


async def async_setup_entry(
    hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback
) -> None:
    """Set up switch entities."""
    accessory: AirPurifierAccessory = hass.data[DOMAIN][entry.entry_id]
    entities: list[SwitchEntity] = [
        WindmillSwitch(
            accessory,
            entry,
            key="child_lock",
            name="Child lock",
            characteristic=accessory.air_purifier_service.get_characteristic(
                "LockPhysicalControls"
            ),
            on_value=LockPhysicalControls.CONTROL_LOCK_ENABLED,
            off_value=LockPhysicalControls.CONTROL_LOCK_DISABLED,
            icon="mdi:lock",
        ),
        WindmillSwitch(
            accessory,
            entry,
            key="autofade",
            name="Autofade",
            characteristic=accessory.autofade_switch.get_characteristic("On"),
            icon="mdi:brightness-auto",
        ),
        WindmillSwitch(
            accessory,
            entry,
            key="beeping",
            name="Beeping",
            characteristic=accessory.beeping_switch.get_characteristic("On"),
            icon="mdi:volume-high",
        ),
        # On = White Noise, off = Whisper
        WindmillSwitch(
            accessory,
            entry,
            key="white_noise",
            name="White noise",
            characteristic=accessory.white_noise_switch.get_characteristic("On"),
            icon="mdi:waveform",
        ),
    ]
    async_add_entities(entities, update_before_add=True)


class WindmillSwitch(WindmillEntity, SwitchEntity):
    """Switch bound to a two-valued characteristic."""

    _attr_device_class = SwitchDeviceClass.SWITCH
    _attr_entity_category = EntityCategory.CONFIG

    def __init__(
        self,
        accessory: AirPurifierAccessory,
        entry: ConfigEntry,
        key: str,
        name: str,
        characteristic: Characteristic,
        on_value: Any = True,
        off_value: Any = False,
        icon: str | None = None,
    ) -> None:
        """Initialize the switch."""
        super().__init__(accessory, entry, key)
        self._attr_name = name
        self._attr_icon = icon
        self._characteristic = characteristic
        self._on_value = on_value
        self._off_value = off_value

    async def async_update(self) -> None:
        """Read the characteristic."""
        value = await self._async_read(self._characteristic)
        self._attr_is_on = None if value is None else value == self._on_value

    async def async_turn_on(self, **kwargs: Any) -> None:
        """Turn the switch on."""
        await self._async_write(self._characteristic, self._on_value)

    async def async_turn_off(self, **kwargs: Any) -> None:
        """Turn the switch off."""
        await self._async_write(self._characteristic, self._off_value)
