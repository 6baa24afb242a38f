"""Sensor entities for the Windmill air purifier."""

from __future__ import annotations

from typing import Any, Optional

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorStateClass,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONCENTRATION_MICROGRAMS_PER_CUBIC_METER, PERCENTAGE
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .accessory import AirPurifierAccessory, Service
from .const import DEFAULT_SCAN_INTERVAL, DOMAIN
from .entity import WindmillEntity
from .models import AirQuality, CurrentAirPurifierState

AIR_QUALITY_OPTIONS = [
    quality.name.lower() for quality in AirQuality if quality is not AirQuality.UNKNOWN
]
PURIFIER_STATE_OPTIONS = [state.name.lower() for state in CurrentAirPurifierState]

SCAN_INTERVAL = DEFAULT_SCAN_INTERVAL


async def async_setup_entry(
    hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback
) -> None:
    """Set up sensors from config entry."""
    accessory: AirPurifierAccessory = hass.data[DOMAIN][entry.entry_id]
    async_add_entities(
        [
            WindmillAirQualitySensor(accessory, entry),
            WindmillPM25Sensor(accessory, entry),
            WindmillFilterLifeSensor(accessory, entry),
            WindmillPurifierStateSensor(accessory, entry),
        ],
        update_before_add=True,
    )


class WindmillCharacteristicSensor(WindmillEntity, SensorEntity):
    """Sensor reporting one characteristic of an accessory service."""

    def __init__(
        self,
        accessory: AirPurifierAccessory,
        entry: ConfigEntry,
        key: str,
        service: Service,
        characteristic: str,
    ) -> None:
        """Initialize the sensor."""
        super().__init__(accessory, entry, key)
        self._characteristic = service.get_characteristic(characteristic)

    def _convert(self, value: Any) -> Any:
        return value

    async def async_update(self) -> None:
        """Read the characteristic."""
        value = await self._async_read(self._characteristic)
        self._attr_native_value = None if value is None else self._convert(value)


class WindmillAirQualitySensor(WindmillCharacteristicSensor):
    """Air quality level derived from PM2.5."""

    _attr_name = "Air quality"
    _attr_device_class = SensorDeviceClass.ENUM
    _attr_options = AIR_QUALITY_OPTIONS
    _attr_icon = "mdi:air-filter"

    def __init__(self, accessory: AirPurifierAccessory, entry: ConfigEntry) -> None:
        """Initialize air quality sensor."""
        super().__init__(
            accessory, entry, "air_quality", accessory.air_quality_service, "AirQuality"
        )

    def _convert(self, value: AirQuality) -> Optional[str]:
        if value == AirQuality.UNKNOWN:
            return None
        return AirQuality(value).name.lower()


class WindmillPM25Sensor(WindmillCharacteristicSensor):
    """Raw PM2.5 density."""

    _attr_name = "PM2.5"
    _attr_device_class = SensorDeviceClass.PM25
    _attr_state_class = SensorStateClass.MEASUREMENT
    _attr_native_unit_of_measurement = CONCENTRATION_MICROGRAMS_PER_CUBIC_METER

    def __init__(self, accessory: AirPurifierAccessory, entry: ConfigEntry) -> None:
        """Initialize PM2.5 sensor."""
        super().__init__(
            accessory, entry, "pm25", accessory.air_quality_service, "PM2_5Density"
        )


class WindmillFilterLifeSensor(WindmillCharacteristicSensor):
    """Remaining filter life."""

    _attr_name = "Filter life"
    _attr_state_class = SensorStateClass.MEASUREMENT
    _attr_native_unit_of_measurement = PERCENTAGE
    _attr_icon = "mdi:air-filter"

    def __init__(self, accessory: AirPurifierAccessory, entry: ConfigEntry) -> None:
        """Initialize filter life sensor."""
        super().__init__(
            accessory, entry, "filter_life", accessory.filter_maintenance_service, "FilterLifeLevel"
        )


class WindmillPurifierStateSensor(WindmillCharacteristicSensor):
    """Whether the purifier is off, idle or purifying."""

    _attr_name = "Status"
    _attr_device_class = SensorDeviceClass.ENUM
    _attr_options = PURIFIER_STATE_OPTIONS

    def __init__(self, accessory: AirPurifierAccessory, entry: ConfigEntry) -> None:
        """Initialize status sensor."""
        super().__init__(
            accessory,
            entry,
            "status",
            accessory.air_purifier_service,
            "CurrentAirPurifierState",
        )

    def _convert(self, value: CurrentAirPurifierState) -> str:
        return CurrentAirPurifierState(value).name.lower()
