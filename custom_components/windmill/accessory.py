"""Air purifier accessory: characteristic hooks over the purifier service."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
import logging
from typing import Any, Awaitable, Callable, Optional

from .const import FILTER_CHANGE_THRESHOLD, IDENTIFY_DELAY, MANUFACTURER, MODEL
from .exceptions import CharacteristicNotWritable
from .models import (
    AccessoryConfig,
    Active,
    AirPurifierMode,
    AirQuality,
    CurrentAirPurifierState,
    FilterChangeIndication,
    LockPhysicalControls,
    TargetAirPurifierState,
)
from .purifier import AirPurifierService

LOGGER = logging.getLogger(__name__)

GetHook = Callable[[], Awaitable[Any]]
SetHook = Callable[[Any], Awaitable[None]]

# Inclusive PM2.5 upper bounds (µg/m³), EPA AQI breakpoints
AIR_QUALITY_BREAKPOINTS: tuple[tuple[int, AirQuality], ...] = (
    (12, AirQuality.EXCELLENT),
    (35, AirQuality.GOOD),
    (55, AirQuality.FAIR),
    (150, AirQuality.INFERIOR),
)


def air_quality_from_pm25(pm25: int) -> AirQuality:
    """Bucket a PM2.5 concentration into an air quality level."""
    for upper, quality in AIR_QUALITY_BREAKPOINTS:
        if pm25 <= upper:
            return quality
    return AirQuality.POOR


def filter_change_from_life(filter_life: int) -> FilterChangeIndication:
    """Return CHANGE_FILTER once filter life drops below the threshold."""
    if filter_life < FILTER_CHANGE_THRESHOLD:
        return FilterChangeIndication.CHANGE_FILTER
    return FilterChangeIndication.FILTER_OK


@dataclass
class Characteristic:
    """A single readable (and optionally writable) value of a service."""

    name: str
    on_get: Optional[GetHook] = None
    on_set: Optional[SetHook] = None
    value: Any = None

    @property
    def writable(self) -> bool:
        return self.on_set is not None

    async def get(self) -> Any:
        """Return the current value, invoking the get hook when there is one."""
        if self.on_get is None:
            return self.value
        return await self.on_get()

    async def set(self, value: Any) -> None:
        if self.on_set is None:
            raise CharacteristicNotWritable(f"{self.name} is read-only")
        await self.on_set(value)


@dataclass
class Service:
    """A group of characteristics exposed as one accessory service."""

    name: str
    service_type: str
    subtype: Optional[str] = None
    characteristics: dict[str, Characteristic] = field(default_factory=dict)
    linked_services: list["Service"] = field(default_factory=list)
    primary: bool = False

    def add_characteristic(
        self,
        name: str,
        on_get: Optional[GetHook] = None,
        on_set: Optional[SetHook] = None,
        value: Any = None,
    ) -> Characteristic:
        characteristic = Characteristic(name, on_get=on_get, on_set=on_set, value=value)
        self.characteristics[name] = characteristic
        return characteristic

    def get_characteristic(self, name: str) -> Characteristic:
        return self.characteristics[name]

    def add_linked_service(self, service: "Service") -> None:
        self.linked_services.append(service)


class AirPurifierAccessory:
    """Exposes a Windmill purifier as accessory services.

    Every hook goes straight to the purifier service; the accessory keeps
    no state of its own, so hooks may run concurrently in any order.
    """

    def __init__(
        self,
        config: AccessoryConfig,
        purifier: AirPurifierService,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """Build the service graph and bind each characteristic's hooks."""
        self.config = config
        self.name = config.name
        self.purifier = purifier
        self.log = logger or LOGGER

        self.information_service = Service(self.name, "AccessoryInformation")
        self.information_service.add_characteristic("Manufacturer", value=MANUFACTURER)
        self.information_service.add_characteristic("Model", value=MODEL)
        self.information_service.add_characteristic("Name", value=self.name)

        self.air_purifier_service = Service(self.name, "AirPurifier", primary=True)
        self.air_purifier_service.add_characteristic(
            "Active", self.handle_get_active, self.handle_set_active
        )
        self.air_purifier_service.add_characteristic(
            "CurrentAirPurifierState", self.handle_get_current_air_purifier_state
        )
        self.air_purifier_service.add_characteristic(
            "TargetAirPurifierState",
            self.handle_get_target_air_purifier_state,
            self.handle_set_target_air_purifier_state,
        )
        self.air_purifier_service.add_characteristic(
            "RotationSpeed", self.handle_get_rotation_speed, self.handle_set_rotation_speed
        )
        self.air_purifier_service.add_characteristic(
            "LockPhysicalControls",
            self.handle_get_lock_physical_controls,
            self.handle_set_lock_physical_controls,
        )

        self.air_quality_service = Service("Air Quality", "AirQualitySensor")
        self.air_quality_service.add_characteristic("AirQuality", self.handle_get_air_quality)
        self.air_quality_service.add_characteristic("PM2_5Density", self.handle_get_pm25_density)

        self.filter_maintenance_service = Service("Filter", "FilterMaintenance")
        self.filter_maintenance_service.add_characteristic(
            "FilterChangeIndication", self.handle_get_filter_change_indication
        )
        self.filter_maintenance_service.add_characteristic(
            "FilterLifeLevel", self.handle_get_filter_life_level
        )

        self.autofade_switch = Service("Autofade", "Switch", subtype="autofade")
        self.autofade_switch.add_characteristic(
            "On", self.handle_get_autofade, self.handle_set_autofade
        )

        self.beeping_switch = Service("Beeping", "Switch", subtype="beeping")
        self.beeping_switch.add_characteristic(
            "On", self.handle_get_beeping, self.handle_set_beeping
        )

        # On = White Noise, Off = Whisper
        self.white_noise_switch = Service("White Noise", "Switch", subtype="whitenoise")
        self.white_noise_switch.add_characteristic(
            "On", self.handle_get_white_noise, self.handle_set_white_noise
        )

        for linked in (
            self.air_quality_service,
            self.filter_maintenance_service,
            self.autofade_switch,
            self.beeping_switch,
            self.white_noise_switch,
        ):
            self.air_purifier_service.add_linked_service(linked)

    def get_services(self) -> list[Service]:
        return [
            self.air_purifier_service,
            self.information_service,
            self.air_quality_service,
            self.filter_maintenance_service,
            self.autofade_switch,
            self.beeping_switch,
            self.white_noise_switch,
        ]

    def get_service(self, name: str) -> Service:
        """Return the first service with the given display name."""
        for service in self.get_services():
            if service.name == name:
                return service
        raise KeyError(name)

    async def identify(self) -> None:
        """Blink the purifier by flipping its power and restoring it."""
        self.log.debug("Identify requested")
        power = await self.purifier.get_power()
        await self.purifier.set_power(not power)
        await asyncio.sleep(IDENTIFY_DELAY)
        await self.purifier.set_power(power)

    # Air purifier

    async def handle_get_active(self) -> Active:
        self.log.debug("Triggered GET Active")
        power = await self.purifier.get_power()
        return Active.ACTIVE if power else Active.INACTIVE

    async def handle_set_active(self, value: Any) -> None:
        self.log.debug("Triggered SET Active: %s", value)
        await self.purifier.set_power(value == Active.ACTIVE)

    async def handle_get_current_air_purifier_state(self) -> CurrentAirPurifierState:
        self.log.debug("Triggered GET CurrentAirPurifierState")
        if not await self.purifier.get_power():
            return CurrentAirPurifierState.INACTIVE

        # Any detectable particulate counts as purifying
        pm25 = await self.purifier.get_pm25()
        if pm25 > 0:
            return CurrentAirPurifierState.PURIFYING_AIR
        return CurrentAirPurifierState.IDLE

    async def handle_get_target_air_purifier_state(self) -> TargetAirPurifierState:
        self.log.debug("Triggered GET TargetAirPurifierState")
        mode = await self.purifier.get_mode()
        if mode == AirPurifierMode.ECO:
            return TargetAirPurifierState.AUTO
        return TargetAirPurifierState.MANUAL

    async def handle_set_target_air_purifier_state(self, value: Any) -> None:
        self.log.debug("Triggered SET TargetAirPurifierState: %s", value)
        if value == TargetAirPurifierState.AUTO:
            await self.purifier.set_mode(AirPurifierMode.ECO)
        # Manual keeps the current mode; rotation speed selects manual modes

    async def handle_get_rotation_speed(self) -> int:
        self.log.debug("Triggered GET RotationSpeed")
        if not await self.purifier.get_power():
            return 0
        mode = await self.purifier.get_mode()
        return self.purifier.mode_to_rotation_speed(mode)

    async def handle_set_rotation_speed(self, value: Any) -> None:
        self.log.debug("Triggered SET RotationSpeed: %s", value)
        speed = int(value)
        if speed == 0:
            await self.purifier.set_power(False)
            return

        if not await self.purifier.get_power():
            await self.purifier.set_power(True)
        await self.purifier.set_mode(self.purifier.rotation_speed_to_mode(speed))

    async def handle_get_lock_physical_controls(self) -> LockPhysicalControls:
        self.log.debug("Triggered GET LockPhysicalControls")
        if await self.purifier.get_child_lock():
            return LockPhysicalControls.CONTROL_LOCK_ENABLED
        return LockPhysicalControls.CONTROL_LOCK_DISABLED

    async def handle_set_lock_physical_controls(self, value: Any) -> None:
        self.log.debug("Triggered SET LockPhysicalControls: %s", value)
        await self.purifier.set_child_lock(value == LockPhysicalControls.CONTROL_LOCK_ENABLED)

    # Air quality

    async def handle_get_air_quality(self) -> AirQuality:
        self.log.debug("Triggered GET AirQuality")
        return air_quality_from_pm25(await self.purifier.get_pm25())

    async def handle_get_pm25_density(self) -> int:
        self.log.debug("Triggered GET PM2_5Density")
        return await self.purifier.get_pm25()

    # Filter maintenance

    async def handle_get_filter_change_indication(self) -> FilterChangeIndication:
        self.log.debug("Triggered GET FilterChangeIndication")
        return filter_change_from_life(await self.purifier.get_filter_life())

    async def handle_get_filter_life_level(self) -> int:
        self.log.debug("Triggered GET FilterLifeLevel")
        return await self.purifier.get_filter_life()

    # Switches

    async def handle_get_autofade(self) -> bool:
        self.log.debug("Triggered GET Autofade")
        return await self.purifier.get_autofade()

    async def handle_set_autofade(self, value: Any) -> None:
        self.log.debug("Triggered SET Autofade: %s", value)
        await self.purifier.set_autofade(bool(value))

    async def handle_get_beeping(self) -> bool:
        self.log.debug("Triggered GET Beeping")
        return await self.purifier.get_beeping()

    async def handle_set_beeping(self, value: Any) -> None:
        self.log.debug("Triggered SET Beeping: %s", value)
        await self.purifier.set_beeping(bool(value))

    async def handle_get_white_noise(self) -> bool:
        self.log.debug("Triggered GET WhiteNoise")
        return await self.purifier.is_white_noise()

    async def handle_set_white_noise(self, value: Any) -> None:
        self.log.debug("Triggered SET WhiteNoise: %s", value)
        await self.purifier.set_white_noise(bool(value))
