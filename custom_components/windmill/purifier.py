"""Translation between Windmill pin values and purifier state."""

from __future__ import annotations

import logging
import re
from typing import Optional, Union

from .client import BlynkClient
from .models import AirPurifierMode, AirPurifierPin, SleepSound

LOGGER = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

# Integer codes accepted by the mode pin on write. Reads return the mode name.
MODE_CODES: dict[AirPurifierMode, int] = {
    AirPurifierMode.LOW: 0,
    AirPurifierMode.MEDIUM: 2,
    AirPurifierMode.HIGH: 3,
    AirPurifierMode.BOOST: 4,
    AirPurifierMode.ECO: 5,
    AirPurifierMode.SLEEP: 6,
}

MODE_ROTATION_SPEEDS: dict[AirPurifierMode, int] = {
    AirPurifierMode.SLEEP: 10,
    AirPurifierMode.LOW: 25,
    AirPurifierMode.MEDIUM: 50,
    AirPurifierMode.HIGH: 75,
    AirPurifierMode.ECO: 40,
    AirPurifierMode.BOOST: 100,
}
DEFAULT_ROTATION_SPEED = 50

# Upper bound (inclusive) of each speed band, checked in order
ROTATION_SPEED_BANDS: tuple[tuple[int, AirPurifierMode], ...] = (
    (15, AirPurifierMode.SLEEP),
    (30, AirPurifierMode.LOW),
    (45, AirPurifierMode.ECO),
    (60, AirPurifierMode.MEDIUM),
    (85, AirPurifierMode.HIGH),
)


def parse_int(value: Optional[str]) -> int:
    """Parse the leading integer of a pin value, 0 when there is none."""
    if not value:
        return 0
    match = _LEADING_INT.match(value)
    if match is None:
        return 0
    return int(match.group(1))


def decode_bool(value: Optional[str]) -> bool:
    return value == "1"


def encode_bool(value: bool) -> str:
    return "1" if value else "0"


def _as_mode(value: Union[AirPurifierMode, str]) -> Optional[AirPurifierMode]:
    try:
        return AirPurifierMode(value)
    except ValueError:
        return None


def decode_mode(value: str) -> Union[AirPurifierMode, str]:
    """Return the mode for a pin value, or the raw value if it is not a known mode."""
    try:
        return AirPurifierMode(value)
    except ValueError:
        LOGGER.warning("Unrecognised air purifier mode %r", value)
        return value


def encode_mode(mode: Union[AirPurifierMode, str]) -> str:
    """Return the integer code written to the mode pin. Unknown modes map to Eco."""
    return str(MODE_CODES.get(_as_mode(mode), MODE_CODES[AirPurifierMode.ECO]))


def decode_sleep_sound(value: str) -> Union[SleepSound, str]:
    try:
        return SleepSound(value)
    except ValueError:
        LOGGER.warning("Unrecognised sleep sound %r", value)
        return value


def mode_to_rotation_speed(mode: Union[AirPurifierMode, str]) -> int:
    """Map a mode to a rotation speed percentage."""
    return MODE_ROTATION_SPEEDS.get(_as_mode(mode), DEFAULT_ROTATION_SPEED)


def rotation_speed_to_mode(speed: int) -> AirPurifierMode:
    """Map a rotation speed percentage to the mode covering it.

    Every reported speed falls back inside its own mode's band, but the
    bands are not centred on those speeds.
    """
    for upper, mode in ROTATION_SPEED_BANDS:
        if speed <= upper:
            return mode
    return AirPurifierMode.BOOST


class AirPurifierService:
    """Reads and writes purifier settings through a Blynk client.

    Each method is exactly one pin read or write. Nothing is cached.
    """

    mode_to_rotation_speed = staticmethod(mode_to_rotation_speed)
    rotation_speed_to_mode = staticmethod(rotation_speed_to_mode)

    def __init__(self, client: BlynkClient, logger: Optional[logging.Logger] = None) -> None:
        """Initialize the service."""
        self.client = client
        self.log = logger or LOGGER

    async def get_power(self) -> bool:
        self.log.debug("Getting air purifier power")
        value = await self.client.read(AirPurifierPin.POWER)
        self.log.debug("Air purifier power is %s", value)
        return decode_bool(value)

    async def set_power(self, value: bool) -> None:
        self.log.debug("Setting air purifier power to %s", value)
        await self.client.write(AirPurifierPin.POWER, encode_bool(value))

    async def get_pm25(self) -> int:
        self.log.debug("Getting PM2.5")
        value = await self.client.read(AirPurifierPin.PM25)
        self.log.debug("PM2.5 is %s", value)
        return parse_int(value)

    async def get_mode(self) -> Union[AirPurifierMode, str]:
        self.log.debug("Getting air purifier mode")
        value = await self.client.read(AirPurifierPin.MODE)
        self.log.debug("Air purifier mode is %s", value)
        return decode_mode(value)

    async def set_mode(self, mode: Union[AirPurifierMode, str]) -> None:
        self.log.debug("Setting air purifier mode to %s", getattr(mode, "value", mode))
        await self.client.write(AirPurifierPin.MODE, encode_mode(mode))

    async def get_filter_life(self) -> int:
        self.log.debug("Getting filter life")
        value = await self.client.read(AirPurifierPin.FILTER_LIFE)
        self.log.debug("Filter life is %s%%", value)
        return parse_int(value)

    async def get_child_lock(self) -> bool:
        self.log.debug("Getting child lock")
        value = await self.client.read(AirPurifierPin.CHILD_LOCK)
        self.log.debug("Child lock is %s", value)
        return decode_bool(value)

    async def set_child_lock(self, value: bool) -> None:
        self.log.debug("Setting child lock to %s", value)
        await self.client.write(AirPurifierPin.CHILD_LOCK, encode_bool(value))

    async def get_autofade(self) -> bool:
        self.log.debug("Getting autofade")
        value = await self.client.read(AirPurifierPin.AUTOFADE)
        self.log.debug("Autofade is %s", value)
        return decode_bool(value)

    async def set_autofade(self, value: bool) -> None:
        self.log.debug("Setting autofade to %s", value)
        await self.client.write(AirPurifierPin.AUTOFADE, encode_bool(value))

    async def get_beeping(self) -> bool:
        self.log.debug("Getting beeping")
        value = await self.client.read(AirPurifierPin.BEEPING)
        self.log.debug("Beeping is %s", value)
        return decode_bool(value)

    async def set_beeping(self, value: bool) -> None:
        self.log.debug("Setting beeping to %s", value)
        await self.client.write(AirPurifierPin.BEEPING, encode_bool(value))

    async def get_sleep_sound(self) -> Union[SleepSound, str]:
        self.log.debug("Getting sleep sound")
        value = await self.client.read(AirPurifierPin.SLEEP_SOUND)
        self.log.debug("Sleep sound is %s", value)
        return decode_sleep_sound(value)

    async def set_sleep_sound(self, value: Union[SleepSound, str]) -> None:
        sound = getattr(value, "value", value)
        self.log.debug("Setting sleep sound to %s", sound)
        await self.client.write(AirPurifierPin.SLEEP_SOUND, sound)

    async def is_white_noise(self) -> bool:
        """Return True when the sleep sound is White Noise, False for Whisper."""
        return await self.get_sleep_sound() == SleepSound.WHITE_NOISE

    async def set_white_noise(self, enabled: bool) -> None:
        await self.set_sleep_sound(SleepSound.WHITE_NOISE if enabled else SleepSound.WHISPER)
