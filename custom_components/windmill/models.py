"""Typed data models for the Windmill air purifier."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class AirPurifierPin(str, Enum):
    """Virtual pins exposed by the purifier on the Blynk cloud."""

    POWER = "V0"
    PM25 = "V1"
    MODE = "V2"
    SLEEP_SOUND = "V4"
    AUTOFADE = "V5"
    CHILD_LOCK = "V6"
    FILTER_LIFE = "V7"
    BEEPING = "V10"


class AirPurifierMode(str, Enum):
    """Operating modes, as reported by the mode pin."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    BOOST = "Boost"
    ECO = "Eco"
    SLEEP = "Sleep"


class SleepSound(str, Enum):
    """Sleep sound options. The pin takes the display string both ways."""

    WHISPER = "Whisper"
    WHITE_NOISE = "White Noise"


class Active(IntEnum):
    """Active characteristic values."""

    INACTIVE = 0
    ACTIVE = 1


class CurrentAirPurifierState(IntEnum):
    """Current air purifier state characteristic values."""

    INACTIVE = 0
    IDLE = 1
    PURIFYING_AIR = 2


class TargetAirPurifierState(IntEnum):
    """Target air purifier state characteristic values."""

    MANUAL = 0
    AUTO = 1


class LockPhysicalControls(IntEnum):
    """Lock physical controls characteristic values."""

    CONTROL_LOCK_DISABLED = 0
    CONTROL_LOCK_ENABLED = 1


class AirQuality(IntEnum):
    """Air quality characteristic values."""

    UNKNOWN = 0
    EXCELLENT = 1
    GOOD = 2
    FAIR = 3
    INFERIOR = 4
    POOR = 5


class FilterChangeIndication(IntEnum):
    """Filter change indication characteristic values."""

    FILTER_OK = 0
    CHANGE_FILTER = 1


@dataclass(frozen=True)
class AccessoryConfig:
    """Per-device configuration supplied by the host."""

    name: str
    token: str
