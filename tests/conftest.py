"""Shared fixtures for the Windmill tests."""

from __future__ import annotations

import logging
import sys

import pytest

from custom_components.windmill.accessory import AirPurifierAccessory
from custom_components.windmill.models import AccessoryConfig, AirPurifierPin
from custom_components.windmill.purifier import MODE_CODES, AirPurifierService

MODE_NAMES = {str(code): mode.value for mode, code in MODE_CODES.items()}


class FakeBlynkClient:
    """In-memory stand-in for the Blynk cloud.

    Like the real device, the mode pin takes an integer code on write and
    reports the mode name on read.
    """

    def __init__(self, pins: dict | None = None) -> None:
        self.pins: dict[AirPurifierPin, str] = dict(pins or {})
        self.calls: list[tuple] = []

    async def read(self, pin: AirPurifierPin) -> str:
        self.calls.append(("read", pin))
        return self.pins.get(pin, "")

    async def write(self, pin: AirPurifierPin, value: str) -> None:
        self.calls.append(("write", pin, value))
        if pin == AirPurifierPin.MODE:
            value = MODE_NAMES.get(value, value)
        self.pins[pin] = value


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Show debug logs from the integration when a test fails."""
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(fmt="%(levelname)-8s %(name)s %(message)s"))
    logger = logging.getLogger("custom_components.windmill")
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)


@pytest.fixture
def fake_client() -> FakeBlynkClient:
    return FakeBlynkClient(
        {
            AirPurifierPin.POWER: "1",
            AirPurifierPin.PM25: "8",
            AirPurifierPin.MODE: "Medium",
            AirPurifierPin.SLEEP_SOUND: "Whisper",
            AirPurifierPin.AUTOFADE: "0",
            AirPurifierPin.CHILD_LOCK: "0",
            AirPurifierPin.FILTER_LIFE: "85",
            AirPurifierPin.BEEPING: "1",
        }
    )


@pytest.fixture
def purifier(fake_client: FakeBlynkClient) -> AirPurifierService:
    return AirPurifierService(fake_client)


@pytest.fixture
def accessory(purifier: AirPurifierService) -> AirPurifierAccessory:
    return AirPurifierAccessory(AccessoryConfig(name="Bedroom", token="secret"), purifier)
