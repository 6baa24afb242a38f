"""Constants for the Windmill air purifier integration."""

from __future__ import annotations

from datetime import timedelta

DOMAIN = "windmill"

DEFAULT_NAME = "Windmill Air Purifier"
CONF_TOKEN = "token"

# Blynk cloud serving the Windmill devices
BASE_URL = "https://dashboard.windmillair.com"
API_GET_PATH = "/external/api/get"
API_UPDATE_PATH = "/external/api/update"

REQUEST_TIMEOUT = 10  # seconds

# Identify toggles power, waits, then restores it
IDENTIFY_DELAY = 3  # seconds

# Entities poll the cloud directly; nothing is cached between polls
DEFAULT_SCAN_INTERVAL = timedelta(seconds=30)

FILTER_CHANGE_THRESHOLD = 20  # percent

MANUFACTURER = "The Air Lab, Inc."
MODEL = "Windmill Air Purifier"

PLATFORMS = ["fan", "sensor", "binary_sensor", "switch", "select", "button"]
