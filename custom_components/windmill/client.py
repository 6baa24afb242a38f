"""Async HTTP client for the Blynk virtual pin API."""

from __future__ import annotations

import asyncio
from enum import Enum
import logging
from typing import Optional, Union
from urllib.parse import quote

import aiohttp

from .const import API_GET_PATH, API_UPDATE_PATH, REQUEST_TIMEOUT
from .exceptions import AuthenticationError, TransportError

LOGGER = logging.getLogger(__name__)

Pin = Union[str, Enum]


def _pin_name(pin: Pin) -> str:
    return pin.value if isinstance(pin, Enum) else pin


class BlynkClient:
    """Reads and writes virtual pins of a single Blynk device.

    Every call is one independent HTTP round trip. When no session is given,
    each call opens and closes its own session.
    """

    def __init__(
        self,
        server_address: str,
        token: str,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        """Initialize the client."""
        self.server_address = server_address.rstrip("/")
        self._token = token
        self._session = session
        self._timeout = timeout

    async def read(self, pin: Pin) -> str:
        """Return the raw text value of a pin."""
        name = _pin_name(pin)
        url = f"{self._base_url(API_GET_PATH)}&{name}"
        value = await self._request(url)
        LOGGER.debug("Read pin %s: %r", name, value)
        return value

    async def write(self, pin: Pin, value: str) -> None:
        """Write a raw text value to a pin."""
        name = _pin_name(pin)
        url = f"{self._base_url(API_UPDATE_PATH)}&{name}={quote(str(value), safe='')}"
        LOGGER.debug("Writing pin %s: %r", name, value)
        await self._request(url)

    def _base_url(self, path: str) -> str:
        return f"{self.server_address}{path}?token={quote(self._token, safe='')}"

    async def _request(self, url: str) -> str:
        try:
            if self._session is None:
                async with aiohttp.ClientSession() as session:
                    return await self._fetch(session, url)
            return await self._fetch(self._session, url)
        except asyncio.TimeoutError as err:
            raise TransportError(f"Timeout talking to {self.server_address}") from err
        except aiohttp.ClientError as err:
            raise TransportError(f"Error talking to {self.server_address}: {err}") from err

    async def _fetch(self, session: aiohttp.ClientSession, url: str) -> str:
        async with session.get(
            url, timeout=aiohttp.ClientTimeout(total=self._timeout)
        ) as response:
            # Undecodable bytes are replaced rather than raised
            body = await response.text(errors="replace")
            if response.status in (401, 403) or (
                response.status == 400 and "token" in body.lower()
            ):
                raise AuthenticationError(f"Token rejected (HTTP {response.status})")
            if not 200 <= response.status < 300:
                raise TransportError(
                    f"Unexpected HTTP {response.status} from {self.server_address}: {body[:100]}"
                )
            return body
