"""Config flow for the Windmill air purifier integration."""

from __future__ import annotations

from collections.abc import Mapping
import hashlib
import logging
from typing import Any

from homeassistant import config_entries
from homeassistant.const import CONF_NAME
from homeassistant.core import HomeAssistant
from homeassistant.data_entry_flow import FlowResult
from homeassistant.helpers.aiohttp_client import async_get_clientsession
import voluptuous as vol

from .client import BlynkClient
from .const import BASE_URL, CONF_TOKEN, DEFAULT_NAME, DOMAIN
from .exceptions import AuthenticationError, TransportError
from .purifier import AirPurifierService

LOGGER = logging.getLogger(__name__)

STEP_USER_DATA_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_NAME, default=DEFAULT_NAME): str,
        vol.Required(CONF_TOKEN): str,
    }
)

STEP_REAUTH_DATA_SCHEMA = vol.Schema({vol.Required(CONF_TOKEN): str})


def token_unique_id(token: str) -> str:
    """Return a stable id for a device token without storing the token itself."""
    return hashlib.sha256(token.encode()).hexdigest()[:16]


async def validate_token(hass: HomeAssistant, token: str) -> dict[str, str]:
    """Read the power pin with the token, returning form errors."""
    client = BlynkClient(BASE_URL, token, session=async_get_clientsession(hass))
    try:
        await AirPurifierService(client).get_power()
    except AuthenticationError:
        return {"base": "invalid_auth"}
    except TransportError:
        return {"base": "cannot_connect"}
    except Exception:  # noqa: BLE001
        LOGGER.exception("Unexpected error validating token")
        return {"base": "unknown"}
    return {}


class WindmillConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for a Windmill air purifier."""

    VERSION = 1

    async def async_step_user(self, user_input: dict[str, Any] | None = None) -> FlowResult:
        """Handle user step."""
        errors: dict[str, str] = {}
        if user_input is not None:
            token = user_input[CONF_TOKEN].strip()
            await self.async_set_unique_id(token_unique_id(token))
            self._abort_if_unique_id_configured()

            errors = await validate_token(self.hass, token)
            if not errors:
                return self.async_create_entry(
                    title=user_input[CONF_NAME],
                    data={CONF_NAME: user_input[CONF_NAME], CONF_TOKEN: token},
                )

        return self.async_show_form(
            step_id="user",
            data_schema=STEP_USER_DATA_SCHEMA,
            errors=errors,
        )

    async def async_step_reauth(self, entry_data: Mapping[str, Any]) -> FlowResult:
        """Start reauthentication after the cloud rejected the token."""
        return await self.async_step_reauth_confirm()

    async def async_step_reauth_confirm(
        self, user_input: dict[str, Any] | None = None
    ) -> FlowResult:
        """Ask for a replacement token."""
        errors: dict[str, str] = {}
        entry = self.hass.config_entries.async_get_entry(self.context["entry_id"])
        assert entry is not None

        if user_input is not None:
            token = user_input[CONF_TOKEN].strip()
            errors = await validate_token(self.hass, token)
            if not errors:
                return self.async_update_reload_and_abort(
                    entry,
                    unique_id=token_unique_id(token),
                    data={**entry.data, CONF_TOKEN: token},
                )

        return self.async_show_form(
            step_id="reauth_confirm",
            data_schema=STEP_REAUTH_DATA_SCHEMA,
            errors=errors,
            description_placeholders={"name": entry.title},
        )
