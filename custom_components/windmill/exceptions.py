"""Exceptions raised by the Windmill client and accessory."""

from __future__ import annotations


class WindmillError(Exception):
    """Base class for Windmill errors."""


class TransportError(WindmillError):
    """A pin read or write did not complete.

    Raised for network failures, timeouts, non-success HTTP statuses and
    rejected tokens. Never retried.
    """


class AuthenticationError(TransportError):
    """The cloud rejected the device token."""


class CharacteristicNotWritable(WindmillError):
    """A set was attempted on a read-only characteristic."""
