"""Error taxonomy for the balance gateway.

AddressValidationError and ProviderError are raised by the leaf components.
The balance service wraps both into a HandlerError subclass, which the API
layer translates into an HTTP status.
"""


class AddressValidationError(ValueError):
    """Address text is not a well-formed account address."""


class ProviderError(Exception):
    """Upstream node could not produce a balance."""


class HandlerError(Exception):
    """Base error for a failed balance request."""

    def __init__(self, message: str, address: str):
        super().__init__(message)
        self.address = address


class InvalidAddressError(HandlerError):
    """Request carried a malformed address. The provider was not called."""


class UpstreamUnavailableError(HandlerError):
    """Provider failed to return a balance (network, timeout, bad response)."""
