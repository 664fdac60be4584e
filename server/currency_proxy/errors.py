from typing import Any, Dict

GENERIC_ERROR_MESSAGE = 'Something Went Wrong. Please contact to site administrator.'
INCORRECT_DATA_MESSAGE = 'Incorrect Data.'


class ConversionError(Exception):
    """Base class for failures rendered as an error envelope."""
    message = GENERIC_ERROR_MESSAGE
    code = 400

    def __init__(self, message: str = None, code: int = None):
        if message is not None:
            self.message = message
        if code is not None:
            self.code = code
        super().__init__(self.message)

    def to_envelope(self) -> Dict[str, Any]:
        return {"error": {"message": self.message, "code": self.code}}


class ConfigurationError(ConversionError):
    """Upstream URL or API token is not configured."""


class UpstreamTransportError(ConversionError):
    """The provider could not be reached or answered with a non-2xx status."""


class EmptyResponseError(ConversionError):
    """The provider answered 2xx with an empty body."""


class MalformedPayloadError(ConversionError):
    """The provider body has no usable `quotes` mapping."""
    message = INCORRECT_DATA_MESSAGE
