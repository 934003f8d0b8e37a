"""Exception and warning hierarchy for spreadsheet date conversion."""


class ConversionError(Exception):
    """Base exception for spreadsheet date conversion errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidInputError(ConversionError):
    """Raised when a value of the wrong kind is supplied for conversion."""


class OutOfRangeError(ConversionError):
    """Raised when a serial number falls outside the representable range."""


class BadDateWarning(UserWarning):
    """Emitted when a non-calendar serial is replaced by the nearest real date."""


# Sanitized user-facing error message constants
ERR_MSG_NOT_NUMERIC = "serial value must be numeric"
ERR_MSG_NEGATIVE = "serial value cannot be negative"
ERR_MSG_TOO_LARGE = "serial value is past the last supported date"
ERR_MSG_NOT_TIMESTAMP = "value must be a date or datetime"
ERR_MSG_INVALID_TIMEZONE = "invalid time zone"
