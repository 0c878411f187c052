"""Error taxonomy shared by every SMS channel operation."""

from enum import StrEnum
from typing import Any


class ErrorKind(StrEnum):
    RECIPIENT_NOT_PROVIDED = "recipient_not_provided"
    SENDER_NOT_PROVIDED = "sender_not_provided"
    CONTENT_NOT_PROVIDED = "content_not_provided"
    MISSING_PATTERN_CODE = "missing_pattern_code"
    INVALID_PATTERN_VARIABLES = "invalid_pattern_variables"
    INVALID_MESSAGE_OBJECT = "invalid_message_object"
    SERVICE_RESPONDED_WITH_AN_ERROR = "service_responded_with_an_error"
    GENERIC_ERROR = "generic_error"
    API_KEY_NOT_PROVIDED = "api_key_not_provided"
    SENDER_NOT_PROVIDED_AT_CONFIG = "sender_not_provided_at_config"
    UNSUPPORTED_DRIVER = "unsupported_driver"


class CouldNotSendNotification(Exception):
    """Raised when an SMS could not be handed over to the provider.

    ``kind`` tells callers which failure occurred without parsing the
    message. ``status_code`` and ``response_body`` are only set for
    provider and transport failures. The underlying exception, if any,
    is chained via ``raise ... from``.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.GENERIC_ERROR,
        status_code: int | None = None,
        response_body: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code
        self.response_body = response_body

    @classmethod
    def recipient_not_provided(
        cls, message: str = "Recipient not provided or invalid."
    ) -> "CouldNotSendNotification":
        return cls(message, ErrorKind.RECIPIENT_NOT_PROVIDED)

    @classmethod
    def sender_not_provided(cls) -> "CouldNotSendNotification":
        return cls(
            "Sender (originator/from number) was not provided in message "
            "or configuration.",
            ErrorKind.SENDER_NOT_PROVIDED,
        )

    @classmethod
    def content_not_provided(cls) -> "CouldNotSendNotification":
        return cls(
            "SMS content was not provided for a normal message.",
            ErrorKind.CONTENT_NOT_PROVIDED,
        )

    @classmethod
    def missing_pattern_code(cls) -> "CouldNotSendNotification":
        return cls(
            "Pattern code was not provided for a pattern-based message.",
            ErrorKind.MISSING_PATTERN_CODE,
        )

    @classmethod
    def invalid_pattern_variables(cls) -> "CouldNotSendNotification":
        return cls(
            "Pattern variables are invalid or not provided as a mapping.",
            ErrorKind.INVALID_PATTERN_VARIABLES,
        )

    @classmethod
    def invalid_message_object(cls, message: object) -> "CouldNotSendNotification":
        """Build the error for a producer that returned a non-message.

        Builtin values (lists, dicts, numbers, None) carry no useful class
        name and are reported as ``Unknown``.
        """
        message_type = type(message)
        if message_type.__module__ == "builtins":
            class_name = "Unknown"
        else:
            class_name = f"{message_type.__module__}.{message_type.__qualname__}"
        return cls(
            "The message object provided was invalid. Expected an instance of "
            f"SmsMessage or a string, got {class_name}.",
            ErrorKind.INVALID_MESSAGE_OBJECT,
        )

    @classmethod
    def string_message_given(cls, text: str) -> "CouldNotSendNotification":
        return cls(
            f"Message must be an instance of SmsMessage. String given: {text}",
            ErrorKind.INVALID_MESSAGE_OBJECT,
        )

    @classmethod
    def service_responded_with_an_error(
        cls,
        error_message: str,
        status_code: int | None = None,
        response_body: dict[str, Any] | None = None,
    ) -> "CouldNotSendNotification":
        message = f'SMS service responded with an error: "{error_message}"'
        if status_code:
            message += f" (Status Code: {status_code})"
        return cls(
            message,
            ErrorKind.SERVICE_RESPONDED_WITH_AN_ERROR,
            status_code=status_code,
            response_body=response_body,
        )

    @classmethod
    def generic_error(cls, reason: str) -> "CouldNotSendNotification":
        return cls(f"Could not send SMS: {reason}", ErrorKind.GENERIC_ERROR)

    @classmethod
    def api_key_not_provided(cls) -> "CouldNotSendNotification":
        return cls(
            "IPPanel API key is missing or not configured.",
            ErrorKind.API_KEY_NOT_PROVIDED,
        )

    @classmethod
    def sender_not_configured(cls) -> "CouldNotSendNotification":
        return cls(
            "Sender (originator/from number) was not provided in message "
            "or configuration.",
            ErrorKind.SENDER_NOT_PROVIDED_AT_CONFIG,
        )

    @classmethod
    def unsupported_driver(cls, driver: str) -> "CouldNotSendNotification":
        return cls(
            f"Unsupported SMS driver [{driver}].", ErrorKind.UNSUPPORTED_DRIVER
        )
