"""Abstract SMS channel interface."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import httpx

# Called with the notification target; expected to return an SmsMessage.
MessageProducer = Callable[[Any], Any]


@dataclass(frozen=True, slots=True)
class SendResult:
    """Outcome of a send attempt that did not raise."""

    success: bool
    details: str
    response: httpx.Response | None = None
    data: Any = None

    @classmethod
    def delivered(
        cls, response: httpx.Response, body: dict[str, Any] | None
    ) -> "SendResult":
        data = body.get("data") if body else None
        return cls(
            success=True,
            details=f"SMS accepted (HTTP {response.status_code})",
            response=response,
            data=data,
        )

    @classmethod
    def skipped(cls, details: str = "No recipient could be resolved") -> "SendResult":
        return cls(success=False, details=details)

    @property
    def is_skipped(self) -> bool:
        return not self.success and self.response is None

    @property
    def status_code(self) -> int | None:
        return self.response.status_code if self.response is not None else None


class SmsChannel(ABC):
    """Base class for all SMS provider channels."""

    @abstractmethod
    def send(self, target: Any, message_producer: MessageProducer) -> SendResult:
        """Send the message produced for *target*.

        Returns a skipped result when no recipient can be resolved.
        Every other failure raises CouldNotSendNotification.
        """

    @abstractmethod
    def get_credit(self) -> Any:
        """Return the account credit reported by the provider."""

    def close(self) -> None:
        """Release the underlying HTTP client, if the channel owns one."""

    def __enter__(self) -> "SmsChannel":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
