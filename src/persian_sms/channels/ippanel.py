"""IPPanel SMS channel (plain and pattern messages)."""

import logging
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any

import httpx

from persian_sms.channels.base import MessageProducer, SendResult, SmsChannel
from persian_sms.config import IPPANEL_API_BASE_URL
from persian_sms.exceptions import CouldNotSendNotification
from persian_sms.message import SmsMessage

logger = logging.getLogger(__name__)

# Status reported when the provider could not be reached at all.
_TRANSPORT_FAILURE_STATUS = 503


class IPPanelChannel(SmsChannel):
    """Deliver SmsMessage objects through the IPPanel REST API.

    The channel holds no per-call state: the HTTP client, API key and
    default sender are fixed at construction, so one instance can serve
    concurrent callers as long as the client can. Configuration is not
    validated here; use ``persian_sms.channels.create_channel`` to build a
    checked instance from settings.
    """

    API_BASE_URL = IPPANEL_API_BASE_URL
    ENDPOINT_SEND_SINGLE = "/sms/send/webservice/single"
    ENDPOINT_SEND_PATTERN = "/sms/pattern/normal/send"
    ENDPOINT_CHECK_CREDIT = "/sms/accounting/credit/show"
    API_KEY_HEADER = "apiKey"
    CHANNEL_NAME = "persian_sms"

    def __init__(
        self,
        client: httpx.Client,
        api_key: str,
        default_sender: str,
        base_url: str = IPPANEL_API_BASE_URL,
    ) -> None:
        self._client = client
        self._api_key = api_key
        self._default_sender = default_sender
        self._base_url = base_url.rstrip("/")

    def send(self, target: Any, message_producer: MessageProducer) -> SendResult:
        message = message_producer(target)
        if not isinstance(message, SmsMessage):
            if isinstance(message, str):
                raise CouldNotSendNotification.string_message_given(message)
            raise CouldNotSendNotification.invalid_message_object(message)

        recipient = self._resolve_recipient(target, message)
        if not recipient:
            logger.info(
                "No recipient resolved, SMS skipped",
                extra={"channel": self.CHANNEL_NAME},
            )
            return SendResult.skipped()

        if isinstance(recipient, (list, tuple)):
            recipients = list(recipient)
        else:
            recipients = [recipient]

        sender = message.sender or self._default_sender
        if not sender or not sender.strip():
            raise CouldNotSendNotification.sender_not_provided()

        endpoint, payload = self._build_payload(message, recipients, sender)
        return self._dispatch(endpoint, payload)

    def get_credit(self) -> Any:
        with self._translate_errors(generic_prefix="Failed to get credit: "):
            response = self._client.get(
                self._url(self.ENDPOINT_CHECK_CREDIT), headers=self._headers()
            )
            body = _decode_body(response)
            if response.status_code == 200 and _is_ok(body):
                return body.get("data")
            raise self._provider_error(
                response, body, "Failed to retrieve credit information."
            )

    def close(self) -> None:
        self._client.close()

    def _resolve_recipient(self, target: Any, message: SmsMessage) -> Any:
        """Return the first non-empty recipient, or None.

        The message's own recipient wins over anything derived from the
        target.
        """
        resolvers: tuple[Callable[[], Any], ...] = (
            lambda: message.recipient,
            lambda: _route_for(target, self.CHANNEL_NAME),
            lambda: _route_for(target, type(self)),
            lambda: _provider_route(target),
            lambda: _field(target, "phone_number"),
            lambda: _field(target, "mobile"),
            lambda: _target_as_recipient(target),
        )
        for resolve in resolvers:
            recipient = resolve()
            if recipient:
                return recipient
        return None

    def _build_payload(
        self, message: SmsMessage, recipients: list[str], sender: str
    ) -> tuple[str, dict[str, Any]]:
        if message.is_pattern():
            # Only reachable when a subclass overrides is_pattern().
            if not message.pattern_code:
                raise CouldNotSendNotification.missing_pattern_code()
            if not isinstance(message.variables, Mapping):
                raise CouldNotSendNotification.invalid_pattern_variables()
            # The pattern endpoint takes a single recipient.
            return self.ENDPOINT_SEND_PATTERN, {
                "code": message.pattern_code,
                "sender": sender,
                "recipient": recipients[0],
                "variable": dict(message.variables),
            }

        content = message.content or ""
        if not content.strip():
            raise CouldNotSendNotification.content_not_provided()
        payload: dict[str, Any] = {
            "recipient": recipients,
            "sender": sender,
            "message": content,
        }
        if message.scheduled_at:
            payload["time"] = message.scheduled_at
        return self.ENDPOINT_SEND_SINGLE, payload

    def _dispatch(self, endpoint: str, payload: dict[str, Any]) -> SendResult:
        with self._translate_errors():
            response = self._client.post(
                self._url(endpoint),
                headers=self._headers(json_body=True),
                json=payload,
            )
            body = _decode_body(response)
            if response.is_success and _is_ok(body):
                logger.info(
                    "SMS sent",
                    extra={
                        "channel": self.CHANNEL_NAME,
                        "endpoint": endpoint,
                        "status_code": response.status_code,
                    },
                )
                return SendResult.delivered(response, body)
            raise self._provider_error(response, body, "Unknown error from IPPanel.")

    @contextmanager
    def _translate_errors(self, generic_prefix: str = "") -> Iterator[None]:
        """Map anything raised inside the block onto CouldNotSendNotification."""
        try:
            yield
        except CouldNotSendNotification:
            raise
        except httpx.HTTPStatusError as exc:
            # Raised by clients configured with a raise_for_status hook.
            response = exc.response
            raise self._provider_error(
                response, _decode_body(response), str(exc)
            ) from exc
        except httpx.RequestError as exc:
            error_message = str(exc) or type(exc).__name__
            logger.warning(
                "IPPanel unreachable",
                extra={"channel": self.CHANNEL_NAME, "error": error_message},
            )
            raise CouldNotSendNotification.service_responded_with_an_error(
                error_message, _TRANSPORT_FAILURE_STATUS
            ) from exc
        except Exception as exc:
            raise CouldNotSendNotification.generic_error(
                f"{generic_prefix}{exc}"
            ) from exc

    def _provider_error(
        self,
        response: httpx.Response,
        body: dict[str, Any] | None,
        default: str,
    ) -> CouldNotSendNotification:
        error_message = _error_text(body, default)
        logger.warning(
            "IPPanel responded with an error",
            extra={
                "channel": self.CHANNEL_NAME,
                "status_code": response.status_code,
                "error": error_message,
            },
        )
        return CouldNotSendNotification.service_responded_with_an_error(
            error_message, response.status_code, body
        )

    def _url(self, endpoint: str) -> str:
        return f"{self._base_url}{endpoint}"

    def _headers(self, json_body: bool = False) -> dict[str, str]:
        headers = {
            self.API_KEY_HEADER: self._api_key,
            "Accept": "application/json",
        }
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers


def _route_for(target: Any, key: Any) -> Any:
    route = getattr(target, "route_notification_for", None)
    return route(key) if callable(route) else None


def _provider_route(target: Any) -> Any:
    route = getattr(target, "route_notification_for_ippanel", None)
    return route(target) if callable(route) else None


def _field(target: Any, name: str) -> Any:
    if isinstance(target, Mapping):
        return target.get(name)
    return getattr(target, name, None)


def _target_as_recipient(target: Any) -> Any:
    if isinstance(target, str):
        return target
    if isinstance(target, (list, tuple)) and all(isinstance(t, str) for t in target):
        return list(target)
    return None


def _decode_body(response: httpx.Response) -> dict[str, Any] | None:
    """Parse the JSON envelope; anything unparseable counts as no body."""
    try:
        body = response.json()
    except (ValueError, httpx.StreamError):
        return None
    return body if isinstance(body, dict) else None


def _is_ok(body: dict[str, Any] | None) -> bool:
    return body is not None and body.get("status") == "OK"


def _error_text(body: dict[str, Any] | None, default: str) -> str:
    """Extract ``errorMessage``, flattening lists and per-field error mappings.

    ``{"recipient": ["invalid", "blocked"], "sender": "unknown"}`` becomes
    ``"recipient: invalid|blocked, sender: unknown"``.
    A plain list such as ``["bad sender", "blocked"]`` becomes
    ``"bad sender, blocked"``.
    """
    error = body.get("errorMessage") if body else None
    if error is None:
        return default
    if isinstance(error, Mapping):
        return ", ".join(
            f"{key}: {'|'.join(_as_strings(value))}" for key, value in error.items()
        )
    return ", ".join(_as_strings(error))


def _as_strings(value: Any) -> list[str]:
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    return [str(value)]
