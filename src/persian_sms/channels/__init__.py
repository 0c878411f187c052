"""Channel registry and configuration-driven channel construction."""

import logging
from collections.abc import Callable

import httpx

from persian_sms.channels.base import SendResult, SmsChannel
from persian_sms.channels.ippanel import IPPanelChannel
from persian_sms.config import IPPanelConfig, PersianSmsConfig
from persian_sms.exceptions import CouldNotSendNotification

__all__ = [
    "ChannelFactory",
    "ChannelRegistry",
    "IPPanelChannel",
    "SendResult",
    "SmsChannel",
    "build_ippanel_channel",
    "create_channel",
    "create_default_registry",
]

logger = logging.getLogger(__name__)

ChannelFactory = Callable[[PersianSmsConfig, httpx.Client | None], SmsChannel]


class ChannelRegistry:
    """Maps driver names to channel factories."""

    def __init__(self) -> None:
        self._factories: dict[str, ChannelFactory] = {}

    def register(self, driver: str, factory: ChannelFactory) -> None:
        self._factories[driver] = factory

    def get(self, driver: str) -> ChannelFactory:
        """Return the factory for a driver.

        Raises KeyError if no factory is registered for the driver.
        """
        return self._factories[driver]


def build_ippanel_channel(
    config: PersianSmsConfig,
    client: httpx.Client | None = None,
    ippanel: IPPanelConfig | None = None,
) -> IPPanelChannel:
    """Build an IPPanelChannel, rejecting missing credentials up front."""
    ippanel = ippanel or IPPanelConfig()

    if not ippanel.api_key.strip():
        raise CouldNotSendNotification.api_key_not_provided()
    if not ippanel.sender_number.strip():
        raise CouldNotSendNotification.sender_not_configured()

    if client is None:
        client = httpx.Client(timeout=config.timeout_seconds)

    return IPPanelChannel(
        client,
        ippanel.api_key,
        ippanel.sender_number,
        base_url=ippanel.base_url,
    )


def create_default_registry() -> ChannelRegistry:
    """Create a registry with all built-in drivers."""
    registry = ChannelRegistry()
    registry.register("ippanel", build_ippanel_channel)
    return registry


def create_channel(
    config: PersianSmsConfig | None = None,
    client: httpx.Client | None = None,
    registry: ChannelRegistry | None = None,
) -> SmsChannel:
    """Build the channel for the configured driver.

    Settings are read from the environment when *config* is omitted.
    *client* replaces the HTTP client the channel would otherwise create.
    """
    config = config or PersianSmsConfig()
    registry = registry or create_default_registry()

    try:
        factory = registry.get(config.driver)
    except KeyError:
        raise CouldNotSendNotification.unsupported_driver(config.driver) from None

    channel = factory(config, client)
    logger.info("SMS channel ready", extra={"driver": config.driver})
    return channel
