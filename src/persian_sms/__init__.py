"""SMS notification channels for Iranian SMS gateways."""

from persian_sms.channels import (
    ChannelRegistry,
    IPPanelChannel,
    SendResult,
    SmsChannel,
    create_channel,
    create_default_registry,
)
from persian_sms.config import IPPanelConfig, PersianSmsConfig
from persian_sms.exceptions import CouldNotSendNotification, ErrorKind
from persian_sms.log import JsonFormatter, setup_logging
from persian_sms.message import SmsMessage

__all__ = [
    "ChannelRegistry",
    "CouldNotSendNotification",
    "ErrorKind",
    "IPPanelChannel",
    "IPPanelConfig",
    "JsonFormatter",
    "PersianSmsConfig",
    "SendResult",
    "SmsChannel",
    "SmsMessage",
    "create_channel",
    "create_default_registry",
    "setup_logging",
]
