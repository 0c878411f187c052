#!/usr/bin/env python3
"""Send a test SMS (or check credit) through the configured channel.

Reads credentials from the environment:
    PERSIAN_SMS_IPPANEL_API_KEY=...
    PERSIAN_SMS_IPPANEL_SENDER_NUMBER=+983000...

Usage:
    python scripts/send_sms.py --to +989120000000 --text "Hello"
    python scripts/send_sms.py --to +989120000000 --pattern abc123 --var name=Ali
    python scripts/send_sms.py --credit
"""

import argparse
import sys

from persian_sms import (
    CouldNotSendNotification,
    PersianSmsConfig,
    SmsMessage,
    create_channel,
    setup_logging,
)


def _parse_variables(pairs: list[str]) -> dict[str, str]:
    variables: dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep:
            raise SystemExit(f"Invalid --var {pair!r}, expected name=value")
        variables[name] = value
    return variables


def main() -> None:
    parser = argparse.ArgumentParser(description="Send a test SMS")
    parser.add_argument("--to", action="append", default=[], help="Recipient number")
    parser.add_argument("--text", help="Plain message body")
    parser.add_argument("--pattern", help="Pattern code of an approved template")
    parser.add_argument(
        "--var", action="append", default=[], help="Pattern variable as name=value"
    )
    parser.add_argument("--sender", help="Override the configured sender number")
    parser.add_argument("--credit", action="store_true", help="Show account credit")
    args = parser.parse_args()

    config = PersianSmsConfig()
    setup_logging(config.log_level)

    try:
        channel = create_channel(config)
    except CouldNotSendNotification as exc:
        print(f"Configuration error: {exc}")
        sys.exit(1)

    with channel:
        if args.credit:
            try:
                credit = channel.get_credit()
            except CouldNotSendNotification as exc:
                print(f"Credit check failed: {exc}")
                sys.exit(1)
            print(f"Credit: {credit}")
            return

        if not args.to:
            parser.error("--to is required when sending")

        message = SmsMessage()
        if args.pattern:
            message.set_pattern(args.pattern, _parse_variables(args.var))
        else:
            message.set_content(args.text or "")
        if args.sender:
            message.set_sender(args.sender)

        try:
            result = channel.send(args.to, lambda _target: message)
        except CouldNotSendNotification as exc:
            print(f"Send failed [{exc.kind}]: {exc}")
            sys.exit(1)

        print(f"{result.details}  data={result.data}")


if __name__ == "__main__":
    main()
