"""Outgoing SMS description built by notification code."""

from typing import Any


class SmsMessage:
    """Builder for a single outgoing SMS.

    A message is either plain text (``content``) or a reference to a
    provider-side template (``pattern_code`` plus ``variables``). Setting
    one mode clears the other. Nothing is validated here; the channel
    rejects incomplete messages at send time.
    """

    def __init__(self, content: str = "") -> None:
        self.content: str | None = None
        self.pattern_code: str | None = None
        self.variables: dict[str, Any] | None = None
        self.sender: str | None = None
        self.recipient: str | list[str] | None = None
        self.scheduled_at: str | None = None

        if content:
            self.set_content(content)

    @classmethod
    def create(cls, content: str = "") -> "SmsMessage":
        return cls(content)

    def set_content(self, content: str) -> "SmsMessage":
        self.content = content
        self.pattern_code = None
        self.variables = None
        return self

    def set_pattern(
        self, pattern_code: str, variables: dict[str, Any] | None = None
    ) -> "SmsMessage":
        self.pattern_code = pattern_code
        self.variables = {} if variables is None else variables
        self.content = None
        return self

    def set_variable(self, name: str, value: Any) -> "SmsMessage":
        if self.variables is None:
            self.variables = {}
        self.variables[name] = value
        return self

    def set_sender(self, sender: str) -> "SmsMessage":
        self.sender = sender
        return self

    def set_recipient(self, recipient: str | list[str]) -> "SmsMessage":
        self.recipient = recipient
        return self

    def set_scheduled_at(self, scheduled_at: str) -> "SmsMessage":
        """Schedule a plain message, e.g. ``"2025-03-21T09:12:50.824Z"``."""
        self.scheduled_at = scheduled_at
        return self

    def is_pattern(self) -> bool:
        return isinstance(self.pattern_code, str) and bool(self.pattern_code)

    def __repr__(self) -> str:
        mode = "pattern" if self.is_pattern() else "content"
        return f"<SmsMessage mode={mode} sender={self.sender!r}>"
