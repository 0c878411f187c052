"""Tests for the SmsMessage builder."""

from persian_sms.message import SmsMessage


class TestContentMode:
    def test_constructor_content_sets_plain_mode(self) -> None:
        message = SmsMessage("Hello")

        assert message.content == "Hello"
        assert message.is_pattern() is False

    def test_create_is_equivalent_to_constructor(self) -> None:
        message = SmsMessage.create("Hello")

        assert isinstance(message, SmsMessage)
        assert message.content == "Hello"

    def test_default_message_has_no_mode(self) -> None:
        message = SmsMessage()

        assert message.content is None
        assert message.pattern_code is None
        assert message.variables is None
        assert message.is_pattern() is False

    def test_set_content_clears_pattern_fields(self) -> None:
        message = SmsMessage().set_pattern("X", {"a": 1}).set_content("Y")

        assert message.is_pattern() is False
        assert message.content == "Y"
        assert message.pattern_code is None
        assert message.variables is None


class TestPatternMode:
    def test_set_pattern_switches_mode(self) -> None:
        message = SmsMessage("Hello").set_pattern("otp_code", {"code": "1234"})

        assert message.is_pattern() is True
        assert message.content is None
        assert message.variables == {"code": "1234"}

    def test_set_pattern_defaults_to_empty_variables(self) -> None:
        message = SmsMessage().set_pattern("welcome")

        assert message.variables == {}

    def test_empty_pattern_code_is_not_pattern_mode(self) -> None:
        message = SmsMessage().set_pattern("")

        assert message.is_pattern() is False

    def test_set_variable_before_pattern_initialises_mapping(self) -> None:
        message = SmsMessage().set_variable("name", "Ali")

        assert message.variables == {"name": "Ali"}
        assert message.is_pattern() is False

    def test_set_variable_upserts(self) -> None:
        message = (
            SmsMessage()
            .set_pattern("welcome", {"name": "Ali"})
            .set_variable("name", "Sara")
            .set_variable("code", "42")
        )

        assert message.variables == {"name": "Sara", "code": "42"}


class TestPlainSetters:
    def test_setters_return_same_instance(self) -> None:
        message = SmsMessage("Hi")

        assert message.set_sender("+983000789") is message
        assert message.set_recipient(["+989120000001"]) is message
        assert message.set_scheduled_at("2025-03-21T09:12:50.824Z") is message

        assert message.sender == "+983000789"
        assert message.recipient == ["+989120000001"]
        assert message.scheduled_at == "2025-03-21T09:12:50.824Z"

    def test_setters_do_not_touch_mode(self) -> None:
        message = SmsMessage().set_pattern("otp").set_sender("+98300")

        assert message.is_pattern() is True
