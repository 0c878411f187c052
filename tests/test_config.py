import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from persian_sms.config import IPPANEL_API_BASE_URL, IPPanelConfig, PersianSmsConfig


class TestPersianSmsConfig:
    def test_defaults(self):
        config = PersianSmsConfig()
        assert config.driver == "ippanel"
        assert config.log_level == "INFO"
        assert config.timeout_seconds == 10.0

    def test_from_env(self):
        env = {
            "PERSIAN_SMS_DRIVER": "ippanel",
            "PERSIAN_SMS_LOG_LEVEL": "DEBUG",
            "PERSIAN_SMS_TIMEOUT_SECONDS": "2.5",
        }
        with patch.dict(os.environ, env, clear=False):
            config = PersianSmsConfig()
        assert config.log_level == "DEBUG"
        assert config.timeout_seconds == 2.5

    def test_timeout_validation(self):
        env = {"PERSIAN_SMS_TIMEOUT_SECONDS": "soon"}
        with patch.dict(os.environ, env, clear=False):
            with pytest.raises(ValidationError):
                PersianSmsConfig()


class TestIPPanelConfig:
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = IPPanelConfig()
        assert config.api_key == ""
        assert config.sender_number == ""
        assert config.base_url == IPPANEL_API_BASE_URL

    def test_from_env(self):
        env = {
            "PERSIAN_SMS_IPPANEL_API_KEY": "s3cret",
            "PERSIAN_SMS_IPPANEL_SENDER_NUMBER": "+983000123",
            "PERSIAN_SMS_IPPANEL_BASE_URL": "https://sandbox.ippanel.test/api/v1",
        }
        with patch.dict(os.environ, env, clear=False):
            config = IPPanelConfig()
        assert config.api_key == "s3cret"
        assert config.sender_number == "+983000123"
        assert config.base_url == "https://sandbox.ippanel.test/api/v1"
