from pydantic_settings import BaseSettings, SettingsConfigDict

IPPANEL_API_BASE_URL = "https://api2.ippanel.com/api/v1"


class PersianSmsConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PERSIAN_SMS_")

    driver: str = "ippanel"
    log_level: str = "INFO"
    timeout_seconds: float = 10.0


class IPPanelConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PERSIAN_SMS_IPPANEL_")

    api_key: str = ""
    sender_number: str = ""
    base_url: str = IPPANEL_API_BASE_URL
