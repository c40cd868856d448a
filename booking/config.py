from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class DemoConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BOOKING_", env_file=".env", extra="ignore")

    general_patient: str = "Mariana Diaz"
    general_schedule: str = "2025-11-20 10:00"
    specialist_patient: str = "Roberto Cruz"
    specialist_schedule: str = "2025-11-21 15:30"
    specialty: str = "Dermatology"
    sms_message: str = "Your appointment has been confirmed. Please arrive 10 minutes early."
    email_message: str = "Your appointment has been cancelled. Contact us to reschedule."
    log_level: LogLevel = "WARNING"
