"""
artifact_identity configuration
"""
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Codec settings, read from the environment or ``.env``."""

    # Policy table used by the runner when none is passed explicitly
    POLICY_TABLE_PATH: Optional[str] = None

    # Platform token for one-token names; empty means detect from the OS
    HOST_PLATFORM: Optional[str] = None

    # CLI
    LOG_LEVEL: str = "INFO"
    REPORT_FILENAME: str = "artifact_report.json"

    class Config:
        env_file = ".env"
        env_prefix = "ARTIFACT_IDENTITY_"
        case_sensitive = True


settings = Settings()
