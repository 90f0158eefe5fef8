# config/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Project settings, read from environment variables or the .env file
    """
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Judiciary HRMS - Employee Profile"

    # Backend that serves uploaded documents (serve_document.php lives here)
    DOCUMENT_API_BASE: str = "http://localhost/judiciary_hrms/api"

    # personal | service | financial | documents | all | complete | profile
    DEFAULT_VIEW_MODE: str = "all"

    LOG_LEVEL: str = "INFO"
    TEMPLATES_DIR: str = "templates"

settings = Settings()
