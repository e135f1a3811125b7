from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    # Application
    PROJECT_NAME: str = "Namma Metro Journey Planner"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Routing
    INTERCHANGE_TIME_MINUTES: int = 5
    DEPARTURE_INTERVAL_MINUTES: int = 5

    # Fares
    DEFAULT_TICKET_TYPE: str = "TOKEN"

    @property
    def interchange_time_seconds(self) -> int:
        return self.INTERCHANGE_TIME_MINUTES * 60

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

settings = Settings()
