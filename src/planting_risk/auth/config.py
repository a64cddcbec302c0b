"""Configuration management for the Rainy Day planting service.

Centralized settings using Pydantic Settings. Values come from environment
variables, with automatic loading of a ``.env`` file at the project root.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, ClassVar
import os


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    Attributes
    ----------
    APP_NAME : str
        Application name identifier.
    API_TOKEN : str, optional
        Bearer token for API authentication.
    WEATHER_API_URL : str
        Current-weather endpoint (OpenWeatherMap compatible).
    WEATHER_API_KEY : str, optional
        Key sent as ``appid`` to the weather endpoint.
    WEATHER_UNITS : str
        Unit system requested from the weather endpoint.
    WEATHER_TIMEOUT_SECONDS : float
        Timeout for a single weather request.
    LOG_LEVEL : str
        Root logging level name.
    """
    APP_NAME: str = "rainy-day"
    API_TOKEN: Optional[str] = None
    WEATHER_API_URL: str = "https://api.openweathermap.org/data/2.5/weather"
    WEATHER_API_KEY: Optional[str] = None
    WEATHER_UNITS: str = "metric"
    WEATHER_TIMEOUT_SECONDS: float = 30.0
    LOG_LEVEL: str = "INFO"

    env_path: ClassVar[str] = os.path.join(os.path.dirname(os.path.dirname(
        os.path.dirname(os.path.dirname(os.path.abspath(__file__))))), ".env")
    model_config = SettingsConfigDict(env_file=env_path, extra="ignore")


settings = Settings()
