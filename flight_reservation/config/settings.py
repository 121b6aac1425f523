"""Booking configuration with environment-based settings."""
import os
from typing import List
from dotenv import load_dotenv


class Config:
    """Base configuration class following Single Responsibility Principle."""

    # Load environment variables
    load_dotenv()

    # Booking rules
    NO_FLY_LIST: str = os.getenv("NO_FLY_LIST", "Peter,Johannes")
    DEFAULT_FLIGHT_PRICE: float = float(os.getenv("DEFAULT_FLIGHT_PRICE", "100"))

    # Placeholder flight-time model
    DEFAULT_LEG_DISTANCE_KM: int = int(os.getenv("DEFAULT_LEG_DISTANCE_KM", "500"))
    CRUISE_SPEED_KMH: float = float(os.getenv("CRUISE_SPEED_KMH", "800"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    @classmethod
    def no_fly_names(cls) -> List[str]:
        """Return the configured no-fly names, stripped and without blanks."""
        return [name.strip() for name in cls.NO_FLY_LIST.split(",") if name.strip()]

    @classmethod
    def validate(cls) -> None:
        """Validate configuration values."""
        problems = []
        if cls.DEFAULT_FLIGHT_PRICE < 0:
            problems.append("DEFAULT_FLIGHT_PRICE must be non-negative")
        if cls.DEFAULT_LEG_DISTANCE_KM <= 0:
            problems.append("DEFAULT_LEG_DISTANCE_KM must be positive")
        if cls.CRUISE_SPEED_KMH <= 0:
            problems.append("CRUISE_SPEED_KMH must be positive")

        if problems:
            raise ValueError(f"Invalid configuration: {', '.join(problems)}")


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    NO_FLY_LIST = "Peter,Johannes"
    DEFAULT_FLIGHT_PRICE = 100.0
    DEFAULT_LEG_DISTANCE_KM = 500
    CRUISE_SPEED_KMH = 800.0


def get_config() -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = os.getenv("BOOKING_ENV", "development").lower()

    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }

    return config_map.get(env, DevelopmentConfig)
