"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


class Config:
    # App settings
    APP_ENV = os.getenv("APP_ENV", "development")
    TESTING = _env_flag("TESTING")
    DEBUG = _env_flag("DEBUG")
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5001"))
    API_PREFIX = os.getenv("API_PREFIX", "/api")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Discord gateway
    # Login attempts that don't reach "ready" within this window fail as ConnectFailed
    DISCORD_LOGIN_TIMEOUT = float(os.getenv("DISCORD_LOGIN_TIMEOUT", "20"))

    # Message history
    MESSAGE_PAGE_LIMIT = int(os.getenv("MESSAGE_PAGE_LIMIT", "50"))

    # Rate limiting (connect endpoint hits Discord's login budget)
    RATE_LIMIT_ENABLED = _env_flag("RATE_LIMIT_ENABLED", "true")
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    CONNECT_RATE_LIMIT = os.getenv("CONNECT_RATE_LIMIT", "10/minute;200/day")


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    RATE_LIMIT_ENABLED = False
    DISCORD_LOGIN_TIMEOUT = 1.0


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])
