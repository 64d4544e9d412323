"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s [%(levelname)s] [%(correlation_id)s] %(name)s: %(message)s",
    )
    LOG_FILE = os.getenv("LOG_FILE", "")

    # Progress tracking
    # A lesson started sooner than this share of the previous lesson's
    # duration counts as a suspicious (skipped) lesson.
    FRAUD_MIN_COMPLETION_RATIO = float(os.getenv("FRAUD_MIN_COMPLETION_RATIO", "0.2"))


class DevelopmentConfig(Config):
    """Development configuration"""

    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class TestingConfig(Config):
    """Testing configuration"""

    LOG_FILE = ""


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
