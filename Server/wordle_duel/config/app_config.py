"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Game Settings
    MAX_ROUNDS = int(os.getenv('MAX_ROUNDS', 6))
    PLAYER_NAME_MAX_LENGTH = int(os.getenv('PLAYER_NAME_MAX_LENGTH', 20))

    # Room Maintenance Settings
    ROOM_MAX_AGE_MINUTES = int(os.getenv('ROOM_MAX_AGE_MINUTES', 30))
    ROOM_CLEANUP_INTERVAL_SECONDS = int(os.getenv('ROOM_CLEANUP_INTERVAL_SECONDS', 600))
    ROOM_CODE_MAX_ATTEMPTS = int(os.getenv('ROOM_CODE_MAX_ATTEMPTS', 100))
    START_CLEANUP_WORKER = True

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    START_CLEANUP_WORKER = False


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
