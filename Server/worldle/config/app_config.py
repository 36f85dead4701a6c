"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

_CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))

# Load environment variables from config.env
load_dotenv(os.path.join(_CONFIG_DIR, 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Daily word source: a local JSON file, or a URL serving the same JSON.
    # The bundled words.json schedules 2026-1-1 through 2030-12-31; later days
    # fail with SolutionUnavailableError until the file is extended.
    WORDS_FILE = os.getenv('WORDS_FILE', os.path.join(_CONFIG_DIR, 'words.json'))
    WORDS_URL = os.getenv('WORDS_URL')
    WORDS_TIMEOUT_SECONDS = float(os.getenv('WORDS_TIMEOUT_SECONDS', 5))

    # Dictionary Settings ("api" or "wordlist")
    DICTIONARY_BACKEND = os.getenv('DICTIONARY_BACKEND', 'api')
    DICTIONARY_API_URL = os.getenv(
        'DICTIONARY_API_URL', 'https://api.dictionaryapi.dev/api/v2/entries/en/{word}'
    )
    DICTIONARY_TIMEOUT_SECONDS = float(os.getenv('DICTIONARY_TIMEOUT_SECONDS', 5))

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
    DICTIONARY_BACKEND = 'wordlist'


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
