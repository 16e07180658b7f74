"""
Application Configuration

Centralizes all Flask and application configuration settings.
"""

import os

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')
    JSON_SORT_KEYS = False

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///plates.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Seed the ingredient catalog on startup when the table is empty
    SEED_CATALOG = True

    # Owner account created on startup when there are no users; the web
    # client saves plates as user 1
    SEED_DEFAULT_USER = True
    DEFAULT_USERNAME = os.environ.get('DEFAULT_USERNAME', 'guest')
    DEFAULT_USER_PASSWORD = os.environ.get('DEFAULT_USER_PASSWORD', 'change-me')

    # Per-meal goals used by the nutrition progress preview
    MEAL_CALORIE_GOAL = int(os.environ.get('MEAL_CALORIE_GOAL', 800))
    MEAL_PROTEIN_GOAL = float(os.environ.get('MEAL_PROTEIN_GOAL', 50))


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOG_LEVEL = 'WARNING'


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
