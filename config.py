"""
Application Configuration

Flask, database, catalog search, Reminders export and update check settings.
"""

import os

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

APP_VERSION = '1.0.0'


class Config:
    """Defaults shared by every environment, overridable from the environment."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///batched.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Ingredient catalog (JSON list of {name, slug, image, category})
    CATALOG_PATH = os.environ.get('CATALOG_PATH', os.path.join(BASE_DIR, 'data', 'ingredients.json'))

    # Catalog search
    SEARCH_LIMIT = int(os.environ.get('SEARCH_LIMIT', 12))
    SEARCH_THRESHOLD = float(os.environ.get('SEARCH_THRESHOLD', 0.4))  # 0 = exact only, 1 = anything

    # Reminders export
    REMINDERS_LIST_NAME = os.environ.get('REMINDERS_LIST_NAME', 'Batched Shopping List')
    REMINDERS_CHUNK_SIZE = int(os.environ.get('REMINDERS_CHUNK_SIZE', 50))

    # Update check
    APP_VERSION = APP_VERSION
    UPDATE_REPO = os.environ.get('UPDATE_REPO', 'ohjey/batched-app')
    UPDATE_TIMEOUT = 10

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Local development: debug mode and DEBUG logging."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """In-memory database and the small fixture catalog."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    CATALOG_PATH = os.path.join(BASE_DIR, 'tests', 'fixtures', 'catalog.json')


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Config class for `env`, or for FLASK_ENV when not given."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
