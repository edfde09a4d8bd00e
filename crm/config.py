import os
# Define the base directory for the data file (the project root)
BASEDIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
CSV_PATH = os.path.join(BASEDIR, 'rent_roll.csv')


class Config:
    """Base configuration class."""
    # Source of truth for the rent roll; never written back
    RENT_ROLL_CSV = os.environ.get('RENT_ROLL_CSV') or CSV_PATH

    # The record store lives in memory for the lifetime of the process
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Secret Key is required by Flask
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'a-very-secret-and-hard-to-guess-string'

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    # Comma separated list, '*' allows the front-end dev server on any port
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')

class TestingConfig(Config):
    """Configuration used specifically for running Pytest."""
    TESTING = True
    RENT_ROLL_CSV = os.path.join(BASEDIR, 'tests', 'fixtures', 'rent_roll.csv')
    # Disabling logging during tests for cleaner output
    SQLALCHEMY_ECHO = False
    LOG_LEVEL = 'WARNING'
