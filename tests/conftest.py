import pytest
from crm import create_app, db
from crm.config import TestingConfig
from crm.services.rent_roll import refresh_store, all_records

@pytest.fixture(scope='module')
def app():
    """Create and configure a new app instance for each test module."""
    app = create_app(config_class=TestingConfig)
    yield app

@pytest.fixture(scope='function')
def store(app):
    """
    Reload the record store from the fixture CSV before each test so
    mutations made by one test never leak into the next.
    """
    with app.app_context():
        refresh_store(app.config['RENT_ROLL_CSV'])
        yield db.session
        db.session.rollback()

@pytest.fixture(scope='function')
def client(app, store):
    """A Flask test client to make HTTP requests during integration tests."""
    return app.test_client()

@pytest.fixture
def records(store):
    """The fixture rent roll, in file order."""
    return all_records()
