import logging

from flask import Flask
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy
from .config import Config, TestingConfig

# Initialize SQLAlchemy outside the create_app function
db = SQLAlchemy()

logger = logging.getLogger(__name__)


def create_app(config_class=Config, config_name=None):
    # map friendly names to classes
    if config_name == 'testing':
        config_class = TestingConfig

    # 1. Application Setup
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    logging.getLogger('crm').setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    origins = [o.strip() for o in app.config.get('CORS_ORIGINS', '*').split(',') if o.strip()]
    CORS(app, resources={r"/api/*": {"origins": origins or '*'}})

    # 2. Record store initialization
    db.init_app(app)

    # 3. Register Blueprints (Routes)
    from .routes import register_blueprints
    register_blueprints(app)

    # 4. Import Models so SQLAlchemy knows about RentRollRecord
    from . import models

    # 5. Create the in-memory table and load the rent roll once at startup
    from .services.rent_roll import refresh_store
    from .errors import DataSourceError
    app.extensions['rent_roll'] = {
        'source': app.config['RENT_ROLL_CSV'],
        'loaded': 0,
        'error': None,
    }
    with app.app_context():
        db.create_all()
        try:
            refresh_store(app.config['RENT_ROLL_CSV'])
        except DataSourceError as exc:
            # The process keeps serving; endpoints report the load error
            logger.error("Rent roll not loaded: %s", exc.message)

    return app
