# crm/services/rent_roll.py
import csv
import io
import logging

from flask import current_app

from ..models import RentRollRecord
from ..errors import DataSourceError
from .. import db

logger = logging.getLogger(__name__)

# Source column -> model attribute
CSV_COLUMNS = {
    'date': 'date',
    'property_id': 'property_id',
    'property_name': 'property_name',
    'unit_number': 'unit_number',
    'resident_id': 'resident_id',
    'resident_name': 'resident_name',
    'monthly_rent': 'monthly_rent',
}


def read_rent_roll_csv(path):
    """
    Reads the rent-roll CSV and returns a list of dicts keyed by model attribute,
    in file order. All values are strings; missing columns become ''.
    """
    try:
        with open(path, newline='', encoding='utf-8-sig') as fh:
            reader = csv.DictReader(fh)
            if reader.fieldnames is None:
                raise DataSourceError(f"Rent roll file {path} is empty", source=path)
            missing = [c for c in ('date', 'property_name', 'unit_number') if c not in reader.fieldnames]
            if missing:
                raise DataSourceError(
                    f"Rent roll file {path} is missing columns: {', '.join(missing)}", source=path)
            rows = []
            for raw in reader:
                rows.append({attr: (raw.get(col) or '').strip() for col, attr in CSV_COLUMNS.items()})
    except OSError as exc:
        raise DataSourceError(f"Failed to read rent roll {path}: {exc.strerror or exc}", source=path) from exc
    except csv.Error as exc:
        raise DataSourceError(f"Malformed rent roll {path}: {exc}", source=path) from exc
    except UnicodeDecodeError as exc:
        raise DataSourceError(f"Rent roll {path} is not valid UTF-8: {exc.reason} at byte {exc.start}", source=path) from exc
    return rows


def refresh_store(path=None):
    """
    (Re)loads the record store from the CSV source. Replaces the whole collection.
    Must run inside an application context. Returns the number of rows loaded.
    """
    path = path or current_app.config['RENT_ROLL_CSV']
    state = current_app.extensions.setdefault('rent_roll', {'source': path, 'loaded': 0, 'error': None})
    state['source'] = path
    try:
        rows = read_rent_roll_csv(path)
    except DataSourceError as exc:
        state['error'] = exc.message
        logger.error("Failed to load rent roll from %s: %s", path, exc.message)
        raise

    RentRollRecord.query.delete()
    db.session.add_all([RentRollRecord(**row) for row in rows])
    db.session.commit()

    state['loaded'] = len(rows)
    state['error'] = None
    logger.info("Loaded %d rent roll rows from %s", len(rows), path)
    return len(rows)


def load_error():
    state = current_app.extensions.get('rent_roll') or {}
    return state.get('error')


def all_records():
    """The full collection in source/insertion order."""
    return RentRollRecord.query.order_by(RentRollRecord.id).all()


def rent_roll_csv(records):
    """Serializes records back to the source column layout."""
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=list(CSV_COLUMNS))
    writer.writeheader()
    for r in records:
        writer.writerow({col: getattr(r, attr) or '' for col, attr in CSV_COLUMNS.items()})
    csv_data = output.getvalue()
    output.close()
    return csv_data
