# crm/services/transactions.py
import logging

from ..models import RentRollRecord, rent_amount, format_rent
from .. import db

logger = logging.getLogger(__name__)


def _is_blank(value):
    # lists, objects and booleans from a JSON body count as missing
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return True
    return not str(value).strip()


def _unit_rows(property_name, unit_number):
    return RentRollRecord.query.filter_by(
        property_name=property_name, unit_number=unit_number
    ).order_by(RentRollRecord.id).all()


def _clone(base, **overrides):
    fields = {
        'date': base.date,
        'property_id': base.property_id,
        'property_name': base.property_name,
        'unit_number': base.unit_number,
        'resident_id': base.resident_id,
        'resident_name': base.resident_name,
        'monthly_rent': base.monthly_rent,
    }
    fields.update(overrides)
    return RentRollRecord(**fields)


def move_in_resident(property_name, unit_number, date, resident_name, monthly_rent):
    """
    Moves a resident into a unit from `date` onwards.

    Every row of the unit dated on or after `date` takes the new resident and rent.
    When no such row exists a new row is appended, cloned from the unit's first row.
    Incomplete input or a non-numeric rent is ignored.
    Returns {'applied', 'updated', 'created'}.
    """
    if any(_is_blank(v) for v in (property_name, unit_number, date, resident_name, monthly_rent)) \
            or rent_amount(monthly_rent) is None:
        logger.debug("Ignoring incomplete move-in for %s %s", property_name, unit_number)
        return {'applied': False, 'updated': 0, 'created': 0}

    property_name, unit_number, date = str(property_name), str(unit_number), str(date)
    resident_name = str(resident_name)
    rent = format_rent(monthly_rent)
    rows = _unit_rows(property_name, unit_number)
    updated = 0
    for row in rows:
        if row.date < date:
            continue
        row.resident_name = resident_name
        row.resident_id = resident_name
        row.monthly_rent = rent
        updated += 1

    created = 0
    if not updated:
        overrides = dict(date=date, property_name=property_name, unit_number=unit_number,
                         resident_name=resident_name, resident_id=resident_name, monthly_rent=rent)
        if rows:
            db.session.add(_clone(rows[0], **overrides))
        else:
            db.session.add(RentRollRecord(property_id='', **overrides))
        created = 1

    db.session.commit()
    logger.info("Move-in %s into %s %s on %s (%d updated, %d created)",
                resident_name, property_name, unit_number, date, updated, created)
    return {'applied': True, 'updated': updated, 'created': created}


def move_out_resident(property_name, unit_number, date):
    """
    Vacates a unit from `date` onwards: resident cleared and rent zeroed on every
    row dated on or after `date`. With no such row, a vacant row is appended
    cloned from the unit's first row; a unit with no rows at all is left alone.
    """
    if any(_is_blank(v) for v in (property_name, unit_number, date)):
        logger.debug("Ignoring incomplete move-out for %s %s", property_name, unit_number)
        return {'applied': False, 'updated': 0, 'created': 0}

    property_name, unit_number, date = str(property_name), str(unit_number), str(date)
    rows = _unit_rows(property_name, unit_number)
    if not rows:
        logger.debug("Nothing to move out of: %s %s has no rows", property_name, unit_number)
        return {'applied': False, 'updated': 0, 'created': 0}

    updated = 0
    for row in rows:
        if row.date < date:
            continue
        row.resident_name = ''
        row.resident_id = ''
        row.monthly_rent = '0'
        updated += 1

    created = 0
    if not updated:
        db.session.add(_clone(rows[0], date=date, resident_name='', resident_id='', monthly_rent='0'))
        created = 1

    db.session.commit()
    logger.info("Move-out of %s %s on %s (%d updated, %d created)",
                property_name, unit_number, date, updated, created)
    return {'applied': True, 'updated': updated, 'created': created}
