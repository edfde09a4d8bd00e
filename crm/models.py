# crm/models.py
from . import db


class RentRollRecord(db.Model):
    """One rent-roll row: a unit of a property as observed on a snapshot date.

    Rows are kept in load order (the primary key); several rows may share a
    (property, unit) pair across dates, forming a per-unit time series.
    """
    __tablename__ = 'rent_roll_record'

    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.String(10), nullable=False, default='', index=True)
    property_id = db.Column(db.String(50), nullable=False, default='')
    property_name = db.Column(db.String(100), nullable=False, default='')
    unit_number = db.Column(db.String(50), nullable=False, default='')
    resident_id = db.Column(db.String(100), nullable=False, default='')
    resident_name = db.Column(db.String(100), nullable=False, default='')
    # Kept as read from the source; coerced to a number on demand
    monthly_rent = db.Column(db.String(20), nullable=False, default='0')

    @property
    def occupied(self):
        return is_occupied(self)

    @property
    def resident_key(self):
        return resident_key(self)

    def to_dict(self):
        return {
            'date': self.date,
            'propertyId': self.property_id,
            'propertyName': self.property_name,
            'unitNumber': self.unit_number,
            'residentId': self.resident_id,
            'residentName': self.resident_name,
            'monthlyRent': self.monthly_rent,
        }

    def __repr__(self):
        return f"<RentRollRecord {self.date} {self.property_name} {self.unit_number}>"


def is_occupied(row):
    """A row is occupied when its resident name is not blank."""
    return bool((row.resident_name or '').strip())


def resident_key(row):
    # resident_id may be blank for an occupied row, fall back to the name
    return row.resident_id or row.resident_name or ''


def rent_amount(value):
    """
    Coerce a monthly rent value to a float.
    Blank counts as 0; anything non-numeric returns None.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return None if value != value else float(value)
    text = str(value).strip()
    if not text:
        return 0.0
    try:
        amount = float(text)
    except ValueError:
        return None
    return None if amount != amount else amount


def format_rent(value):
    """Canonical string for a numeric rent: 1500.0 -> '1500', 1250.5 -> '1250.5'."""
    amount = rent_amount(value)
    if amount is None:
        return str(value)
    if amount.is_integer():
        return str(int(amount))
    return repr(amount)
