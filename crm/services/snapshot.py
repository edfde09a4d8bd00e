# crm/services/snapshot.py
from ..models import is_occupied

OCCUPANCY_FILTERS = ('occupied', 'vacant')


def default_snapshot_date(records):
    """The date of the first record in load order, '' for an empty collection."""
    for r in records:
        return r.date or ''
    return ''


def snapshot_rows(records, snapshot_date=None):
    """
    Returns the records observed on snapshot_date.
    With no snapshot date chosen, the first date in load order is used.
    """
    snapshot_date = snapshot_date or default_snapshot_date(records)
    return [r for r in records if r.date == snapshot_date]


def matches_search(row, query):
    """Case-insensitive prefix match on unit number or resident name."""
    query = (query or '').strip().lower()
    if not query:
        return True
    unit = (row.unit_number or '').lower()
    resident = (row.resident_name or '').lower()
    return unit.startswith(query) or resident.startswith(query)


def filter_rent_roll(records, snapshot_date=None, property_name=None, occupancy=None, search=None):
    """
    Rent-roll table rows for a snapshot date, narrowed by property name,
    occupancy ('occupied' / 'vacant') and a free-text search.
    Empty filters impose no constraint.
    """
    rows = snapshot_rows(records, snapshot_date)
    if property_name:
        rows = [r for r in rows if r.property_name == property_name]
    if occupancy in OCCUPANCY_FILTERS:
        want_occupied = occupancy == 'occupied'
        rows = [r for r in rows if is_occupied(r) == want_occupied]
    if search and search.strip():
        rows = [r for r in rows if matches_search(r, search)]
    return rows


def unit_listing(records, snapshot_date=None):
    """
    De-duplicated (property name, unit number) pairs for the snapshot date,
    split into vacant and occupied. First occurrence wins.
    """
    vacant, occupied = {}, {}
    for r in snapshot_rows(records, snapshot_date):
        bucket = occupied if is_occupied(r) else vacant
        key = (r.property_name, r.unit_number)
        if key not in bucket:
            bucket[key] = {'propertyName': r.property_name, 'unitNumber': r.unit_number}
    return {'vacant': list(vacant.values()), 'occupied': list(occupied.values())}


def property_names(records):
    """Distinct property names, first occurrence of each property id wins."""
    by_id = {}
    for r in records:
        if r.property_id and r.property_id not in by_id:
            by_id[r.property_id] = r.property_name
    return list(by_id.values())


def snapshot_dates(records):
    seen = {}
    for r in records:
        if r.date:
            seen.setdefault(r.date, None)
    return list(seen)
