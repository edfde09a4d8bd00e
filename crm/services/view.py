# crm/services/view.py
from .snapshot import (default_snapshot_date, filter_rent_roll, unit_listing,
                       property_names, snapshot_dates)
from .kpis import calculate_kpis, default_date_range, range_days


def derive_view(records, filters=None):
    """
    Computes everything the CRM screen shows from the record collection and the
    current filters, on demand. Recognised filter keys: snapshotDate,
    propertyName, occupancy, search, startDate, endDate.
    Blank snapshot date falls back to the first date in load order; blank range
    bounds fall back to the earliest/latest dates in the collection.
    """
    filters = filters or {}
    records = list(records)

    snapshot_date = filters.get('snapshotDate') or default_snapshot_date(records)
    first, last = default_date_range(records)
    start_date = filters.get('startDate') or first
    end_date = filters.get('endDate') or last

    rows = filter_rent_roll(
        records,
        snapshot_date=snapshot_date,
        property_name=filters.get('propertyName'),
        occupancy=filters.get('occupancy'),
        search=filters.get('search'),
    )
    units = unit_listing(records, snapshot_date)

    return {
        'snapshotDate': snapshot_date,
        'startDate': start_date,
        'endDate': end_date,
        'rangeDays': range_days(start_date, end_date),
        'rentRoll': [r.to_dict() for r in rows],
        'properties': property_names(records),
        'snapshotDates': snapshot_dates(records),
        'vacantUnits': units['vacant'],
        'occupiedUnits': units['occupied'],
        'kpis': calculate_kpis(records, start_date, end_date),
    }
