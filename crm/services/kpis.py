# crm/services/kpis.py
from collections import defaultdict
from datetime import date

from ..models import is_occupied, resident_key, rent_amount

UNKNOWN_PROPERTY = 'Unknown'


def _property_key(row):
    return row.property_name or UNKNOWN_PROPERTY


def default_date_range(records):
    """(earliest, latest) date in the collection, ('', '') when there are none."""
    dates = sorted(r.date for r in records if r.date)
    if not dates:
        return '', ''
    return dates[0], dates[-1]


def range_days(start_date, end_date):
    """Inclusive number of days between two ISO dates; 0 if either is blank or invalid."""
    if not start_date or not end_date:
        return 0
    try:
        start = date.fromisoformat(start_date)
        end = date.fromisoformat(end_date)
    except (TypeError, ValueError):
        return 0
    return max(0, (end - start).days + 1)


def rows_in_range(records, start_date, end_date):
    # Plain string comparison, dates must be YYYY-MM-DD
    return [r for r in records if start_date <= (r.date or '') <= end_date]


def unit_timelines(rows):
    """
    Maps (property name, unit number) to the unit's observed states in
    ascending date order: a list of (date, occupied, resident key).
    The last row wins when a unit has several rows on one date.
    """
    by_unit = defaultdict(dict)
    for r in rows:
        by_unit[(_property_key(r), r.unit_number)][r.date] = r
    timelines = {}
    for key, by_date in by_unit.items():
        timelines[key] = [
            (d, is_occupied(by_date[d]), resident_key(by_date[d]))
            for d in sorted(by_date)
        ]
    return timelines


def count_moves(timeline):
    """
    Walks one unit's states and counts transitions between consecutive
    observations. The first state is the baseline. A change of resident
    between two occupied states counts as a move-out plus a move-in.
    """
    move_ins = move_outs = 0
    for (_, was_occupied, prev_resident), (_, now_occupied, next_resident) in zip(timeline, timeline[1:]):
        if not was_occupied and now_occupied:
            move_ins += 1
        elif was_occupied and not now_occupied:
            move_outs += 1
        elif was_occupied and now_occupied and prev_resident and next_resident \
                and prev_resident != next_resident:
            move_outs += 1
            move_ins += 1
    return move_ins, move_outs


def calculate_kpis(records, start_date, end_date):
    """
    Per-property KPIs for the range [start_date, end_date].

    Average rent, occupancy and unit count come from the end-date snapshot;
    move-ins and move-outs are counted across every date observed in the range.
    Rows with a blank property name are reported under "Unknown", and their
    units are tracked under that name too, so they contribute move counts.
    Returns a list of dicts: name, avgRent, occupancy, moveIns, moveOuts, numUnits.
    """
    if not start_date or not end_date:
        return []

    in_range = rows_in_range(records, start_date, end_date)

    # Property order: first seen among start rows, then end rows
    by_property = {}
    for r in in_range:
        if r.date == start_date:
            by_property.setdefault(_property_key(r), [])
    for r in in_range:
        if r.date == end_date:
            by_property.setdefault(_property_key(r), []).append(r)

    moves = defaultdict(lambda: [0, 0])
    for (name, _), timeline in unit_timelines(in_range).items():
        if name not in by_property:
            continue
        move_ins, move_outs = count_moves(timeline)
        moves[name][0] += move_ins
        moves[name][1] += move_outs

    kpis = []
    for name, end_rows in by_property.items():
        occupied = [r for r in end_rows if is_occupied(r)]
        num_units = len(end_rows)
        total_rent = 0.0
        for r in occupied:
            amount = rent_amount(r.monthly_rent)
            if amount is not None:
                total_rent += amount
        avg_rent = total_rent / len(occupied) if occupied else 0
        occupancy = len(occupied) / num_units if num_units else 0
        move_ins, move_outs = moves[name]
        kpis.append({
            'name': name,
            'avgRent': avg_rent,
            'occupancy': occupancy,
            'moveIns': move_ins,
            'moveOuts': move_outs,
            'numUnits': num_units,
        })
    return kpis
