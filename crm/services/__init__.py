# services package

from .rent_roll import refresh_store, all_records, read_rent_roll_csv
from .snapshot import filter_rent_roll, snapshot_rows, unit_listing
from .kpis import calculate_kpis, default_date_range
from .transactions import move_in_resident, move_out_resident
from .view import derive_view

__all__ = [
    "refresh_store", "all_records", "read_rent_roll_csv",
    "filter_rent_roll", "snapshot_rows", "unit_listing",
    "calculate_kpis", "default_date_range",
    "move_in_resident", "move_out_resident",
    "derive_view",
]
