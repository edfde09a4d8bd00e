from flask import Blueprint, request, jsonify
from ..services.rent_roll import all_records, load_error
from ..services.snapshot import unit_listing
from ..services.kpis import calculate_kpis, default_date_range
from ..services.view import derive_view

reports_bp = Blueprint('reports', __name__)

@reports_bp.route('/api/rent-roll/view', methods=['GET'])
def get_view():
    error = load_error()
    if error:
        return jsonify({'error': error}), 503
    filters = {
        'snapshotDate': request.args.get('snapshot_date', ''),
        'propertyName': request.args.get('property_name', ''),
        'occupancy': request.args.get('occupancy', ''),
        'search': request.args.get('search', ''),
        'startDate': request.args.get('start_date', ''),
        'endDate': request.args.get('end_date', ''),
    }
    return jsonify(derive_view(all_records(), filters)), 200

# Per-property KPIs for a date range (defaults to the full range on file)
@reports_bp.route('/api/kpis', methods=['GET'])
def get_kpis():
    error = load_error()
    if error:
        return jsonify({'error': error}), 503
    records = all_records()
    first, last = default_date_range(records)
    start_date = request.args.get('start_date') or first
    end_date = request.args.get('end_date') or last
    return jsonify(calculate_kpis(records, start_date, end_date)), 200

# Vacant / occupied units for a snapshot date
@reports_bp.route('/api/units', methods=['GET'])
def get_units():
    error = load_error()
    if error:
        return jsonify({'error': error}), 503
    return jsonify(unit_listing(all_records(), request.args.get('snapshot_date'))), 200
