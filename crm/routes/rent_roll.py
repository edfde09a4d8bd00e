from flask import Blueprint, request, jsonify, Response, current_app
from ..services.rent_roll import all_records, refresh_store, load_error, rent_roll_csv
from ..errors import DataSourceError

rent_roll_bp = Blueprint('rent_roll', __name__)

@rent_roll_bp.route('/', methods=['GET'])
def index():
    return "Hello There!"

@rent_roll_bp.route('/api/rent-roll', methods=['GET'])
def get_rent_roll():
    error = load_error()
    if error:
        return jsonify({'error': error}), 503
    records = all_records()
    if request.args.get('format') == 'csv':
        headers = {
            'Content-Type': 'text/csv',
            'Content-Disposition': 'attachment; filename="rent_roll.csv"'
        }
        return Response(rent_roll_csv(records), headers=headers)
    return jsonify([r.to_dict() for r in records]), 200

@rent_roll_bp.route('/api/refresh', methods=['POST'])
def refresh():
    try:
        loaded = refresh_store()
    except DataSourceError as exc:
        return jsonify({'error': exc.message}), 503
    return jsonify({'loaded': loaded}), 200

@rent_roll_bp.route('/api/status', methods=['GET'])
def status():
    state = current_app.extensions.get('rent_roll') or {}
    return jsonify({
        'source': state.get('source'),
        'loaded': state.get('loaded', 0),
        'error': state.get('error'),
    }), 200
