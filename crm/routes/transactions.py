from flask import Blueprint, request, jsonify
from ..services.transactions import move_in_resident, move_out_resident

transactions_bp = Blueprint('transactions', __name__)

# Malformed input is a no-op reported as applied=False, never an error
@transactions_bp.route('/api/move-in', methods=['POST'])
def move_in():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    result = move_in_resident(
        data.get('propertyName'),
        data.get('unitNumber'),
        data.get('date'),
        data.get('residentName'),
        data.get('monthlyRent'),
    )
    return jsonify(result), 200

@transactions_bp.route('/api/move-out', methods=['POST'])
def move_out():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    result = move_out_resident(
        data.get('propertyName'),
        data.get('unitNumber'),
        data.get('date'),
    )
    return jsonify(result), 200
