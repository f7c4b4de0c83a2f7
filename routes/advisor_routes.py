import logging

from flask import Blueprint, request, jsonify

from models import FormInput, InvalidInputError, SoilQuality, Climate, GrowthStage, choices
from services.fertilizer_service import get_fertilizer_recommendation
from services.diagnosis_service import diagnose_image

logger = logging.getLogger(__name__)

advisor_bp = Blueprint('advisor_bp', __name__)


@advisor_bp.route('/options', methods=['GET'])
def options():
    return jsonify({
        "soil_quality": choices(SoilQuality),
        "climate": choices(Climate),
        "growth_stage": choices(GrowthStage),
    }), 200


@advisor_bp.route('/recommend', methods=['POST'])
def recommend():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400
    try:
        form_input = FormInput.from_mapping(data)
    except InvalidInputError as e:
        return jsonify({"error": str(e)}), 400

    recs = get_fertilizer_recommendation(form_input)
    return jsonify({
        "input": form_input.to_dict(),
        "recommendations": [r.to_dict() for r in recs],
    }), 200


@advisor_bp.route('/diagnose', methods=['POST'])
def diagnose():
    if 'image' not in request.files:
        return jsonify({"error": "No image provided"}), 400
    file = request.files['image']
    try:
        diagnosis = diagnose_image(file.read(), file.filename)
    except InvalidInputError as e:
        logger.info("Rejected upload %r: %s", file.filename, e)
        return jsonify({"error": str(e)}), 400
    return jsonify(diagnosis.to_dict()), 200
