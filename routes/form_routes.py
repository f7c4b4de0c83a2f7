import logging

from flask import Blueprint, request, render_template

from models import FormInput, InvalidInputError, SoilQuality, Climate, GrowthStage, choices
from services.fertilizer_service import get_fertilizer_recommendation
from services.diagnosis_service import diagnose_image

logger = logging.getLogger(__name__)

form_bp = Blueprint('form_bp', __name__)

FALLBACK_ERROR = 'Failed to fetch recommendations'


def render_page(form_data, recommendations=None, error=None, diagnosis=None):
    return render_template(
        'index.html',
        form=form_data,
        soil_qualities=choices(SoilQuality),
        climates=choices(Climate),
        growth_stages=choices(GrowthStage),
        recommendations=recommendations,
        diagnosis=diagnosis,
        error=error,
    )


@form_bp.route('/', methods=['GET'])
def index():
    return render_page(FormInput().to_dict())


@form_bp.route('/', methods=['POST'])
def submit():
    # echo back exactly what was typed, even if it fails validation
    submitted = {**FormInput().to_dict(), **request.form.to_dict()}
    try:
        form_input = FormInput.from_mapping(request.form)
        recs = get_fertilizer_recommendation(form_input)
    except InvalidInputError as e:
        return render_page(submitted, error=str(e) or FALLBACK_ERROR), 400
    except Exception as e:
        logger.exception("Recommendation lookup failed")
        return render_page(submitted, error=str(e) or FALLBACK_ERROR), 500
    return render_page(form_input.to_dict(), recommendations=recs)


@form_bp.route('/diagnose', methods=['POST'])
def diagnose():
    file = request.files.get('image')
    if file is None:
        return render_page(FormInput().to_dict(), error='No image provided'), 400
    try:
        diagnosis = diagnose_image(file.read(), file.filename)
    except InvalidInputError as e:
        return render_page(FormInput().to_dict(), error=str(e)), 400
    return render_page(FormInput().to_dict(), diagnosis=diagnosis)
