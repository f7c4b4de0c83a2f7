from models import FormInput
from services.fertilizer_service import (
    NITROGEN, PHOSPHORUS, match_recommendations, get_fertilizer_recommendation,
)


def test_nitrogen_only():
    assert match_recommendations("nitrogen deficiency, yellow leaves") == [NITROGEN]


def test_phosphorus_included():
    assert PHOSPHORUS in match_recommendations("suspect phosphorus shortage")


def test_both_keywords_keep_order():
    recs = match_recommendations("phosphorus and nitrogen both low")
    assert recs == [NITROGEN, PHOSPHORUS]


def test_empty_input_falls_back_to_phosphorus():
    assert match_recommendations("") == [PHOSPHORUS]
    assert match_recommendations("   ") == [PHOSPHORUS]
    assert match_recommendations(None) == [PHOSPHORUS]


def test_unrelated_symptom_falls_back_to_phosphorus():
    # current behaviour: anything without a keyword gets the phosphorus default
    assert match_recommendations("rust spots") == [PHOSPHORUS]


def test_matching_ignores_case():
    assert match_recommendations("NITROGEN") == [NITROGEN]
    assert match_recommendations("Phosphorus") == [PHOSPHORUS]


def test_never_more_than_two():
    recs = match_recommendations("nitrogen nitrogen phosphorus phosphorus")
    assert len(recs) == 2


def test_same_input_same_output():
    text = "Nitrogen and phosphorus"
    assert match_recommendations(text) == match_recommendations(text)


def test_service_reads_nutrient_deficiencies():
    form = FormInput(crop_type="Maize", nutrient_deficiencies="nitrogen")
    assert get_fertilizer_recommendation(form) == [NITROGEN]


def test_canned_record_text():
    assert NITROGEN.fertilizer_name == 'Urea (46% N)'
    assert PHOSPHORUS.fertilizer_name == 'Single Super Phosphate (SSP)'
    assert PHOSPHORUS.precautions == 'Acidic soils can fix P; follow soil-test recommendations.'
