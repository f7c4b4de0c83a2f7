import logging

from models import Recommendation

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 2

NITROGEN = Recommendation(
    fertilizer_name='Urea (46% N)',
    application_method='Top-dress or band-apply during active vegetative growth; 50-100 kg/ha depending on crop and soil test.',
    reasoning='Provides fast-available nitrogen to correct deficiency symptoms like yellowing leaves and poor growth.',
    precautions='Avoid over-application; apply when soil moisture is adequate. Wear gloves and avoid contact with eyes.',
)

PHOSPHORUS = Recommendation(
    fertilizer_name='Single Super Phosphate (SSP)',
    application_method='Broadcast and incorporate into soil before sowing or as a side placement near roots.',
    reasoning='Supplies phosphorus for root development and early establishment; useful when phosphorus deficiency suspected.',
    precautions='Acidic soils can fix P; follow soil-test recommendations.',
)


# Keyword lookup over a fixed table; no model behind it
def match_recommendations(text: str):
    t = (text or '').lower()
    results = []
    if 'nitrogen' in t:
        results.append(NITROGEN)
    # phosphorus doubles as the catch-all when nothing else matched
    if 'phosphorus' in t or not results:
        results.append(PHOSPHORUS)
    return results[:MAX_RECOMMENDATIONS]


def get_fertilizer_recommendation(form_input):
    recs = match_recommendations(form_input.nutrient_deficiencies)
    logger.debug("Matched %s for crop=%r deficiencies=%r",
                 [r.fertilizer_name for r in recs], form_input.crop_type, form_input.nutrient_deficiencies)
    return recs
