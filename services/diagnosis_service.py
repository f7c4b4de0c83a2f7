import io
import logging

from PIL import Image, ImageStat

from models import Diagnosis, InvalidInputError
from services.fertilizer_service import match_recommendations

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg'}

# well below Pillow's own decompression-bomb threshold
MAX_PIXELS = 20_000_000

# how far (0-255) two channels must sit above the third to count as a tint
TINT_MARGIN = 20

CONDITIONS = {
    'chlorosis': {
        "condition": "Leaf chlorosis",
        "confidence": 0.72,
        "description": "Leaves look pale or yellow, a common sign of nitrogen shortage.",
        "suspected_deficiency": "nitrogen",
    },
    'purpling': {
        "condition": "Purple leaf discoloration",
        "confidence": 0.68,
        "description": "Leaves show a purple or reddish cast, often linked to phosphorus shortage.",
        "suspected_deficiency": "phosphorus",
    },
    'unclear': {
        "condition": "No clear deficiency detected",
        "confidence": 0.5,
        "description": "No dominant discoloration found. Describe the symptoms in the form for a better match.",
        "suspected_deficiency": None,
    },
}


def allowed_file(filename):
    return bool(filename) and '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def load_image(image_bytes):
    try:
        image = Image.open(io.BytesIO(image_bytes))
        # header only so far; refuse before decoding anything huge
        if image.width * image.height > MAX_PIXELS:
            raise InvalidInputError(
                f"Image is too large: {image.width}x{image.height} exceeds {MAX_PIXELS} pixels")
        image.load()
    except (OSError, Image.DecompressionBombError) as e:
        raise InvalidInputError(f"Could not read image: {e}")
    return image.convert('RGB')


def classify_colour(mean_rgb):
    r, g, b = mean_rgb
    if r - b > TINT_MARGIN and g - b > TINT_MARGIN:
        return 'chlorosis'
    if r - g > TINT_MARGIN and b - g > TINT_MARGIN:
        return 'purpling'
    return 'unclear'


def diagnose_image(image_bytes, filename):
    """Return a canned Diagnosis for an uploaded leaf photo.

    The pick is driven only by the image's mean colour, so identical pixels
    always give the same answer.
    """
    if not allowed_file(filename):
        raise InvalidInputError("Invalid image file. Please upload a PNG, JPG, or JPEG file.")
    if not image_bytes:
        raise InvalidInputError("Uploaded image is empty")

    image = load_image(image_bytes)
    mean_rgb = ImageStat.Stat(image).mean
    key = classify_colour(mean_rgb)
    canned = CONDITIONS[key]
    logger.info("Diagnosed %s (%dx%d) as %s, mean rgb=%s",
                filename, image.width, image.height, key, [round(c, 1) for c in mean_rgb])

    return Diagnosis(
        condition=canned["condition"],
        confidence=canned["confidence"],
        description=canned["description"],
        suspected_deficiency=canned["suspected_deficiency"],
        recommendations=tuple(match_recommendations(canned["suspected_deficiency"] or '')),
    )
