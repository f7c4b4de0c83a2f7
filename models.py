from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Optional


class InvalidInputError(ValueError):
    pass


class SoilQuality(Enum):
    POOR = 'Poor'
    AVERAGE = 'Average'
    GOOD = 'Good'


class Climate(Enum):
    TROPICAL = 'Tropical'
    DRY = 'Dry'
    TEMPERATE = 'Temperate'
    CONTINENTAL = 'Continental'


class GrowthStage(Enum):
    SEEDLING = 'Seedling'
    VEGETATIVE = 'Vegetative'
    FLOWERING = 'Flowering'
    FRUITING = 'Fruiting'


def choices(enum_cls):
    return [member.value for member in enum_cls]


def parse_choice(enum_cls, raw, field_name, default):
    if raw is None:
        return default
    value = str(raw).strip()
    if not value:
        return default
    for member in enum_cls:
        if member.value.lower() == value.lower():
            return member
    allowed = ", ".join(choices(enum_cls))
    raise InvalidInputError(f"Invalid {field_name} '{value}'. Allowed values: {allowed}")


@dataclass
class FormInput:
    crop_type: str = ''
    soil_quality: SoilQuality = SoilQuality.AVERAGE
    climate: Climate = Climate.TEMPERATE
    growth_stage: GrowthStage = GrowthStage.VEGETATIVE
    nutrient_deficiencies: str = ''

    @classmethod
    def from_mapping(cls, data):
        """Build a FormInput from request form fields or a JSON body.

        Missing fields fall back to the form defaults; enum fields are matched
        case-insensitively and anything outside the allowed set raises
        InvalidInputError.
        """
        if data is None:
            data = {}
        return cls(
            crop_type=str(data.get('crop_type') or '').strip(),
            soil_quality=parse_choice(SoilQuality, data.get('soil_quality'), 'soil_quality', SoilQuality.AVERAGE),
            climate=parse_choice(Climate, data.get('climate'), 'climate', Climate.TEMPERATE),
            growth_stage=parse_choice(GrowthStage, data.get('growth_stage'), 'growth_stage', GrowthStage.VEGETATIVE),
            nutrient_deficiencies=str(data.get('nutrient_deficiencies') or ''),
        )

    def to_dict(self):
        return {
            "crop_type": self.crop_type,
            "soil_quality": self.soil_quality.value,
            "climate": self.climate.value,
            "growth_stage": self.growth_stage.value,
            "nutrient_deficiencies": self.nutrient_deficiencies,
        }


@dataclass(frozen=True)
class Recommendation:
    fertilizer_name: str
    application_method: str
    reasoning: str
    precautions: str

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class Diagnosis:
    condition: str
    confidence: float
    description: str
    suspected_deficiency: Optional[str] = None
    recommendations: tuple = field(default_factory=tuple)

    def to_dict(self):
        return {
            "condition": self.condition,
            "confidence": self.confidence,
            "description": self.description,
            "suspected_deficiency": self.suspected_deficiency,
            "recommendations": [r.to_dict() for r in self.recommendations],
        }
