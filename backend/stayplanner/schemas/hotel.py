from enum import Enum

from pydantic import BaseModel, Field, field_validator


class Brand(str, Enum):
    MARRIOTT = "marriott"
    HILTON = "hilton"
    HYATT = "hyatt"


class ExperienceTag(str, Enum):
    ADVENTURE = "adventure"
    RELAXING = "relaxing"
    ROMANTIC = "romantic"
    FAMILY = "family"
    NIGHTLIFE = "nightlife"
    CULTURE = "culture"
    BEACH = "beach"
    MOUNTAIN = "mountain"
    SPA = "spa"
    WATERPARK = "waterpark"
    GOLF = "golf"


class Suitability(BaseModel):
    family: bool = False
    couples: bool = False
    groups: bool = False


class Hotel(BaseModel):
    """Normalized candidate property.

    Only base_price_usd is ever rewritten after creation, when the caller
    declared a budget band.
    """

    id: str
    brand: Brand
    name: str
    city: str
    country: str = ""
    region: str | None = None
    base_price_usd: float = Field(default=250.0, gt=0)
    suitability: Suitability = Field(default_factory=Suitability)
    experiences: list[ExperienceTag] = Field(default_factory=lambda: [ExperienceTag.RELAXING])
    amenities: list[str] = Field(default_factory=list)
    hero_image: str = ""
    source_url: str | None = None

    model_config = {"validate_assignment": True}

    @field_validator("experiences")
    @classmethod
    def _never_empty(cls, value: list[ExperienceTag]) -> list[ExperienceTag]:
        return value or [ExperienceTag.RELAXING]

    def has_experience(self, tag: str | Enum) -> bool:
        wanted = tag.value if isinstance(tag, Enum) else tag
        return any(e.value == wanted for e in self.experiences)

    @property
    def experience_values(self) -> list[str]:
        return [e.value for e in self.experiences]
