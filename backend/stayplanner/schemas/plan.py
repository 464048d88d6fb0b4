from pydantic import BaseModel, Field, field_validator

from stayplanner.schemas.hotel import Brand, Hotel


class Ancillary(BaseModel):
    title: str
    description: str | None = None
    price_hint: str | None = None

    model_config = {"frozen": True}


class PlannedHotel(BaseModel):
    hotel: Hotel
    score: float
    highlights: list[str]
    ancillaries: list[Ancillary]
    book_url: str


class PlanOption(BaseModel):
    brand: Brand
    rationale: str
    hotels: list[PlannedHotel] = Field(min_length=1, max_length=3)


class PlanRequest(BaseModel):
    prompt: str

    @field_validator("prompt")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Prompt is required")
        return value
