"""
Entités du domaine astrologique.

Ce module définit la requête de thème natal (validée à la frontière de l'outil MCP) et la forme du
thème renvoyé par le backend ou le mock.
"""

from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator

HouseSystem = Literal["placidus", "whole_sign", "koch", "equal"]
HOUSE_SYSTEMS: tuple[str, ...] = get_args(HouseSystem)

PLANETS: tuple[str, ...] = (
    "sun",
    "moon",
    "mercury",
    "venus",
    "mars",
    "jupiter",
    "saturn",
    "uranus",
    "neptune",
    "pluto",
)


def _string_only(schema: dict[str, Any]) -> None:
    """Champ optionnel publié comme simple `string`: omis, jamais `null`."""
    schema.pop("anyOf", None)
    schema.pop("default", None)
    schema["type"] = "string"


class ChartRequest(BaseModel):
    """Données de naissance pour le calcul d'un thème natal."""

    model_config = ConfigDict(frozen=True)

    datetime: str = Field(
        min_length=1,
        description="Birth date and time in ISO 8601 format (e.g., '1990-05-15T14:30:00')",
    )
    latitude: float = Field(
        ge=-90,
        le=90,
        strict=True,
        allow_inf_nan=False,
        description="Birth location latitude (e.g., 40.7128 for New York)",
    )
    longitude: float = Field(
        ge=-180,
        le=180,
        strict=True,
        allow_inf_nan=False,
        description="Birth location longitude (e.g., -74.0060 for New York)",
    )
    timezone: str | None = Field(
        default=None,
        description=(
            "Timezone identifier (e.g., 'America/New_York'). Auto-detected if not provided."
        ),
        json_schema_extra=_string_only,
    )
    house_system: HouseSystem = Field(
        default="placidus",
        description="House system to use. Placidus is most common in Western astrology.",
    )

    @field_validator("timezone", mode="before")
    @classmethod
    def reject_null_timezone(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("timezone must be a string when provided")
        return value

    def to_payload(self) -> dict[str, Any]:
        """Corps JSON envoyé au backend; `timezone` est omis s'il est absent."""
        return self.model_dump(exclude_none=True)


class PlanetPosition(BaseModel):
    """Position d'une planète dans un signe."""

    sign: str
    degree: float = Field(ge=0, lt=30)
    retrograde: bool = False


class SignPosition(BaseModel):
    """Position d'une maison ou d'un angle dans un signe."""

    sign: str
    degree: float = Field(ge=0, lt=30)


class Angles(BaseModel):
    ascendant: SignPosition
    midheaven: SignPosition


class Aspect(BaseModel):
    """Relation angulaire entre deux planètes avec son orbe."""

    planet1: str
    planet2: str
    aspect: str
    orb: float


class ChartMetadata(BaseModel):
    generated_at: str
    input: dict[str, Any]
    house_system: str
    note: str | None = None


class ChartResult(BaseModel):
    """Thème natal complet: planètes, maisons, angles, aspects et métadonnées."""

    model_config = ConfigDict(populate_by_name=True)

    planets: dict[str, PlanetPosition]
    houses: dict[str, SignPosition]
    angles: Angles
    aspects: list[Aspect]
    meta: ChartMetadata | None = Field(default=None, alias="_meta")

    def to_payload(self) -> dict[str, Any]:
        """Forme JSON du thème, métadonnées sous la clé `_meta`."""
        return self.model_dump(by_alias=True, exclude_none=True)
