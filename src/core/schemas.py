"""Pydantic schemas for persisted collection documents.

These models describe the on-disk JSON exactly: camelCase keys, no
unknown fields, integer stats within range, and percentages within
range. The startup gate validates every loaded document against them,
and the resulting frozen models are what lookup code reads.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    model_validator,
)
from pydantic.alias_generators import to_camel

from core.constants import (
    CHARACTERS_COLLECTION,
    COVERAGE_MAX,
    COVERAGE_MIN,
    MAX_ID_LENGTH,
    STAT_MAX,
    STAT_MIN,
    TERRAIN_SUM_TOLERANCE,
    TRACKS_COLLECTION,
    VEHICLES_COLLECTION,
)


def _require_number(value: object) -> object:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {type(value).__name__}")
    return value


StatValue = Annotated[StrictInt, Field(ge=STAT_MIN, le=STAT_MAX)]
Percentage = Annotated[
    float,
    BeforeValidator(_require_number),
    Field(ge=COVERAGE_MIN, le=COVERAGE_MAX, allow_inf_nan=False),
]
Identifier = Annotated[StrictStr, Field(min_length=1, max_length=MAX_ID_LENGTH)]
DisplayText = Annotated[StrictStr, Field(min_length=1)]


class DocumentModel(BaseModel):
    """Base model for persisted payloads."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
    )


class TerrainStatsModel(DocumentModel):
    road: StatValue
    rough: StatValue
    water: StatValue


class StatBlockModel(DocumentModel):
    """Stat fields shared by characters and vehicles."""

    speed: TerrainStatsModel
    handling: TerrainStatsModel
    acceleration: StatValue
    mini_turbo: StatValue
    weight: StatValue
    coin_curve: StatValue


class CharacterModel(StatBlockModel):
    id: Identifier
    name: DisplayText


class VehicleModel(StatBlockModel):
    id: Identifier
    name: DisplayText
    tag: Identifier
    category: Literal["kart", "bike", "atv"] | None = None


class SurfaceCoverageModel(DocumentModel):
    road: Percentage
    rough: Percentage
    water: Percentage
    neutral: Percentage
    off_road: Percentage


class TerrainCoverageModel(DocumentModel):
    """Renormalized road/rough/water coverage."""

    road: Percentage
    rough: Percentage
    water: Percentage

    @model_validator(mode="after")
    def check_total(self) -> "TerrainCoverageModel":
        total = self.road + self.rough + self.water
        if total != 0 and abs(total - 100) > TERRAIN_SUM_TOLERANCE:
            raise ValueError(f"terrain coverage must sum to 100 or 0, got {round(total, 4)}")
        return self


class TrackModel(DocumentModel):
    id: Identifier
    name: DisplayText
    cup: DisplayText
    surface_coverage: SurfaceCoverageModel
    terrain_coverage: TerrainCoverageModel


class CharactersDocument(DocumentModel):
    data_version: StrictStr
    characters: tuple[CharacterModel, ...]


class VehiclesDocument(DocumentModel):
    data_version: StrictStr
    vehicles: tuple[VehicleModel, ...]


class TracksDocument(DocumentModel):
    data_version: StrictStr
    tracks: tuple[TrackModel, ...]


class DataVersionDocument(DocumentModel):
    data_version: Annotated[StrictStr, Field(min_length=1)]


CollectionDocument = CharactersDocument | VehiclesDocument | TracksDocument

DOCUMENT_MODELS: dict[str, type[CollectionDocument]] = {
    CHARACTERS_COLLECTION: CharactersDocument,
    VEHICLES_COLLECTION: VehiclesDocument,
    TRACKS_COLLECTION: TracksDocument,
}
