"""Read-only validated tables for lookup code.

Instances are only built by the startup validation gate. Lookups assume
every invariant already holds and never re-validate or mutate data.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, TypeVar

from core.schemas import (
    CharacterModel,
    CharactersDocument,
    TrackModel,
    TracksDocument,
    VehicleModel,
    VehiclesDocument,
)
from transforms.slugs import to_id

_RowT = TypeVar("_RowT", CharacterModel, VehicleModel, TrackModel)


class StatTables:
    """Immutable character, vehicle, and track tables sharing one version."""

    def __init__(
        self,
        characters: CharactersDocument,
        vehicles: VehiclesDocument,
        tracks: TracksDocument,
    ) -> None:
        """Index validated documents for lookups.

        Args:
            characters: Validated characters document.
            vehicles: Validated vehicles document.
            tracks: Validated tracks document.
        """
        self._data_version = characters.data_version
        self._characters = characters.characters
        self._vehicles = vehicles.vehicles
        self._tracks = tracks.tracks
        self._characters_by_id = _index_by_id(self._characters)
        self._vehicles_by_id = _index_by_id(self._vehicles)
        self._tracks_by_id = _index_by_id(self._tracks)

    @property
    def data_version(self) -> str:
        """Version stamp shared by all three collections."""
        return self._data_version

    @property
    def characters(self) -> tuple[CharacterModel, ...]:
        return self._characters

    @property
    def vehicles(self) -> tuple[VehicleModel, ...]:
        return self._vehicles

    @property
    def tracks(self) -> tuple[TrackModel, ...]:
        return self._tracks

    def character(self, character_id: str) -> CharacterModel | None:
        """Return a character by id, or None when unknown."""
        return self._characters_by_id.get(character_id)

    def vehicle(self, vehicle_id: str) -> VehicleModel | None:
        """Return a vehicle by id, or None when unknown."""
        return self._vehicles_by_id.get(vehicle_id)

    def vehicles_by_tag(self, tag: str) -> tuple[VehicleModel, ...]:
        """Return every vehicle sharing a stat-group tag, in table order."""
        return tuple(row for row in self._vehicles if row.tag == tag)

    def track(self, track_id: str) -> TrackModel | None:
        """Return a track by id, or None when unknown."""
        return self._tracks_by_id.get(track_id)

    def tracks_by_cup(self, cup_slug: str) -> tuple[TrackModel, ...]:
        """Return tracks whose cup name slugs to ``cup_slug``, e.g. ``mushroom-cup``."""
        return tuple(row for row in self._tracks if to_id(row.cup) == cup_slug)

    def counts(self) -> dict[str, int]:
        """Return the number of loaded rows per collection."""
        return {
            "characters": len(self._characters),
            "vehicles": len(self._vehicles),
            "tracks": len(self._tracks),
        }


def _index_by_id(rows: tuple[_RowT, ...]) -> Mapping[str, _RowT]:
    return MappingProxyType({row.id: row for row in rows})
