"""In-process tournament store."""

from __future__ import annotations

from typing import Any, Optional

from clubbracket.bracket.models import Tournament

from .base import TournamentStore


class InMemoryTournamentStore(TournamentStore):
    """Keeps serialized snapshots in a dict, in insertion order."""

    def __init__(self) -> None:
        self._documents: dict[str, dict[str, Any]] = {}

    def get(self, tournament_id: str) -> Optional[Tournament]:
        data = self._documents.get(tournament_id)
        if data is None:
            return None
        return Tournament.from_dict(data)

    def save(self, tournament: Tournament) -> None:
        self._documents[tournament.id] = dict(tournament.to_dict())

    def list(self, club_id: Optional[str] = None) -> list[Tournament]:
        return [
            Tournament.from_dict(data)
            for data in self._documents.values()
            if club_id is None or data.get("clubId") == club_id
        ]
