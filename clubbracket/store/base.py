"""Abstract persistence capability for tournament snapshots."""

from __future__ import annotations

import abc
from typing import Optional

from clubbracket.bracket.models import Tournament


class TournamentStore(abc.ABC):
    """Loads and saves whole-tournament snapshots.

    Saves replace the stored snapshot entirely; concurrent writers are
    last-write-wins.
    """

    @abc.abstractmethod
    def get(self, tournament_id: str) -> Optional[Tournament]:
        """Return the snapshot for ``tournament_id`` or None."""

    @abc.abstractmethod
    def save(self, tournament: Tournament) -> None:
        """Store ``tournament``, replacing any previous snapshot."""

    @abc.abstractmethod
    def list(self, club_id: Optional[str] = None) -> list[Tournament]:
        """Return all snapshots, optionally only those of one club."""
