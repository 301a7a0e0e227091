"""Service layer for tournament business logic."""

from __future__ import annotations

import datetime
import logging
from typing import Any, Optional

from clubbracket.bracket import (
    Tournament,
    TournamentStateMachine,
    TournamentStatus,
    group_rounds,
)
from clubbracket.bracket.models import IdFactory
from clubbracket.errors import TournamentNotFoundError
from clubbracket.store import TournamentStore


class TournamentService:
    """Applies tournament commands against a store.

    Every command loads the current snapshot, lets the state machine compute
    the next one and saves it. Nothing is saved when a command is rejected.
    """

    def __init__(
        self, store: TournamentStore, id_factory: Optional[IdFactory] = None
    ) -> None:
        self.store = store
        self.id_factory = id_factory

    def _load(self, tournament_id: str) -> Tournament:
        tournament = self.store.get(tournament_id)
        if tournament is None:
            raise TournamentNotFoundError(tournament_id)
        return tournament

    def get_tournament(self, tournament_id: str) -> Tournament:
        """Fetch a single tournament snapshot."""
        return self._load(tournament_id)

    def list_tournaments(self, club_id: Optional[str] = None) -> list[Tournament]:
        """Fetch all tournaments, or only those organized by ``club_id``."""
        tournaments = self.store.list(club_id)
        tournaments.sort(key=lambda t: (t.date, t.name))
        return tournaments

    def create_tournament(self, data: dict[str, Any], club_id: str) -> Tournament:
        """Create a tournament and return its snapshot."""
        tournament = TournamentStateMachine.create(
            name=data["name"],
            date=data["date"],
            max_participants=data["max_participants"],
            club_id=club_id,
            description=data.get("description") or "",
            id_factory=self.id_factory,
            created_at=datetime.datetime.now(datetime.timezone.utc).isoformat(),
        )
        self.store.save(tournament)
        logging.info(f"Tournament {tournament.id} created for club {club_id}.")
        return tournament

    def join_tournament(self, tournament_id: str, name: str) -> Tournament:
        """Register a participant."""
        tournament = TournamentStateMachine.join(self._load(tournament_id), name)
        self.store.save(tournament)
        return tournament

    def start_tournament(self, tournament_id: str) -> Tournament:
        """Generate the bracket and move the tournament to ongoing."""
        tournament = TournamentStateMachine.start(
            self._load(tournament_id), self.id_factory
        )
        self.store.save(tournament)
        logging.info(
            f"Tournament {tournament.id} started with "
            f"{len(tournament.participants)} participants, "
            f"{tournament.total_rounds} rounds."
        )
        return tournament

    def record_winner(
        self, tournament_id: str, match_id: str, winner: str
    ) -> Tournament:
        """Record a match winner and advance them."""
        tournament = TournamentStateMachine.record_winner(
            self._load(tournament_id), match_id, winner
        )
        self.store.save(tournament)
        if tournament.status is TournamentStatus.COMPLETED:
            logging.info(f"Tournament {tournament.id} won by {tournament.winner}.")
        return tournament

    def get_bracket(self, tournament_id: str) -> list[dict[str, Any]]:
        """Return the bracket grouped into labelled rounds."""
        tournament = self._load(tournament_id)
        return [
            {
                "round": r["round"],
                "label": r["label"],
                "matches": [m.to_dict() for m in r["matches"]],
            }
            for r in group_rounds(tournament.matches)
        ]
