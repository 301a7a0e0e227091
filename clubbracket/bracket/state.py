"""Tournament lifecycle: upcoming -> ongoing -> completed."""

from __future__ import annotations

import datetime
from dataclasses import replace
from typing import Optional, Union

from clubbracket.core.constants import MIN_PARTICIPANTS
from clubbracket.errors import (
    DuplicateParticipantError,
    IllegalStateTransitionError,
    InsufficientParticipantsError,
    TournamentFullError,
    ValidationError,
)

from .advancer import MatchAdvancer
from .generator import BracketGenerator
from .models import (
    IdFactory,
    Tournament,
    TournamentStatus,
    new_id,
    parse_tournament_date,
)


class TournamentStateMachine:
    """Gates every tournament command on the current status.

    Each operation takes a snapshot and returns a new one. A rejected
    command raises and leaves the given snapshot untouched.
    """

    @staticmethod
    def _require(tournament: Tournament, status: TournamentStatus, action: str) -> None:
        if tournament.status is not status:
            raise IllegalStateTransitionError(
                f"Cannot {action} a tournament that is {tournament.status.value}."
            )

    @staticmethod
    def create(  # noqa: PLR0913
        name: str,
        date: Union[datetime.date, str],
        max_participants: int,
        club_id: str,
        description: str = "",
        id_factory: Optional[IdFactory] = None,
        created_at: Optional[str] = None,
    ) -> Tournament:
        """Create an empty tournament awaiting participants."""
        name = (name or "").strip()
        if not name:
            raise ValidationError("Tournament name is required.")
        if max_participants < MIN_PARTICIPANTS:
            raise ValidationError(
                f"A tournament needs room for at least {MIN_PARTICIPANTS} participants."
            )
        return Tournament(
            id=(id_factory or new_id)(),
            name=name,
            description=description or "",
            date=parse_tournament_date(date),
            max_participants=max_participants,
            club_id=club_id,
            created_at=created_at,
        )

    @staticmethod
    def join(tournament: Tournament, name: str) -> Tournament:
        """Add a participant by display name."""
        TournamentStateMachine._require(tournament, TournamentStatus.UPCOMING, "join")
        name = (name or "").strip()
        if not name:
            raise ValidationError("Participant name is required.")
        if tournament.is_full:
            raise TournamentFullError(tournament.max_participants)
        if name in tournament.participants:
            raise DuplicateParticipantError(name)
        return replace(tournament, participants=tournament.participants + (name,))

    @staticmethod
    def start(
        tournament: Tournament, id_factory: Optional[IdFactory] = None
    ) -> Tournament:
        """Freeze the participant list and build the bracket."""
        TournamentStateMachine._require(tournament, TournamentStatus.UPCOMING, "start")
        if len(tournament.participants) < MIN_PARTICIPANTS:
            raise InsufficientParticipantsError(
                len(tournament.participants), MIN_PARTICIPANTS
            )
        matches = BracketGenerator.generate(tournament.participants, id_factory)
        return replace(tournament, matches=matches, status=TournamentStatus.ONGOING)

    @staticmethod
    def record_winner(tournament: Tournament, match_id: str, winner: str) -> Tournament:
        """Record a match result, completing the tournament on the final."""
        TournamentStateMachine._require(
            tournament, TournamentStatus.ONGOING, "record a winner in"
        )
        matches = MatchAdvancer.record_winner(tournament.matches, match_id, winner)
        champion = MatchAdvancer.champion(matches)
        if champion is not None:
            return replace(
                tournament,
                matches=matches,
                winner=champion,
                status=TournamentStatus.COMPLETED,
            )
        return replace(tournament, matches=matches)
