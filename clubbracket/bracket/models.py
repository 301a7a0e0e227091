"""Snapshot models for tournaments and their brackets."""

from __future__ import annotations

import datetime
import enum
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional

from clubbracket.core.types import MatchDocument, TournamentDocument
from clubbracket.errors import ValidationError

IdFactory = Callable[[], str]


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return uuid.uuid4().hex


class TournamentStatus(str, enum.Enum):
    """Lifecycle states of a tournament."""

    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, value: Any) -> TournamentStatus:
        """Convert a stored token into a status, rejecting unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValidationError(f"Unknown tournament status: {value!r}") from None


@dataclass(frozen=True)
class Match:
    """A single bracket match. ``(round, match_number)`` is its real key."""

    id: str
    round: int
    match_number: int
    player1: Optional[str] = None
    player2: Optional[str] = None
    winner: Optional[str] = None

    @property
    def players(self) -> tuple[str, ...]:
        """Players currently seated in this match."""
        return tuple(p for p in (self.player1, self.player2) if p is not None)

    def to_dict(self) -> MatchDocument:
        data: MatchDocument = {
            "id": self.id,
            "round": self.round,
            "matchNumber": self.match_number,
        }
        if self.player1 is not None:
            data["player1"] = self.player1
        if self.player2 is not None:
            data["player2"] = self.player2
        if self.winner is not None:
            data["winner"] = self.winner
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Match:
        return cls(
            id=str(data["id"]),
            round=int(data["round"]),
            match_number=int(data["matchNumber"]),
            player1=data.get("player1"),
            player2=data.get("player2"),
            winner=data.get("winner"),
        )


def parse_tournament_date(value: Any) -> datetime.datetime:
    """Return ``value`` as an aware UTC datetime.

    Accepts datetimes, plain dates (midnight), Firestore timestamps and
    ISO-8601 strings such as ``2024-06-01``, ``2024-06-01T18:30`` or
    ``2024-06-01T18:30:00.000Z``. Naive values are taken to be UTC.
    """
    if hasattr(value, "to_datetime"):
        value = value.to_datetime()
    if isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            value = datetime.datetime.fromisoformat(text)
        except ValueError:
            raise ValidationError(f"Invalid tournament date: {value!r}") from None
    if not isinstance(value, datetime.datetime) and isinstance(value, datetime.date):
        value = datetime.datetime.combine(value, datetime.time())
    if not isinstance(value, datetime.datetime):
        raise ValidationError(f"Invalid tournament date: {value!r}")
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


def format_tournament_date(value: datetime.datetime) -> str:
    """Render a tournament date the way JavaScript's ``toISOString`` does."""
    utc = value.astimezone(datetime.timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class Tournament:
    """An immutable snapshot of one tournament's state."""

    id: str
    name: str
    date: datetime.datetime
    max_participants: int
    club_id: str
    description: str = ""
    participants: tuple[str, ...] = ()
    matches: tuple[Match, ...] = ()
    status: TournamentStatus = TournamentStatus.UPCOMING
    winner: Optional[str] = None
    created_at: Optional[str] = field(default=None, compare=False)

    @property
    def total_rounds(self) -> int:
        return max((m.round for m in self.matches), default=0)

    @property
    def is_full(self) -> bool:
        return len(self.participants) >= self.max_participants

    def to_dict(self) -> TournamentDocument:
        """Serialize into a JSON-compatible record."""
        data: TournamentDocument = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "date": format_tournament_date(self.date),
            "maxParticipants": self.max_participants,
            "participants": list(self.participants),
            "matches": [m.to_dict() for m in self.matches],
            "status": self.status.value,
            "clubId": self.club_id,
        }
        if self.winner is not None:
            data["winner"] = self.winner
        if self.created_at is not None:
            data["createdAt"] = self.created_at
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Tournament:
        """Build a snapshot from a stored record.

        Participants may be plain names or ``{"name": ...}`` objects, the
        shape returned by the remote API.
        """
        participants = tuple(
            p["name"] if isinstance(p, dict) else str(p)
            for p in data.get("participants") or []
        )
        try:
            max_participants = int(data["maxParticipants"])
        except (KeyError, TypeError, ValueError):
            raise ValidationError("maxParticipants is required.") from None
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            description=data.get("description") or "",
            date=parse_tournament_date(data.get("date")),
            max_participants=max_participants,
            club_id=data.get("clubId") or "",
            participants=participants,
            matches=tuple(Match.from_dict(m) for m in data.get("matches") or []),
            status=TournamentStatus.parse(data.get("status", "upcoming")),
            winner=data.get("winner"),
            created_at=data.get("createdAt"),
        )
