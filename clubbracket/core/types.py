"""Core data types for the clubbracket application."""

from typing import Optional, TypedDict


class _FirestoreDocumentBase(TypedDict):
    id: str


class FirestoreDocument(_FirestoreDocumentBase, total=False):
    """Generic Firestore document structure."""

    createdAt: str


class _MatchDocumentBase(TypedDict):
    id: str
    round: int
    matchNumber: int


class MatchDocument(_MatchDocumentBase, total=False):
    """A bracket match as stored inside a tournament document."""

    player1: str
    player2: str
    winner: str


class TournamentDocument(FirestoreDocument, total=False):
    """A tournament snapshot as serialized for storage and the API."""

    name: str
    description: str
    date: str
    maxParticipants: int
    participants: list[str]
    matches: list[MatchDocument]
    status: str
    clubId: str
    winner: Optional[str]
