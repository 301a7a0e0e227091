"""Persistence gateways for tournament snapshots."""

from .base import TournamentStore
from .firestore import FirestoreTournamentStore
from .memory import InMemoryTournamentStore

__all__ = ["FirestoreTournamentStore", "InMemoryTournamentStore", "TournamentStore"]
