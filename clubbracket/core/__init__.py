"""Core module for the clubbracket application."""

from .types import FirestoreDocument, MatchDocument, TournamentDocument

__all__ = ["FirestoreDocument", "MatchDocument", "TournamentDocument"]
