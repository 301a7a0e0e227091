"""Firestore-backed tournament store."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, cast

from firebase_admin import firestore

from clubbracket.bracket.models import Tournament
from clubbracket.core.constants import TOURNAMENTS_COLLECTION

from .base import TournamentStore

if TYPE_CHECKING:
    from google.cloud.firestore_v1.base_document import DocumentSnapshot
    from google.cloud.firestore_v1.client import Client


class FirestoreTournamentStore(TournamentStore):
    """Stores one document per tournament; matches are embedded."""

    def __init__(self, db: Client | None = None) -> None:
        self._db = db

    @property
    def db(self) -> Client:
        if self._db is None:
            self._db = firestore.client()
        return self._db

    @staticmethod
    def _from_snapshot(doc: Any) -> Optional[Tournament]:
        data = doc.to_dict()
        if not data:
            return None
        data["id"] = doc.id
        return Tournament.from_dict(data)

    def get(self, tournament_id: str) -> Optional[Tournament]:
        doc = cast(
            "DocumentSnapshot",
            self.db.collection(TOURNAMENTS_COLLECTION).document(tournament_id).get(),
        )
        if not doc.exists:
            return None
        return self._from_snapshot(doc)

    def save(self, tournament: Tournament) -> None:
        data = dict(tournament.to_dict())
        data.pop("id")
        self.db.collection(TOURNAMENTS_COLLECTION).document(tournament.id).set(data)

    def list(self, club_id: Optional[str] = None) -> list[Tournament]:
        query: Any = self.db.collection(TOURNAMENTS_COLLECTION)
        if club_id is not None:
            query = query.where(
                filter=firestore.FieldFilter("clubId", "==", club_id)
            )
        tournaments = []
        for doc in query.stream():
            tournament = self._from_snapshot(doc)
            if tournament is not None:
                tournaments.append(tournament)
        return tournaments
