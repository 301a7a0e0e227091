"""Tests for the tournament stores."""

from __future__ import annotations

import datetime
import unittest

from mockfirestore import MockFirestore

from clubbracket.bracket import TournamentStateMachine, TournamentStatus
from clubbracket.store import FirestoreTournamentStore, InMemoryTournamentStore
from tests.conftest import patch_mockfirestore, sequential_ids


def _tournament(tournament_id: str, club_id: str, day: int = 1):
    return TournamentStateMachine.create(
        f"Cup {tournament_id}",
        datetime.date(2024, 5, day),
        4,
        club_id,
        id_factory=lambda: tournament_id,
    )


class StoreContract:
    """Behaviour shared by every store implementation."""

    def make_store(self):
        raise NotImplementedError

    def setUp(self) -> None:
        self.store = self.make_store()

    def test_get_missing(self) -> None:
        """Test an unknown id returns None."""
        self.assertIsNone(self.store.get("missing"))

    def test_save_and_get(self) -> None:
        """Test a saved snapshot loads back equal."""
        t = TournamentStateMachine.join(_tournament("t1", "c1"), "Ann")
        t = TournamentStateMachine.join(t, "Ben")
        t = TournamentStateMachine.start(t, sequential_ids("m"))
        self.store.save(t)

        loaded = self.store.get("t1")
        self.assertEqual(loaded, t)
        self.assertIs(loaded.status, TournamentStatus.ONGOING)

    def test_save_replaces_snapshot(self) -> None:
        """Test saving again overwrites the previous snapshot."""
        t = _tournament("t1", "c1")
        self.store.save(t)
        self.store.save(TournamentStateMachine.join(t, "Ann"))
        self.assertEqual(self.store.get("t1").participants, ("Ann",))

    def test_list_by_club(self) -> None:
        """Test listing all tournaments and one club's tournaments."""
        self.store.save(_tournament("t1", "c1"))
        self.store.save(_tournament("t2", "c2"))
        self.store.save(_tournament("t3", "c1"))

        self.assertEqual({t.id for t in self.store.list()}, {"t1", "t2", "t3"})
        self.assertEqual({t.id for t in self.store.list("c1")}, {"t1", "t3"})
        self.assertEqual(self.store.list("nobody"), [])


class InMemoryTournamentStoreTestCase(StoreContract, unittest.TestCase):
    """Test case for the in-memory store."""

    def make_store(self):
        return InMemoryTournamentStore()

    def test_snapshots_are_copies(self) -> None:
        """Test the store does not share state with loaded snapshots."""
        self.store.save(_tournament("t1", "c1"))
        first = self.store.get("t1")
        second = self.store.get("t1")
        self.assertEqual(first, second)
        self.assertIsNot(first, second)


class FirestoreTournamentStoreTestCase(StoreContract, unittest.TestCase):
    """Test case for the Firestore store using mockfirestore."""

    def make_store(self):
        patch_mockfirestore()
        self.db = MockFirestore()
        return FirestoreTournamentStore(self.db)

    def test_document_layout(self) -> None:
        """Test the stored document body carries no id field."""
        self.store.save(_tournament("t1", "c1"))
        doc = self.db.collection("tournaments").document("t1").get()
        self.assertTrue(doc.exists)
        data = doc.to_dict()
        self.assertNotIn("id", data)
        self.assertEqual(data["clubId"], "c1")
        self.assertEqual(data["status"], "upcoming")
        self.assertEqual(data["matches"], [])


if __name__ == "__main__":
    unittest.main()
