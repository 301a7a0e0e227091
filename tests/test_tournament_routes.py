"""Tests for the tournament JSON API."""

from __future__ import annotations

import unittest
from typing import Any

from mockfirestore import MockFirestore

from clubbracket import create_app
from tests.conftest import patch_mockfirestore, sequential_ids

SUMMER_OPEN = {
    "name": "Summer Open",
    "description": "Singles knockout",
    "date": "2024-06-01",
    "maxParticipants": 4,
    "clubId": "club1",
}


class TournamentRoutesTestCase(unittest.TestCase):
    """Test case for the tournament blueprint with the in-memory store."""

    def make_config(self) -> dict[str, Any]:
        return {"TESTING": True, "ID_FACTORY": sequential_ids("id")}

    def setUp(self) -> None:
        """Set up a test client."""
        self.app = create_app(self.make_config())
        self.client = self.app.test_client()

    def _create(self, **overrides: Any) -> dict[str, Any]:
        response = self.client.post("/api/tournaments/", json=dict(SUMMER_OPEN, **overrides))
        self.assertEqual(response.status_code, 201)
        return response.get_json()

    def _join(self, tournament_id: str, *names: str) -> Any:
        response = None
        for name in names:
            response = self.client.post(
                f"/api/tournaments/{tournament_id}/join", json={"name": name}
            )
        return response

    def _winner(self, tournament_id: str, match_id: str, winner: str) -> Any:
        return self.client.post(
            f"/api/tournaments/{tournament_id}/match/{match_id}/winner",
            json={"winner": winner},
        )

    def test_create_tournament(self) -> None:
        """Test successfully creating a new tournament."""
        data = self._create()
        self.assertEqual(data["name"], "Summer Open")
        self.assertEqual(data["date"], "2024-06-01T00:00:00.000Z")
        self.assertEqual(data["status"], "upcoming")
        self.assertEqual(data["participants"], [])
        self.assertEqual(data["matches"], [])
        self.assertEqual(data["clubId"], "club1")

        response = self.client.get(f"/api/tournaments/{data['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["name"], "Summer Open")

    def test_create_tournament_with_time(self) -> None:
        """Test a datetime-local value keeps its time of day."""
        data = self._create(date="2024-06-01T18:30")
        self.assertEqual(data["date"], "2024-06-01T18:30:00.000Z")

        data = self._create(date="2024-06-01T18:30:00.000Z")
        self.assertEqual(data["date"], "2024-06-01T18:30:00.000Z")

        stored = self.client.get(f"/api/tournaments/{data['id']}").get_json()
        self.assertEqual(stored["date"], "2024-06-01T18:30:00.000Z")

    def test_create_tournament_invalid_date(self) -> None:
        """Test a date that is not ISO-8601 is rejected with a clear message."""
        response = self.client.post(
            "/api/tournaments/", json=dict(SUMMER_OPEN, date="next saturday")
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.get_json()["error"],
            "date: Not a valid ISO-8601 date or datetime.",
        )

    def test_collection_without_trailing_slash(self) -> None:
        """Test the collection URL works without a trailing slash."""
        response = self.client.post("/api/tournaments", json=SUMMER_OPEN)
        self.assertEqual(response.status_code, 201)
        created = response.get_json()

        response = self.client.get("/api/tournaments?clubId=club1")
        self.assertEqual(response.status_code, 200)
        self.assertEqual([t["id"] for t in response.get_json()], [created["id"]])

    def test_create_tournament_validation(self) -> None:
        """Test missing or invalid fields are rejected with 400."""
        response = self.client.post("/api/tournaments/", json={"name": "No date"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("error", response.get_json())

        response = self.client.post(
            "/api/tournaments/", json=dict(SUMMER_OPEN, maxParticipants=1)
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("maxParticipants", response.get_json()["error"])

    def test_list_tournaments_by_club(self) -> None:
        """Test listing tournaments with and without a club filter."""
        self._create()
        self._create(clubId="club2", name="Other Club Cup")

        everything = self.client.get("/api/tournaments/").get_json()
        self.assertEqual(len(everything), 2)

        club_two = self.client.get("/api/tournaments/?clubId=club2").get_json()
        self.assertEqual([t["name"] for t in club_two], ["Other Club Cup"])

    def test_full_tournament_flow(self) -> None:
        """Test join, start and winners through to a champion."""
        tournament_id = self._create()["id"]
        response = self._join(tournament_id, "A", "B", "C")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["participants"], ["A", "B", "C"])

        response = self.client.post(f"/api/tournaments/{tournament_id}/start")
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(data["status"], "ongoing")
        m1, m2, final = data["matches"]
        self.assertEqual((m1["player1"], m1["player2"]), ("A", "B"))
        self.assertEqual(m2["player1"], "C")
        self.assertNotIn("player2", m2)

        data = self._winner(tournament_id, m1["id"], "A").get_json()
        self.assertEqual(data["matches"][2]["player1"], "A")
        self._winner(tournament_id, m2["id"], "C")
        response = self._winner(tournament_id, final["id"], "C")

        data = response.get_json()
        self.assertEqual(data["status"], "completed")
        self.assertEqual(data["winner"], "C")

        response = self._join(tournament_id, "D")
        self.assertEqual(response.status_code, 409)

    def test_view_bracket(self) -> None:
        """Test the bracket endpoint labels rounds."""
        tournament_id = self._create()["id"]
        self._join(tournament_id, "A", "B", "C", "D")
        self.client.post(f"/api/tournaments/{tournament_id}/start")

        rounds = self.client.get(f"/api/tournaments/{tournament_id}/bracket").get_json()
        self.assertEqual([r["label"] for r in rounds], ["Semifinal", "Final"])
        self.assertEqual([len(r["matches"]) for r in rounds], [2, 1])

    def test_join_errors(self) -> None:
        """Test duplicate names and full tournaments return 409."""
        tournament_id = self._create(maxParticipants=2)["id"]
        self._join(tournament_id, "A")

        response = self._join(tournament_id, "A")
        self.assertEqual(response.status_code, 409)
        self.assertIn("already joined", response.get_json()["error"])

        self._join(tournament_id, "B")
        response = self._join(tournament_id, "C")
        self.assertEqual(response.status_code, 409)
        self.assertIn("full", response.get_json()["error"])

        response = self.client.post(f"/api/tournaments/{tournament_id}/join", json={})
        self.assertEqual(response.status_code, 400)

    def test_start_with_one_participant(self) -> None:
        """Test starting with a single participant is rejected."""
        tournament_id = self._create()["id"]
        self._join(tournament_id, "A")
        response = self.client.post(f"/api/tournaments/{tournament_id}/start")
        self.assertEqual(response.status_code, 409)
        status = self.client.get(f"/api/tournaments/{tournament_id}").get_json()["status"]
        self.assertEqual(status, "upcoming")

    def test_invalid_winner(self) -> None:
        """Test a winner who is not in the match leaves the bracket unchanged."""
        tournament_id = self._create()["id"]
        self._join(tournament_id, "A", "B")
        match_id = self.client.post(
            f"/api/tournaments/{tournament_id}/start"
        ).get_json()["matches"][0]["id"]

        response = self._winner(tournament_id, match_id, "Z")
        self.assertEqual(response.status_code, 400)
        data = self.client.get(f"/api/tournaments/{tournament_id}").get_json()
        self.assertNotIn("winner", data["matches"][0])

        response = self._winner(tournament_id, "missing", "A")
        self.assertEqual(response.status_code, 404)

    def test_unknown_tournament(self) -> None:
        """Test unknown tournaments return 404 JSON."""
        response = self.client.get("/api/tournaments/nope")
        self.assertEqual(response.status_code, 404)
        self.assertIn("nope", response.get_json()["error"])

        response = self.client.get("/no/such/route")
        self.assertEqual(response.status_code, 404)


class FirestoreTournamentRoutesTestCase(TournamentRoutesTestCase):
    """Run the same API tests against the Firestore store."""

    def make_config(self) -> dict[str, Any]:
        patch_mockfirestore()
        self.db = MockFirestore()
        return dict(
            super().make_config(),
            TOURNAMENT_STORE="firestore",
            FIRESTORE_CLIENT=self.db,
        )

    def test_snapshot_written_to_firestore(self) -> None:
        """Test commands write the tournament document."""
        tournament_id = self._create()["id"]
        self._join(tournament_id, "A")
        doc = self.db.collection("tournaments").document(tournament_id).get()
        self.assertEqual(doc.to_dict()["participants"], ["A"])


if __name__ == "__main__":
    unittest.main()
