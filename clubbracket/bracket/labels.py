"""Round naming and grouping for bracket display."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .models import Match


def round_label(round_number: int, total_rounds: int) -> str:
    """Get the name of a round based on its distance from the final."""
    diff = total_rounds - round_number
    if diff == 0:
        return "Final"
    elif diff == 1:
        return "Semifinal"
    elif diff == 2:
        return "Quarterfinal"
    else:
        return f"Round {round_number}"


def group_rounds(matches: Iterable[Match]) -> list[dict[str, Any]]:
    """Group matches into labelled rounds, ordered by round then match number."""
    by_round: dict[int, list[Match]] = {}
    for match in matches:
        by_round.setdefault(match.round, []).append(match)
    if not by_round:
        return []

    total_rounds = max(by_round)
    rounds = []
    for round_number in sorted(by_round):
        round_matches = sorted(by_round[round_number], key=lambda m: m.match_number)
        rounds.append({
            "round": round_number,
            "label": round_label(round_number, total_rounds),
            "matches": round_matches,
        })
    return rounds
