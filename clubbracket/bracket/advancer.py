"""Winner recording and advancement through a single elimination bracket."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from typing import Optional

from clubbracket.errors import (
    InvalidWinnerError,
    MatchNotFoundError,
    MatchNotReadyError,
)

from .models import Match

MatchKey = tuple[int, int]


class MatchAdvancer:
    """Records match winners and moves them into the following round."""

    @staticmethod
    def _index(matches: Sequence[Match]) -> dict[MatchKey, Match]:
        return {(m.round, m.match_number): m for m in matches}

    @staticmethod
    def target_of(match: Match) -> tuple[MatchKey, str]:
        """Key of the next-round match fed by ``match`` and the slot it fills.

        Odd match numbers feed ``player1``, even ones ``player2``.
        """
        key = (match.round + 1, (match.match_number - 1) // 2 + 1)
        slot = "player1" if match.match_number % 2 == 1 else "player2"
        return key, slot

    @staticmethod
    def fed_slots(index: dict[MatchKey, Match], match: Match) -> tuple[bool, bool]:
        """Which of the two slots will ever hold a player."""
        if match.round == 1:
            return match.player1 is not None, match.player2 is not None
        previous = match.round - 1
        return (
            (previous, 2 * match.match_number - 1) in index,
            (previous, 2 * match.match_number) in index,
        )

    @staticmethod
    def is_ready(matches: Sequence[Match], match: Match) -> bool:
        """True when every slot the bracket feeds is filled."""
        index = MatchAdvancer._index(matches)
        feeds_p1, feeds_p2 = MatchAdvancer.fed_slots(index, match)
        if feeds_p1 and match.player1 is None:
            return False
        if feeds_p2 and match.player2 is None:
            return False
        return bool(match.players)

    @staticmethod
    def _place(
        index: dict[MatchKey, Match], source: Match, occupant: Optional[str]
    ) -> None:
        """Seat ``occupant`` downstream of ``source``, undoing stale results."""
        key, slot = MatchAdvancer.target_of(source)
        target = index.get(key)
        if target is None:
            return
        previous = getattr(target, slot)
        if previous == occupant:
            return

        if target.winner is not None and target.winner == previous:
            # The old occupant's win no longer stands; clear it and its seat.
            cleared = replace(target, **{slot: occupant, "winner": None})
            index[key] = cleared
            MatchAdvancer._place(index, cleared, None)
        else:
            index[key] = replace(target, **{slot: occupant})

    @staticmethod
    def record_winner(
        matches: Sequence[Match], match_id: str, winner: str
    ) -> tuple[Match, ...]:
        """Return a new bracket with ``winner`` recorded for ``match_id``.

        Recording on an already decided match overwrites the result. The
        input sequence is never modified.
        """
        match = next((m for m in matches if m.id == match_id), None)
        if match is None:
            raise MatchNotFoundError(match_id)
        if winner is None or winner not in match.players:
            raise InvalidWinnerError(winner, match_id)
        if not MatchAdvancer.is_ready(matches, match):
            raise MatchNotReadyError(match_id)

        index = MatchAdvancer._index(matches)
        decided = replace(match, winner=winner)
        index[(match.round, match.match_number)] = decided
        MatchAdvancer._place(index, decided, winner)

        return tuple(index[(m.round, m.match_number)] for m in matches)

    @staticmethod
    def champion(matches: Sequence[Match]) -> Optional[str]:
        """Winner of the final match, if it has been played."""
        if not matches:
            return None
        total_rounds = max(m.round for m in matches)
        finals = [m for m in matches if m.round == total_rounds]
        if len(finals) != 1:
            return None
        return finals[0].winner
