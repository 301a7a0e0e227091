"""Single elimination bracket generation."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Optional

from clubbracket.core.constants import MIN_PARTICIPANTS
from clubbracket.errors import InsufficientParticipantsError

from .models import IdFactory, Match, new_id


class BracketGenerator:
    """Utility class for generating single elimination brackets."""

    MIN_PARTICIPANTS = MIN_PARTICIPANTS

    @staticmethod
    def total_rounds(num_participants: int) -> int:
        """Number of rounds needed to reduce the field to one champion."""
        if num_participants < 2:
            return 0
        return math.ceil(math.log2(num_participants))

    @staticmethod
    def round_sizes(num_participants: int) -> list[int]:
        """Match count of every round, first round first."""
        sizes: list[int] = []
        if num_participants < 2:
            return sizes
        count = math.ceil(num_participants / 2)
        for _ in range(BracketGenerator.total_rounds(num_participants)):
            sizes.append(count)
            count = math.ceil(count / 2)
        return sizes

    @staticmethod
    def generate(
        participants: Sequence[str], id_factory: Optional[IdFactory] = None
    ) -> tuple[Match, ...]:
        """Build every match of the bracket, round-major.

        Round one pairs participants in join order. With an odd field the
        last first-round match keeps an empty ``player2`` slot (a bye).
        Later rounds are placeholders whose slots fill as winners advance.
        """
        if len(participants) < BracketGenerator.MIN_PARTICIPANTS:
            raise InsufficientParticipantsError(
                len(participants), BracketGenerator.MIN_PARTICIPANTS
            )
        make_id = id_factory or new_id

        matches = []
        for i in range(0, len(participants), 2):
            matches.append(
                Match(
                    id=make_id(),
                    round=1,
                    match_number=i // 2 + 1,
                    player1=participants[i],
                    player2=participants[i + 1] if i + 1 < len(participants) else None,
                )
            )

        sizes = BracketGenerator.round_sizes(len(participants))
        for round_num, count in enumerate(sizes[1:], start=2):
            for i in range(count):
                matches.append(Match(id=make_id(), round=round_num, match_number=i + 1))

        return tuple(matches)
