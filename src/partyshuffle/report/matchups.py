"""Random head-to-head pairing of parties."""

from __future__ import annotations

import logging
import random
from typing import List, Sequence, Tuple

from partyshuffle.models import Team


logger = logging.getLogger(__name__)


def generate_matchups(teams: Sequence[Team], rng: random.Random) -> List[Tuple[Team, Team]]:
    """Shuffle a copy of ``teams`` and pair consecutive entries.

    With an odd party count the trailing party sits out.
    """

    shuffled = list(teams)
    rng.shuffle(shuffled)

    if len(shuffled) % 2 == 1:
        bye = shuffled[-1]
        logger.warning(
            "Odd party count (%s); %s sits out this round",
            len(shuffled),
            " / ".join(member.name for member in bye.members),
        )

    return [(shuffled[i], shuffled[i + 1]) for i in range(0, len(shuffled) - 1, 2)]
