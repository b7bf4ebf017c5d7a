"""
Outcast service — find the odd one out in a list of nouns.

For nouns ``x_1 .. x_k`` the outcast is the ``x_i`` maximising

    d_i = Σ_j distance(x_i, x_j)

Ties go to the earliest noun in input order.  This costs O(k²) SAP queries;
``distance`` is symmetric, so each unordered pair is computed once.
"""

import logging
from typing import Iterable, List, NamedTuple

from app.exceptions import InvalidArgumentError
from app.services.wordnet_service import WordNet

logger = logging.getLogger(__name__)


class OutcastResult(NamedTuple):
    outcast: str
    distance_sums: List[int]


class Outcast:
    """Outcast detection over a fully built ``WordNet``."""

    def __init__(self, wordnet: WordNet):
        self._wordnet = wordnet

    def outcast(self, nouns: Iterable[str]) -> str:
        """Return the noun with the greatest distance sum (first one on ties)."""
        return self.rank(nouns).outcast

    def distance_sums(self, nouns: Iterable[str]) -> List[int]:
        """Return ``d_i`` for every noun, in input order."""
        return self.rank(nouns).distance_sums

    def rank(self, nouns: Iterable[str]) -> OutcastResult:
        """
        Compute every noun's distance sum and pick the outcast.

        Raises
        ------
        InvalidArgumentError
            If ``nouns`` is None or empty.
        UnknownNounError
            If any noun is not in the taxonomy.
        """
        nouns = list(nouns or ())
        if not nouns:
            raise InvalidArgumentError("Outcast needs at least one noun.")

        # Fail on the first unknown noun before spending any SAP queries.
        for noun in nouns:
            self._wordnet.synset_ids(noun)

        sums = [0] * len(nouns)
        for i in range(len(nouns)):
            for j in range(i + 1, len(nouns)):
                d = self._wordnet.distance(nouns[i], nouns[j])
                sums[i] += d
                sums[j] += d

        best = 0
        for i, total in enumerate(sums):
            if total > sums[best]:
                best = i

        logger.debug("Outcast of %s → %r (sums=%s)", nouns, nouns[best], sums)
        return OutcastResult(outcast=nouns[best], distance_sums=sums)
