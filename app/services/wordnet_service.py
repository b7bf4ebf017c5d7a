"""
WordNet taxonomy index — nouns, synsets and the hypernym DAG.

Construction builds the hypernym graph, validates it as a single-rooted DAG
and wires a SAP engine over it.  Any failure aborts construction with
``InvalidTaxonomyError``; there is no partially built index.

A noun may belong to several synsets, so noun queries are multi-source SAP
queries over *all* of a noun's synset ids on each side.
"""

import logging
from collections import defaultdict
from typing import Dict, FrozenSet, Iterable, List, NamedTuple, Set, Tuple

from app.exceptions import (
    InvalidArgumentError,
    InvalidEdgeError,
    InvalidTaxonomyError,
    OutOfRangeError,
    UnknownNounError,
)
from app.services.sap_service import ShortestAncestralPath
from app.utils.graph import Digraph, validate_rooted_dag

logger = logging.getLogger(__name__)


class SynsetRecord(NamedTuple):
    """One synonym set: vertex id, its nouns, and a free-text gloss."""

    id: int
    nouns: Tuple[str, ...]
    gloss: str = ""

    @property
    def display(self) -> str:
        """Space-separated nouns, as reported for an ancestor."""
        return " ".join(self.nouns)


class HypernymRecord(NamedTuple):
    """Edges ``synset_id → h`` for every ``h`` in ``hypernym_ids``."""

    synset_id: int
    hypernym_ids: Tuple[int, ...]


class NounPath(NamedTuple):
    """Distance between two nouns and the synset where their paths meet."""

    distance: int
    ancestor_id: int
    ancestor: str


def _as_synset(record) -> SynsetRecord:
    """Accept a SynsetRecord, a plain ``(id, nouns[, gloss])`` tuple, or any
    object exposing ``id`` / ``nouns`` / ``gloss`` (ORM rows, pydantic models)."""
    if isinstance(record, tuple):
        synset_id, nouns, *rest = record
        gloss = rest[0] if rest else ""
    else:
        synset_id, nouns, gloss = record.id, record.nouns, getattr(record, "gloss", "")
    return SynsetRecord(synset_id, tuple(nouns), gloss or "")


def _as_hypernym(record) -> HypernymRecord:
    if isinstance(record, tuple):
        synset_id, hypernym_ids = record
    else:
        synset_id, hypernym_ids = record.synset_id, record.hypernym_ids
    return HypernymRecord(synset_id, tuple(hypernym_ids))


class WordNet:
    """
    Noun-level SAP queries over a validated hypernym taxonomy.

    Parameters
    ----------
    synsets:
        Synset records in vertex order; the i-th record must have id ``i``.
    hypernyms:
        Hypernym records.  Self-loops (``h == synset_id``) are dropped.

    Raises
    ------
    InvalidTaxonomyError
        If ids are not dense, a synset has no nouns, an edge points outside
        the synset range, or the graph is not a single-rooted DAG.
    """

    def __init__(self, synsets: Iterable, hypernyms: Iterable = ()):
        self._synsets: List[SynsetRecord] = []
        index: Dict[str, Set[int]] = defaultdict(set)

        for position, raw in enumerate(synsets):
            record = _as_synset(raw)
            if record.id != position:
                raise InvalidTaxonomyError(
                    f"Synset ids must be dense and ordered from 0: "
                    f"expected id {position}, got {record.id}."
                )
            if not record.nouns:
                raise InvalidTaxonomyError(f"Synset {record.id} has no nouns.")
            self._synsets.append(record)
            for noun in record.nouns:
                index[noun].add(record.id)

        self._index: Dict[str, FrozenSet[int]] = {
            noun: frozenset(ids) for noun, ids in index.items()
        }

        edges = [
            (rec.synset_id, h)
            for rec in map(_as_hypernym, hypernyms)
            for h in rec.hypernym_ids
            if h != rec.synset_id
        ]
        try:
            graph = Digraph(len(self._synsets), edges)
        except InvalidEdgeError as exc:
            raise InvalidTaxonomyError(str(exc)) from exc

        self._root = validate_rooted_dag(graph)
        self._graph = graph
        self._sap = ShortestAncestralPath(graph)

        logger.info(
            "WordNet built: %d synsets, %d nouns, %d hypernym edges, root=%d (%s)",
            len(self._synsets), len(self._index), graph.edge_count,
            self._root, self._synsets[self._root].display,
        )

    # ── Introspection ──────────────────────────────────────────────────────

    @property
    def graph(self) -> Digraph:
        return self._graph

    @property
    def engine(self) -> ShortestAncestralPath:
        return self._sap

    @property
    def root(self) -> int:
        return self._root

    @property
    def synset_count(self) -> int:
        return len(self._synsets)

    @property
    def noun_count(self) -> int:
        return len(self._index)

    @property
    def edge_count(self) -> int:
        return self._graph.edge_count

    def synset(self, synset_id: int) -> SynsetRecord:
        if not 0 <= synset_id < len(self._synsets):
            raise OutOfRangeError(
                f"Synset {synset_id} is outside [0, {len(self._synsets)})."
            )
        return self._synsets[synset_id]

    # ── Noun queries ───────────────────────────────────────────────────────

    def nouns(self) -> FrozenSet[str]:
        """All distinct nouns of the taxonomy."""
        return frozenset(self._index)

    def is_noun(self, word: str) -> bool:
        if word is None:
            raise InvalidArgumentError("Word must not be None.")
        return word in self._index

    def synset_ids(self, noun: str) -> FrozenSet[int]:
        """Ids of every synset containing ``noun``."""
        if not self.is_noun(noun):
            raise UnknownNounError(noun)
        return self._index[noun]

    def distance(self, noun_a: str, noun_b: str) -> int:
        """Length of the shortest ancestral path between two nouns."""
        return self.ancestral_path(noun_a, noun_b).distance

    def sap(self, noun_a: str, noun_b: str) -> str:
        """Display string of the nearest common ancestor synset."""
        return self.ancestral_path(noun_a, noun_b).ancestor

    def ancestral_path(self, noun_a: str, noun_b: str) -> NounPath:
        """Answer ``distance`` and ``sap`` together with a single search."""
        ids_a = self.synset_ids(noun_a)
        ids_b = self.synset_ids(noun_b)
        result = self._sap.search(ids_a, ids_b)
        if not result.exists:
            # Unreachable on a validated graph: the root is a common ancestor.
            raise RuntimeError(
                f"No common ancestor for '{noun_a}' and '{noun_b}'."
            )
        return NounPath(
            distance=result.length,
            ancestor_id=result.ancestor,
            ancestor=self._synsets[result.ancestor].display,
        )

    def __repr__(self) -> str:
        return (
            f"<WordNet synsets={self.synset_count} nouns={self.noun_count} "
            f"root={self._root}>"
        )

