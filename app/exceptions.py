"""
Custom application exceptions.

Using distinct exception types lets routers map them to the right HTTP status
codes without resorting to string-matching on messages.
"""

from typing import List, Sequence


class NotFoundError(ValueError):
    """Raised when a requested resource does not exist."""


class UnknownNounError(NotFoundError):
    """Raised when a word is not a noun of the loaded taxonomy."""

    def __init__(self, noun: str):
        self.noun = noun
        super().__init__(f"'{noun}' is not a noun of the taxonomy.")


class InvalidArgumentError(ValueError):
    """Raised for a missing, empty or malformed query argument."""


class InvalidVertexError(InvalidArgumentError):
    """Raised when a query names a vertex id outside ``[0, N)``."""


class OutOfRangeError(ValueError):
    """Raised when the graph store is asked about a vertex it does not have."""


class InvalidEdgeError(ValueError):
    """Raised when an edge endpoint lies outside the graph's vertex range."""


class InvalidTaxonomyError(ValueError):
    """Raised when synset / hypernym data does not form a single-rooted DAG."""


class NotAcyclicError(InvalidTaxonomyError):
    """Raised when the hypernym graph contains a directed cycle."""

    def __init__(self, cycle: Sequence[int]):
        self.cycle: List[int] = list(cycle)
        path = " → ".join(str(v) for v in self.cycle)
        super().__init__(f"Hypernym graph is not acyclic: cycle {path}.")


class NotSingleRootedError(InvalidTaxonomyError):
    """Raised when the hypernym graph does not have exactly one root."""

    def __init__(self, sinks: Sequence[int]):
        self.sinks: List[int] = list(sinks)
        if self.sinks:
            shown = ", ".join(str(v) for v in self.sinks[:10])
            more = "" if len(self.sinks) <= 10 else ", ..."
            detail = f"found {len(self.sinks)} roots ({shown}{more})"
        else:
            detail = "found no root"
        super().__init__(f"Hypernym graph must have exactly one root: {detail}.")
