"""
Pydantic v2 request / response schemas for the WordNet service.

Follows the project-wide pattern of strict validation, Field constraints,
and model_config with json_schema_extra examples.
"""

from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.config import settings

# Same limit as synset_nouns.noun (String(255))
Noun = Annotated[str, Field(max_length=255)]


# ── Import payload ────────────────────────────────────────────────────────────

class SynsetCreate(BaseModel):
    """One synset record: dense vertex id, its nouns, and a gloss."""

    id: int = Field(..., ge=0, description="Vertex id; ids must run 0..N-1 in order")
    nouns: List[Noun] = Field(..., min_length=1, description="Nouns of the synset")
    gloss: str = Field(default="", description="Free-text definition")

    @field_validator("nouns")
    @classmethod
    def check_nouns(cls, v: List[str]) -> List[str]:
        nouns = [noun.strip() for noun in v]
        for noun in nouns:
            if not noun:
                raise ValueError("Nouns must not be blank.")
            if "," in noun or any(ch.isspace() for ch in noun):
                raise ValueError(
                    f"Noun '{noun}' must not contain commas or whitespace "
                    "(use underscores for collocations, e.g. 'sea_bass')."
                )
        return nouns


class HypernymCreate(BaseModel):
    """Hypernym edges ``synset_id → h`` for each ``h`` in ``hypernym_ids``."""

    synset_id: int = Field(..., ge=0)
    hypernym_ids: List[int] = Field(default_factory=list)


class TaxonomyImport(BaseModel):
    """
    Full taxonomy upload.  Replaces whatever taxonomy is currently stored.

    Example::

        {
            "synsets": [
                {"id": 0, "nouns": ["entity"], "gloss": "that which exists"},
                {"id": 1, "nouns": ["animal", "beast"], "gloss": "a living organism"},
                {"id": 2, "nouns": ["dog"], "gloss": "a domesticated canid"}
            ],
            "hypernyms": [
                {"synset_id": 1, "hypernym_ids": [0]},
                {"synset_id": 2, "hypernym_ids": [1]}
            ]
        }
    """

    synsets: List[SynsetCreate] = Field(..., min_length=1)
    hypernyms: List[HypernymCreate] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "synsets": [
                        {"id": 0, "nouns": ["entity"], "gloss": "that which exists"},
                        {"id": 1, "nouns": ["animal", "beast"], "gloss": "a living organism"},
                        {"id": 2, "nouns": ["dog"], "gloss": "a domesticated canid"},
                    ],
                    "hypernyms": [
                        {"synset_id": 1, "hypernym_ids": [0]},
                        {"synset_id": 2, "hypernym_ids": [1]},
                    ],
                }
            ]
        }
    )


# ── Taxonomy responses ────────────────────────────────────────────────────────

class TaxonomySummary(BaseModel):
    """Shape of the active taxonomy."""

    synset_count: int
    noun_count: int
    edge_count: int
    root_id: int
    root: str = Field(description="Display string of the root synset")


class SynsetResponse(BaseModel):
    """A stored synset with its outgoing hypernym edges."""

    id: int
    nouns: List[str]
    gloss: Optional[str]
    hypernym_ids: List[int]

    model_config = ConfigDict(from_attributes=True)


# ── Noun schemas ──────────────────────────────────────────────────────────────

class NounResponse(BaseModel):
    """Membership of a single word in the taxonomy."""

    noun: str
    is_noun: bool
    synset_ids: List[int] = Field(default_factory=list)


class NounListResponse(BaseModel):
    """Sorted page of taxonomy nouns."""

    total: int
    nouns: List[str]


# ── SAP schemas ───────────────────────────────────────────────────────────────

class AncestralPathResponse(BaseModel):
    """Shortest ancestral path between two nouns."""

    noun_a: str
    noun_b: str
    distance: int
    ancestor_id: int
    ancestor: str = Field(description="Display string of the nearest common ancestor synset")


class VertexPathResponse(BaseModel):
    """Shortest ancestral path between two vertex sets (-1 means no path)."""

    v: List[int]
    w: List[int]
    length: int
    ancestor: int


# ── Outcast schemas ───────────────────────────────────────────────────────────

class OutcastRequest(BaseModel):
    """
    Nouns to compare.

    Example::

        {"nouns": ["horse", "zebra", "cat", "bear", "table"]}
    """

    nouns: List[str] = Field(..., min_length=1, max_length=settings.max_outcast_nouns)

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"nouns": ["horse", "zebra", "cat", "bear", "table"]}]}
    )


class OutcastResponse(BaseModel):
    """The outcast and each noun's summed distance to the others (input order)."""

    outcast: str
    distance_sums: List[int]
