"""Pydantic schemas package."""

from app.schemas.taxonomy import (
    AncestralPathResponse,
    HypernymCreate,
    NounListResponse,
    NounResponse,
    OutcastRequest,
    OutcastResponse,
    SynsetCreate,
    SynsetResponse,
    TaxonomyImport,
    TaxonomySummary,
    VertexPathResponse,
)

__all__ = [
    "AncestralPathResponse",
    "HypernymCreate",
    "NounListResponse",
    "NounResponse",
    "OutcastRequest",
    "OutcastResponse",
    "SynsetCreate",
    "SynsetResponse",
    "TaxonomyImport",
    "TaxonomySummary",
    "VertexPathResponse",
]
