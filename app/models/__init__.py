"""ORM models package."""

from app.models.orm import Hypernym, Synset, SynsetNoun

__all__ = ["Hypernym", "Synset", "SynsetNoun"]
