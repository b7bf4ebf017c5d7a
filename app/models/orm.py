"""SQLAlchemy ORM models for the persisted WordNet taxonomy."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


# ── Synset ────────────────────────────────────────────────────────────────────

class Synset(Base):
    """
    A synonym set, i.e. one vertex of the hypernym DAG.

    The id is the vertex id itself (dense, starting at 0), so it is assigned
    by the importer rather than auto-incremented.
    """

    __tablename__ = "synsets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    gloss: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )

    # ── Relationships ──────────────────────────────────────────────────────
    noun_entries: Mapped[List["SynsetNoun"]] = relationship(
        "SynsetNoun",
        back_populates="synset",
        cascade="all, delete-orphan",
        order_by="SynsetNoun.position",
        lazy="selectin",
    )

    # Edges where this synset is the more specific concept
    hypernym_edges: Mapped[List["Hypernym"]] = relationship(
        "Hypernym",
        foreign_keys="Hypernym.synset_id",
        back_populates="synset",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def nouns(self) -> List[str]:
        return [entry.noun for entry in self.noun_entries]

    @property
    def hypernym_ids(self) -> List[int]:
        return sorted(edge.hypernym_id for edge in self.hypernym_edges)

    def __repr__(self) -> str:
        return f"<Synset id={self.id} nouns={' '.join(self.nouns)!r}>"


# ── SynsetNoun ────────────────────────────────────────────────────────────────

class SynsetNoun(Base):
    """One noun of a synset; ``position`` keeps the original noun order."""

    __tablename__ = "synset_nouns"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    synset_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("synsets.id", ondelete="CASCADE"), nullable=False
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    noun: Mapped[str] = mapped_column(String(255), nullable=False)

    synset: Mapped["Synset"] = relationship("Synset", back_populates="noun_entries")

    __table_args__ = (
        UniqueConstraint("synset_id", "position", name="uq_synset_noun_position"),
        Index("ix_synset_noun", "noun"),  # noun → synset lookups
    )

    def __repr__(self) -> str:
        return f"<SynsetNoun {self.synset_id}:{self.noun}>"


# ── Hypernym ──────────────────────────────────────────────────────────────────

class Hypernym(Base):
    """
    Directed edge in the hypernym DAG.

        synset ──is-a──► hypernym

    Self-loops are never stored; the importer drops them.
    """

    __tablename__ = "hypernyms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    synset_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("synsets.id", ondelete="CASCADE"), nullable=False
    )
    hypernym_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("synsets.id", ondelete="CASCADE"), nullable=False
    )

    synset: Mapped["Synset"] = relationship(
        "Synset", foreign_keys=[synset_id], back_populates="hypernym_edges"
    )

    __table_args__ = (
        UniqueConstraint("synset_id", "hypernym_id", name="uq_hypernym_edge"),
        Index("ix_hypernym_synset", "synset_id"),
        Index("ix_hypernym_hypernym", "hypernym_id"),
    )

    def __repr__(self) -> str:
        return f"<Hypernym {self.synset_id} → {self.hypernym_id}>"
