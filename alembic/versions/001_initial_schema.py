"""Initial schema — synsets, synset_nouns, hypernyms

Revision ID: 001
Revises: 
Create Date: 2026-10-18
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ── synsets ───────────────────────────────────────────────────────────────
    op.create_table(
        "synsets",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("gloss", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # ── synset_nouns ──────────────────────────────────────────────────────────
    op.create_table(
        "synset_nouns",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("synset_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("noun", sa.String(255), nullable=False),
        sa.ForeignKeyConstraint(["synset_id"], ["synsets.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("synset_id", "position", name="uq_synset_noun_position"),
    )
    op.create_index("ix_synset_noun", "synset_nouns", ["noun"])

    # ── hypernyms ─────────────────────────────────────────────────────────────
    op.create_table(
        "hypernyms",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("synset_id", sa.Integer(), nullable=False),
        sa.Column("hypernym_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["synset_id"], ["synsets.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["hypernym_id"], ["synsets.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("synset_id", "hypernym_id", name="uq_hypernym_edge"),
    )
    op.create_index("ix_hypernym_synset", "hypernyms", ["synset_id"])
    op.create_index("ix_hypernym_hypernym", "hypernyms", ["hypernym_id"])


def downgrade() -> None:
    op.drop_index("ix_hypernym_hypernym", table_name="hypernyms")
    op.drop_index("ix_hypernym_synset", table_name="hypernyms")
    op.drop_table("hypernyms")
    op.drop_index("ix_synset_noun", table_name="synset_nouns")
    op.drop_table("synset_nouns")
    op.drop_table("synsets")
