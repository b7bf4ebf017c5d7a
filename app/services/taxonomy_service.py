"""
Taxonomy service — persists synsets / hypernyms and builds the WordNet index.

An import is validated in memory first: the payload must build a valid
``WordNet`` before any row is written, so a rejected taxonomy leaves the
stored one untouched.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from app.models.orm import Hypernym, Synset, SynsetNoun
from app.schemas.taxonomy import TaxonomyImport, TaxonomySummary
from app.services.wordnet_service import HypernymRecord, SynsetRecord, WordNet

logger = logging.getLogger(__name__)


def import_taxonomy(db: Session, payload: TaxonomyImport) -> WordNet:
    """
    Replace the stored taxonomy with ``payload`` and return its index.

    Raises
    ------
    InvalidTaxonomyError
        If the payload is not a dense, single-rooted hypernym DAG.
        Nothing is written in that case.
    """
    wordnet = WordNet(payload.synsets, payload.hypernyms)

    db.execute(delete(Hypernym))
    db.execute(delete(SynsetNoun))
    db.execute(delete(Synset))

    db.add_all(
        Synset(
            id=record.id,
            gloss=record.gloss,
            noun_entries=[
                SynsetNoun(position=i, noun=noun) for i, noun in enumerate(record.nouns)
            ],
        )
        for record in payload.synsets
    )
    # Flush synsets first so the hypernym foreign keys resolve.
    db.flush()
    db.add_all(
        Hypernym(synset_id=v, hypernym_id=w) for v, w in wordnet.graph.edges()
    )
    db.commit()

    logger.info(
        "Imported taxonomy: %d synsets, %d hypernym edges",
        wordnet.synset_count, wordnet.edge_count,
    )
    return wordnet


def load_wordnet(db: Session) -> Optional[WordNet]:
    """
    Build a WordNet from the stored taxonomy.

    Returns
    -------
    WordNet or None
        None when nothing has been imported yet.

    Raises
    ------
    InvalidTaxonomyError
        If the stored rows do not form a valid taxonomy.
    """
    synsets = db.scalars(select(Synset).order_by(Synset.id)).all()
    if not synsets:
        logger.info("No stored taxonomy to load.")
        return None

    hypernyms: Dict[int, List[int]] = defaultdict(list)
    for synset_id, hypernym_id in db.execute(
        select(Hypernym.synset_id, Hypernym.hypernym_id)
    ):
        hypernyms[synset_id].append(hypernym_id)

    wordnet = WordNet(
        (SynsetRecord(s.id, tuple(s.nouns), s.gloss or "") for s in synsets),
        (HypernymRecord(v, tuple(ws)) for v, ws in hypernyms.items()),
    )
    logger.info("Loaded stored taxonomy: %r", wordnet)
    return wordnet


def get_synset(db: Session, synset_id: int) -> Synset:
    """
    Return a stored synset by id.

    Raises
    ------
    NotFoundError
        If no synset has this id.
    """
    synset = db.get(Synset, synset_id)
    if synset is None:
        raise NotFoundError(f"Synset {synset_id} not found.")
    return synset


def summarize(wordnet: WordNet) -> TaxonomySummary:
    """Counts and root of an active taxonomy."""
    return TaxonomySummary(
        synset_count=wordnet.synset_count,
        noun_count=wordnet.noun_count,
        edge_count=wordnet.edge_count,
        root_id=wordnet.root,
        root=wordnet.synset(wordnet.root).display,
    )
