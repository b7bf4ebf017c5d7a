"""Taxonomy import / inspection router."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_wordnet
from app.exceptions import InvalidTaxonomyError, NotFoundError
from app.schemas.taxonomy import SynsetResponse, TaxonomyImport, TaxonomySummary
from app.services import taxonomy_service
from app.services.wordnet_service import WordNet

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/taxonomy", tags=["Taxonomy"])


@router.post(
    "",
    response_model=TaxonomySummary,
    status_code=status.HTTP_201_CREATED,
    summary="Import a taxonomy",
    description=(
        "Replace the stored taxonomy with the given synsets and hypernym edges "
        "and make it the active one. Synset ids must run 0..N-1 in order. "
        "The hypernym graph must be a DAG with exactly one root; otherwise the "
        "import is rejected and the current taxonomy stays active."
    ),
)
def import_taxonomy(
    payload: TaxonomyImport,
    request: Request,
    db: Session = Depends(get_db),
) -> TaxonomySummary:
    try:
        wordnet = taxonomy_service.import_taxonomy(db, payload)
    except InvalidTaxonomyError as exc:
        logger.warning("Rejected taxonomy import: %s", exc)
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))

    request.app.state.wordnet = wordnet
    return taxonomy_service.summarize(wordnet)


@router.get(
    "",
    response_model=TaxonomySummary,
    summary="Describe the active taxonomy",
)
def get_taxonomy(wordnet: WordNet = Depends(get_wordnet)) -> TaxonomySummary:
    return taxonomy_service.summarize(wordnet)


@router.get(
    "/synsets/{synset_id}",
    response_model=SynsetResponse,
    summary="Get a stored synset",
    description="Return a synset's nouns, gloss and direct hypernym ids.",
)
def get_synset(
    synset_id: int,
    db: Session = Depends(get_db),
) -> SynsetResponse:
    try:
        return SynsetResponse.model_validate(taxonomy_service.get_synset(db, synset_id))
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
