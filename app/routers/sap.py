"""Shortest ancestral path router."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.dependencies import get_wordnet
from app.exceptions import InvalidArgumentError, UnknownNounError
from app.schemas.taxonomy import AncestralPathResponse, VertexPathResponse
from app.services.wordnet_service import WordNet

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sap", tags=["Ancestral paths"])


@router.get(
    "",
    response_model=AncestralPathResponse,
    summary="Distance and nearest common ancestor of two nouns",
    description=(
        "Every synset containing a noun takes part in the search. "
        "Among equally near ancestors the one with the lowest synset id is reported."
    ),
)
def noun_path(
    noun_a: str = Query(..., min_length=1),
    noun_b: str = Query(..., min_length=1),
    wordnet: WordNet = Depends(get_wordnet),
) -> AncestralPathResponse:
    try:
        path = wordnet.ancestral_path(noun_a, noun_b)
    except UnknownNounError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))

    return AncestralPathResponse(
        noun_a=noun_a,
        noun_b=noun_b,
        distance=path.distance,
        ancestor_id=path.ancestor_id,
        ancestor=path.ancestor,
    )


@router.get(
    "/vertices",
    response_model=VertexPathResponse,
    summary="Shortest ancestral path between vertex sets",
    description="Repeat ``v`` and ``w`` to query sets, e.g. ``?v=3&v=7&w=11``.",
)
def vertex_path(
    v: List[int] = Query(..., description="Source vertex ids"),
    w: List[int] = Query(..., description="Target vertex ids"),
    wordnet: WordNet = Depends(get_wordnet),
) -> VertexPathResponse:
    try:
        result = wordnet.engine.search(v, w)
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))

    return VertexPathResponse(v=v, w=w, length=result.length, ancestor=result.ancestor)
