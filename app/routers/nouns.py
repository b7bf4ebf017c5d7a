"""Noun lookup router."""

from fastapi import APIRouter, Depends, Query

from app.config import settings
from app.dependencies import get_wordnet
from app.schemas.taxonomy import NounListResponse, NounResponse
from app.services.wordnet_service import WordNet

router = APIRouter(prefix="/nouns", tags=["Nouns"])


@router.get(
    "",
    response_model=NounListResponse,
    summary="List taxonomy nouns",
    description="Alphabetically sorted page of every distinct noun.",
)
def list_nouns(
    skip: int = Query(default=0, ge=0, description="Offset for pagination"),
    limit: int = Query(
        default=settings.default_page_size,
        ge=1,
        le=settings.max_page_size,
        description="Page size",
    ),
    wordnet: WordNet = Depends(get_wordnet),
) -> NounListResponse:
    nouns = sorted(wordnet.nouns())
    return NounListResponse(total=len(nouns), nouns=nouns[skip: skip + limit])


@router.get(
    "/{word}",
    response_model=NounResponse,
    summary="Is the word a noun?",
    description="Unknown words are reported with ``is_noun: false``, not as an error.",
)
def get_noun(
    word: str,
    wordnet: WordNet = Depends(get_wordnet),
) -> NounResponse:
    if not wordnet.is_noun(word):
        return NounResponse(noun=word, is_noun=False)
    return NounResponse(
        noun=word,
        is_noun=True,
        synset_ids=sorted(wordnet.synset_ids(word)),
    )
