"""Outcast router."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.dependencies import get_outcast
from app.exceptions import UnknownNounError
from app.schemas.taxonomy import OutcastRequest, OutcastResponse
from app.services.outcast_service import Outcast

router = APIRouter(prefix="/outcast", tags=["Outcast"])


@router.post(
    "",
    response_model=OutcastResponse,
    summary="Find the odd noun out",
    description=(
        "Returns the noun whose summed ancestral distance to all the others is "
        "largest. On ties the earliest noun in the list wins."
    ),
)
def find_outcast(
    payload: OutcastRequest,
    finder: Outcast = Depends(get_outcast),
) -> OutcastResponse:
    try:
        result = finder.rank(payload.nouns)
    except UnknownNounError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))

    return OutcastResponse(outcast=result.outcast, distance_sums=result.distance_sums)
