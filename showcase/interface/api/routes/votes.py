"""Vote routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status

from showcase.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetVoteStateRequest,
    GetVoteStateUseCase,
    RevokeVoteRequest,
    RevokeVoteUseCase,
)
from showcase.domain.service import JWTService
from showcase.domain.value import CastOutcome, RevokeOutcome
from showcase.interface.api.schema import CastVoteBody, RevokeVoteBody, VoteStateBody

router = APIRouter(prefix="/submission", tags=["votes"], route_class=DishkaRoute)

# Rejected cast outcomes and the status they map to
CAST_REJECTION_STATUS = {
    CastOutcome.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    CastOutcome.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    CastOutcome.SELF_VOTE: status.HTTP_403_FORBIDDEN,
    CastOutcome.VOTE_LIMIT_REACHED: status.HTTP_429_TOO_MANY_REQUESTS,
}


@router.get("/{submission_id}/vote", response_model=VoteStateBody)
async def get_vote_state(
    submission_id: str,
    get_vote_state_use_case: FromDishka[GetVoteStateUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteStateBody:
    """Get the vote total of a submission and whether the caller voted.

    Works without authentication; anonymous callers always see
    ``hasVoted: false``.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        state = await get_vote_state_use_case.execute(
            GetVoteStateRequest(
                submission_id=submission_id,
                user_id=str(user_id) if user_id else None,
            )
        )
    except Exception as e:
        logfire.error(
            "Failed to fetch vote state", submission_id=submission_id, error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch vote data",
        )

    return VoteStateBody(
        submission_id=state.submission_id,
        has_voted=state.has_voted,
        total_votes=state.total_votes,
    )


@router.post(
    "/{submission_id}/vote",
    response_model=CastVoteBody,
    status_code=status.HTTP_201_CREATED,
)
async def cast_vote(
    submission_id: str,
    response: Response,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteBody:
    """Cast a vote for a submission.

    Requires authentication. Below the vote limit, casting again on a
    submission the caller already voted for is not an error and changes
    nothing.

    Returns:
        201 with ``alreadyVoted: false`` when a vote was recorded,
        200 with ``alreadyVoted: true`` when it already existed

    Raises:
        HTTPException: 401 unauthenticated, 403 own submission,
            404 unknown submission, 429 vote limit reached
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        result = await cast_vote_use_case.execute(
            CastVoteRequest(
                submission_id=submission_id,
                user_id=str(user_id) if user_id else None,
            )
        )
    except Exception as e:
        logfire.error("Failed to cast vote", submission_id=submission_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to cast vote",
        )

    if result.outcome in CAST_REJECTION_STATUS:
        raise HTTPException(
            status_code=CAST_REJECTION_STATUS[result.outcome],
            detail=result.message,
        )

    if result.already_voted:
        response.status_code = status.HTTP_200_OK
    return CastVoteBody(already_voted=result.already_voted)


@router.delete("/{submission_id}/vote", response_model=RevokeVoteBody)
async def revoke_vote(
    submission_id: str,
    revoke_vote_use_case: FromDishka[RevokeVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RevokeVoteBody:
    """Remove the caller's vote from a submission.

    Requires authentication. Removing a vote that does not exist succeeds.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        result = await revoke_vote_use_case.execute(
            RevokeVoteRequest(
                submission_id=submission_id,
                user_id=str(user_id) if user_id else None,
            )
        )
    except Exception as e:
        logfire.error(
            "Failed to remove vote", submission_id=submission_id, error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to remove vote",
        )

    if result.outcome == RevokeOutcome.UNAUTHENTICATED:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=result.message,
        )

    return RevokeVoteBody(ok=True)
