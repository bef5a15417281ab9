"""Submission routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status

from showcase.application.usecase.submission import (
    CreateSubmissionRequest,
    CreateSubmissionUseCase,
    DeleteSubmissionRequest,
    DeleteSubmissionUseCase,
    GetOwnSubmissionRequest,
    GetOwnSubmissionUseCase,
    GetSubmissionRequest,
    GetSubmissionUseCase,
    GetTopSubmissionsRequest,
    GetTopSubmissionsUseCase,
    SubmissionResponse,
)
from showcase.domain.error import (
    BusinessRuleViolationError,
    DuplicateSubmissionError,
    NotAuthorizedError,
    NotFoundError,
)
from showcase.domain.service import JWTService
from showcase.interface.api.schema import (
    CreateSubmissionBody,
    DeleteSubmissionBody,
    OwnSubmissionBody,
    RankedSubmissionBody,
    SubmissionBody,
    TopSubmissionsBody,
)

router = APIRouter(prefix="/submission", tags=["submissions"], route_class=DishkaRoute)


def _to_body(submission: SubmissionResponse) -> SubmissionBody:
    return SubmissionBody(
        id=submission.submission_id,
        owner_id=submission.owner_id,
        title=submission.title,
        created_at=submission.created_at,
        updated_at=submission.updated_at,
    )


# Fixed paths are registered before /{submission_id}


@router.get("/top", response_model=TopSubmissionsBody)
async def get_top_submissions(
    get_top_submissions_use_case: FromDishka[GetTopSubmissionsUseCase],
    limit: str | None = Query(default=None),
) -> TopSubmissionsBody:
    """Get submissions ranked by vote total.

    Args:
        limit: Number of rows, clamped to 1-100; missing, zero or
            non-numeric values give the default of 10
    """
    try:
        top = await get_top_submissions_use_case.execute(
            GetTopSubmissionsRequest(limit=limit)
        )
    except Exception as e:
        logfire.error("Failed to fetch top submissions", limit=limit, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch top submissions",
        )

    return TopSubmissionsBody(
        submissions=[
            RankedSubmissionBody(
                rank=row.rank,
                id=row.submission_id,
                owner_id=row.owner_id,
                title=row.title,
                total_votes=row.total_votes,
                created_at=row.created_at,
            )
            for row in top.submissions
        ]
    )


@router.get("/me", response_model=OwnSubmissionBody)
async def get_own_submission(
    get_own_submission_use_case: FromDishka[GetOwnSubmissionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> OwnSubmissionBody:
    """Get the caller's submission, if they have one.

    Requires authentication.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        own = await get_own_submission_use_case.execute(
            GetOwnSubmissionRequest(user_id=str(user_id))
        )
    except Exception as e:
        logfire.error("Failed to fetch own submission", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch submission",
        )

    return OwnSubmissionBody(
        submission=_to_body(own.submission) if own.submission else None
    )


@router.post("", response_model=SubmissionBody, status_code=status.HTTP_201_CREATED)
async def create_submission(
    body: CreateSubmissionBody,
    create_submission_use_case: FromDishka[CreateSubmissionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SubmissionBody:
    """Register the caller's submission.

    Requires authentication. Each user may register one submission.

    Raises:
        HTTPException: 401 unauthenticated, 409 already submitted or ID taken,
            422 invalid URL, ID or title
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        request = CreateSubmissionRequest(
            submission_id=body.submission_id,
            url=body.url,
            title=body.title,
            user_id=str(user_id),
        )
        submission = await create_submission_use_case.execute(request)
    except (BusinessRuleViolationError, DuplicateSubmissionError) as e:
        logfire.warn("Submission rejected", user_id=str(user_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    except ValueError as e:
        logfire.warn("Submission validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error creating submission", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create submission",
        )

    return _to_body(submission)


@router.get("/{submission_id}", response_model=SubmissionBody)
async def get_submission(
    submission_id: str,
    get_submission_use_case: FromDishka[GetSubmissionUseCase],
) -> SubmissionBody:
    """Get a submission by ID."""
    try:
        submission = await get_submission_use_case.execute(
            GetSubmissionRequest(submission_id=submission_id)
        )
    except Exception as e:
        logfire.error(
            "Failed to fetch submission", submission_id=submission_id, error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch submission",
        )

    if not submission:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Submission not found",
        )

    return _to_body(submission)


@router.delete("/{submission_id}", response_model=DeleteSubmissionBody)
async def delete_submission(
    submission_id: str,
    delete_submission_use_case: FromDishka[DeleteSubmissionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteSubmissionBody:
    """Delete the caller's own submission together with its votes.

    Raises:
        HTTPException: 401 unauthenticated, 403 not the owner, 404 not found
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        result = await delete_submission_use_case.execute(
            DeleteSubmissionRequest(submission_id=submission_id, user_id=str(user_id))
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Submission not found",
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized submission delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden",
        )
    except Exception as e:
        logfire.error(
            "Failed to delete submission", submission_id=submission_id, error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete submission",
        )

    return DeleteSubmissionBody(success=result.success)
