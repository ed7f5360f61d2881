"""Vote routes."""

from typing import Literal

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, Request, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field

from board.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from board.domain.error import NotFoundError, StoreError
from board.domain.service import JWTService
from board.domain.value import VoteType

router = APIRouter(tags=["votes"], route_class=DishkaRoute)

STORE_ERROR_DETAIL = "Could not register your vote at this time. Please try later."


class PostVotePayload(BaseModel):
    """Body of a vote request."""

    model_config = ConfigDict(populate_by_name=True)

    post_id: str = Field(alias="postId", min_length=1)
    vote_type: Literal["UP", "DOWN"] = Field(alias="voteType")


def _bearer_token(authorization: str | None) -> str | None:
    if authorization and authorization.lower().startswith("bearer "):
        return authorization[7:].strip() or None
    return None


@router.patch("/api/subreddit/post/vote", response_class=PlainTextResponse)
async def vote_on_post(
    request: Request,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PlainTextResponse:
    """Cast, flip or withdraw the caller's vote on a post.

    Voting the same direction twice removes the vote; voting the other
    direction flips it. The body is validated before authentication.

    Args:
        request: Raw request, body is ``{"postId": ..., "voteType": "UP"|"DOWN"}``
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Optional ``Bearer`` token header

    Returns:
        Plain ``OK`` acknowledgement

    Raises:
        HTTPException: 400 on a malformed body, 401 if not authenticated,
            404 if the post does not exist, 500 if a store operation fails
    """
    try:
        payload = PostVotePayload.model_validate(await request.json())
    except ValueError as e:
        # Covers undecodable bytes, invalid JSON and pydantic validation failures
        logfire.warn("Invalid vote payload", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    # Verify authentication and get user ID
    user_id = jwt_service.authenticated_user_id(
        auth_token or _bearer_token(authorization)
    )
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )

    try:
        result = await cast_vote_use_case.execute(
            CastVoteRequest(
                post_id=payload.post_id,
                vote_type=VoteType(payload.vote_type),
                user_id=user_id,
            )
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{e.resource} not found",
        )
    except StoreError as e:
        logfire.error(
            "Vote request failed",
            post_id=payload.post_id,
            user_id=user_id,
            error=str(e),
            cause=repr(e.__cause__),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=STORE_ERROR_DETAIL,
        )

    logfire.info(
        "Vote registered",
        post_id=result.post_id,
        user_id=user_id,
        action=result.action.value,
        score=result.score,
        cached=result.cached,
    )

    return PlainTextResponse("OK")
