from __future__ import annotations

import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends, Path, Query, Request
from fastapi.responses import JSONResponse

from schemas import ErrorList, ErrorMessage, GithubListUser, GithubUser, GithubUserSearch
from services.github_client import GitHubClient, UpstreamError, UpstreamNotFoundError, UpstreamResponse
from services.user_rules import GET_USER_RULES, LIST_USERS_RULES
from services.validation import ValidationFailure, apply_defaults, validate
from utils.case import dict_keys_to_camel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["Users"])

MSG_USER_NOT_FOUND = "User not found"
MSG_SOMETHING_WENT_WRONG = "Something went wrong"


def get_github_client(request: Request) -> GitHubClient:
    return request.app.state.github_client


def _present(**params: Optional[str]) -> dict[str, str]:
    """Keep only the parameters the caller actually sent."""
    return {k: v for k, v in params.items() if v is not None}


def _validation_error(failures: list[ValidationFailure]) -> JSONResponse:
    return JSONResponse(status_code=400, content={"errors": [f.to_dict() for f in failures]})


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _camel_response(upstream: UpstreamResponse) -> JSONResponse:
    return JSONResponse(status_code=upstream.status_code, content=dict_keys_to_camel(upstream.body))


@router.get(
    "",
    summary="Get a list of users from GitHub",
    description=(
        "Retrieve a list of users from GitHub, the results are paginated and the default page size is 30 users. "
        "When `search` is given, GitHub's user search is used instead and `sort`, `order` and `page` apply."
    ),
    responses={
        200: {"model": Union[list[GithubListUser], GithubUserSearch], "description": "A list of users"},
        400: {"model": ErrorList, "description": "Bad request"},
        500: {"model": ErrorMessage, "description": "GitHub could not be reached or failed"},
    },
)
async def list_users(
    per_page: Optional[str] = Query(None, alias="perPage", description="Results per page (1-100, default 30)"),
    since: Optional[str] = Query(None, description="The integer ID of the last User that you've seen."),
    search: Optional[str] = Query(
        None,
        description="A search term. This can be any word or even a phrase. GitHub will search all users for this value.",
    ),
    sort: Optional[str] = Query(
        None,
        description="The sort field. One of followers, repositories, or joined. By default results are sorted by best match.",
    ),
    order: Optional[str] = Query(
        None, description="The sort order if sort parameter is provided. One of asc or desc. By default desc."
    ),
    page: Optional[str] = Query(None, description="Page number of the results to fetch."),
    github: GitHubClient = Depends(get_github_client),
):
    params = _present(perPage=per_page, since=since, search=search, sort=sort, order=order, page=page)
    failures = validate(LIST_USERS_RULES, params)
    if failures:
        return _validation_error(failures)
    params = apply_defaults(LIST_USERS_RULES, params)

    try:
        if "search" in params:
            upstream = await github.search_users(
                params["search"],
                sort=params.get("sort"),
                order=params.get("order"),
                page=params.get("page"),
                per_page=params.get("perPage"),
            )
        else:
            upstream = await github.list_users(since=params.get("since"), per_page=params.get("perPage"))
    except UpstreamError:
        logger.exception("Listing users failed")
        return _error(500, MSG_SOMETHING_WENT_WRONG)
    return _camel_response(upstream)


@router.get(
    "/{username}",
    summary="Get a user from GitHub",
    description="Retrieve a user from GitHub",
    responses={
        200: {"model": GithubUser, "description": "A user"},
        400: {"model": ErrorList, "description": "Bad request when the username is not valid"},
        404: {"model": ErrorMessage, "description": "Not found when the user does not exist"},
        500: {"model": ErrorMessage, "description": "GitHub could not be reached or failed"},
    },
)
async def get_user(
    username: str = Path(..., description="The username of the user"),
    github: GitHubClient = Depends(get_github_client),
):
    failures = validate(GET_USER_RULES, {"username": username})
    if failures:
        return _validation_error(failures)

    try:
        upstream = await github.get_user(username)
    except UpstreamNotFoundError:
        logger.info("GitHub user %s not found", username, extra={"username": username})
        return _error(404, MSG_USER_NOT_FOUND)
    except UpstreamError:
        logger.exception("Fetching user %s failed", username, extra={"username": username})
        return _error(500, MSG_SOMETHING_WENT_WRONG)
    return _camel_response(upstream)
