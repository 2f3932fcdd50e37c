"""Validation rule sets for the /api/users endpoints."""
import re

from services.validation import Rule, absent, is_in, is_int, matches, min_length, present

DEFAULT_PER_PAGE = "30"

SORT_FIELDS = ("followers", "repositories", "joined")
SORT_ORDERS = ("asc", "desc")

# alphanumerics and single inner hyphens, 1-39 characters
GITHUB_USERNAME_RE = re.compile(r"[a-z\d](?:[a-z\d]|-(?=[a-z\d])){0,38}", re.IGNORECASE)

LIST_USERS_RULES: tuple[Rule, ...] = (
    Rule(
        parameter="perPage",
        location="query",
        check=is_int(minimum=1, maximum=100),
        message="perPage must be an integer between 1 and 100",
        default=DEFAULT_PER_PAGE,
    ),
    Rule(
        parameter="since",
        location="query",
        check=is_int(minimum=0),
        message="since must be an integer greater than 0",
        guard=absent("search"),
    ),
    Rule(
        parameter="search",
        location="query",
        check=min_length(3),
        message="search must be a string with at least 3 characters",
    ),
    Rule(
        parameter="sort",
        location="query",
        check=is_in(SORT_FIELDS),
        message=f"sort must be one of the following values: {', '.join(SORT_FIELDS)}",
        guard=present("search"),
    ),
    Rule(
        parameter="order",
        location="query",
        check=is_in(SORT_ORDERS),
        message=f"order must be one of the following values: {', '.join(SORT_ORDERS)}",
        guard=present("search"),
    ),
    Rule(
        parameter="page",
        location="query",
        check=is_int(minimum=1),
        message="page must be an integer greater than 0",
        guard=present("search"),
    ),
)

GET_USER_RULES: tuple[Rule, ...] = (
    Rule(
        parameter="username",
        location="path",
        check=matches(GITHUB_USERNAME_RE),
        message="Username must be a valid github username",
        optional=False,
    ),
)
