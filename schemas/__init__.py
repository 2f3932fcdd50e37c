from schemas.errors import ErrorList, ErrorMessage, ValidationErrorItem
from schemas.user import GithubListUser, GithubUser, GithubUserSearch

__all__ = [
    "ErrorList",
    "ErrorMessage",
    "ValidationErrorItem",
    "GithubListUser",
    "GithubUser",
    "GithubUserSearch",
]
