"""Documentation schemas for camel-cased GitHub user payloads."""
from typing import Optional

from pydantic import BaseModel, Field


class GithubListUser(BaseModel):
    login: str = Field(..., description="The username of the user")
    id: int = Field(..., description="The id of the user")
    node_id: str = Field(..., alias="nodeId", description="The node id of the user")
    avatar_url: str = Field(..., alias="avatarUrl", description="The avatar url of the user")
    gravatar_id: str = Field(..., alias="gravatarId", description="The gravatar id of the user")
    url: str = Field(..., description="The url of the user")
    html_url: str = Field(..., alias="htmlUrl", description="The html url of the user")
    followers_url: str = Field(..., alias="followersUrl", description="The followers url of the user")
    following_url: str = Field(..., alias="followingUrl", description="The following url of the user")
    gists_url: str = Field(..., alias="gistsUrl", description="The gists url of the user")
    starred_url: str = Field(..., alias="starredUrl", description="The starred url of the user")
    subscriptions_url: str = Field(..., alias="subscriptionsUrl", description="The subscriptions url of the user")
    organizations_url: str = Field(..., alias="organizationsUrl", description="The organizations url of the user")
    repos_url: str = Field(..., alias="reposUrl", description="The repos url of the user")
    events_url: str = Field(..., alias="eventsUrl", description="The events url of the user")
    received_events_url: str = Field(..., alias="receivedEventsUrl", description="The received events url of the user")
    type: str = Field(..., description="The type of the user")
    site_admin: bool = Field(..., alias="siteAdmin", description="The site admin status of the user")

    model_config = {"populate_by_name": True}


class GithubUser(GithubListUser):
    name: Optional[str] = Field(..., description="The name of the user")
    email: Optional[str] = Field(..., description="The email of the user")
    company: Optional[str] = Field(None, description="The company of the user")
    blog: Optional[str] = Field(None, description="The blog of the user")
    location: Optional[str] = Field(None, description="The location of the user")


class GithubUserSearch(BaseModel):
    total_count: int = Field(..., alias="totalCount")
    incomplete_results: bool = Field(..., alias="incompleteResults")
    items: list[GithubListUser]

    model_config = {"populate_by_name": True}
