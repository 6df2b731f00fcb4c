from typing import List, Optional

from pydantic import Field  # type: ignore

from vendor_clients.models.base import ApiModel


class SimpleUser(ApiModel):
    id: int
    login: str
    node_id: Optional[str] = None
    type: Optional[str] = None
    site_admin: bool = False
    avatar_url: Optional[str] = None
    html_url: Optional[str] = None
    url: Optional[str] = None


class PrivateUser(SimpleUser):
    name: Optional[str] = None
    email: Optional[str] = None
    company: Optional[str] = None
    bio: Optional[str] = None
    public_repos: int = 0
    followers: int = 0
    following: int = 0
    created_at: Optional[str] = None


class Label(ApiModel):
    id: Optional[int] = None
    name: str
    color: Optional[str] = None
    description: Optional[str] = None


class Milestone(ApiModel):
    id: int
    number: int
    title: str
    state: Optional[str] = None


class Repository(ApiModel):
    id: int
    name: str
    full_name: str
    owner: SimpleUser
    private: bool = False
    description: Optional[str] = None
    fork: bool = False
    default_branch: Optional[str] = None
    html_url: Optional[str] = None
    open_issues_count: int = 0
    stargazers_count: int = 0
    archived: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class Issue(ApiModel):
    id: int
    number: int
    title: str
    state: str = "open"
    body: Optional[str] = None
    user: Optional[SimpleUser] = None
    labels: List[Label] = Field(default_factory=list)
    assignees: List[SimpleUser] = Field(default_factory=list)
    milestone: Optional[Milestone] = None
    comments: int = 0
    locked: bool = False
    # Pull requests are issues too; this key is present only for them
    pull_request: Optional[dict] = None
    html_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    closed_at: Optional[str] = None

    @property
    def is_pull_request(self) -> bool:
        return self.pull_request is not None


class IssueComment(ApiModel):
    id: int
    body: Optional[str] = None
    user: Optional[SimpleUser] = None
    html_url: Optional[str] = None
    issue_url: Optional[str] = None
    author_association: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
