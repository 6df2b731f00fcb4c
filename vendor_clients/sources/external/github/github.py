"""
GitHub API DataSource

List endpoints return one page; ``list_all_*`` methods follow the ``Link``
header until GitHub stops sending a ``rel="next"`` target.
"""

from typing import Any, Dict, List, Optional, Sequence

from vendor_clients.sources.client.github.github import GitHubClient, GitHubRESTClient
from vendor_clients.sources.client.http.http_request import JSON_CONTENT_TYPE
from vendor_clients.sources.client.pagination import PaginationStrategy
from vendor_clients.sources.external.github.models import (
    Issue,
    IssueComment,
    PrivateUser,
    Repository,
)
from vendor_clients.utils.query import safe_format_url


class GitHubDataSource:
    """
    GitHub API Data Source.

    Args:
        client: GitHubClient builder or a GitHubRESTClient
    """

    def __init__(self, client: GitHubClient | GitHubRESTClient) -> None:
        self.client: GitHubRESTClient = client.get_client()

    def get_client(self) -> GitHubRESTClient:
        return self.client

    # ========================================================================
    # USERS AND REPOSITORIES
    # ========================================================================

    async def get_authenticated_user(self) -> PrivateUser:
        """Get the user the token belongs to.

        API Endpoint: GET /user
        """
        return await self.client.request("GET", "/user", model=PrivateUser)

    async def get_repository(self, owner: str, repo: str) -> Repository:
        """Get a repository.

        API Endpoint: GET /repos/{owner}/{repo}
        """
        path = safe_format_url("/repos/{owner}/{repo}", {"owner": owner, "repo": repo})
        return await self.client.request("GET", path, model=Repository)

    # ========================================================================
    # ISSUES
    # ========================================================================

    async def list_repository_issues(
        self,
        owner: str,
        repo: str,
        milestone: Optional[str] = None,
        state: Optional[str] = None,
        assignee: Optional[str] = None,
        creator: Optional[str] = None,
        mentioned: Optional[str] = None,
        labels: Optional[Sequence[str]] = None,
        sort: Optional[str] = None,
        direction: Optional[str] = None,
        since: Optional[str] = None,
        per_page: int = 0,
        page: int = 0,
    ) -> List[Issue]:
        """List issues in a repository. Pull requests are included.

        API Endpoint: GET /repos/{owner}/{repo}/issues

        Args:
            owner: Account owner of the repository
            repo: Repository name
            milestone: Milestone number, ``*`` or ``none``
            state: ``open``, ``closed`` or ``all``
            assignee: Login, ``*`` or ``none``
            creator: Login of the issue creator
            mentioned: Login mentioned in the issue
            labels: Label names; sent comma separated
            sort: ``created``, ``updated`` or ``comments``
            direction: ``asc`` or ``desc``
            since: ISO 8601 timestamp; only issues updated after it
            per_page: Page size, at most 100
            page: Page number

        Returns:
            List[Issue]: one page of issues
        """
        path = safe_format_url("/repos/{owner}/{repo}/issues", {"owner": owner, "repo": repo})
        query = {
            "milestone": milestone,
            "state": state,
            "assignee": assignee,
            "creator": creator,
            "mentioned": mentioned,
            "labels": labels,
            "sort": sort,
            "direction": direction,
            "since": since,
            "per_page": per_page,
            "page": page,
        }
        return await self.client.request("GET", path, query=query, model=List[Issue])

    async def list_all_repository_issues(
        self,
        owner: str,
        repo: str,
        milestone: Optional[str] = None,
        state: Optional[str] = None,
        assignee: Optional[str] = None,
        creator: Optional[str] = None,
        labels: Optional[Sequence[str]] = None,
        sort: Optional[str] = None,
        direction: Optional[str] = None,
        since: Optional[str] = None,
    ) -> List[Issue]:
        """List every issue in a repository.

        API Endpoint: GET /repos/{owner}/{repo}/issues (all pages)
        """
        path = safe_format_url("/repos/{owner}/{repo}/issues", {"owner": owner, "repo": repo})
        query = {
            "milestone": milestone,
            "state": state,
            "assignee": assignee,
            "creator": creator,
            "labels": labels,
            "sort": sort,
            "direction": direction,
            "since": since,
            "per_page": 100,
        }
        return await self.client.list_all(path, Issue, strategy=PaginationStrategy.LINK_HEADER, query=query)

    async def get_issue(self, owner: str, repo: str, issue_number: int) -> Issue:
        """Get an issue.

        API Endpoint: GET /repos/{owner}/{repo}/issues/{issue_number}
        """
        path = safe_format_url(
            "/repos/{owner}/{repo}/issues/{issue_number}",
            {"owner": owner, "repo": repo, "issue_number": issue_number},
        )
        return await self.client.request("GET", path, model=Issue)

    async def create_issue(
        self,
        owner: str,
        repo: str,
        title: str,
        body: Optional[str] = None,
        assignees: Optional[List[str]] = None,
        milestone: Optional[int] = None,
        labels: Optional[List[str]] = None,
    ) -> Issue:
        """Create an issue.

        API Endpoint: POST /repos/{owner}/{repo}/issues
        """
        path = safe_format_url("/repos/{owner}/{repo}/issues", {"owner": owner, "repo": repo})
        payload: Dict[str, Any] = {"title": title}
        if body is not None:
            payload["body"] = body
        if assignees is not None:
            payload["assignees"] = assignees
        if milestone is not None:
            payload["milestone"] = milestone
        if labels is not None:
            payload["labels"] = labels
        return await self.client.request("POST", path, body=payload, content_type=JSON_CONTENT_TYPE, model=Issue)

    async def update_issue(
        self,
        owner: str,
        repo: str,
        issue_number: int,
        title: Optional[str] = None,
        body: Optional[str] = None,
        state: Optional[str] = None,
        state_reason: Optional[str] = None,
        assignees: Optional[List[str]] = None,
        labels: Optional[List[str]] = None,
    ) -> Issue:
        """Update an issue; fields left as None are not sent.

        API Endpoint: PATCH /repos/{owner}/{repo}/issues/{issue_number}
        """
        path = safe_format_url(
            "/repos/{owner}/{repo}/issues/{issue_number}",
            {"owner": owner, "repo": repo, "issue_number": issue_number},
        )
        candidates = {
            "title": title,
            "body": body,
            "state": state,
            "state_reason": state_reason,
            "assignees": assignees,
            "labels": labels,
        }
        payload = {k: v for k, v in candidates.items() if v is not None}
        return await self.client.request("PATCH", path, body=payload, content_type=JSON_CONTENT_TYPE, model=Issue)

    # ========================================================================
    # ISSUE COMMENTS
    # ========================================================================

    async def list_issue_comments(
        self,
        owner: str,
        repo: str,
        issue_number: int,
        since: Optional[str] = None,
        per_page: int = 0,
        page: int = 0,
    ) -> List[IssueComment]:
        """List comments on an issue, oldest first.

        API Endpoint: GET /repos/{owner}/{repo}/issues/{issue_number}/comments
        """
        path = safe_format_url(
            "/repos/{owner}/{repo}/issues/{issue_number}/comments",
            {"owner": owner, "repo": repo, "issue_number": issue_number},
        )
        query = {"since": since, "per_page": per_page, "page": page}
        return await self.client.request("GET", path, query=query, model=List[IssueComment])

    async def list_all_issue_comments(
        self,
        owner: str,
        repo: str,
        issue_number: int,
        since: Optional[str] = None,
    ) -> List[IssueComment]:
        """List every comment on an issue.

        API Endpoint: GET /repos/{owner}/{repo}/issues/{issue_number}/comments (all pages)
        """
        path = safe_format_url(
            "/repos/{owner}/{repo}/issues/{issue_number}/comments",
            {"owner": owner, "repo": repo, "issue_number": issue_number},
        )
        query = {"since": since, "per_page": 100}
        return await self.client.list_all(
            path, IssueComment, strategy=PaginationStrategy.LINK_HEADER, query=query
        )

    async def create_issue_comment(self, owner: str, repo: str, issue_number: int, body: str) -> IssueComment:
        """Comment on an issue.

        API Endpoint: POST /repos/{owner}/{repo}/issues/{issue_number}/comments
        """
        path = safe_format_url(
            "/repos/{owner}/{repo}/issues/{issue_number}/comments",
            {"owner": owner, "repo": repo, "issue_number": issue_number},
        )
        return await self.client.request(
            "POST", path, body={"body": body}, content_type=JSON_CONTENT_TYPE, model=IssueComment
        )

    async def delete_issue_comment(self, owner: str, repo: str, comment_id: int) -> None:
        """Delete a comment. GitHub answers 204 No Content.

        API Endpoint: DELETE /repos/{owner}/{repo}/issues/comments/{comment_id}
        """
        path = safe_format_url(
            "/repos/{owner}/{repo}/issues/comments/{comment_id}",
            {"owner": owner, "repo": repo, "comment_id": comment_id},
        )
        await self.client.request("DELETE", path)
