"""
Tests for the GitHub data source.
"""

import pytest  # type: ignore

from tests.utils.mock_transport import link_header, request_json, request_query
from tests.utils.test_data_factory import VendorDataFactory
from vendor_clients.sources.client.errors import HTTPStatusError

ISSUES_PATH = "/repos/octocat/hello-world/issues"


class TestGitHubRepositories:
    """Test user and repository endpoints."""

    async def test_get_authenticated_user(self, github, transport):
        transport.add("GET", "/user", json={**VendorDataFactory.github_user("octocat"), "public_repos": 8})

        user = await github.get_authenticated_user()

        assert user.login == "octocat"
        assert user.public_repos == 8
        headers = transport.last_request.headers
        assert headers["Authorization"] == "Bearer ghp_test"
        assert headers["Accept"] == "application/vnd.github+json"

    async def test_get_repository(self, github, transport):
        transport.add("GET", "/repos/octocat/hello-world", json={
            "id": 1296269,
            "name": "hello-world",
            "full_name": "octocat/hello-world",
            "owner": VendorDataFactory.github_user("octocat"),
            "default_branch": "main",
        })

        repository = await github.get_repository("octocat", "hello-world")

        assert repository.full_name == "octocat/hello-world"
        assert repository.owner.login == "octocat"


class TestGitHubIssues:
    """Test issue endpoints."""

    async def test_list_repository_issues_query(self, github, transport):
        transport.add("GET", ISSUES_PATH, json=[VendorDataFactory.github_issue(1)])

        issues = await github.list_repository_issues(
            "octocat", "hello-world", state="open", labels=["bug", "ui"], per_page=50
        )

        assert [i.number for i in issues] == [1]
        assert request_query(transport.last_request) == [
            ("state", "open"),
            ("labels", "bug,ui"),
            ("per_page", "50"),
        ]

    async def test_list_all_repository_issues_follows_links(self, github, transport):
        transport.add("GET", ISSUES_PATH, json=[VendorDataFactory.github_issue(1), VendorDataFactory.github_issue(2)],
                      headers=link_header(f"https://api.github.com{ISSUES_PATH}?per_page=100&page=2"))
        transport.add("GET", ISSUES_PATH, json=[VendorDataFactory.github_issue(3, pull_request={"url": "x"})])

        issues = await github.list_all_repository_issues("octocat", "hello-world")

        assert [i.number for i in issues] == [1, 2, 3]
        assert issues[2].is_pull_request
        assert str(transport.requests[1].url) == f"https://api.github.com{ISSUES_PATH}?per_page=100&page=2"
        assert transport.pending == 0

    async def test_get_issue(self, github, transport):
        transport.add("GET", f"{ISSUES_PATH}/42", json=VendorDataFactory.github_issue(42))

        issue = await github.get_issue("octocat", "hello-world", 42)

        assert issue.number == 42

    async def test_create_issue(self, github, transport, faker_instance):
        title = faker_instance.sentence()
        transport.add("POST", ISSUES_PATH, status_code=201, json=VendorDataFactory.github_issue(7, title=title))

        issue = await github.create_issue("octocat", "hello-world", title=title, labels=["bug"])

        assert issue.title == title
        assert request_json(transport.last_request) == {"title": title, "labels": ["bug"]}

    async def test_update_issue_sends_only_given_fields(self, github, transport):
        transport.add("PATCH", f"{ISSUES_PATH}/7", json=VendorDataFactory.github_issue(7, state="closed"))

        issue = await github.update_issue("octocat", "hello-world", 7, state="closed", state_reason="completed")

        assert issue.state == "closed"
        assert request_json(transport.last_request) == {"state": "closed", "state_reason": "completed"}

    async def test_missing_repo(self, github, transport):
        transport.add("GET", "/repos/octocat/nope/issues/1", status_code=404, json={"message": "Not Found"})

        with pytest.raises(HTTPStatusError) as exc_info:
            await github.get_issue("octocat", "nope", 1)

        assert exc_info.value.status_code == 404


class TestGitHubIssueComments:
    """Test issue comment endpoints."""

    async def test_list_issue_comments(self, github, transport):
        transport.add("GET", f"{ISSUES_PATH}/7/comments", json=[VendorDataFactory.github_comment(1)])

        comments = await github.list_issue_comments("octocat", "hello-world", 7, since="2024-01-01T00:00:00Z")

        assert [c.id for c in comments] == [1]
        assert dict(transport.last_request.url.params) == {"since": "2024-01-01T00:00:00Z"}

    async def test_list_all_issue_comments(self, github, transport):
        path = f"{ISSUES_PATH}/7/comments"
        transport.add("GET", path, json=[VendorDataFactory.github_comment(1)],
                      headers=link_header(f"https://api.github.com{path}?per_page=100&page=2"))
        transport.add("GET", path, json=[VendorDataFactory.github_comment(2)])

        comments = await github.list_all_issue_comments("octocat", "hello-world", 7)

        assert [c.id for c in comments] == [1, 2]

    async def test_create_issue_comment(self, github, transport):
        transport.add("POST", f"{ISSUES_PATH}/7/comments", status_code=201,
                      json=VendorDataFactory.github_comment(99, body="Me too"))

        comment = await github.create_issue_comment("octocat", "hello-world", 7, "Me too")

        assert comment.id == 99
        assert request_json(transport.last_request) == {"body": "Me too"}

    async def test_delete_issue_comment(self, github, transport):
        transport.add("DELETE", "/repos/octocat/hello-world/issues/comments/99", status_code=204)

        assert await github.delete_issue_comment("octocat", "hello-world", 99) is None
