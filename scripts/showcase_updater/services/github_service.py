#------------------------------------------------------------
#                      github_service.py
#          Handles GitHub API requests, repository
#             normalization, and file commits.

import base64
from datetime import datetime, timezone
from typing import Dict, List, Optional
import requests
from dateutil import parser as date_parser
from ..config import (
    DEFAULT_COMMIT_BRANCH,
    GITHUB_API_ACCEPT_HEADER,
    GITHUB_API_BASE_URL,
    GITHUB_REPOS_PER_PAGE,
    GITHUB_REPOS_SORT,
    GITHUB_REPOS_TYPE,
    GITHUB_REQUEST_TIMEOUT_SECONDS,
)
from ..models import Repository
from .action_service import ActionReporter

USER_REPOS_ENDPOINT_TEMPLATE = "/users/{username}/repos"
CONTENTS_ENDPOINT_TEMPLATE = "/repos/{owner}/{repo}/contents/{path}"

FETCH_MESSAGE_TEMPLATE = "Fetching repositories for user: {username} with topic: {topic}"
FOUND_MESSAGE_TEMPLATE = "Found {count} repositories with topic: {topic}"
FETCH_FAILED_TEMPLATE = "Failed to fetch repositories: {error}"
FILE_MISSING_MESSAGE = "README file does not exist in repository. Creating new file."
COMMITTED_MESSAGE_TEMPLATE = "Successfully committed changes to {path}"
COMMIT_FAILED_TEMPLATE = "Failed to commit changes: {error}"

UPDATED_AT_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
CONTENT_ENCODING = "utf-8"
FILE_CONTENT_TYPE = "file"

# This function does produce the fallback timestamp for missing update times.
def _now_timestamp() -> str:
    return datetime.now(timezone.utc).strftime(UPDATED_AT_FORMAT)

def _normalize_updated_at(value) -> str:
    if not value:
        return _now_timestamp()
    try:
        date_parser.isoparse(str(value))
    except (ValueError, OverflowError):
        return _now_timestamp()
    return str(value)

# This function does convert a raw API repository into a Repository record.
# Absent or null optional fields map to their defaults instead of raising.
def normalize_repository(raw: dict) -> Repository:
    return Repository(
        name=raw["name"],
        full_name=raw["full_name"],
        html_url=raw["html_url"],
        description=raw.get("description"),
        language=raw.get("language") or None,
        stargazers_count=raw.get("stargazers_count") or 0,
        forks_count=raw.get("forks_count") or 0,
        topics=tuple(raw.get("topics") or ()),
        homepage=raw.get("homepage") or None,
        updated_at=_normalize_updated_at(raw.get("updated_at")),
    )

# This function does check whether a raw repository carries a topic.
# A null or missing topics field never matches.
def has_topic(raw: dict, topic: str) -> bool:
    topics = raw.get("topics")
    return bool(topics) and topic in topics

class GitHubService:

    # This function does initialize the service with credentials.
    # The reporter receives progress lines and failure diagnostics.
    def __init__(self, token: str, reporter: Optional[ActionReporter] = None, base_url: str = GITHUB_API_BASE_URL):
        self.token = token
        self.reporter = reporter or ActionReporter()
        self.base_url = base_url

    # This function does build headers shared by the listing and contents calls.
    # The bearer token is required for committing, optional for listing.
    def headers(self) -> Dict[str, str]:
        headers = {"Accept": GITHUB_API_ACCEPT_HEADER}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    # This function does fetch the user's repositories tagged with a topic.
    # It reads a single page of 100, most recently updated first.
    def fetch_repositories_with_topic(self, username: str, topic: str) -> List[Repository]:
        self.reporter.info(FETCH_MESSAGE_TEMPLATE.format(username=username, topic=topic))
        url = f"{self.base_url}{USER_REPOS_ENDPOINT_TEMPLATE.format(username=username)}"
        params = {
            "type": GITHUB_REPOS_TYPE,
            "sort": GITHUB_REPOS_SORT,
            "per_page": GITHUB_REPOS_PER_PAGE,
        }

        try:
            response = requests.get(url, headers=self.headers(), params=params, timeout=GITHUB_REQUEST_TIMEOUT_SECONDS)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:
            self.reporter.error(FETCH_FAILED_TEMPLATE.format(error=exc))
            raise

        repositories = [normalize_repository(repo) for repo in data or [] if has_topic(repo, topic)]
        self.reporter.info(FOUND_MESSAGE_TEMPLATE.format(count=len(repositories), topic=topic))
        return repositories

    def _contents_url(self, owner: str, repo: str, path: str) -> str:
        return f"{self.base_url}{CONTENTS_ENDPOINT_TEMPLATE.format(owner=owner, repo=repo, path=path.lstrip('/'))}"

    # This function does look up the current blob sha of a remote file.
    # It returns None when the file does not exist on the branch.
    def fetch_file_sha(self, owner: str, repo: str, path: str, branch: str = DEFAULT_COMMIT_BRANCH) -> Optional[str]:
        response = requests.get(
            self._contents_url(owner, repo, path),
            headers=self.headers(),
            params={"ref": branch},
            timeout=GITHUB_REQUEST_TIMEOUT_SECONDS,
        )
        if response.status_code == 404:
            self.reporter.info(FILE_MISSING_MESSAGE)
            return None
        response.raise_for_status()

        data = response.json()
        if isinstance(data, dict) and data.get("type") == FILE_CONTENT_TYPE:
            return data.get("sha")
        return None

    # This function does create or update a file through the contents API.
    # The previous sha is sent only when the file already exists.
    def commit_file(
        self,
        owner: str,
        repo: str,
        path: str,
        content: str,
        message: str,
        branch: str = DEFAULT_COMMIT_BRANCH,
    ) -> None:
        try:
            sha = self.fetch_file_sha(owner, repo, path, branch)
            payload = {
                "message": message,
                "content": base64.b64encode(content.encode(CONTENT_ENCODING)).decode("ascii"),
                "branch": branch,
            }
            if sha:
                payload["sha"] = sha

            response = requests.put(
                self._contents_url(owner, repo, path),
                headers=self.headers(),
                json=payload,
                timeout=GITHUB_REQUEST_TIMEOUT_SECONDS,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            self.reporter.error(COMMIT_FAILED_TEMPLATE.format(error=exc))
            raise

        self.reporter.info(COMMITTED_MESSAGE_TEMPLATE.format(path=path))
