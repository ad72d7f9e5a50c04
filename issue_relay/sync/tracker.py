"""Bulk fetch of a repository's issues into the issue store."""

import logging
import time

from github.GithubException import GithubException
from requests.exceptions import RequestException

from ..errors import ConfigurationError, TrackerSyncError
from ..github_client.client import GitHubClient
from ..storage.issue_store import IssueStore

logger = logging.getLogger(__name__)


class TrackerSync:
    """Repopulates an IssueStore from the full issue list of a repository."""

    def __init__(self, client: GitHubClient, store: IssueStore) -> None:
        self.client = client
        self.store = store

    def fetch(self, owner: str, repo: str) -> int:
        """Fetch all issues and pull requests of ``owner/repo`` into the store.

        Every fetched page is written as soon as it arrives, so pages that
        precede a failure stay in the store. Entries that no longer exist
        upstream are not removed here; they expire through the store's TTL.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            Total number of records written

        Raises:
            ConfigurationError: If owner or repo is empty
            TrackerSyncError: If any GitHub request fails, including network
                errors raised by the underlying HTTP session
        """
        if not owner or not repo:
            raise ConfigurationError("owner/repo invalid format")

        logger.info("Fetching all issues for %s/%s", owner, repo)
        started = time.monotonic()
        count = 0
        try:
            for page in self.client.list_issue_pages(owner, repo):
                count += self.store.put_all(page)
        except (GithubException, RequestException) as e:
            raise TrackerSyncError(owner, repo, str(e)) from e

        logger.info(
            "%d issues fetched in cache for %s/%s (%.1fs)",
            count,
            owner,
            repo,
            time.monotonic() - started,
        )
        return count
