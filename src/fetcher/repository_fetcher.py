import re
import shutil
import logging
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

import requests
from git import Repo
from git.exc import GitCommandError

logger = logging.getLogger(__name__)


@dataclass
class FetchResult:
    """Outcome of a fetch: where the repository lives and whether it was cloned now."""
    path: Path
    cloned: bool


class RepositoryFetcher:
    """Ensures a local working copy of a git repository exists."""

    ALREADY_CLONED_MESSAGE = "Checkstyle repository already cloned."

    def __init__(self, check_remote=True, api_timeout=10):
        self.check_remote = check_remote
        self.api_timeout = api_timeout

    def fetch(self, repo_url, destination_dir):
        """Clone ``repo_url`` into ``destination_dir`` unless that directory exists.

        Args:
            repo_url: URL (or local path) of the repository to clone
            destination_dir: Directory the working copy lives in

        Returns:
            FetchResult for the working copy

        Raises:
            ValueError: If a GitHub repository is not accessible or the
                destination is a file
            RuntimeError: For git clone failures
        """
        repo_path = Path(destination_dir)

        # An existing directory alone counts as a completed clone
        if repo_path.is_dir():
            logger.info(self.ALREADY_CLONED_MESSAGE)
            if not (repo_path / ".git").exists():
                logger.warning(
                    f"{repo_path} exists but has no .git entry; "
                    f"it may be a partial clone. Remove it to clone again."
                )
            return FetchResult(path=repo_path, cloned=False)

        if repo_path.exists():
            raise ValueError(f"{repo_path} exists and is not a directory")

        if self.check_remote:
            github_repo = self._parse_github_url(repo_url)
            if github_repo and not self._check_repo_exists(*github_repo):
                owner, name = github_repo
                raise ValueError(f"Repository {owner}/{name} does not exist or is not accessible")

        repo_path.parent.mkdir(parents=True, exist_ok=True)
        self._clone_repository(repo_url, repo_path)

        return FetchResult(path=repo_path, cloned=True)

    def _parse_github_url(self, url):
        """Extract (owner, name) from a GitHub URL, or None for anything else."""
        parsed_url = urlparse(url)
        if parsed_url.hostname not in ("github.com", "www.github.com"):
            return None

        path = parsed_url.path.lstrip("/")
        match = re.match(r"([^/]+)/([^/]+)/?.*", path)
        if not match:
            raise ValueError(f"Invalid GitHub URL format: {url}")

        owner, name = match.groups()
        return owner, name.removesuffix(".git")

    def _check_repo_exists(self, owner, repo):
        """Verify that the repository exists and is accessible."""
        api_url = f"https://api.github.com/repos/{owner}/{repo}"
        try:
            response = requests.get(api_url, timeout=self.api_timeout)
        except requests.RequestException as e:
            logger.warning(f"Could not reach GitHub API for {owner}/{repo}: {e}")
            # Let git report the real problem
            return True
        return response.status_code == 200

    def _clone_repository(self, clone_url, target_path):
        """Clone the repository to the target path."""
        try:
            logger.info(f"Cloning from {clone_url} to {target_path}...")
            Repo.clone_from(clone_url, str(target_path))
            logger.info(f"Repository cloned successfully to {target_path}")
        except GitCommandError as e:
            logger.error(f"Git clone failed: {e.stderr}")
            # Clean up any partial clone
            if target_path.exists():
                shutil.rmtree(target_path)
            raise RuntimeError(f"Failed to clone repository: {e.stderr}") from e
