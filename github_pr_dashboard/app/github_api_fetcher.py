import logging
from typing import List, Optional

from github import Github
from github.Auth import Token
from github.PullRequest import PullRequest
from github.Repository import Repository

from github_pr_dashboard.constants.app_setting_constants import GITHUB_POOL_SIZE, PULL_REQUESTS_PER_PAGE


class GithubAPIFetcher:
    """Thin wrapper over PyGithub, authenticated when a personal access token is given."""

    _DEFAULT_POOL_SIZE: int = GITHUB_POOL_SIZE

    def __init__(self, github_pat: Optional[str] = None, per_page: int = PULL_REQUESTS_PER_PAGE):
        self.github_pat = github_pat
        self.per_page = per_page
        self.github: Github = self._open_github_connection(github_pat)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.github_pat)

    def get_current_user_login(self) -> str:
        return self.github.get_user().login

    def get_open_pull_requests(self, owner: str, name: str) -> List[PullRequest]:
        # Only the first page is used, most recently updated first
        repository: Repository = self.github.get_repo(f'{owner}/{name}', lazy=True)
        pull_requests = repository.get_pulls(state='open', sort='updated', direction='desc')
        page: List[PullRequest] = pull_requests.get_page(0)
        logging.debug(f'Fetched {len(page)} open pull requests for "{owner}/{name}"')
        return page

    def close(self) -> None:
        self.github.close()

    def _open_github_connection(self, github_pat: Optional[str]) -> Github:
        if github_pat:
            return Github(auth=Token(github_pat), pool_size=self._DEFAULT_POOL_SIZE, per_page=self.per_page)
        logging.info('No GitHub token configured, using anonymous access')
        return Github(pool_size=self._DEFAULT_POOL_SIZE, per_page=self.per_page)
