from dataclasses import dataclass
from typing import Tuple

from github.PullRequest import PullRequest

from github_pr_dashboard.exceptions import PullRequestMappingError


@dataclass(frozen=True, order=True)
class PullRequestInfo:
    """Display form of an open pull request.

    Field order defines the sort order of the table: id, then title, repo and url.
    """
    id: str
    title: str
    repo: str
    url: str

    @classmethod
    def from_github_pull_request(cls, pull_request: PullRequest) -> 'PullRequestInfo':
        if not pull_request.title:
            raise PullRequestMappingError(f'Pull request #{pull_request.number} has no title')

        base = getattr(pull_request, 'base', None)
        repository = getattr(base, 'repo', None)
        if repository is None or not repository.name:
            raise PullRequestMappingError(f'Pull request #{pull_request.number} has no base repository')

        return cls(id=str(pull_request.number),
                   title=pull_request.title,
                   repo=repository.name,
                   url=pull_request.html_url or '')

    def to_row(self) -> Tuple[str, str]:
        return self.title, self.repo
