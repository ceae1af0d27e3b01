from dataclasses import dataclass
from typing import FrozenSet, NamedTuple, Optional, Tuple

from github_pr_dashboard.models.filter_kind import FilterKind


class Repo(NamedTuple):
    owner: str
    name: str

    @classmethod
    def parse(cls, full_name: str) -> 'Repo':
        owner, _, name = full_name.strip().partition('/')
        if not owner or not name or '/' in name:
            raise ValueError(f'Repository "{full_name}" is not in the "owner/name" form')
        return cls(owner, name)

    @property
    def full_name(self) -> str:
        return f'{self.owner}/{self.name}'


@dataclass(frozen=True)
class GitHubSettings:
    repos: Tuple[Repo, ...] = ()
    labels: FrozenSet[str] = frozenset()
    filters: Tuple[FilterKind, ...] = ()
    github_token: Optional[str] = None
