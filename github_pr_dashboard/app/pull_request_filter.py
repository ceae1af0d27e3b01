"""Relevance filters evaluated against raw GitHub pull requests.

Each ``FilterKind`` maps to one pure predicate. A pull request is kept when at least
one enabled predicate matches. Predicates that depend on the authenticated login match
everything when no login is known.
"""
from typing import AbstractSet, Callable, Dict, Iterable, Optional

from github.PullRequest import PullRequest

from github_pr_dashboard.models.filter_kind import FilterKind

Predicate = Callable[[PullRequest, Optional[str], AbstractSet[str]], bool]


def _logins(users) -> Iterable[str]:
    return (user.login for user in users or [])


def is_review_requested(pull_request: PullRequest, authed_login: Optional[str], _labels: AbstractSet[str]) -> bool:
    return authed_login is None or authed_login in _logins(pull_request.requested_reviewers)


def mentions(pull_request: PullRequest, authed_login: Optional[str], _labels: AbstractSet[str]) -> bool:
    return authed_login is None or f'@{authed_login}' in (pull_request.body or '')


def has_label(pull_request: PullRequest, _authed_login: Optional[str], labels: AbstractSet[str]) -> bool:
    return not labels or any(label.name in labels for label in pull_request.labels or [])


def is_assigned(pull_request: PullRequest, authed_login: Optional[str], _labels: AbstractSet[str]) -> bool:
    return authed_login is None or authed_login in _logins(pull_request.assignees)


def is_created(pull_request: PullRequest, authed_login: Optional[str], _labels: AbstractSet[str]) -> bool:
    if authed_login is None:
        return True
    return pull_request.user is not None and pull_request.user.login == authed_login


PREDICATES: Dict[FilterKind, Predicate] = {
    FilterKind.REVIEW_REQUESTED: is_review_requested,
    FilterKind.MENTIONS: mentions,
    FilterKind.LABELS: has_label,
    FilterKind.ASSIGNED: is_assigned,
    FilterKind.CREATED: is_created,
}


def matches(pull_request: PullRequest, authed_login: Optional[str], label_allowlist: AbstractSet[str],
            enabled_filters: Iterable[FilterKind]) -> bool:
    """Return True if any enabled filter keeps the pull request.

    Filters are evaluated in order and stop at the first match. An empty filter list
    keeps nothing.
    """
    return any(PREDICATES[kind](pull_request, authed_login, label_allowlist) for kind in enabled_filters)
