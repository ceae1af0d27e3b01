import threading
from typing import Iterable, List, NamedTuple, Optional, Tuple

from github_pr_dashboard.exceptions import NoSelectionError
from github_pr_dashboard.models.loading_state import LoadingState, LoadingStatus
from github_pr_dashboard.models.pull_request_info import PullRequestInfo


class StateSnapshot(NamedTuple):
    pull_requests: Tuple[PullRequestInfo, ...]
    loading_state: LoadingState
    authed_login: Optional[str]
    selected: Optional[int]


class PullRequestListState:
    """Pull requests shared between the fetch thread and the UI loop.

    Every public method takes the lock once and releases it before returning, so no
    caller ever holds it across network I/O. ``selected`` is either None (empty list)
    or a valid index into ``pull_requests``.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._pull_requests: List[PullRequestInfo] = []
        self._loading_state: LoadingState = LoadingState.idle()
        self._authed_login: Optional[str] = None
        self._selected: Optional[int] = None

    # Fetch thread writers

    def set_loading_state(self, loading_state: LoadingState) -> None:
        with self._lock:
            self._loading_state = loading_state

    def set_authed_login(self, authed_login: Optional[str]) -> None:
        with self._lock:
            self._authed_login = authed_login

    def merge(self, pull_requests: Iterable[PullRequestInfo]) -> None:
        with self._lock:
            self._pull_requests.extend(pull_requests)
            self._pull_requests.sort()

            # An error recorded earlier in the cycle stays visible
            if self._loading_state.status in (LoadingStatus.IDLE, LoadingStatus.LOADING):
                self._loading_state = LoadingState.loaded()

            if self._selected is None and self._pull_requests:
                self._selected = 0

    def record_error(self, message: str) -> None:
        self.set_loading_state(LoadingState.error(message))

    def finish_cycle(self) -> None:
        with self._lock:
            if self._loading_state.status is LoadingStatus.LOADING:
                self._loading_state = LoadingState.loaded()

    # UI loop

    def scroll_down(self) -> None:
        with self._lock:
            if self._selected is not None:
                self._selected = min(self._selected + 1, len(self._pull_requests) - 1)

    def scroll_up(self) -> None:
        with self._lock:
            if self._selected is not None:
                self._selected = max(self._selected - 1, 0)

    def get_selected(self) -> PullRequestInfo:
        with self._lock:
            if self._selected is None:
                raise NoSelectionError('No pull request selected')
            return self._pull_requests[self._selected]

    def snapshot(self) -> StateSnapshot:
        with self._lock:
            return StateSnapshot(tuple(self._pull_requests), self._loading_state, self._authed_login, self._selected)

    @property
    def pull_requests(self) -> List[PullRequestInfo]:
        with self._lock:
            return list(self._pull_requests)

    @property
    def loading_state(self) -> LoadingState:
        with self._lock:
            return self._loading_state

    @property
    def authed_login(self) -> Optional[str]:
        with self._lock:
            return self._authed_login

    @property
    def selected(self) -> Optional[int]:
        with self._lock:
            return self._selected
