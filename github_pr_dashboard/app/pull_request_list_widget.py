import logging
import threading
import webbrowser
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from github_pr_dashboard.app.github_api_fetcher import GithubAPIFetcher
from github_pr_dashboard.app.pull_request_fetcher import PullRequestFetcher
from github_pr_dashboard.constants.display_constants import PULL_REQUESTS_TITLE, NO_AUTH_TOKEN, KEY_HINT
from github_pr_dashboard.models.loading_state import LoadingState
from github_pr_dashboard.models.pull_request_list_state import PullRequestListState
from github_pr_dashboard.models.settings import GitHubSettings


@dataclass(frozen=True)
class PullRequestListView:
    rows: Tuple[Tuple[str, str], ...]
    selected: Optional[int]
    loading_state: LoadingState
    user_title: str
    title: str = PULL_REQUESTS_TITLE
    hint: str = KEY_HINT

    @property
    def titles(self) -> Tuple[str, str, str]:
        return self.title, self.user_title, self.loading_state.label


class PullRequestListWidget:
    """Boundary between the shared pull request state and the terminal UI.

    The UI loop calls ``render_rows`` once per frame and forwards key presses to the
    scroll and open methods. The fetcher writes to the same state from its thread.
    """

    def __init__(self, state: Optional[PullRequestListState] = None, fetcher: Optional[PullRequestFetcher] = None,
                 open_url: Callable[[str], bool] = webbrowser.open):
        self.state = state or PullRequestListState()
        self.fetcher = fetcher or PullRequestFetcher(self.state)
        self.open_url = open_url

    def run(self, client: GithubAPIFetcher, settings: GitHubSettings) -> threading.Thread:
        return self.fetcher.run(client, settings)

    def scroll_down(self) -> None:
        self.state.scroll_down()

    def scroll_up(self) -> None:
        self.state.scroll_up()

    def open_selected(self) -> None:
        """Open the selected pull request in the browser.

        Raises NoSelectionError when the list is empty.
        """
        selected = self.state.get_selected()
        if not selected.url:
            logging.warning(f'Pull request #{selected.id} in "{selected.repo}" has no URL to open')
            return
        logging.info(f'Opening {selected.url}')
        self.open_url(selected.url)

    def render_rows(self) -> PullRequestListView:
        snapshot = self.state.snapshot()
        return PullRequestListView(rows=tuple(pull_request.to_row() for pull_request in snapshot.pull_requests),
                                   selected=snapshot.selected,
                                   loading_state=snapshot.loading_state,
                                   user_title=snapshot.authed_login or NO_AUTH_TOKEN)
