import threading
from typing import ClassVar, List, Optional, Tuple

from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from github_pr_dashboard.app.github_api_fetcher import GithubAPIFetcher
from github_pr_dashboard.app.pull_request_list_widget import PullRequestListView, PullRequestListWidget
from github_pr_dashboard.constants.app_setting_constants import FRAMES_PER_SECOND
from github_pr_dashboard.constants.display_constants import APP_NAME, NAME_COLUMN, REPO_COLUMN, HIGHLIGHT_SYMBOL, \
    REPO_COLUMN_MAX_WIDTH, NO_SELECTION_MSG
from github_pr_dashboard.exceptions import NoSelectionError
from github_pr_dashboard.models.settings import GitHubSettings

# Panel border, panel title and table header
_CHROME_HEIGHT: int = 3


def visible_window(total: int, selected: Optional[int], height: int) -> Tuple[int, int]:
    """Return the [start, end) slice of rows to draw so the selected row stays on screen."""
    height = max(height, 1)
    if total <= height or selected is None:
        return 0, min(total, height)
    start = max(selected - height + 1, 0)
    return start, start + height


class GithubPullRequestDashboardApp(App):
    CSS = """
    #title { text-style: bold; content-align: center middle; width: 100%; }
    #pull-requests { height: 1fr; }
    """

    BINDINGS: ClassVar[List[Binding]] = [
        Binding("q", "quit", "Quit"),
        Binding("escape", "quit", "Quit", show=False),
        Binding("j", "scroll_down", "Down"),
        Binding("down", "scroll_down", "Down", show=False),
        Binding("k", "scroll_up", "Up"),
        Binding("up", "scroll_up", "Up", show=False),
        Binding("enter", "open_selected", "Open"),
    ]

    def __init__(self, client: GithubAPIFetcher, settings: GitHubSettings,
                 pull_requests: Optional[PullRequestListWidget] = None,
                 frames_per_second: float = FRAMES_PER_SECOND):
        super().__init__()
        self.client = client
        self.settings = settings
        self.pull_requests = pull_requests or PullRequestListWidget()
        self.frames_per_second = frames_per_second
        self.fetch_thread: Optional[threading.Thread] = None
        self._last_view: Optional[PullRequestListView] = None
        self._last_height: Optional[int] = None

    def compose(self) -> ComposeResult:
        yield Static(APP_NAME, id="title")
        yield Static(id="pull-requests")

    def on_mount(self) -> None:
        self.fetch_thread = self.pull_requests.run(self.client, self.settings)
        self.set_interval(1 / self.frames_per_second, self.draw)
        self.draw()

    # Key bindings

    def action_scroll_down(self) -> None:
        self.pull_requests.scroll_down()
        self.draw()

    def action_scroll_up(self) -> None:
        self.pull_requests.scroll_up()
        self.draw()

    def action_open_selected(self) -> None:
        try:
            self.pull_requests.open_selected()
        except NoSelectionError:
            self.notify(NO_SELECTION_MSG, severity="warning")

    # Drawing

    def draw(self) -> None:
        body = self.query_one("#pull-requests", Static)
        view = self.pull_requests.render_rows()
        height = body.size.height
        if view == self._last_view and height == self._last_height:
            return
        self._last_view, self._last_height = view, height
        body.update(self.build_panel(view, height - _CHROME_HEIGHT))

    @staticmethod
    def build_panel(view: PullRequestListView, height: int) -> Panel:
        table = Table(expand=True, box=None, show_edge=False, pad_edge=False)
        table.add_column("", width=len(HIGHLIGHT_SYMBOL), no_wrap=True)
        table.add_column(NAME_COLUMN, ratio=1, no_wrap=True, overflow="ellipsis")
        table.add_column(REPO_COLUMN, max_width=REPO_COLUMN_MAX_WIDTH, no_wrap=True, overflow="ellipsis")

        start, end = visible_window(len(view.rows), view.selected, height)
        for index in range(start, end):
            name, repo = view.rows[index]
            if index == view.selected:
                table.add_row(HIGHLIGHT_SYMBOL, name, repo, style="on blue")
            else:
                table.add_row("", name, repo)

        static_title, user_title, loading_title = view.titles
        title = Text.assemble(static_title, " ─ ", user_title, " ─ ", loading_title)
        return Panel(table, title=title, title_align="left", subtitle=view.hint, subtitle_align="left")
