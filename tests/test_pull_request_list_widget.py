"""Tests for the view adapter between shared state and the terminal UI."""

from typing import List

import pytest

from github_pr_dashboard.app.pull_request_list_widget import PullRequestListWidget
from github_pr_dashboard.exceptions import NoSelectionError
from github_pr_dashboard.models.loading_state import LoadingState
from github_pr_dashboard.models.pull_request_info import PullRequestInfo


def make_widget(opened: List[str]) -> PullRequestListWidget:
    widget = PullRequestListWidget(open_url=opened.append)
    widget.state.set_loading_state(LoadingState.loading())
    return widget


def test_render_rows_before_fetch() -> None:
    view = PullRequestListWidget().render_rows()
    assert view.rows == ()
    assert view.selected is None
    assert view.titles == ("Pull Requests", "No Auth Token", "Idle")
    assert view.hint == "j/k to scroll, enter to open, q to quit"


def test_render_rows_reflects_state() -> None:
    widget = make_widget([])
    widget.state.set_authed_login("alice")
    widget.state.merge([PullRequestInfo("2", "Second", "gadgets", "u2"), PullRequestInfo("1", "First", "widgets", "u1")])

    view = widget.render_rows()

    assert view.rows == (("First", "widgets"), ("Second", "gadgets"))
    assert view.selected == 0
    assert view.titles == ("Pull Requests", "alice", "Loaded")


def test_render_rows_has_no_side_effects() -> None:
    widget = make_widget([])
    widget.state.merge([PullRequestInfo("1", "First", "widgets", "u1")])
    before = widget.state.snapshot()
    assert widget.render_rows() == widget.render_rows()
    assert widget.state.snapshot() == before


def test_error_is_shown_in_title() -> None:
    widget = make_widget([])
    widget.state.record_error("404 Not Found")
    assert widget.render_rows().titles[2] == "Error: 404 Not Found"


def test_open_selected_opens_url_of_selection() -> None:
    opened: List[str] = []
    widget = make_widget(opened)
    widget.state.merge([PullRequestInfo("1", "First", "widgets", "u1"), PullRequestInfo("2", "Second", "widgets", "u2")])

    widget.scroll_down()
    widget.open_selected()

    assert opened == ["u2"]


def test_open_selected_without_selection_raises() -> None:
    opened: List[str] = []
    widget = make_widget(opened)
    widget.state.finish_cycle()

    with pytest.raises(NoSelectionError):
        widget.open_selected()
    assert opened == []


def test_open_selected_with_empty_url_does_nothing() -> None:
    opened: List[str] = []
    widget = make_widget(opened)
    widget.state.merge([PullRequestInfo("1", "First", "widgets", "")])

    widget.open_selected()

    assert opened == []


def test_scroll_saturates() -> None:
    widget = make_widget([])
    widget.state.merge([PullRequestInfo(str(n), "T", "widgets", "u") for n in range(3)])

    widget.scroll_up()
    assert widget.render_rows().selected == 0
    for _ in range(4):
        widget.scroll_down()
    assert widget.render_rows().selected == 2
