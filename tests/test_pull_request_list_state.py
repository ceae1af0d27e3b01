"""Tests for the shared pull request state."""

import threading

import pytest

from github_pr_dashboard.exceptions import NoSelectionError
from github_pr_dashboard.models.loading_state import LoadingState, LoadingStatus
from github_pr_dashboard.models.pull_request_info import PullRequestInfo
from github_pr_dashboard.models.pull_request_list_state import PullRequestListState


def pr(number: int, title: str = "Title", repo: str = "widgets") -> PullRequestInfo:
    return PullRequestInfo(str(number), title, repo, f"https://github.com/acme/{repo}/pull/{number}")


def loading_state() -> PullRequestListState:
    state = PullRequestListState()
    state.set_loading_state(LoadingState.loading())
    return state


def assert_selection_valid(state: PullRequestListState) -> None:
    snapshot = state.snapshot()
    if snapshot.pull_requests:
        assert snapshot.selected is not None
        assert 0 <= snapshot.selected < len(snapshot.pull_requests)
    else:
        assert snapshot.selected is None


def test_initial_state() -> None:
    state = PullRequestListState()
    assert state.loading_state.status is LoadingStatus.IDLE
    assert state.pull_requests == []
    assert state.authed_login is None
    assert state.selected is None


def test_merge_keeps_list_sorted_after_every_merge() -> None:
    state = loading_state()
    for page in ([pr(5), pr(3)], [pr(4)], [pr(1), pr(30)]):
        state.merge(page)
        assert state.pull_requests == sorted(state.pull_requests)
    assert [info.id for info in state.pull_requests] == ["1", "3", "30", "4", "5"]


def test_first_merge_sets_loaded_and_selects_first() -> None:
    state = loading_state()
    state.merge([pr(2), pr(1)])
    assert state.loading_state == LoadingState.loaded()
    assert state.selected == 0


def test_merge_does_not_move_existing_selection() -> None:
    state = loading_state()
    state.merge([pr(2), pr(3)])
    state.scroll_down()
    state.merge([pr(1)])
    assert state.selected == 1
    assert state.get_selected() == pr(2)


def test_merging_empty_page_is_idempotent_once_loaded() -> None:
    state = loading_state()
    state.merge([pr(1)])
    before = state.snapshot()
    state.merge([])
    assert state.snapshot() == before
    assert state.loading_state == LoadingState.loaded()


def test_empty_merge_leaves_selection_unset() -> None:
    state = loading_state()
    state.merge([])
    assert state.loading_state == LoadingState.loaded()
    assert state.selected is None


def test_error_is_kept_by_later_merges() -> None:
    state = loading_state()
    state.record_error("404 Not Found")
    state.merge([pr(1)])
    assert state.loading_state == LoadingState.error("404 Not Found")
    assert state.pull_requests == [pr(1)]


def test_error_does_not_clear_loaded_items() -> None:
    state = loading_state()
    state.merge([pr(1)])
    state.record_error("boom")
    assert state.pull_requests == [pr(1)]
    assert state.selected == 0


def test_finish_cycle_moves_loading_to_loaded() -> None:
    state = loading_state()
    state.finish_cycle()
    assert state.loading_state == LoadingState.loaded()


def test_finish_cycle_keeps_error() -> None:
    state = loading_state()
    state.record_error("boom")
    state.finish_cycle()
    assert state.loading_state.is_error


def test_scroll_saturates_at_bounds() -> None:
    state = loading_state()
    state.merge([pr(1), pr(2), pr(3)])

    state.scroll_up()
    assert state.selected == 0

    for _ in range(5):
        state.scroll_down()
        assert_selection_valid(state)
    assert state.selected == 2

    state.scroll_up()
    assert state.selected == 1


def test_scroll_on_empty_list_keeps_no_selection() -> None:
    state = loading_state()
    state.scroll_down()
    state.scroll_up()
    assert state.selected is None


def test_get_selected_without_selection_raises() -> None:
    with pytest.raises(NoSelectionError):
        PullRequestListState().get_selected()


def test_concurrent_merges_and_scrolls_keep_invariants() -> None:
    state = loading_state()

    def fetch(offset: int) -> None:
        for number in range(offset, offset + 50):
            state.merge([pr(number)])

    def scroll() -> None:
        for _ in range(200):
            state.scroll_down()
            assert_selection_valid(state)
            state.scroll_up()

    threads = [threading.Thread(target=fetch, args=(offset,)) for offset in (0, 100)]
    threads.append(threading.Thread(target=scroll))
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(state.pull_requests) == 100
    assert state.pull_requests == sorted(state.pull_requests)
    assert_selection_valid(state)
