import logging
import threading
from typing import List, Optional

import requests
from github import GithubException
from github.PullRequest import PullRequest

from github_pr_dashboard.app import pull_request_filter
from github_pr_dashboard.app.github_api_fetcher import GithubAPIFetcher
from github_pr_dashboard.config import THREAD_MANAGER
from github_pr_dashboard.constants.display_constants import DEFAULT_ERROR
from github_pr_dashboard.exceptions import PullRequestMappingError
from github_pr_dashboard.managers.thread_manager import ThreadManager
from github_pr_dashboard.models.loading_state import LoadingState
from github_pr_dashboard.models.pull_request_info import PullRequestInfo
from github_pr_dashboard.models.pull_request_list_state import PullRequestListState
from github_pr_dashboard.models.settings import GitHubSettings, Repo


class PullRequestFetcher:
    """Fills a ``PullRequestListState`` from GitHub on a background thread.

    One call to ``run`` is one fetch cycle: resolve the login, then list the open pull
    requests of every configured repository in order, merging each page as soon as it
    arrives. A failing repository is recorded as the loading error and skipped.
    """

    def __init__(self, state: PullRequestListState, thread_manager: ThreadManager = THREAD_MANAGER):
        self.state = state
        self.thread_manager = thread_manager

    def run(self, client: GithubAPIFetcher, settings: GitHubSettings) -> threading.Thread:
        return self.thread_manager.start_thread(self.fetch_pull_requests, args=(client, settings))

    def fetch_pull_requests(self, client: GithubAPIFetcher, settings: GitHubSettings) -> None:
        self.state.set_loading_state(LoadingState.loading())

        authed_login = self._resolve_authed_login(client)
        self.state.set_authed_login(authed_login)

        for repo in settings.repos:
            try:
                page: List[PullRequest] = client.get_open_pull_requests(repo.owner, repo.name)
            except GithubException as e:
                self._on_error(repo, f'{e.status} {self._github_error_message(e)}')
                continue
            except requests.exceptions.RequestException as e:
                self._on_error(repo, str(e) or DEFAULT_ERROR)
                continue
            except Exception as e:
                logging.exception(e)
                self._on_error(repo, str(e) or DEFAULT_ERROR)
                continue
            self.state.merge(self._format_pull_requests(page, authed_login, settings))

        self.state.finish_cycle()
        logging.info(f'Fetch cycle over {len(settings.repos)} repositories finished')

    @staticmethod
    def _resolve_authed_login(client: GithubAPIFetcher) -> Optional[str]:
        if not client.is_authenticated:
            return None
        try:
            return client.get_current_user_login()
        except (GithubException, requests.exceptions.RequestException) as e:
            logging.info(f'Could not resolve the authenticated user, continuing anonymously: {e}')
            return None
        except Exception as e:
            logging.exception(f'Unexpected error while resolving the authenticated user: {e}')
            return None

    @staticmethod
    def _format_pull_requests(page: List[PullRequest], authed_login: Optional[str],
                              settings: GitHubSettings) -> List[PullRequestInfo]:
        pull_requests_info: List[PullRequestInfo] = []
        for pull_request in page:
            try:
                if not pull_request_filter.matches(pull_request, authed_login, settings.labels, settings.filters):
                    continue
                pull_requests_info.append(PullRequestInfo.from_github_pull_request(pull_request))
            except PullRequestMappingError as e:
                logging.warning(f'Skipping pull request: {e}')
            except (GithubException, requests.exceptions.RequestException, AttributeError) as e:
                logging.warning(f'Skipping pull request #{getattr(pull_request, "number", "?")}: {e}')
        return pull_requests_info

    def _on_error(self, repo: Repo, message: str) -> None:
        logging.error(f'Failed to fetch pull requests for "{repo.full_name}": {message}')
        self.state.record_error(message)

    @staticmethod
    def _github_error_message(e: GithubException) -> str:
        if isinstance(e.data, dict) and e.data.get('message'):
            return e.data['message']
        return DEFAULT_ERROR
