import argparse
import getpass
import logging
from typing import List, Optional

from github_pr_dashboard.app.github_api_fetcher import GithubAPIFetcher
from github_pr_dashboard.app.github_pull_request_dashboard_app import GithubPullRequestDashboardApp
from github_pr_dashboard.config import setup_logging
from github_pr_dashboard.exceptions import ConfigError
from github_pr_dashboard.managers.config_manager import ConfigManager
from github_pr_dashboard.security.keyring_manager import KeyringManager


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Show open GitHub pull requests from several repositories.")
    parser.add_argument("-c", "--config", help="Path to the JSON configuration file", type=str)
    parser.add_argument("-p", "--pat", help="Set GitHub Personal Access Token", action="store_true")
    parser.add_argument("--log-file", help="Write logs to this file", type=str)
    parser.add_argument("--debug", help="Enable debug logging", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_file, args.debug)

    keyring_manager = KeyringManager()
    if args.pat:
        keyring_manager.set_github_pat(getpass.getpass("GitHub Personal Access Token: ").strip())

    try:
        settings = ConfigManager(args.config, keyring_manager=keyring_manager).get_settings()
    except ConfigError as e:
        parser.error(str(e))

    logging.info(f'Watching {len(settings.repos)} repositories with filters '
                 f'{[kind.value for kind in settings.filters]}')
    client = GithubAPIFetcher(settings.github_token)
    try:
        GithubPullRequestDashboardApp(client, settings).run()
    finally:
        client.close()


if __name__ == "__main__":
    main()
