import json
import logging
import os
from typing import Any, Dict, List, Mapping, Optional, Tuple

from github_pr_dashboard.constants.app_setting_constants import DEFAULT_CONFIG_FILE_NAME, DEFAULT_CONFIG_DIR, \
    ENV_PREFIX, GITHUB_TOKEN_CONFIG_KEY, REPOS_CONFIG_KEY, LABELS_CONFIG_KEY, FILTERS_CONFIG_KEY
from github_pr_dashboard.exceptions import ConfigError
from github_pr_dashboard.models.filter_kind import FilterKind
from github_pr_dashboard.models.settings import GitHubSettings, Repo
from github_pr_dashboard.security.keyring_manager import KeyringManager


class ConfigManager:
    """Resolves ``GitHubSettings`` from the JSON config file and the environment.

    Environment variables named ``GITHUB_PR_DASHBOARD_<KEY>`` take precedence over the
    file. List values in the environment are comma separated.
    """

    def __init__(self, config_path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None,
                 keyring_manager: Optional[KeyringManager] = None):
        self.config_path = os.path.expanduser(config_path) if config_path else self._get_config_path()
        self.environ = os.environ if environ is None else environ
        self.keyring_manager = keyring_manager
        self.config = self._load_config()

    def get_settings(self) -> GitHubSettings:
        filters = self.get_filters()
        if not filters:
            logging.warning('No pull request filters configured, every pull request will be hidden')

        return GitHubSettings(repos=self.get_repos(),
                              labels=frozenset(self.get_labels()),
                              filters=filters,
                              github_token=self.get_github_token())

    def get_github_token(self) -> Optional[str]:
        token = self._get_config(GITHUB_TOKEN_CONFIG_KEY)
        if token:
            return str(token)
        if self.keyring_manager is not None:
            return self.keyring_manager.get_github_pat()
        return None

    def get_repos(self) -> Tuple[Repo, ...]:
        repos: List[Repo] = []
        for value in self._get_list_config(REPOS_CONFIG_KEY):
            try:
                if isinstance(value, str):
                    repos.append(Repo.parse(value))
                elif isinstance(value, (list, tuple)) and len(value) == 2:
                    repos.append(Repo(str(value[0]), str(value[1])))
                else:
                    raise ValueError(f'Repository {value!r} must be "owner/name" or [owner, name]')
            except ValueError as e:
                raise ConfigError(str(e)) from e
        return tuple(repos)

    def get_labels(self) -> List[str]:
        return [str(label) for label in self._get_list_config(LABELS_CONFIG_KEY)]

    def get_filters(self) -> Tuple[FilterKind, ...]:
        filters: List[FilterKind] = []
        for value in self._get_list_config(FILTERS_CONFIG_KEY):
            try:
                kind = FilterKind.from_name(str(value))
            except ValueError as e:
                raise ConfigError(str(e)) from e
            if kind not in filters:
                filters.append(kind)
        return tuple(filters)

    def _get_config(self, key: str) -> Any:
        env_value = self.environ.get(f'{ENV_PREFIX}{key.upper()}')
        if env_value is not None:
            return env_value
        return self.config.get(key)

    def _get_list_config(self, key: str) -> List[Any]:
        value = self._get_config(key)
        if value is None:
            return []
        if isinstance(value, str):
            return [item.strip() for item in value.split(',') if item.strip()]
        if not isinstance(value, list):
            raise ConfigError(f'Configuration key "{key}" must be a list')
        return value

    def _load_config(self) -> Dict[str, Any]:
        try:
            with open(self.config_path, 'r') as config_file:
                config = json.load(config_file)
        except FileNotFoundError as e:
            logging.warning(f'Error while loading configuration file: {e}')
            return {}
        except json.JSONDecodeError as e:
            raise ConfigError(f'Invalid configuration file {self.config_path}: {e}') from e

        if not isinstance(config, dict):
            raise ConfigError(f'Configuration file {self.config_path} must hold a JSON object')
        return config

    @staticmethod
    def _get_config_path(dir_name: str = DEFAULT_CONFIG_DIR, file_name: str = DEFAULT_CONFIG_FILE_NAME) -> str:
        return os.path.join(os.path.expanduser(dir_name), file_name)
