import logging
from typing import Optional

import keyring
from keyring.errors import KeyringError, PasswordDeleteError


class KeyringManager:

    _GITHUB_SERVICE_NAME: str = 'github'
    _TOKEN_KEY: str = 'token'

    def __init__(self):
        self._github_pat = self._load_github_pat()

    def set_github_pat(self, token: Optional[str]) -> None:
        if token:
            keyring.set_password(self._GITHUB_SERVICE_NAME, self._TOKEN_KEY, token)
        else:
            try:
                keyring.delete_password(self._GITHUB_SERVICE_NAME, self._TOKEN_KEY)
            except PasswordDeleteError as e:
                logging.debug(f'No GitHub token stored in the keyring to delete: {e}')
        self._github_pat = token or None

    def get_github_pat(self) -> Optional[str]:
        return self._github_pat

    def _load_github_pat(self) -> Optional[str]:
        try:
            token = keyring.get_password(self._GITHUB_SERVICE_NAME, self._TOKEN_KEY)
        except KeyringError:
            return None
        return token if token != '' else None
