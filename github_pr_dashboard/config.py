import logging
import os
from typing import Optional

from github_pr_dashboard.constants.app_setting_constants import DEFAULT_CONFIG_DIR, DEFAULT_LOG_FILE_NAME
from github_pr_dashboard.managers.thread_manager import ThreadManager

THREAD_MANAGER = ThreadManager()

LOG_FORMAT: str = '%(asctime)s %(levelname)s: %(message)s'


def setup_logging(log_file: Optional[str] = None, debug: bool = False) -> str:
    # The terminal belongs to the dashboard, so log records go to a file
    log_path = os.path.expanduser(log_file or os.path.join(DEFAULT_CONFIG_DIR, DEFAULT_LOG_FILE_NAME))
    log_dir = os.path.dirname(log_path)
    if log_dir and not os.path.exists(log_dir):
        os.makedirs(log_dir)
    logging.basicConfig(filename=log_path, level=logging.DEBUG if debug else logging.INFO, format=LOG_FORMAT)
    return log_path
