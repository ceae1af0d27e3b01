DEFAULT_CONFIG_DIR: str = '~/.config/github_pr_dashboard'
DEFAULT_CONFIG_FILE_NAME: str = 'config.json'
DEFAULT_LOG_FILE_NAME: str = 'dashboard.log'

ENV_PREFIX: str = 'GITHUB_PR_DASHBOARD_'

GITHUB_TOKEN_CONFIG_KEY: str = 'github_token'
REPOS_CONFIG_KEY: str = 'repos'
LABELS_CONFIG_KEY: str = 'labels'
FILTERS_CONFIG_KEY: str = 'filters'

GITHUB_POOL_SIZE: int = 4
FRAMES_PER_SECOND: float = 30.0
PULL_REQUESTS_PER_PAGE: int = 30
