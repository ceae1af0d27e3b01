APP_NAME: str = "GitHub PR Dashboard"

PULL_REQUESTS_TITLE: str = "Pull Requests"
NO_AUTH_TOKEN: str = "No Auth Token"
KEY_HINT: str = "j/k to scroll, enter to open, q to quit"

NAME_COLUMN: str = "Name"
REPO_COLUMN: str = "Repo"
HIGHLIGHT_SYMBOL: str = ">>"
REPO_COLUMN_MAX_WIDTH: int = 49

NO_SELECTION_MSG: str = "No pull request selected"
DEFAULT_ERROR: str = "Unexpected Error"
