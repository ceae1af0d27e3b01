class ConfigError(ValueError):
    """Raised when the configuration file or environment holds an unusable value."""


class PullRequestMappingError(ValueError):
    """Raised when a raw pull request lacks a field needed for display."""


class NoSelectionError(LookupError):
    """Raised when an action needs a selected pull request and none is selected."""
