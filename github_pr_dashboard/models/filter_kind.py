from enum import Enum


class FilterKind(Enum):
    REVIEW_REQUESTED = 'ReviewRequested'
    MENTIONS = 'Mentions'
    LABELS = 'Labels'
    ASSIGNED = 'Assigned'
    CREATED = 'Created'

    @classmethod
    def from_name(cls, name: str) -> 'FilterKind':
        """Parse a filter tag as written in the configuration.

        ``ReviewRequested``, ``review_requested`` and ``review-requested`` are all accepted.
        """
        normalized = name.strip().replace('_', '').replace('-', '').lower()
        for kind in cls:
            if kind.value.lower() == normalized:
                return kind
        raise ValueError(f'Unknown pull request filter "{name}"')
