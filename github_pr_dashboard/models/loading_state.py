from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LoadingStatus(Enum):
    IDLE = 'Idle'
    LOADING = 'Loading'
    LOADED = 'Loaded'
    ERROR = 'Error'


@dataclass(frozen=True)
class LoadingState:
    status: LoadingStatus = LoadingStatus.IDLE
    message: Optional[str] = None

    @classmethod
    def idle(cls) -> 'LoadingState':
        return cls(LoadingStatus.IDLE)

    @classmethod
    def loading(cls) -> 'LoadingState':
        return cls(LoadingStatus.LOADING)

    @classmethod
    def loaded(cls) -> 'LoadingState':
        return cls(LoadingStatus.LOADED)

    @classmethod
    def error(cls, message: str) -> 'LoadingState':
        return cls(LoadingStatus.ERROR, message)

    @property
    def is_error(self) -> bool:
        return self.status is LoadingStatus.ERROR

    @property
    def label(self) -> str:
        if self.is_error:
            return f'{self.status.value}: {self.message}'
        return self.status.value
