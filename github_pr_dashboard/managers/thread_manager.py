import logging
import threading
from typing import Any, Callable


class ThreadManager:
    """Starts daemon threads for background work that must never block the UI loop."""

    def start_thread(self, target: Callable, args=()) -> threading.Thread:
        thread = threading.Thread(target=self._run, args=(target, args), daemon=True,
                                  name=getattr(target, '__name__', None))
        thread.start()
        return thread

    @staticmethod
    def _run(target: Callable, args: Any) -> None:
        try:
            target(*args)
        except Exception as e:
            logging.exception(f'Background thread "{threading.current_thread().name}" failed: {e}')
