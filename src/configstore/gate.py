from __future__ import annotations

import logging
import threading
from typing import Callable, Mapping, Optional

from configstore.loader import load

logger = logging.getLogger(__name__)


class LoadGate:
    """
    Caller-owned one-shot guard.

    Use one gate per configuration record. The guarded action runs at most once,
    even when it raises: the error reaches the caller that ran it and later calls
    are no-ops. Concurrent callers block until the first one finishes.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def run(self, action: Callable[[], object]) -> bool:
        """Run `action` unless it already ran. Returns True if this call ran it."""
        if self._done:
            return False
        with self._lock:
            if self._done:
                return False
            try:
                action()
            finally:
                self._done = True
            return True


def load_once(
    record: object,
    test_mode: bool,
    gate: LoadGate,
    environ: Optional[Mapping[str, str]] = None,
) -> None:
    """Load `record` from the environment the first time `gate` is used; later calls are no-ops."""
    if test_mode:
        logger.warning("Running in test mode, configuration not loaded from env. record=%s", type(record).__name__)
        return

    if not gate.run(lambda: load(record, environ)):
        logger.debug("Configuration already loaded, skipping. record=%s", type(record).__name__)
