"""Fire-and-forget background threads."""

from __future__ import annotations

import threading
from typing import Any, Callable


def start_thread(fn: Callable[[Any], object], arg: Any = None) -> threading.Thread:
    """Run `fn` on a daemon thread and return the thread.

    The function is always called with None; `arg` is accepted but not passed on.
    """
    del arg
    thread = threading.Thread(target=fn, args=(None,), daemon=True)
    thread.start()
    print("[THREAD] Started new thread")
    return thread