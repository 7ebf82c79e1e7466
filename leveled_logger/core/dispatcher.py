"""
Deferred task dispatcher

A FIFO task queue drained by a single worker thread. Logger.log() submits one
task per accepted message; tasks run in submission order and each runs to
completion before the next one starts.
"""

from __future__ import annotations
from typing import Callable, Optional
import atexit
import queue
import sys
import threading


_STOP = object()


class Dispatcher:
    """Single-worker FIFO executor for deferred log writes."""

    def __init__(self, name: str = "leveled-logger-dispatch"):
        self.name = name
        self._queue: queue.Queue = queue.Queue()
        self._worker_thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()
        self._metrics = {"submitted": 0, "completed": 0, "failed": 0}

    def _start_worker(self) -> None:
        """
        Start the worker thread if it is not running.

        Caller must hold lock.
        """
        if self._worker_thread is not None and self._worker_thread.is_alive():
            return

        self._worker_thread = threading.Thread(
            target=self._process_queue,
            name=self.name,
            daemon=True
        )
        self._worker_thread.start()

    def _process_queue(self) -> None:
        """Run queued tasks until the stop marker is reached (worker thread)."""
        while True:
            task = self._queue.get()
            try:
                if task is _STOP:
                    with self._lock:
                        if self._queue.empty():
                            self._worker_thread = None
                            return
                        # Submitted during shutdown: drain before stopping
                        self._queue.put_nowait(_STOP)
                    continue

                try:
                    task()
                except Exception as e:
                    self._record("failed")
                    print(f"Dispatch error: {e}", file=sys.stderr)
                else:
                    self._record("completed")
            finally:
                # Always mark task as done to prevent queue.join() deadlock
                self._queue.task_done()

    def _record(self, key: str) -> None:
        with self._lock:
            self._metrics[key] += 1

    def submit(self, task: Callable[[], None]) -> None:
        """
        Enqueue a task for deferred execution.

        Never blocks and never runs the task on the caller's stack. The task
        may start on the worker before this call returns.

        Args:
            task: Zero-argument callable
        """
        self._record("submitted")
        with self._lock:
            self._queue.put_nowait(task)
            self._start_worker()

    def in_worker(self) -> bool:
        """Check whether the current thread is the worker thread."""
        return threading.current_thread() is self._worker_thread

    def flush(self) -> None:
        """Block until every task submitted so far has run."""
        if self.in_worker():
            return
        self._queue.join()

    def shutdown(self) -> None:
        """Run the pending tasks, then stop the worker."""
        with self._lock:
            worker = self._worker_thread
            if worker is None or worker is threading.current_thread():
                return
            self._queue.put_nowait(_STOP)

        worker.join(timeout=5.0)

    def get_metrics(self) -> dict:
        """Get dispatch metrics."""
        with self._lock:
            return self._metrics.copy()


_default_dispatcher: Optional[Dispatcher] = None
_default_lock = threading.Lock()


def get_default_dispatcher() -> Dispatcher:
    """Return the process-wide dispatcher, creating it on first use."""
    global _default_dispatcher

    with _default_lock:
        if _default_dispatcher is None:
            _default_dispatcher = Dispatcher()
            atexit.register(_default_dispatcher.shutdown)
        return _default_dispatcher
