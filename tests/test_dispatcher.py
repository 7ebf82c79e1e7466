"""Tests for the deferred task dispatcher"""

import threading
import time

from leveled_logger.core.dispatcher import Dispatcher, get_default_dispatcher


class TestDispatcher:
    """Test FIFO deferred execution."""

    def test_runs_tasks_in_submission_order(self, dispatcher):
        results = []
        for i in range(100):
            dispatcher.submit(lambda i=i: results.append(i))

        dispatcher.flush()
        assert results == list(range(100))

    def test_tasks_run_off_caller_thread(self, dispatcher):
        threads = []
        dispatcher.submit(lambda: threads.append(threading.current_thread()))

        dispatcher.flush()
        assert threads[0] is not threading.current_thread()
        assert threads[0].name == "test-dispatch"

    def test_submit_does_not_wait(self, dispatcher):
        gate = threading.Event()
        done = []
        dispatcher.submit(gate.wait)
        dispatcher.submit(lambda: done.append(True))

        assert done == []
        gate.set()
        dispatcher.flush()
        assert done == [True]

    def test_failing_task_does_not_stop_worker(self, dispatcher, capsys):
        results = []

        def boom():
            raise RuntimeError("boom")

        dispatcher.submit(boom)
        dispatcher.submit(lambda: results.append("after"))
        dispatcher.flush()

        assert results == ["after"]
        assert "Dispatch error: boom" in capsys.readouterr().err
        metrics = dispatcher.get_metrics()
        assert metrics == {"submitted": 2, "completed": 1, "failed": 1}

    def test_flush_from_worker_does_not_deadlock(self, dispatcher):
        results = []

        def task():
            dispatcher.flush()
            results.append("done")

        dispatcher.submit(task)
        dispatcher.flush()
        assert results == ["done"]

    def test_shutdown_drains_and_restarts(self, dispatcher):
        results = []
        for i in range(10):
            dispatcher.submit(lambda i=i: results.append(i))

        dispatcher.shutdown()
        assert results == list(range(10))

        dispatcher.submit(lambda: results.append("again"))
        dispatcher.flush()
        assert results[-1] == "again"

    def test_submit_during_shutdown_is_not_lost(self, dispatcher):
        started = threading.Event()
        gate = threading.Event()
        ran = []

        def blocked():
            started.set()
            gate.wait()

        dispatcher.submit(blocked)
        assert started.wait(timeout=5.0)

        stopper = threading.Thread(target=dispatcher.shutdown)
        stopper.start()
        deadline = time.monotonic() + 5.0
        while dispatcher._queue.qsize() < 1 and time.monotonic() < deadline:
            time.sleep(0.001)

        dispatcher.submit(lambda: ran.append(1))
        gate.set()
        stopper.join(timeout=5.0)
        dispatcher.flush()

        assert ran == [1]
        assert dispatcher._queue.unfinished_tasks == 0

    def test_shutdown_without_worker(self):
        Dispatcher().shutdown()

    def test_default_dispatcher_is_shared(self):
        assert get_default_dispatcher() is get_default_dispatcher()
