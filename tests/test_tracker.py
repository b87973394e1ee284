import threading

from subsweep.models import ScanState
from subsweep.tracker import ProgressTracker


def test_wait_returns_once_total_is_reached():
    state = ScanState("example.com")
    seen = []

    def worker():
        for _ in range(5):
            state.record_attempt()

    thread = threading.Thread(target=worker)
    thread.start()
    assert ProgressTracker(state, 5, seen.append).wait() == 5
    thread.join()

    assert seen[-1] == 5
    assert all(a < b for a, b in zip(seen, seen[1:]))


def test_wait_with_nothing_to_do():
    state = ScanState("example.com")
    assert ProgressTracker(state, 0).wait() == 0


def test_wait_blocks_until_last_attempt():
    state = ScanState("example.com")
    done = threading.Event()

    def waiter():
        ProgressTracker(state, 2).wait()
        done.set()

    thread = threading.Thread(target=waiter)
    thread.start()
    state.record_attempt()
    assert not done.wait(0.05)
    state.record_attempt()
    assert done.wait(5)
    thread.join()
