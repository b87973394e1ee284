class ProgressTracker:
    """
    Completion barrier over a ScanState's progress counter.

    `wait()` sleeps on the state's condition variable and wakes whenever a resolution
    attempt finishes. The observer is called outside the lock with the latest progress
    value, so it may see several increments at once but always sees the final one.
    """

    def __init__(self, state, total, on_progress=None):
        self.state = state
        self.total = total
        self.on_progress = on_progress

    def wait(self):
        observed = None
        while True:
            with self.state.progress_changed:
                self.state.progress_changed.wait_for(lambda: self.state.progress != observed)
                observed = self.state.progress

            if self.on_progress:
                self.on_progress(observed)

            if observed >= self.total:
                return observed
