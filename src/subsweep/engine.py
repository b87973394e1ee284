import threading
from concurrent.futures import ThreadPoolExecutor

from .config import logger, DEFAULT_MAX_WORKERS
from .errors import LookupFailure
from .models import ScanState
from .tracker import ProgressTracker
from .utils.dns_utils import lookup_addresses
from .utils.wordlist_utils import parse_wordlist


class ResolutionEngine:
    """
    Resolves `<word>.<domain>` for every word of a wordlist, one thread task per word.

    `resolver` is anything with a dnspython style `resolve(name, rdtype)`; it is shared by
    all tasks and never reconfigured. With `threads=None` the pool grows with the wordlist
    up to DEFAULT_MAX_WORKERS; a number sets the cap explicitly. The cap only affects how
    long a scan takes, never what it finds.
    """

    def __init__(self, domain, resolver, threads=None):
        self.domain = domain.strip().lower().rstrip('.')
        self.resolver = resolver
        if threads is not None and threads < 1:
            raise ValueError(f"threads must be a positive integer, got {threads!r}")
        self.threads = threads
        self._stop = threading.Event()

    def candidate_name(self, word):
        return f"{word.strip().lower()}.{self.domain}"

    def cancel(self):
        """
        Makes tasks of the current run that have not started yet skip their lookup.
        They still count as progress. The next call to `run` starts uncancelled.
        """
        self._stop.set()

    @property
    def cancelled(self):
        return self._stop.is_set()

    def _resolve_candidate(self, state, word):
        full_domain = self.candidate_name(word)
        try:
            if self._stop.is_set():
                return
            addresses = lookup_addresses(self.resolver, full_domain)
            state.merge_host(full_domain, addresses)
            logger.debug(f" [+] Resolved {full_domain}: {', '.join(addresses)}")
        except LookupFailure as e:
            logger.debug(f" [-] {e}")
        except Exception as e:
            logger.error(f" [!] Unexpected error while resolving {full_domain}: {e}")
        finally:
            # Always last, even on failure: the tracker only returns once every task counted itself
            state.record_attempt()

    def run(self, words, on_progress=None):
        """Resolves every non-blank word and returns a snapshot of the finished ScanState."""
        self._stop.clear()
        words = parse_wordlist(words)
        total = len(words)
        state = ScanState(self.domain)
        tracker = ProgressTracker(state, total, on_progress)

        if total == 0:
            logger.info("[*] Wordlist is empty, nothing to resolve.")
            tracker.wait()
            return state.snapshot()

        workers = self.threads or min(total, DEFAULT_MAX_WORKERS)
        logger.info(f"[*] Resolving {total} candidates under {self.domain} ({workers} concurrent lookups)...")

        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix='subsweep')
        try:
            for word in words:
                executor.submit(self._resolve_candidate, state, word)
            tracker.wait()
        except KeyboardInterrupt:
            logger.warning(" [!] Interrupted, cancelling pending lookups.")
            self.cancel()
            raise
        finally:
            executor.shutdown(wait=True, cancel_futures=self.cancelled)

        logger.info(f"[*] Resolution completed. {len(state)} of {total} candidates resolved.")
        return state.snapshot()
