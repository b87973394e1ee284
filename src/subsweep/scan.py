from .config import logger, DEFAULT_RESOLVER, DEFAULT_TIMEOUT
from .engine import ResolutionEngine
from .utils.dns_utils import initialize_dns_resolver, select_resolver_config
from .utils.wordlist_utils import parse_wordlist


def run_scan(wordlist, domain, resolver_name=DEFAULT_RESOLVER, on_progress=None,
             threads=None, timeout=DEFAULT_TIMEOUT, resolver=None):
    """
    Brute forces subdomains of `domain` and returns the finished ScanState.

    `wordlist` is loaded text or an iterable of lines; blank lines are skipped.
    `on_progress(count)` is called as attempts complete, at least once with the final count.
    `resolver` replaces the client built from `resolver_name` when given.

    Raises ResolverInitError before any lookup if the resolver cannot be built. Failed
    lookups are not errors: they just contribute no host.
    """
    words = parse_wordlist(wordlist)

    if resolver is None:
        config = select_resolver_config(resolver_name)
        resolver = initialize_dns_resolver(config, timeout)
        logger.debug(f"Using resolver '{config.name}' for {len(words)} candidates.")

    engine = ResolutionEngine(domain, resolver, threads=threads)
    return engine.run(words, on_progress)
