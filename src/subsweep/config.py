import os
import sys
import logging

# Public resolvers selectable by name
RESOLVERS = {
    'google': ['8.8.8.8', '8.8.4.4'],
    'cloudflare': ['1.1.1.1', '1.0.0.1'],
    'quad9': ['9.9.9.9', '149.112.112.112'],
}
DEFAULT_RESOLVER = 'google'

# Seconds allowed for a single lookup (all record types, all nameservers)
DEFAULT_TIMEOUT = 5.0

# Upper bound on concurrent lookups when no thread count is given. Each in-flight
# lookup holds a socket, so this stays well below common file descriptor limits.
DEFAULT_MAX_WORKERS = 200

OUTPUT_FORMATS = ('txt', 'json', 'csv')

# Used by the CLI when no wordlist is given
DEFAULT_WORDLIST = [
    'www', 'mail', 'dev', 'test', 'api', 'blog', 'vpn', 'admin',
    'webmail', 'app', 'cdn', 'sftp', 'docs', 'portal',
]

USER_AGENT = 'subsweep/0.1 (+https://pypi.org/project/subsweep/)'

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

logger = logging.getLogger('subsweep')


def configure_logging(verbose=False):
    """Attach a stderr handler to the package logger (stdout is kept for results)."""
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger


def _env_number(name, cast):
    raw = os.getenv(name, '').strip()
    if not raw:
        return None
    try:
        value = cast(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not a valid {cast.__name__}.")
        return None
    if value <= 0:
        logger.warning(f"Ignoring {name}={raw!r}: must be positive.")
        return None
    return value


# Settings overridable from the environment (loaded from env vars)
def load_settings():
    return {
        'resolver': os.getenv('SUBSWEEP_RESOLVER', '').strip() or DEFAULT_RESOLVER,
        'timeout': _env_number('SUBSWEEP_TIMEOUT', float) or DEFAULT_TIMEOUT,
        'threads': _env_number('SUBSWEEP_THREADS', int),
    }
