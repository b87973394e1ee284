import requests

from ..config import logger, DEFAULT_TIMEOUT
from ..errors import WordlistError
from .http_utils import make_request


def is_remote(source):
    return source.lower().startswith(('http://', 'https://'))


def load_wordlist(source, timeout=DEFAULT_TIMEOUT):
    """Reads a wordlist from a local path or an http(s) URL and returns its text."""
    if is_remote(source):
        logger.info(f"[*] Downloading wordlist from {source}...")
        try:
            response = make_request(source, timeout=timeout)
        except requests.exceptions.RequestException as e:
            raise WordlistError(f"Could not download wordlist {source}: {e}") from e
        return response.text

    try:
        with open(source, 'r', encoding='utf-8', errors='replace') as f:
            return f.read()
    except FileNotFoundError as e:
        raise WordlistError(f"Wordlist not found at {source}") from e
    except OSError as e:
        raise WordlistError(f"Could not read wordlist {source}: {e}") from e


def parse_wordlist(wordlist):
    """Accepts wordlist text or an iterable of lines; returns the stripped, non-empty words."""
    if isinstance(wordlist, str):
        wordlist = wordlist.splitlines()
    return [line.strip() for line in wordlist if line and line.strip()]
