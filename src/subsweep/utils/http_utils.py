import requests
import backoff

from ..config import logger, USER_AGENT, DEFAULT_TIMEOUT


def get_session():
    session = requests.Session()
    session.headers.update({'User-Agent': USER_AGENT})
    return session


@backoff.on_exception(backoff.expo, requests.exceptions.RequestException, max_tries=5, jitter=backoff.full_jitter, logger=logger)
def make_request(url, method="GET", timeout=DEFAULT_TIMEOUT, headers=None, allow_redirects=True):
    session = get_session()
    req_headers = session.headers.copy()
    if headers:
        req_headers.update(headers)

    response = session.request(method, url, timeout=timeout, headers=req_headers, allow_redirects=allow_redirects)
    response.raise_for_status()
    return response
