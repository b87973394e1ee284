import time
from collections import namedtuple

import dns.exception
import dns.resolver

from ..config import logger, RESOLVERS, DEFAULT_RESOLVER, DEFAULT_TIMEOUT
from ..errors import LookupFailure, ResolverInitError

ResolverConfig = namedtuple('ResolverConfig', ['name', 'nameservers'])

ADDRESS_RECORD_TYPES = ('A', 'AAAA')


def select_resolver_config(name):
    """
    Maps a resolver name to its nameservers.

    Only exact "cloudflare" and "quad9" are recognised; anything else falls back to google.
    """
    if name not in RESOLVERS:
        name = DEFAULT_RESOLVER
    return ResolverConfig(name, tuple(RESOLVERS[name]))


def initialize_dns_resolver(config, timeout=DEFAULT_TIMEOUT):
    """Builds the one dnspython resolver shared by every lookup of a scan."""
    if not config.nameservers:
        raise ResolverInitError(f"No DNS nameservers configured for resolver '{config.name}'.")
    if timeout is None or timeout <= 0:
        raise ResolverInitError(f"Invalid resolver timeout: {timeout!r}")

    try:
        resolver = dns.resolver.Resolver(configure=False)
        resolver.nameservers = list(config.nameservers)
        resolver.timeout = timeout / 2
        resolver.lifetime = timeout
    except (ValueError, TypeError, dns.exception.DNSException) as e:
        raise ResolverInitError(f"Could not initialize resolver '{config.name}': {e}") from e

    logger.debug(f"Resolver '{config.name}' ready with nameservers {', '.join(config.nameservers)}.")
    return resolver


def lookup_addresses(resolver, name):
    """
    Returns every A and AAAA address of `name`.

    The resolver's `lifetime` is a budget for the whole lookup: the AAAA query only gets
    what the A query left, and is skipped once it is spent.
    Raises LookupFailure when nothing was found, whatever the cause.
    """
    budget = getattr(resolver, 'lifetime', None)
    deadline = time.monotonic() + budget if budget else None

    addresses = []
    for rtype in ADDRESS_RECORD_TYPES:
        kwargs = {}
        if deadline is not None:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                logger.debug(f"Lookup budget spent before {rtype} query for {name}.")
                break
            kwargs['lifetime'] = remaining
        try:
            answers = resolver.resolve(name, rtype, **kwargs)
            addresses.extend(str(a) for a in answers)
        except dns.resolver.NXDOMAIN as e:
            raise LookupFailure(name, 'NXDOMAIN') from e
        except dns.resolver.NoAnswer:
            pass
        except (dns.exception.DNSException, OSError) as e:
            logger.debug(f"Error resolving {rtype} for {name}: {e}")

    if not addresses:
        raise LookupFailure(name, 'no A/AAAA records')
    return addresses
