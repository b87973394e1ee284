import copy
import threading


def normalize_domain(domain):
    """Lower-cases a domain and gives it the trailing dot of its fully-qualified form."""
    domain = domain.strip().lower().rstrip('.')
    return f"{domain}."


class Host:
    """A resolved subdomain and the addresses found for it."""

    def __init__(self, name, addresses=None):
        self.name = name
        self.addresses = list(addresses) if addresses else []

    def add_address(self, address):
        """Records an address once. Returns True if it was new."""
        if address in self.addresses:
            return False
        self.addresses.append(address)
        return True

    def to_dict(self):
        return {'name': self.name, 'ips': list(self.addresses)}

    def __repr__(self):
        return f"Host(name={self.name!r}, addresses={self.addresses!r})"


class ScanState:
    """
    Shared state of one brute force run.

    Every resolution thread merges into the same instance, so all reads and writes go through
    `data_lock`. `progress_changed` is a condition bound to that lock and is notified on each
    completed attempt, which is what ProgressTracker waits on.
    """

    def __init__(self, domain):
        self.domain = normalize_domain(domain)
        self.hosts = {}
        self.progress = 0

        # Single lock for all access
        self.data_lock = threading.Lock()
        self.progress_changed = threading.Condition(self.data_lock)

    # --- hosts ---

    def contains_host(self, name):
        with self.data_lock:
            return name in self.hosts

    def host_contains_address(self, name, address):
        with self.data_lock:
            host = self.hosts.get(name)
            return host is not None and address in host.addresses

    def get_host(self, name):
        with self.data_lock:
            host = self.hosts.get(name)
            return copy.deepcopy(host) if host else None

    def merge_host(self, name, addresses):
        """
        Adds the addresses of a successful lookup.

        The host is only created when at least one address is given, and the check, insert
        and append happen in one critical section so concurrent first lookups of the same
        name cannot produce two entries. Returns the number of new addresses.
        """
        addresses = [str(a) for a in addresses]
        if not addresses:
            return 0
        with self.data_lock:
            host = self.hosts.get(name)
            if host is None:
                host = Host(name)
                self.hosts[name] = host
            return sum(1 for address in addresses if host.add_address(address))

    def host_list(self):
        with self.data_lock:
            return [copy.deepcopy(h) for h in self.hosts.values()]

    # --- progress ---

    def record_attempt(self):
        """Counts one finished attempt and wakes anything waiting on progress."""
        with self.progress_changed:
            self.progress += 1
            self.progress_changed.notify_all()
            return self.progress

    def is_progress_pending(self, total):
        with self.data_lock:
            return self.progress < total

    # --- export ---

    def snapshot(self):
        """Returns an independent copy, safe to hand to output formatting."""
        clone = ScanState(self.domain)
        with self.data_lock:
            clone.hosts = copy.deepcopy(self.hosts)
            clone.progress = self.progress
        return clone

    def to_dict(self):
        with self.data_lock:
            return {
                'hosts': [h.to_dict() for h in self.hosts.values()],
                'domain': self.domain,
                'progress': self.progress,
            }

    def __len__(self):
        with self.data_lock:
            return len(self.hosts)

    def __repr__(self):
        return f"ScanState(domain={self.domain!r}, hosts={len(self)}, progress={self.progress})"
