import ipaddress
import threading

import dns.resolver
import pytest


class FakeResolver:
    """Stands in for dns.resolver.Resolver. Unknown names raise NXDOMAIN."""

    def __init__(self, records, delay=0.0):
        self.records = records
        self.delay = delay
        self.queries = []
        self._lock = threading.Lock()

    def resolve(self, name, rdtype='A', **kwargs):
        with self._lock:
            self.queries.append((name, rdtype))
        if self.delay:
            threading.Event().wait(self.delay)
        if name not in self.records:
            raise dns.resolver.NXDOMAIN()
        version = 4 if rdtype == 'A' else 6
        answers = [ip for ip in self.records[name] if ipaddress.ip_address(ip).version == version]
        if not answers:
            raise dns.resolver.NoAnswer()
        return answers


@pytest.fixture
def fake_resolver():
    return FakeResolver({
        "a.example.com": ["1.1.1.1"],
        "b.example.com": [],
        "c.example.com": ["2.2.2.2", "2.2.2.3"],
        "v6.example.com": ["10.0.0.1", "2001:db8::1"],
    })
