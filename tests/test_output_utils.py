import json

import pytest

from subsweep.errors import SerializationError
from subsweep.models import ScanState
from subsweep.utils import output_utils


@pytest.fixture
def scan():
    state = ScanState("domain.com")
    state.merge_host("sub.domain.com", ["0.0.0.0", "0.0.0.1"])
    state.merge_host("www.domain.com", ["1.2.3.4"])
    state.record_attempt()
    state.record_attempt()
    return state


def test_to_pairs(scan):
    assert output_utils.to_pairs(scan) == [
        ("sub.domain.com", "0.0.0.0"),
        ("sub.domain.com", "0.0.0.1"),
        ("www.domain.com", "1.2.3.4"),
    ]


def test_render_text(scan):
    assert output_utils.render_text(scan) == "sub.domain.com 0.0.0.0\nsub.domain.com 0.0.0.1\nwww.domain.com 1.2.3.4"
    assert output_utils.render_text(scan, sep=" || ").startswith("sub.domain.com || 0.0.0.0")


def test_render_csv(scan):
    assert output_utils.render_csv(scan).splitlines() == [
        "Subdomain,Ip",
        "sub.domain.com,0.0.0.0",
        "sub.domain.com,0.0.0.1",
        "www.domain.com,1.2.3.4",
    ]


def test_render_csv_without_hosts():
    assert output_utils.render_csv(ScanState("domain.com")) == "Subdomain,Ip"


def test_render_json(scan):
    data = json.loads(output_utils.render_json(scan))
    assert data["domain"] == "domain.com."
    assert data["progress"] == 2
    assert {"name": "www.domain.com", "ips": ["1.2.3.4"]} in data["hosts"]


def test_render_json_failure(monkeypatch, scan):
    monkeypatch.setattr(scan, "to_dict", lambda: {"bad": object()})
    with pytest.raises(SerializationError):
        output_utils.render_json(scan)


def test_render_unknown_format_falls_back_to_text(scan):
    assert output_utils.render(scan, "xml") == output_utils.render_text(scan)


def test_write_output(tmp_path, scan):
    path = tmp_path / "out.csv"
    output_utils.write_output(output_utils.render_csv(scan), path)
    assert path.read_text().endswith("www.domain.com,1.2.3.4\n")
