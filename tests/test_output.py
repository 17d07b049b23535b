"""
Brief: Tests for ptrcname.output console rendering and JSON export.

Inputs:
  - None

Outputs:
  - None
"""

import json

from rich.console import Console

from ptrcname.models import Endpoint, RecordType
from ptrcname.output import ConsoleOutput, JsonExporter


ENDPOINTS = [
    Endpoint("web.example.com", ["web-lb.example.net"], RecordType.CNAME),
    Endpoint("db.example.com", ["198.51.100.7"], RecordType.A, 60),
]


def _console():
    return Console(record=True, width=120, force_terminal=False)


def test_print_endpoints_lists_every_endpoint():
    console = _console()
    ConsoleOutput(console).print_endpoints(ENDPOINTS, {0})
    text = console.export_text()
    assert "web.example.com" in text
    assert "web-lb.example.net" in text
    assert "198.51.100.7" in text
    assert "CNAME" in text


def test_print_summary():
    console = _console()
    ConsoleOutput(console).print_summary(2, 1)
    assert "1 of 2 endpoints published as CNAME, 1 left as-is" in console.export_text()


def test_print_header_and_error():
    console = _console()
    output = ConsoleOutput(console)
    output.print_header("endpoints.json", "dns", 2.0)
    output.print_error("boom")
    text = console.export_text()
    assert "endpoints.json" in text
    assert "Timeout: 2s" in text
    assert "Error: boom" in text


def test_json_export_writes_file(tmp_path):
    path = tmp_path / "nested" / "out.json"

    data = JsonExporter(source="endpoints.json").export(ENDPOINTS, {0}, path)

    assert json.loads(path.read_text()) == data
    assert data["meta"]["generator"] == "ptrcname"
    assert data["meta"]["source"] == "endpoints.json"
    assert data["endpoints"][1] == {
        "dnsName": "db.example.com",
        "targets": ["198.51.100.7"],
        "recordType": "A",
        "recordTTL": 60,
    }
    assert data["summary"]["rewritten_names"] == ["web.example.com"]
