"""End-to-end tests against the bundled example.thtc."""

from pathlib import Path

from thetha_core import parse, parse_from_source
from thetha_core.values import Null, VBool, VDict, VFloat, VInteger, VList, VString

EXAMPLE = Path(__file__).resolve().parent.parent / "example.thtc"


def test_example_sections():
    doc = parse_from_source(EXAMPLE)
    assert list(doc) == ["general", "database", "database/advanced", "api"]

def test_example_general():
    general = parse_from_source(EXAMPLE).section("general")
    assert general == {
        "app_name": VString("TestApp"),
        "version": VFloat(1.0),
        "enabled": VBool(True),
        "owner": Null,
    }

def test_example_nested_values():
    doc = parse_from_source(EXAMPLE)
    assert doc.get("database", "replicas") == VList([VString("db-1"), VString("db-2")])
    assert doc.get("database/advanced", "retry") == VDict(
        {"attempts": VInteger(3), "backoff": VFloat(1.5)}
    )
    routes = doc.get("api", "routes")
    assert routes.items[1] == VList([VString("/items"), VString("POST")])

def test_example_to_dict():
    data = parse_from_source(EXAMPLE).to_dict()
    assert data["api"]["headers"] == {
        "Authorization": "Bearer token",
        "Content-Type": "application/json",
    }
    assert data["database/advanced"]["pool_size"] == 10

def test_file_and_text_agree():
    assert parse_from_source(EXAMPLE) == parse(EXAMPLE.read_text(encoding="utf-8"))
