import sys
import types
import argparse

import pytest

from personapi.cli import api


@pytest.fixture
def fake_server(monkeypatch):
    """Replace uvicorn and the app module; returns the recorded ``run`` calls."""
    calls = []
    app_module = types.ModuleType("personapi.api.main")
    app_module.app = object()
    uvicorn = types.ModuleType("uvicorn")
    uvicorn.run = lambda app, **kwargs: calls.append((app, kwargs))
    monkeypatch.setitem(sys.modules, "personapi.api.main", app_module)
    monkeypatch.setitem(sys.modules, "uvicorn", uvicorn)
    return types.SimpleNamespace(app=app_module.app, calls=calls)


def _parse(*argv):
    parser = argparse.ArgumentParser()
    api.register_subcommands(parser.add_subparsers(dest="subcommand", required=True))
    return parser.parse_args(list(argv))


def test_start_defaults():
    args = _parse("start")
    assert (args.host, args.port) == ("localhost", 8000)


def test_start_serves_app_on_requested_address(fake_server):
    api.dispatch(_parse("start", "--host", "1.2.3.4", "--port", "1234"))
    assert fake_server.calls == [(fake_server.app, {"host": "1.2.3.4", "port": 1234})]


def test_status_does_not_serve(fake_server):
    api.dispatch(_parse("status"))
    assert fake_server.calls == []


def test_unknown_subcommand_raises():
    with pytest.raises(ValueError, match="No handler for api subcommand"):
        api.dispatch(types.SimpleNamespace(subcommand="restart"))
