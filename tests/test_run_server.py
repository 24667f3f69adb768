from __future__ import annotations

import logging
import time

import pytest

from lightnet.config import Settings
from lightnet.core.errors import AlreadyExistsError
from lightnet.core.registry import NetworkRegistry

DEPLOYER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"


def _wait_alive(url: str, timeout_s: float = 5.0) -> None:
    from lightnet.runtime.server import _is_server_alive

    deadline = time.monotonic() + timeout_s
    while time.monotonic() < deadline:
        if _is_server_alive(url.rstrip("/")):
            return
        time.sleep(0.05)
    raise RuntimeError(f"server at {url} did not come up")


def test_run_serves_registry_over_http() -> None:
    import lightnet

    reg = NetworkRegistry()
    server = lightnet.run(host="127.0.0.1", port=0, new_server=True, registry=reg, settings=Settings())
    _wait_alive(server.url)

    client = server.client(DEPLOYER)
    assert client.register("LiveNet", "Lab", 3) == DEPLOYER
    assert reg.total() == 1
    assert client.total() == 1

    try:
        client.register("LiveNet", "Lab", 3)
    except AlreadyExistsError:
        pass
    else:
        raise AssertionError("second registration should fail")


def test_run_attaches_to_existing_server() -> None:
    import lightnet

    server = lightnet.run(host="127.0.0.1", port=0, new_server=True, registry=NetworkRegistry(), settings=Settings())
    _wait_alive(server.url)

    attached = lightnet.run(host=server.host, port=server.port, settings=Settings())
    assert attached.url.rstrip("/") == f"http://{server.host}:{server.port}"


def test_run_new_server_ignores_env_url() -> None:
    import lightnet

    s1 = lightnet.run(host="127.0.0.1", port=0, new_server=True, registry=NetworkRegistry(), settings=Settings())
    _wait_alive(s1.url)

    env = Settings(url=f"http://{s1.host}:{s1.port}")
    s2 = lightnet.run(host="127.0.0.1", port=0, new_server=True, registry=NetworkRegistry(), settings=env)
    assert (s2.host, s2.port) != (s1.host, s1.port)

    attached = lightnet.run(host="127.0.0.1", port=0, settings=env)
    assert (attached.host, attached.port) == (s1.host, s1.port)


def test_find_free_port_returns_bindable_port() -> None:
    import socket

    from lightnet.runtime.server import _find_free_port

    port = _find_free_port("127.0.0.1")
    assert 0 < port < 65536
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", port))


def test_attach_with_registry_warns(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    import lightnet

    # setup_logging() may have stopped propagation on the package logger.
    monkeypatch.setattr(logging.getLogger("lightnet"), "propagate", True)

    server = lightnet.run(host="127.0.0.1", port=0, new_server=True, registry=NetworkRegistry(), settings=Settings())
    _wait_alive(server.url)

    with caplog.at_level(logging.INFO, logger="lightnet.runtime.server"):
        plain = lightnet.run(host=server.host, port=server.port, settings=Settings())
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
    assert plain.port == server.port

    caplog.clear()
    with caplog.at_level(logging.INFO, logger="lightnet.runtime.server"):
        attached = lightnet.run(host=server.host, port=server.port, registry=NetworkRegistry(), settings=Settings())
    assert attached.port == server.port
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "registry is not served" in warnings[0].getMessage()
