"""Shared test doubles for director HTTP traffic."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

FIXTURES = Path(__file__).resolve().parent / "fixtures"

DIRECTOR_URL = "https://10.0.0.6:25555"
UAA_URL = "https://10.0.0.6:8443"

_ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def read_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


def normalize(text: str) -> str:
    """Collapse whitespace and drop colour codes from console output."""
    return " ".join(_ANSI_ESCAPE.sub("", text).split())


class _StubResponse:
    def __init__(self, status_code: int, payload: Any = None) -> None:
        self.status_code = status_code
        if isinstance(payload, str):
            self.text = payload
        else:
            self.text = json.dumps(payload) if payload is not None else ""

    def json(self) -> Any:
        return json.loads(self.text)


class _StubSession:
    """Routes (method, url) pairs to canned responses and records every call."""

    def __init__(self, routes: dict[tuple[str, str], object]) -> None:
        self._routes = dict(routes)
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def _dispatch(self, method: str, url: str, kwargs: dict[str, Any]) -> object:
        self.calls.append((method, url, kwargs))
        try:
            result = self._routes[(method, url)]
        except KeyError:
            raise AssertionError(f"unexpected request: {method.upper()} {url}")
        if isinstance(result, Exception):
            raise result
        return result

    def get(self, url: str, **kwargs: Any) -> object:
        return self._dispatch("get", url, kwargs)

    def post(self, url: str, **kwargs: Any) -> object:
        return self._dispatch("post", url, kwargs)

    def requests_for(self, method: str) -> list[tuple[str, str, dict[str, Any]]]:
        return [call for call in self.calls if call[0] == method]


def listing(*deployments: tuple[str, tuple[str, ...]]) -> list[dict[str, Any]]:
    """Build a /deployments payload from (name, release names) pairs."""
    return [
        {
            "name": name,
            "releases": [{"name": release, "version": "1"} for release in releases],
            "stemcells": [],
        }
        for name, releases in deployments
    ]


CF_DIEGO_RELEASES = ("cf", "diego", "garden-linux", "etcd")


def basic_director(
    manifest_text: str,
    deployments: list[dict[str, Any]] | None = None,
    deployment_name: str = "cf-diego",
) -> _StubSession:
    """A director using basic auth that serves one manifest."""
    if deployments is None:
        deployments = listing((deployment_name, CF_DIEGO_RELEASES))
    return _StubSession(
        {
            ("get", f"{DIRECTOR_URL}/info"): _StubResponse(
                200, {"name": "bosh", "user_authentication": {"type": "basic"}}
            ),
            ("get", f"{DIRECTOR_URL}/deployments"): _StubResponse(200, deployments),
            ("get", f"{DIRECTOR_URL}/deployments/{deployment_name}"): _StubResponse(
                200, {"manifest": manifest_text}
            ),
        }
    )
