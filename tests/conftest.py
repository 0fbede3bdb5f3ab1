import json
import logging

import pytest
import requests


class DummyResp:
    def __init__(self, status_code=200, payload=None, text=None, reason=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else (json.dumps(payload) if payload is not None else "")
        self.reason = reason

    def json(self):
        if self._payload is None:
            # как requests: битое тело -> JSONDecodeError (наследник ValueError)
            return json.loads(self.text)
        return self._payload


class FakeApi:
    """
    Подменяет requests.get: отдаёт ответы по очереди и запоминает каждый вызов.
    Когда ответы кончились, отдаёт пустую страницу.
    """

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []

    def __call__(self, url, headers=None, params=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "params": dict(params or {}), "timeout": timeout})
        if not self.responses:
            return DummyResp(200, {"items": []})
        resp = self.responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp

    @property
    def offsets(self):
        return [c["params"]["start-index"] for c in self.calls]


class PerUserApi:
    """Разные сценарии для разных пользователей: {user: [responses...]}."""

    def __init__(self, scenarios):
        self.apis = {user: FakeApi(resps) for user, resps in scenarios.items()}
        self.calls = []

    def __call__(self, url, headers=None, params=None, timeout=None):
        user = url.rstrip("/").split("/")[-2]
        self.calls.append({"url": url, "headers": headers, "params": dict(params or {})})
        return self.apis[user](url, headers=headers, params=params, timeout=timeout)


def make_page(start, size, prefix="m"):
    return [{"id": f"{prefix}{i}", "message": f"msg {i}"} for i in range(start, start + size)]


def page_resp(items):
    return DummyResp(200, {"items": items, "startIndex": 0, "maxResults": len(items)})


@pytest.fixture
def fake_api_factory():
    def _factory(*responses):
        return FakeApi(responses)

    return _factory


@pytest.fixture
def per_user_api_factory():
    def _factory(scenarios):
        return PerUserApi(scenarios)

    return _factory


@pytest.fixture
def refuse_network():
    # если код вдруг полезет в сеть — тест упадёт сразу
    def _get(*args, **kwargs):
        raise AssertionError("network MUST NOT be touched")

    return _get


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")


@pytest.fixture
def quiet_logger():
    lg = logging.getLogger("histexport.test")
    lg.setLevel(logging.DEBUG)
    return lg
