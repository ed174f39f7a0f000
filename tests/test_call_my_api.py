import requests

import call_my_api


class FakeResponse:
    def __init__(self, status_code):
        self.status_code = status_code


def test_build_urls():
    urls = call_my_api.build_urls("http://api", 4, 1, 2)

    assert urls == [
        "http://api/api/leagues/4/table",
        "http://api/api/leagues/4/top-scorers",
        "http://api/api/leagues/4/top-assists",
        "http://api/api/head-to-head?teamA=1&teamB=2",
    ]


def test_run_stops_at_first_failure(monkeypatch):
    calls = []
    statuses = iter([200, 500, 200])

    def fake_get(url, timeout):
        calls.append(url)
        return FakeResponse(next(statuses))

    monkeypatch.setattr(call_my_api.requests, "get", fake_get)

    assert call_my_api.run(["a", "b", "c"], delay=0) is False
    assert calls == ["a", "b"]


def test_run_reports_connection_errors(monkeypatch):
    def fake_get(url, timeout):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(call_my_api.requests, "get", fake_get)

    assert call_my_api.run(["a"], delay=0) is False


def test_run_all_ok(monkeypatch):
    monkeypatch.setattr(call_my_api.requests, "get", lambda url, timeout: FakeResponse(200))
    assert call_my_api.run(["a", "b"], delay=0) is True
