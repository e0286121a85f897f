"""Tests for the deployment client, run against the app in-process."""

import pytest
import requests

from cicd_demo_api import client as client_module
from cicd_demo_api.client import DemoApiClient, verify_deployment


BASE_URL = "http://demo.test"


class InProcessSession:
    """Minimal ``requests.Session`` stand-in backed by FastAPI's TestClient."""

    def __init__(self, test_client):
        self.test_client = test_client
        self.calls = []

    def request(self, method, url, json=None, timeout=None):
        self.calls.append((method, url, timeout))
        path = url[len(BASE_URL):]
        r = self.test_client.request(method, path, json=json)
        response = requests.Response()
        response.status_code = r.status_code
        response.reason = r.reason_phrase
        response.url = url
        response.headers.update(r.headers)
        response._content = r.content
        return response


class DownSession:
    def request(self, method, url, json=None, timeout=None):
        raise requests.ConnectionError(f"cannot reach {url}")


@pytest.fixture
def api(client):
    return DemoApiClient(BASE_URL, session=InProcessSession(client), timeout=3)


@pytest.fixture
def down_api():
    return DemoApiClient(BASE_URL, session=DownSession())


class TestDemoApiClient:
    def test_base_url_trailing_slash_stripped(self, client):
        session = InProcessSession(client)
        DemoApiClient(BASE_URL + "/", session=session, timeout=3).health()
        assert session.calls == [("GET", BASE_URL + "/health", 3)]

    def test_health(self, api):
        data, error = api.health()
        assert error is None
        assert data["status"] == "healthy"

    def test_list_users_unwraps_envelope(self, api):
        users, error = api.list_users()
        assert error is None
        assert [u["name"] for u in users] == ["John Doe", "Jane Smith"]

    def test_create_user_and_post(self, api):
        user, error = api.create_user("Alice", "alice@example.com")
        assert error is None
        assert user == {"id": 3, "name": "Alice", "email": "alice@example.com", "role": "user"}

        post, error = api.create_post("Hello", "World", user["id"])
        assert error is None
        assert post["author"] == "Alice"

        fetched, _ = api.get_post(post["id"])
        assert fetched == post

    def test_error_carries_status_and_message(self, api):
        data, error = api.get_user(999)
        assert data is None
        assert error == {"status_code": 404, "message": "User not found"}

    def test_create_post_invalid_user(self, api):
        _, error = api.create_post("T", "C", 999)
        assert error == {"status_code": 400, "message": "Invalid userId"}

    def test_unknown_route_message(self, api):
        _, error = api._request("GET", "/missing")
        assert error == {"status_code": 404, "message": "Route not found"}

    def test_reset_and_dashboard(self, api):
        result, error = api.reset()
        assert error is None
        assert result["success"] is True
        summary, _ = api.dashboard()
        assert summary["totalUsers"] == 0

    def test_network_error(self, down_api):
        data, error = down_api.version()
        assert data is None
        assert error["status_code"] is None
        assert "cannot reach" in error["message"]


class TestVerifyDeployment:
    def test_healthy_deployment_passes(self, api):
        assert verify_deployment(api, expected_version="2.3.4", expected_commit="abc1234") == []

    def test_version_mismatch(self, api):
        problems = verify_deployment(api, expected_version="9.9.9")
        assert problems == ["version is '2.3.4', expected '9.9.9'"]

    def test_commit_mismatch(self, api):
        problems = verify_deployment(api, expected_commit="fffffff")
        assert problems == ["gitCommit is 'abc1234', expected 'fffffff'"]

    def test_unreachable_service(self, down_api):
        problems = verify_deployment(down_api, expected_version="1.0.0")
        assert len(problems) == 3
        assert all("unreachable" in p for p in problems)


class TestMain:
    def test_exit_codes(self, client, monkeypatch, capsys):
        def build(base_url, timeout):
            return DemoApiClient(base_url, session=InProcessSession(client), timeout=timeout)

        monkeypatch.setattr(client_module, "DemoApiClient", build)

        assert client_module.main(["--base-url", BASE_URL, "--expect-version", "2.3.4"]) == 0
        assert "healthy" in capsys.readouterr().out

        assert client_module.main(["--base-url", BASE_URL, "--expect-version", "0.0.1"]) == 1
        assert "expected '0.0.1'" in capsys.readouterr().err
