"""CI/CD Demo API client and deployment smoke check.

This module defines a thin client around the demo service's REST API
and a ``verify_deployment`` helper that pipelines run after a rollout.
The client uses the ``requests`` library internally.

Every client method returns a tuple ``(data, error)``: on success
``data`` holds the parsed JSON body and ``error`` is ``None``; on
failure ``data`` is ``None`` and ``error`` is a dictionary with the
keys ``status_code`` and ``message``.  Network problems are reported
the same way with ``status_code`` set to ``None``, so callers never
need to catch ``requests`` exceptions.

Run it from the command line::

    cicd-demo-verify --base-url http://localhost:3000 --expect-version 1.2.0
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class DemoApiClient:
    """Client for the CI/CD Demo API."""

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 10,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/users``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, json=json_body, timeout=self.timeout)
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("error") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _unwrap(result: Result) -> Result:
        """Strip the ``{"success": true, "data": ...}`` envelope."""
        data, error = result
        if error or not isinstance(data, dict):
            return data, error
        return data.get("data"), None

    # ------------------------------------------------------------------
    # System endpoints
    # ------------------------------------------------------------------
    def health(self) -> Result:
        return self._request("GET", "/health")

    def version(self) -> Result:
        return self._request("GET", "/version")

    def metrics(self) -> Result:
        return self._request("GET", "/metrics")

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def list_users(self) -> Result:
        return self._unwrap(self._request("GET", "/api/users"))

    def get_user(self, user_id: int) -> Result:
        return self._unwrap(self._request("GET", f"/api/users/{user_id}"))

    def create_user(self, name: str, email: str, role: Optional[str] = None) -> Result:
        payload: Dict[str, Any] = {"name": name, "email": email}
        if role is not None:
            payload["role"] = role
        return self._unwrap(self._request("POST", "/api/users", json_body=payload))

    # ------------------------------------------------------------------
    # Posts
    # ------------------------------------------------------------------
    def list_posts(self) -> Result:
        return self._unwrap(self._request("GET", "/api/posts"))

    def get_post(self, post_id: int) -> Result:
        return self._unwrap(self._request("GET", f"/api/posts/{post_id}"))

    def create_post(self, title: str, content: str, user_id: int) -> Result:
        payload = {"title": title, "content": content, "userId": user_id}
        return self._unwrap(self._request("POST", "/api/posts", json_body=payload))

    # ------------------------------------------------------------------
    # Data management
    # ------------------------------------------------------------------
    def dashboard(self) -> Result:
        return self._unwrap(self._request("GET", "/api/dashboard"))

    def reset(self) -> Result:
        return self._request("POST", "/api/reset")


def verify_deployment(
    client: DemoApiClient,
    expected_version: Optional[str] = None,
    expected_commit: Optional[str] = None,
) -> List[str]:
    """Check that a deployed service is healthy and runs the expected build.

    Returns a list of human readable problems; an empty list means the
    deployment passed.  The check only reads, so it is safe to run
    against production.
    """
    problems: List[str] = []

    health, error = client.health()
    if error:
        problems.append(f"/health unreachable: {error['message']}")
    elif not isinstance(health, dict) or health.get("status") != "healthy":
        status = health.get("status") if isinstance(health, dict) else None
        problems.append(f"/health reports status {status!r}")

    version, error = client.version()
    if error:
        problems.append(f"/version unreachable: {error['message']}")
    else:
        version = version or {}
        if expected_version and version.get("version") != expected_version:
            problems.append(f"version is {version.get('version')!r}, expected {expected_version!r}")
        if expected_commit and version.get("gitCommit") != expected_commit:
            problems.append(f"gitCommit is {version.get('gitCommit')!r}, expected {expected_commit!r}")

    _, error = client.metrics()
    if error:
        problems.append(f"/metrics unreachable: {error['message']}")

    return problems


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Verify a CI/CD Demo API deployment.")
    ap.add_argument("--base-url", default="http://localhost:3000", help="Service base URL")
    ap.add_argument("--expect-version", help="Fail unless /version reports this version")
    ap.add_argument("--expect-commit", help="Fail unless /version reports this git commit")
    ap.add_argument("--timeout", type=float, default=10, help="Request timeout in seconds")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    client = DemoApiClient(args.base_url, timeout=args.timeout)
    problems = verify_deployment(client, args.expect_version, args.expect_commit)
    if problems:
        for problem in problems:
            print(f"[!] {problem}", file=sys.stderr)
        return 1
    print(f"[+] Deployment at {args.base_url} is healthy")
    return 0


if __name__ == "__main__":
    sys.exit(main())
