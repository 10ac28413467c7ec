"""Send prebuilt :class:`HttpRequest` values with requests."""

from __future__ import annotations

import requests

from artistexplorer.sources.base import HttpRequest

DEFAULT_TIMEOUT = 15


def send_request(request: HttpRequest, timeout: float = DEFAULT_TIMEOUT) -> requests.Response:
    """
    Send ``request`` and return the raw response.

    Transport errors propagate as ``requests.RequestException``; status codes
    are left for the caller to judge.
    """
    if request.method == "GET":
        return requests.get(request.url, headers=request.headers, timeout=timeout)
    if request.method == "POST":
        return requests.post(request.url, data=request.body, headers=request.headers, timeout=timeout)
    raise ValueError(f"Unsupported HTTP method: {request.method}")


def is_success(resp: requests.Response) -> bool:
    return 200 <= resp.status_code < 300


def describe_failure(resp: requests.Response) -> str:
    return f"HTTP {resp.status_code}: {resp.text}"
