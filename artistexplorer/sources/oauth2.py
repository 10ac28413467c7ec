"""OAuth2 client-credentials authentication helpers."""

from __future__ import annotations

import base64
from abc import ABC, abstractmethod
from typing import Any

import requests

from artistexplorer.credentials import Credentials
from artistexplorer.exceptions import AuthMalformedResponse, AuthRequestFailed
from artistexplorer.logger import get_logger
from artistexplorer.sources.base import HttpRequest
from artistexplorer.sources.http import DEFAULT_TIMEOUT, describe_failure, is_success, send_request

logger = get_logger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def basic_auth_header(credentials: Credentials) -> str:
    """Return ``Basic base64(id:secret)`` without line wrapping."""
    raw = f"{credentials.client_id}:{credentials.client_secret}".encode("utf-8")
    return "Basic " + base64.b64encode(raw).decode("ascii")


def build_token_request(token_url: str, credentials: Credentials) -> HttpRequest:
    """Build the client-credentials token request."""
    return HttpRequest(
        method="POST",
        url=token_url,
        headers={
            "Authorization": basic_auth_header(credentials),
            "Content-Type": FORM_CONTENT_TYPE,
        },
        body="grant_type=client_credentials",
    )


def parse_token_response(payload: Any) -> str:
    """
    Extract ``access_token`` from a decoded token response.

    Raises:
        AuthMalformedResponse: If the payload carries no string token
    """
    if not isinstance(payload, dict):
        raise AuthMalformedResponse("Token response is not a JSON object")
    token = payload.get("access_token")
    if not isinstance(token, str):
        raise AuthMalformedResponse("Token response has no access_token")
    return token


class ClientCredentialsAuthenticator(ABC):
    """
    Abstract base class for the OAuth2 client-credentials grant.

    Each call to :meth:`authenticate` makes exactly one token request; the
    resulting token is returned to the caller and not kept.
    """

    def __init__(self, credentials: Credentials, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        """
        Initialize the authenticator.

        Args:
            credentials: Client id / secret pair, read once by the caller
            timeout: Seconds to wait for the token endpoint
        """
        self.credentials = credentials
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Abstract methods - must be implemented by subclasses
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def token_url(self) -> str:
        """Return the OAuth2 token endpoint URL."""
        pass

    @property
    @abstractmethod
    def service_name(self) -> str:
        """Return the name of the service (e.g., 'Spotify')."""
        pass

    # ------------------------------------------------------------------
    # Token request
    # ------------------------------------------------------------------

    def build_request(self) -> HttpRequest:
        return build_token_request(self.token_url, self.credentials)

    def authenticate(self) -> str:
        """
        Exchange the client credentials for a bearer access token.

        Returns:
            The access token string

        Raises:
            AuthRequestFailed: On transport errors or a non-2xx status
            AuthMalformedResponse: If the body is not JSON or lacks the token
        """
        request = self.build_request()
        logger.debug(f"Requesting {self.service_name} access token from {request.url}")

        try:
            resp = send_request(request, timeout=self.timeout)
        except requests.RequestException as e:
            raise AuthRequestFailed(f"{self.service_name} token request failed: {e}") from e

        if not is_success(resp):
            raise AuthRequestFailed(f"{self.service_name} token request failed: {describe_failure(resp)}")

        try:
            payload = resp.json()
        except ValueError as e:
            raise AuthMalformedResponse(f"{self.service_name} token response is not valid JSON: {e}") from e

        return parse_token_response(payload)
