"""Exception hierarchy shared by the credential, auth and search layers."""


class ArtistExplorerError(RuntimeError):
    """Base class for every error raised by artistexplorer."""


class CredentialsError(ArtistExplorerError):
    """Raised when client credentials are missing or unreadable."""


class AuthError(ArtistExplorerError):
    """Raised when a bearer token cannot be obtained."""


class AuthRequestFailed(AuthError):
    """The token request failed at the transport or HTTP level."""


class AuthMalformedResponse(AuthError):
    """The token endpoint answered with something other than a token."""


class SearchError(ArtistExplorerError):
    """Raised when an artist search cannot be completed."""


class SearchRequestFailed(SearchError):
    """The search request failed at the transport or HTTP level."""


class SearchMalformedResponse(SearchError):
    """The search response did not have the expected shape."""
