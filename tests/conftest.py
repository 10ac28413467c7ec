import pytest

from artistexplorer.credentials import Credentials


@pytest.fixture
def credentials():
    return Credentials(client_id="cid", client_secret="secret")


@pytest.fixture
def token_payload():
    return {
        "access_token": "access123",
        "token_type": "Bearer",
        "expires_in": 3600,
    }


@pytest.fixture
def properties_file(tmp_path):
    # Java-style properties file as shipped alongside the app
    path = tmp_path / "spotify.properties"
    path.write_text("client_id=cid\nclient_secret=secret\n")
    return path


@pytest.fixture(autouse=True)
def no_ambient_credentials(monkeypatch):
    for var in ("SPOTIFY_CLIENT_ID", "SPOTIFY_CLIENT_SECRET", "ARTISTEXPLORER_CREDENTIALS"):
        monkeypatch.delenv(var, raising=False)
