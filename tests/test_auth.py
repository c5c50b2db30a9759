import json
from unittest.mock import MagicMock

import pytest

import gphotos_albums.photos.auth as auth_module
from gphotos_albums.photos.auth import SCOPES, GooglePhotosAuth
from gphotos_albums.photos.errors import AuthenticationError


def make_credentials(valid=True, token="access-token"):
    return MagicMock(
        valid=valid,
        expired=not valid,
        token=token,
        refresh_token="refresh-token",
        token_uri="https://oauth2.googleapis.com/token",
        client_id="client-id",
        client_secret="client-secret",
        scopes=list(SCOPES),
    )


@pytest.fixture
def paths(tmp_path):
    return tmp_path / "client_secret.json", tmp_path / "state" / "token.json"


def test_missing_client_secrets_without_token(paths):
    credentials_path, token_path = paths

    with pytest.raises(FileNotFoundError):
        GooglePhotosAuth(credentials_path, token_path=token_path).authenticate()


def test_saved_token_is_reused(paths, monkeypatch):
    credentials_path, token_path = paths
    token_path.parent.mkdir(parents=True)
    token_path.write_text("{}", encoding="utf-8")
    saved = make_credentials()
    monkeypatch.setattr(
        auth_module.Credentials, "from_authorized_user_file", MagicMock(return_value=saved)
    )
    flow = MagicMock()
    monkeypatch.setattr(auth_module.InstalledAppFlow, "from_client_secrets_file", flow)

    auth = GooglePhotosAuth(credentials_path, token_path=token_path)

    assert auth.authenticate() is saved
    assert auth.is_authenticated()
    flow.assert_not_called()


def test_oauth_flow_persists_token(paths, monkeypatch):
    credentials_path, token_path = paths
    credentials_path.write_text("{}", encoding="utf-8")
    flow = MagicMock()
    flow.run_local_server.return_value = make_credentials(token="new-token")
    from_secrets = MagicMock(return_value=flow)
    monkeypatch.setattr(auth_module.InstalledAppFlow, "from_client_secrets_file", from_secrets)

    credentials = GooglePhotosAuth(credentials_path, token_path=token_path).authenticate()

    assert credentials.token == "new-token"
    from_secrets.assert_called_once_with(str(credentials_path), SCOPES)
    saved = json.loads(token_path.read_text(encoding="utf-8"))
    assert saved["token"] == "new-token"
    assert saved["refresh_token"] == "refresh-token"


def test_flow_returning_invalid_credentials(paths, monkeypatch):
    credentials_path, token_path = paths
    credentials_path.write_text("{}", encoding="utf-8")
    flow = MagicMock()
    flow.run_local_server.return_value = make_credentials(valid=False)
    monkeypatch.setattr(auth_module.InstalledAppFlow, "from_client_secrets_file", MagicMock(return_value=flow))

    with pytest.raises(AuthenticationError):
        GooglePhotosAuth(credentials_path, token_path=token_path).authenticate()


def test_revoke_deletes_token(paths):
    credentials_path, token_path = paths
    token_path.parent.mkdir(parents=True)
    token_path.write_text("{}", encoding="utf-8")
    auth = GooglePhotosAuth(credentials_path, token_path=token_path)
    auth.credentials = make_credentials()

    auth.revoke()

    assert not token_path.exists()
    assert auth.credentials is None
    assert not auth.is_authenticated()
