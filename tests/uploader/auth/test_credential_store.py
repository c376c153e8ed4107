"""
Credential Store Tests

Tests for file-backed OAuth credential persistence.

To run these tests:
    pytest tests/uploader/auth/test_credential_store.py -v
"""

import json

import pytest
from google.oauth2.credentials import Credentials

from uploader.auth.credential_store import FileCredentialStore
from uploader.constants import DEFAULT_USER_ID, YOUTUBE_SCOPES


@pytest.fixture
def token_path(temp_dir):
    return temp_dir / "config" / "tokens.json"


@pytest.fixture
def credential_store(token_path):
    return FileCredentialStore(str(token_path))


@pytest.fixture
def credentials():
    return Credentials(
        token="access-token",
        refresh_token="refresh-token",
        client_id="client-id",
        client_secret="client-secret",
        token_uri="https://oauth2.googleapis.com/token",
        scopes=YOUTUBE_SCOPES,
    )


@pytest.mark.unit
def test_load_missing_file_returns_none(credential_store):
    assert credential_store.load(DEFAULT_USER_ID) is None


@pytest.mark.unit
def test_save_then_load(credential_store, credentials, token_path):
    """
    Test credentials survive a save/load cycle.

    Should:
    - Create the parent directory
    - Key the entry by user ID
    - Restore token and refresh token
    """
    credential_store.save(DEFAULT_USER_ID, credentials)

    assert token_path.exists()
    assert DEFAULT_USER_ID in json.loads(token_path.read_text())

    loaded = credential_store.load(DEFAULT_USER_ID)
    assert loaded.token == "access-token"
    assert loaded.refresh_token == "refresh-token"


@pytest.mark.unit
def test_save_keeps_other_users(credential_store, credentials, token_path):
    credential_store.save("alice", credentials)
    credential_store.save("bob", credentials)

    data = json.loads(token_path.read_text())
    assert set(data) == {"alice", "bob"}


@pytest.mark.unit
def test_unreadable_file_treated_as_empty(credential_store, token_path):
    token_path.parent.mkdir(parents=True)
    token_path.write_text("not json{")

    assert credential_store.load(DEFAULT_USER_ID) is None


@pytest.mark.unit
def test_incomplete_entry_treated_as_absent(credential_store, token_path):
    """Entries missing refresh token / client fields cannot build Credentials"""
    token_path.parent.mkdir(parents=True)
    token_path.write_text(json.dumps({DEFAULT_USER_ID: {"token": "only-a-token"}}))

    assert credential_store.load(DEFAULT_USER_ID) is None


@pytest.mark.unit
def test_delete(credential_store, credentials):
    credential_store.save(DEFAULT_USER_ID, credentials)

    assert credential_store.delete(DEFAULT_USER_ID) is True
    assert credential_store.load(DEFAULT_USER_ID) is None
    assert credential_store.delete(DEFAULT_USER_ID) is False
