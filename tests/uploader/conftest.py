"""
Uploader Test Configuration and Fixtures

This file contains pytest fixtures shared across uploader tests.
Mirrors the pattern from storage/conftest.py.

To use pytest:
    pip install -e ".[test]"
    pytest tests/uploader/
"""

import json
import logging
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import httplib2
import pytest
from googleapiclient.errors import HttpError

from uploader.implementations.csv_log_store import CsvLogStore
from uploader.implementations.mock_gateway import MockVideoGateway
from uploader.implementations.youtube_gateway import YouTubeGateway
from uploader.interfaces.authenticator_interface import (
    AuthConfig,
    AuthenticatorInterface,
    YouTubeSession,
)
from uploader.models import VideoDetails


# =============================================================================
# FILESYSTEM FIXTURES
# =============================================================================

@pytest.fixture
def temp_dir():
    """
    Provide a temporary directory, cleaned up after the test.

    Usage:
        def test_log(temp_dir):
            store = CsvLogStore(str(temp_dir / "log.csv"))
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_video_file(temp_dir):
    """
    Create a small fake video file.

    Usage:
        def test_upload(sample_video_file):
            details = VideoDetails(file_path=str(sample_video_file), ...)
    """
    video_path = temp_dir / "test_video.mp4"
    video_path.write_bytes(b"fake video data" * 1000)
    return video_path


@pytest.fixture
def video_details(sample_video_file):
    """VideoDetails pointing at sample_video_file"""
    return VideoDetails(
        file_path=str(sample_video_file),
        title="Test Video",
        category_id="22",
        description="A test upload",
        tags=["test", "demo"],
    )


@pytest.fixture
def csv_log_path(temp_dir):
    """Path of a (not yet created) audit log inside temp_dir"""
    return temp_dir / "logs" / "upload_log.csv"


@pytest.fixture
def csv_log_store(csv_log_path):
    return CsvLogStore(str(csv_log_path))


@pytest.fixture
def auth_config(temp_dir):
    """
    AuthConfig with an existing client secret file and no stored tokens.
    """
    client_secret = temp_dir / "client_secret.json"
    client_secret.write_text(
        json.dumps(
            {
                "installed": {
                    "client_id": "test-client-id",
                    "client_secret": "test-client-secret",
                    "auth_uri": "https://accounts.google.com/o/oauth2/auth",
                    "token_uri": "https://oauth2.googleapis.com/token",
                },
            },
        ),
    )
    return AuthConfig(
        client_secret_path=str(client_secret),
        tokens_path=str(temp_dir / "tokens.json"),
    )


# =============================================================================
# GATEWAY FIXTURES
# =============================================================================

@pytest.fixture
def mock_gateway():
    """
    Provide a fresh MockVideoGateway for each test.

    Usage:
        def test_something(mock_gateway):
            mock_gateway.upload_video(details)
    """
    gateway = MockVideoGateway()
    yield gateway
    gateway.clear_history()


@pytest.fixture
def youtube_service():
    """
    MagicMock standing in for the googleapiclient YouTube resource.

    Configure responses with:
        youtube_service.videos.return_value.insert.return_value.execute.return_value = {...}
    """
    return MagicMock(name="youtube_service")


@pytest.fixture
def youtube_session(youtube_service):
    """Authenticated session around youtube_service"""
    credentials = MagicMock(token="test-access-token")
    return YouTubeSession(
        service=youtube_service,
        credentials=credentials,
        application_name="Test App",
    )


@pytest.fixture
def youtube_gateway(youtube_session):
    """YouTubeGateway with an authenticated (mocked) session attached"""
    return YouTubeGateway(session=youtube_session)


@pytest.fixture
def make_http_error():
    """
    Build a googleapiclient HttpError with the given status.

    Usage:
        def test_error(make_http_error):
            error = make_http_error(403, "quotaExceeded")
    """
    def _make(status: int, message: str = "error") -> HttpError:
        resp = httplib2.Response({"status": status})
        content = json.dumps({"error": {"message": message}}).encode("utf-8")
        return HttpError(resp=resp, content=content)

    return _make


# =============================================================================
# AUTHENTICATION FIXTURES
# =============================================================================

class StubAuthenticator(AuthenticatorInterface):
    """
    Authenticator double: returns a fixed session or raises a fixed error.

    Records every call for assertions.
    """

    def __init__(self, session=None, error=None):
        self.session = session
        self.error = error
        self.calls = []

    def authenticate(self, config, interaction_provider=None):
        self.calls.append({"config": config, "interaction_provider": interaction_provider})
        if self.error is not None:
            raise self.error
        return self.session


@pytest.fixture
def stub_authenticator(youtube_session):
    """
    Provide a StubAuthenticator returning youtube_session.

    Usage:
        def test_auth_failure(stub_authenticator):
            stub_authenticator.error = AuthenticationError(...)
    """
    return StubAuthenticator(session=youtube_session)


# =============================================================================
# LOGGING FIXTURES
# =============================================================================

@pytest.fixture
def restore_root_logger():
    """Remove handlers added by setup_logging() during a test"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================

def pytest_configure(config):
    """
    Configure pytest with custom markers.

    Same markers as storage tests for consistency.
    """
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "unit_integration: Unit integration tests")
    config.addinivalue_line("markers", "integration: Full integration tests")
