"""
Upload Controller Tests

Tests for the upload orchestration showing:
- Exactly one log entry per attempt
- Each failure mapped to a FAILURE entry
- Configuration errors escape without an entry

To run these tests:
    pytest tests/uploader/controllers/test_upload_controller.py -v
"""

from unittest.mock import MagicMock

import pytest

from uploader.constants import LogStatus, RemoteErrorKind
from uploader.controllers.upload_controller import UploadController
from uploader.interfaces.authenticator_interface import (
    AuthenticationError,
    AuthFailureReason,
    ClientSecretNotFoundError,
)
from uploader.interfaces.log_store_interface import LogStoreInterface
from uploader.interfaces.video_gateway_interface import (
    AuthenticationRequired,
    UploadFailed,
    VideoFileNotFoundError,
    VideoGatewayInterface,
)


@pytest.fixture
def log_store():
    return MagicMock(spec=LogStoreInterface)


@pytest.fixture
def gateway():
    gateway = MagicMock(spec=VideoGatewayInterface)
    gateway.upload_video.return_value = "abc123"
    return gateway


@pytest.fixture
def controller(gateway, log_store, stub_authenticator, auth_config):
    return UploadController(
        gateway=gateway,
        log_store=log_store,
        authenticator=stub_authenticator,
        auth_config=auth_config,
    )


def saved_entry(log_store):
    log_store.save.assert_called_once()
    return log_store.save.call_args.args[0]


class TestUploadController:
    """Test UploadController.execute()"""

    @pytest.mark.unit
    def test_requires_auth_config_with_authenticator(self, gateway, log_store, stub_authenticator):
        with pytest.raises(ValueError):
            UploadController(gateway, log_store, authenticator=stub_authenticator)

    @pytest.mark.unit
    def test_success(self, controller, gateway, log_store, stub_authenticator, video_details):
        """
        Test a successful upload.

        Should:
        - Authenticate and attach the session to the gateway
        - Return and persist a SUCCESS entry with the watch URL
        """
        entry = controller.execute(video_details)

        assert len(stub_authenticator.calls) == 1
        gateway.use_session.assert_called_once_with(stub_authenticator.session)
        gateway.upload_video.assert_called_once_with(video_details)
        assert entry.status is LogStatus.SUCCESS
        assert entry.details == "abc123"
        assert entry.youtube_url == "https://www.youtube.com/watch?v=abc123"
        assert entry.video_title == video_details.title
        assert entry.file_path == video_details.file_path
        assert saved_entry(log_store) is entry

    @pytest.mark.unit
    def test_no_authenticator(self, gateway, log_store, video_details):
        controller = UploadController(gateway=gateway, log_store=log_store)

        entry = controller.execute(video_details)

        assert entry.is_success
        gateway.use_session.assert_not_called()

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "error, expected_details",
        [
            (VideoFileNotFoundError("Video file not found: /x.mp4"), "Video file not found: /x.mp4"),
            (AuthenticationRequired("Authentication required"), "Authentication required"),
            (
                UploadFailed("YouTube API client error: 403 quota", RemoteErrorKind.CLIENT),
                "YouTube API client error: 403 quota",
            ),
            (RuntimeError("boom"), "Unexpected error: boom"),
            (RuntimeError(), "Unexpected error: RuntimeError"),
        ],
    )
    def test_gateway_failures_become_failure_entries(
        self, controller, gateway, log_store, video_details, error, expected_details,
    ):
        gateway.upload_video.side_effect = error

        entry = controller.execute(video_details)

        assert entry.status is LogStatus.FAILURE
        assert entry.details == expected_details
        assert entry.youtube_url is None
        assert saved_entry(log_store) is entry

    @pytest.mark.unit
    def test_authentication_failure(self, controller, gateway, log_store, stub_authenticator, video_details):
        stub_authenticator.error = AuthenticationError(
            "Authentication cancelled or code not provided.",
            AuthFailureReason.CANCELLED,
        )

        entry = controller.execute(video_details)

        assert entry.status is LogStatus.FAILURE
        assert "cancelled" in entry.details
        gateway.upload_video.assert_not_called()
        assert saved_entry(log_store) is entry

    @pytest.mark.unit
    def test_missing_client_secret_escapes(
        self, controller, gateway, log_store, stub_authenticator, video_details,
    ):
        """Configuration errors are not upload attempts: no entry is written"""
        stub_authenticator.error = ClientSecretNotFoundError("Client secret file not found at: x")

        with pytest.raises(ClientSecretNotFoundError):
            controller.execute(video_details)

        gateway.upload_video.assert_not_called()
        log_store.save.assert_not_called()

    @pytest.mark.unit
    def test_log_store_failure_does_not_mask_outcome(
        self, controller, log_store, video_details,
    ):
        log_store.save.side_effect = OSError("disk full")

        entry = controller.execute(video_details)

        assert entry.is_success
        log_store.save.assert_called_once()
