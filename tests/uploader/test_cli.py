"""
CLI Tests

End-to-end runs of uploader.cli.main() against the mock gateway.

To run these tests:
    pytest tests/uploader/test_cli.py -v
"""

import csv

import pytest
import yaml

from uploader import __version__
from uploader.cli import EXIT_FAILURE, EXIT_OK, EXIT_USAGE, main


@pytest.fixture
def cli_config(temp_dir, restore_root_logger):
    """YAML config keeping every file the CLI touches inside temp_dir"""
    path = temp_dir / "uploader.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "client_secret_path": str(temp_dir / "client_secret.json"),
                "tokens_path": str(temp_dir / "tokens.json"),
                "upload_log_path": str(temp_dir / "upload_log.csv"),
                "mode": "auto",
                "log_file": "",
                "log_level": "WARNING",
            },
        ),
        encoding="utf-8",
    )
    return path


def log_rows(temp_dir):
    with open(temp_dir / "upload_log.csv", newline="", encoding="utf-8") as f:
        return list(csv.reader(f))[1:]


@pytest.mark.unit_integration
def test_version_command(capsys):
    assert main(["version"]) == EXIT_OK
    assert __version__ in capsys.readouterr().out


@pytest.mark.unit_integration
def test_upload_success(cli_config, sample_video_file, temp_dir, capsys):
    """
    Test upload through the mock gateway.

    Should:
    - Exit 0
    - Print the watch URL
    - Append one SUCCESS row to the audit log
    """
    exit_code = main(
        [
            "--mock",
            "--config", str(cli_config),
            "upload", str(sample_video_file),
            "--title", "Demo",
            "--category-id", "22",
            "--tags", "demo, test",
        ],
    )

    out = capsys.readouterr().out
    assert exit_code == EXIT_OK
    assert "https://www.youtube.com/watch?v=mock_" in out

    rows = log_rows(temp_dir)
    assert len(rows) == 1
    assert rows[0][2:4] == ["Demo", "SUCCESS"]


@pytest.mark.unit_integration
def test_upload_missing_file_logs_failure(cli_config, temp_dir, capsys):
    exit_code = main(
        [
            "--mock",
            "--config", str(cli_config),
            "upload", str(temp_dir / "missing.mp4"),
            "-t", "Missing",
            "-c", "22",
        ],
    )

    assert exit_code == EXIT_FAILURE
    assert "Video file not found" in capsys.readouterr().out
    rows = log_rows(temp_dir)
    assert rows[0][3] == "FAILURE"
    assert rows[0][5] == ""


@pytest.mark.unit_integration
def test_upload_invalid_privacy_is_usage_error(cli_config, sample_video_file, temp_dir, capsys):
    exit_code = main(
        [
            "--mock",
            "--config", str(cli_config),
            "upload", str(sample_video_file),
            "-t", "Demo",
            "-c", "22",
            "--privacy-status", "friends",
        ],
    )

    assert exit_code == EXIT_USAGE
    assert "Invalid video details" in capsys.readouterr().out
    assert not (temp_dir / "upload_log.csv").exists()


@pytest.mark.unit_integration
def test_list_mock_is_empty(cli_config, capsys):
    assert main(["--mock", "--config", str(cli_config), "list", "-m", "5"]) == EXIT_OK
    assert "No videos found" in capsys.readouterr().out


@pytest.mark.unit_integration
def test_list_rejects_out_of_range_max_results(cli_config):
    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(cli_config), "list", "--max-results", "99"])

    assert exc_info.value.code == 2


@pytest.mark.unit_integration
def test_auth_in_mock_mode(cli_config, capsys):
    assert main(["--mock", "--config", str(cli_config), "auth"]) == EXIT_OK
    assert "no authentication needed" in capsys.readouterr().out


@pytest.mark.unit_integration
def test_missing_client_secret_is_configuration_error(cli_config, capsys):
    """Forcing the real gateway without a client secret exits with a usage error"""
    data = yaml.safe_load(cli_config.read_text(encoding="utf-8"))
    data["mode"] = "youtube"
    cli_config.write_text(yaml.safe_dump(data), encoding="utf-8")

    assert main(["--config", str(cli_config), "auth"]) == EXIT_USAGE
    assert "Client secret file not found" in capsys.readouterr().out


@pytest.mark.unit_integration
def test_invalid_config_is_usage_error(temp_dir, capsys):
    path = temp_dir / "uploader.yaml"
    path.write_text(yaml.safe_dump({"mode": "vimeo"}), encoding="utf-8")

    assert main(["--config", str(path), "list"]) == EXIT_USAGE
