#!/usr/bin/env python3
"""
YouTube Uploader CLI

Command-line front end: authenticate once, then upload and list videos.
Every upload attempt is recorded in the CSV audit log.

Usage:
    youtube-uploader auth                      # Authorize (once)
    youtube-uploader upload demo.mp4 -t "Demo" -c 22 --tags demo,test
    youtube-uploader list --max-results 10
    youtube-uploader --mock upload demo.mp4 -t "Demo" -c 22   # No YouTube calls

Exit codes:
    0 - success
    1 - operation failed (upload failed, authentication failed)
    2 - usage or configuration error (invalid input, missing client secret)
"""

import argparse
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List, Optional

from config import settings
from uploader import __version__
from uploader.auth.oauth_manager import OAuthManager
from uploader.config import UploaderConfig
from uploader.constants import MAX_RESULTS_LIMIT, PrivacyStatus
from uploader.factory import UploaderFactory
from uploader.interfaces.authenticator_interface import (
    AuthenticationError,
    ClientSecretNotFoundError,
)
from uploader.models import ValidationError, VideoDetails

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure the root logger once at process start.

    Console output goes to stderr so command output on stdout stays clean.
    With log_file set, logs are also written to a daily-rotated file
    (LOG_BACKUP_DAYS kept).

    Args:
        level: DEBUG, INFO, WARNING or ERROR
        log_file: Optional path of the rotated log file
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    log_format = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s | %(name)s",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(log_format)
    root.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.TimedRotatingFileHandler(
            log_file,
            when="midnight",
            interval=1,
            backupCount=settings.LOG_BACKUP_DAYS,
            encoding="utf-8",
        )
        file_handler.setFormatter(log_format)
        root.addHandler(file_handler)


def _parse_tags(value: str) -> List[str]:
    return [tag.strip() for tag in value.split(",") if tag.strip()]


def _max_results(value: str) -> int:
    number = int(value)
    if not 1 <= number <= MAX_RESULTS_LIMIT:
        raise argparse.ArgumentTypeError(f"must be between 1 and {MAX_RESULTS_LIMIT}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="youtube-uploader",
        description="Upload videos to YouTube and keep an audit log of every attempt.",
        epilog="""
Examples:
  %(prog)s auth
  %(prog)s upload demo.mp4 --title "Demo" --category-id 22 --privacy-status unlisted
  %(prog)s list --max-results 10
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config",
        type=str,
        help="Path to YAML config file (default: config/uploader.yaml)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override YOUTUBE_UPLOADER_LOG_LEVEL",
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use the in-memory mock gateway (no YouTube calls)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    auth_parser = subparsers.add_parser("auth", help="Authorize access to your YouTube account")
    auth_parser.add_argument(
        "--force",
        action="store_true",
        help="Forget stored credentials and authorize again",
    )

    upload_parser = subparsers.add_parser("upload", help="Upload a video")
    upload_parser.add_argument("file_path", help="Path to the video file")
    upload_parser.add_argument("-t", "--title", required=True, help="Video title")
    upload_parser.add_argument("-d", "--description", default="", help="Video description")
    upload_parser.add_argument(
        "-c",
        "--category-id",
        required=True,
        help="YouTube category ID (e.g. '22' for People & Blogs)",
    )
    upload_parser.add_argument(
        "-p",
        "--privacy-status",
        default=PrivacyStatus.PRIVATE.value,
        help="public, private or unlisted (default: private)",
    )
    upload_parser.add_argument(
        "-g",
        "--tags",
        type=_parse_tags,
        default=[],
        help="Comma-separated list of tags",
    )
    upload_parser.add_argument("--log-path", help="Custom path for the upload log CSV file")

    list_parser = subparsers.add_parser("list", help="List your uploaded videos")
    list_parser.add_argument(
        "-m",
        "--max-results",
        type=_max_results,
        help=f"Maximum number of videos to list (max: {MAX_RESULTS_LIMIT})",
    )
    list_parser.add_argument("--page-token", help="Token printed by a previous list call")

    subparsers.add_parser("version", help="Print the CLI version")

    return parser


# =============================================================================
# COMMANDS
# =============================================================================


def cmd_auth(args: argparse.Namespace, factory: UploaderFactory) -> int:
    if factory.is_mock:
        print("Mock mode: no authentication needed.")
        return EXIT_OK

    auth_config = factory.config.auth_config()
    oauth = OAuthManager()

    if args.force and oauth.reset_credentials(auth_config):
        print("Stored credentials removed.")

    print("Attempting to authenticate with Google...")
    try:
        oauth.authenticate(auth_config, factory.interaction_provider)
    except AuthenticationError as e:
        logger.error(f"Authentication failed: {e}")
        print(f"Authentication failed: {e}")
        return EXIT_FAILURE

    print("Successfully authenticated and authorized.")
    print(f"Tokens stored at: {auth_config.tokens_path}")
    return EXIT_OK


def cmd_upload(args: argparse.Namespace, factory: UploaderFactory) -> int:
    try:
        video_details = VideoDetails(
            file_path=args.file_path,
            title=args.title,
            description=args.description,
            category_id=args.category_id,
            privacy_status=args.privacy_status,
            tags=args.tags,
        )
    except ValidationError as e:
        logger.error(f"Failed to create VideoDetails: {e}")
        print(f"ERROR: Invalid video details provided. {e}")
        return EXIT_USAGE

    controller = factory.create_upload_controller(log_file_path=args.log_path)
    entry = controller.execute(video_details)

    if not entry.is_success:
        print(f"Error uploading video: {entry.details}")
        return EXIT_FAILURE

    print("Video uploaded successfully!")
    print(f"Title: {entry.video_title}")
    print(f"YouTube URL: {entry.youtube_url}")
    print(f"Video ID: {entry.details}")
    return EXIT_OK


def cmd_list(args: argparse.Namespace, factory: UploaderFactory) -> int:
    controller = factory.create_list_controller()
    max_results = args.max_results or factory.config.default_max_results

    print("Fetching video list...")
    videos = controller.execute(max_results=max_results, page_token=args.page_token)

    if not videos:
        if controller.needs_reauthentication:
            print(
                "Could not list videos: YouTube rejected the stored authorization. "
                "Run 'youtube-uploader auth --force' and try again.",
            )
            return EXIT_FAILURE
        print("No videos found or an error occurred while fetching.")
        return EXIT_OK

    print("Your Videos:")
    for index, video in enumerate(videos, start=1):
        published = video.published_at.strftime("%Y-%m-%d") if video.published_at else "N/A"
        print(f"{index}. {video.title} - {video.youtube_url} (Published: {published})")

    if controller.next_page_token:
        print(f"More videos available. Next page: --page-token {controller.next_page_token}")
    return EXIT_OK


COMMANDS = {
    "auth": cmd_auth,
    "upload": cmd_upload,
    "list": cmd_list,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "version":
        print(f"YouTube Uploader CLI version {__version__}")
        return EXIT_OK

    try:
        config = UploaderConfig(config_path=args.config)
    except ValueError as e:
        print(f"ERROR: Invalid configuration. {e}")
        return EXIT_USAGE

    setup_logging(args.log_level or config.log_level, config.log_file)
    logger.debug(f"Running '{args.command}' command")

    try:
        factory = UploaderFactory(config=config, mode="mock" if args.mock else None)
        return COMMANDS[args.command](args, factory)
    except ClientSecretNotFoundError as e:
        logger.error(str(e))
        print(f"ERROR: {e}")
        return EXIT_USAGE
    except KeyboardInterrupt:
        print("\nCancelled by user")
        return EXIT_FAILURE
    except Exception as e:
        logger.critical(f"Unexpected error during '{args.command}': {e}", exc_info=True)
        print(f"ERROR: An unexpected problem occurred. Please check logs for details. Message: {e}")
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
