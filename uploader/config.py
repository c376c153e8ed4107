"""
Uploader Configuration Handler

Manages the optional YAML override file for uploader settings.
Provides defaults (from config/settings.py) and validation.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from config import settings
from uploader.constants import MAX_RESULTS_LIMIT, VALID_LOG_LEVELS
from uploader.interfaces.authenticator_interface import AuthConfig

VALID_MODES = ("auto", "youtube", "mock")


class UploaderConfig:
    """
    Uploader configuration with YAML file support.

    Reads from config/uploader.yaml (or $YOUTUBE_UPLOADER_CONFIG) if it
    exists, otherwise uses defaults from config/settings.py.

    Usage:
        config = UploaderConfig()
        auth_config = config.auth_config()
        log_path = config.upload_log_path
    """

    def __init__(self, config_path: Optional[Path] = None, logger: Optional[logging.Logger] = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML config file (None = use default)
            logger: Logger to use (default: module logger)

        Raises:
            ValueError: If a configured value is invalid
        """
        self.logger = logger or logging.getLogger(__name__)
        self.config_path = Path(config_path or settings.CONFIG_FILE_PATH)

        # Load configuration (defaults + file overrides)
        self._config = self._load_config()

    def _get_defaults(self) -> Dict[str, Any]:
        """Get default configuration values from settings"""
        return {
            # OAuth
            "client_secret_path": settings.GOOGLE_CLIENT_SECRET_PATH,
            "tokens_path": settings.YOUTUBE_TOKENS_PATH,
            "app_name": settings.YOUTUBE_APP_NAME,
            # Audit log
            "upload_log_path": settings.UPLOAD_LOG_PATH,
            # Listing
            "default_max_results": settings.DEFAULT_MAX_RESULTS,
            # Wiring
            "mode": settings.UPLOADER_MODE,
            # Logging
            "log_level": settings.LOG_LEVEL,
            "log_file": settings.LOG_FILE,
        }

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file or use defaults"""
        config = self._get_defaults()

        if self.config_path.exists():
            try:
                with open(self.config_path, "r", encoding="utf-8") as f:
                    file_config = yaml.safe_load(f) or {}

                if not isinstance(file_config, dict):
                    raise ValueError("top level must be a mapping")

                # File overrides defaults
                config.update(file_config)
                self.logger.debug(f"Loaded config from {self.config_path}")

            except (OSError, ValueError, yaml.YAMLError) as e:
                self.logger.warning(
                    f"Failed to load config from {self.config_path}: {e}. Using defaults.",
                )
        else:
            self.logger.debug(f"Config file not found at {self.config_path}. Using defaults.")

        self._validate_config(config)
        return config

    def _validate_config(self, config: Dict[str, Any]) -> None:
        """Validate configuration values"""
        for key in ("client_secret_path", "tokens_path", "upload_log_path"):
            if not config.get(key):
                raise ValueError(f"{key} cannot be empty")

        max_results = config["default_max_results"]
        if not isinstance(max_results, int) or not 1 <= max_results <= MAX_RESULTS_LIMIT:
            raise ValueError(
                f"default_max_results must be between 1 and {MAX_RESULTS_LIMIT}: {max_results}",
            )

        if config["mode"] not in VALID_MODES:
            raise ValueError(f"mode must be one of {VALID_MODES}: {config['mode']}")

        config["log_level"] = str(config["log_level"]).upper()
        if config["log_level"] not in VALID_LOG_LEVELS:
            self.logger.warning(f"Unknown log level {config['log_level']}, using INFO")
            config["log_level"] = "INFO"

    # =========================================================================
    # PROPERTY ACCESSORS
    # =========================================================================

    @property
    def upload_log_path(self) -> str:
        return self._config["upload_log_path"]

    @property
    def default_max_results(self) -> int:
        return self._config["default_max_results"]

    @property
    def mode(self) -> str:
        """Gateway selection: auto, youtube or mock"""
        return self._config["mode"]

    @property
    def log_level(self) -> str:
        return self._config["log_level"]

    @property
    def log_file(self) -> Optional[str]:
        """Log file path, or None for console-only logging"""
        return self._config["log_file"] or None

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def auth_config(self) -> AuthConfig:
        """Build the AuthConfig passed to authenticators"""
        return AuthConfig(
            client_secret_path=str(self._config["client_secret_path"]),
            tokens_path=str(self._config["tokens_path"]),
            app_name=str(self._config["app_name"]),
        )

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """
        Set configuration value (in memory only).

        Raises:
            ValueError: If the resulting configuration is invalid
        """
        updated = dict(self._config)
        updated[key] = value
        self._validate_config(updated)
        self._config = updated

    def to_dict(self) -> Dict[str, Any]:
        """Get all configuration as dictionary"""
        return self._config.copy()
