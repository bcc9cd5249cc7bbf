#!/usr/bin/env python3
"""
Configuration loader for ntfs-remount.
Builds one immutable MountConfig from command line options and defaults.
"""

from pathlib import Path
from dataclasses import dataclass
from typing import Optional, Tuple

from ntfs_remount.core.logger import LOG_LEVELS, get_logger, setup_logging

logger = get_logger(__name__)

@dataclass(frozen=True)
class MountConfig:
    """Settings for a single run"""
    volumes_folder: Path                  # Mount root, e.g. /Volumes
    unmount_only: bool                    # Stop after unmounting
    requested_volumes: Tuple[str, ...]    # Empty means every NTFS drive
    driver_path: Path                     # NTFS-3G binary
    log_level: str                        # OFF, DEBUG, INFO, WARNING, ERROR
    log_file: Optional[Path] = None       # Extra log destination

class ConfigLoader:
    """Merges user options over defaults and validates the result"""

    DEFAULT_CONFIG = {
        "volumes_folder": "/Volumes",
        "unmount_only": False,
        "requested_volumes": (),
        "driver_path": "/usr/local/bin/ntfs-3g",
        "log_level": "WARNING",
        "log_file": None,
    }

    @staticmethod
    def from_options(**options) -> MountConfig:
        """
        Build the configuration from parsed options.

        Options left to None fall back to DEFAULT_CONFIG. Logging is
        configured from the resulting settings.

        Raises:
            ValueError: If a value is missing or invalid
        """
        config_dict = ConfigLoader.DEFAULT_CONFIG.copy()
        config_dict.update({key: value for key, value in options.items() if value is not None})

        config = ConfigLoader._create_config(config_dict)

        # Setup logging with config level
        setup_logging(
            log_level=config.log_level,
            log_file=str(config.log_file) if config.log_file else None
        )

        logger.debug(f"Volumes folder: {config.volumes_folder}")
        logger.debug(f"Unmount only: {config.unmount_only}")
        logger.debug(f"Requested volumes: {list(config.requested_volumes) or 'all'}")
        logger.debug(f"NTFS-3G driver: {config.driver_path}")

        return config

    @staticmethod
    def _create_config(config_dict: dict) -> MountConfig:
        """Create MountConfig from dictionary with validation"""
        volumes_folder = str(config_dict.get("volumes_folder") or "")
        driver_path = str(config_dict.get("driver_path") or "")
        log_file = config_dict.get("log_file")

        errors = []
        if not volumes_folder:
            errors.append("volumes folder must not be empty")
        if not driver_path:
            errors.append("NTFS-3G driver path must not be empty")

        log_level = str(config_dict.get("log_level", "WARNING"))
        if log_level.upper() not in LOG_LEVELS:
            errors.append(f"log_level must be one of {sorted(LOG_LEVELS)}, got {log_level}")

        if errors:
            raise ValueError(f"Invalid configuration: {'; '.join(errors)}")

        return MountConfig(
            volumes_folder=Path(volumes_folder),
            unmount_only=bool(config_dict.get("unmount_only", False)),
            requested_volumes=tuple(str(name) for name in config_dict.get("requested_volumes", ())),
            driver_path=Path(driver_path),
            log_level=log_level.upper(),
            log_file=Path(log_file) if log_file else None,
        )
