"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

config.py
Process-wide listing settings: the defaults a SortParams snapshot starts from.
Loaded from the [manager] table of a TOML file when one is given.
"""
import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from filesorter.core.models import SortBy

logger = logging.getLogger(__name__)

BOOL_KEYS = ("sort_sensitive", "sort_reverse", "sort_dir_first")


@dataclass(frozen=True)
class ManagerSettings:
    """Default sort configuration for directory listings."""
    sort_by: SortBy = SortBy.ALPHABETICAL
    sort_sensitive: bool = True
    sort_reverse: bool = False
    sort_dir_first: bool = True

    @staticmethod
    def from_dict(data: dict) -> "ManagerSettings":
        """
        Build settings from the contents of a [manager] table.
        Missing keys keep their defaults; unknown keys are ignored.
        Raises ValueError naming the offending key on invalid values.
        """
        values = {}

        if "sort_by" in data:
            raw = data["sort_by"]
            try:
                values["sort_by"] = SortBy(str(raw).strip().lower())
            except ValueError:
                valid = ", ".join(m.value for m in SortBy)
                raise ValueError(f"Invalid value for 'sort_by': '{raw}'. Valid options: {valid}")

        for key in BOOL_KEYS:
            if key in data:
                if not isinstance(data[key], bool):
                    raise ValueError(f"Invalid value for '{key}': expected true or false, got {data[key]!r}")
                values[key] = data[key]

        return ManagerSettings(**values)

    @staticmethod
    def load(path: Optional[Union[str, Path]] = None) -> "ManagerSettings":
        """
        Load settings from a TOML file. No path or a missing file yields defaults.
        """
        if path is None:
            return ManagerSettings()

        config_path = Path(path).expanduser()
        if not config_path.is_file():
            logger.debug(f"Settings file not found, using defaults: {config_path}")
            return ManagerSettings()

        try:
            with open(config_path, "rb") as f:
                document = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Malformed settings file {config_path}: {e}") from e

        manager = document.get("manager", {})
        if not isinstance(manager, dict):
            raise ValueError(f"Invalid [manager] section in {config_path}")

        settings = ManagerSettings.from_dict(manager)
        logger.debug(f"Loaded settings from {config_path}: {settings}")
        return settings
