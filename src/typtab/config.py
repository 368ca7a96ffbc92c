"""Project settings (.typtab.yaml)."""

import os
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from typtab.format import check_break_indicator

CONFIG_FILENAME = ".typtab.yaml"


@dataclass
class FormatSettings:
    """Formatting settings persisted under the ``format`` key."""
    break_indicator: Optional[str] = None


class ConfigManager:
    """Read/write .typtab.yaml."""

    def __init__(self, project_dir: str = "."):
        self.project_dir = Path(project_dir)
        self.config_path = self.project_dir / CONFIG_FILENAME


    def read(self) -> FormatSettings:
        """Read settings. Returns defaults on missing or corrupted files.

        A file is treated as corrupted when it is not valid YAML, when
        ``format`` is not a mapping, or when ``break_indicator`` is set to
        anything but a non-empty string.
        """
        if not self.config_path.exists():
            return FormatSettings()

        try:
            with open(self.config_path) as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError("top level must be a mapping")

            section = data.get("format") or {}
            if not isinstance(section, dict):
                raise ValueError("'format' must be a mapping")

            indicator = section.get("break_indicator")
            if indicator is not None:
                check_break_indicator(indicator)
        except (yaml.YAMLError, OSError, ValueError) as e:
            print(
                f"Warning: corrupted {self.config_path}, resetting: {e}",
                file=sys.stderr,
            )
            return FormatSettings()

        return FormatSettings(break_indicator=indicator)

    def write(self, settings: FormatSettings) -> None:
        """Write settings atomically. An unset indicator leaves ``format`` empty."""
        self.project_dir.mkdir(parents=True, exist_ok=True)

        section = {}
        if settings.break_indicator is not None:
            section["break_indicator"] = settings.break_indicator

        fd, tmp_path = tempfile.mkstemp(
            dir=self.project_dir,
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w") as f:
                yaml.dump({"format": section}, f, default_flow_style=False, sort_keys=False)
            os.replace(tmp_path, self.config_path)
        except BaseException:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise

    def update(self, break_indicator: Optional[str] = None) -> FormatSettings:
        """Persist a new break indicator. ``None`` keeps the current one."""
        settings = self.read()
        if break_indicator is not None:
            check_break_indicator(break_indicator)
            settings.break_indicator = break_indicator
        self.write(settings)
        return settings

    def reset(self) -> FormatSettings:
        """Drop all settings back to defaults."""
        settings = FormatSettings()
        self.write(settings)
        return settings
