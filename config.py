"""Global configuration for the NEV/R3D renaming tool.

This module centralizes defaults for:
- the fixed pair of suffixes the tool converts between
- progress-bar rendering
- logging level and message format

Nothing here is read from disk or the environment; the CLI only chooses the
scan root and the conversion direction.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# The suffixes are written in this canonical case; matching ignores case.
SOURCE_SUFFIX = ".NEV"
TARGET_SUFFIX = ".R3D"


@dataclass
class Behavior:
    """Run-time toggles for the CLI.

    Attributes
    ----------
    show_progress
        Whether to render a progress bar. Click hides it anyway when stderr
        is not a terminal.
    progress_label
        Text shown to the left of the bar.
    """

    show_progress: bool = True
    progress_label: str = "Renaming"


@dataclass
class LoggingSettings:
    """Logging defaults.

    Attributes
    ----------
    logger_name
        Name of the logger built for each run.
    level
        One of 'DEBUG', 'INFO', 'WARNING', 'ERROR'.
    fmt
        ``logging.Formatter`` format string.
    """

    logger_name: str = "r3dy"
    level: str = "INFO"
    fmt: str = "%(levelname)s: %(message)s"


@dataclass
class ProjectConfig:
    """Top-level configuration container.

    Attributes
    ----------
    source_suffix, target_suffix
        Forward direction of the conversion. ``--invert`` swaps them.
    behavior
        Execution-time toggles.
    logging
        Logger settings.
    """

    source_suffix: str = SOURCE_SUFFIX
    target_suffix: str = TARGET_SUFFIX
    behavior: Behavior = field(default_factory=Behavior)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


# Default config instance used by the CLI
CONFIG = ProjectConfig()
