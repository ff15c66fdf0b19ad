"""CLI for converting RED camera clip suffixes.

Renames ``.NEV`` files to ``.R3D`` under a directory tree, or ``.R3D`` back to
``.NEV`` with ``--invert``. Existing destinations are never overwritten.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click
from config import CONFIG
from src.func.log_utils import build_logger
from src.func.model import Mode, ScanError
from src.func.progress import LogReporter, ProgressBarReporter, format_summary
from src.func.rename import count_eligible, run
from src.func.walk import check_root


@click.command(
    name="r3dy",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "--invert",
    is_flag=True,
    default=False,
    help="Rename .R3D files to .NEV instead.",
)
@click.argument(
    "path",
    type=click.Path(path_type=Path),
    required=False,
)
def cli(invert: bool, path: Optional[Path]) -> None:
    """Rename .NEV files to .R3D (or vice versa with --invert) within PATH.

    PATH defaults to the current directory.
    """

    mode = Mode.from_invert(invert)
    logger = build_logger(
        CONFIG.logging.logger_name,
        level=CONFIG.logging.level,
        fmt=CONFIG.logging.fmt,
    )

    try:
        root = check_root(path if path is not None else Path.cwd())
        total = count_eligible(root, mode)
        if total == 0:
            # Still walk once so symlink and permission warnings are shown.
            run(root, mode, LogReporter(logger, root))
            click.echo(f"No {mode.source_suffix} files found under {root}")
            return

        if not CONFIG.behavior.show_progress:
            summary = run(root, mode, LogReporter(logger, root))
        else:
            with click.progressbar(
                length=total,
                label=CONFIG.behavior.progress_label,
                show_pos=True,
                item_show_func=lambda item: item,
                file=sys.stderr,
            ) as bar:
                summary = run(root, mode, ProgressBarReporter(bar, logger, root))
    except ScanError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(format_summary(summary))


if __name__ == "__main__":
    cli()
