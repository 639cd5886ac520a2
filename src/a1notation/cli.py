from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import TextIO

from pydantic import BaseModel, Field

from .errors import UnboundedDimensionError
from .notation import CellRef, RangeRef, SheetRef, parse
from .types import NotationKind, OutputFormat, RangeShape

logger = logging.getLogger(__name__)


class CliConfig(BaseModel):
    """Configuration for the a1notation command."""

    notations: list[str] = Field(..., description="A1 notation strings to inspect.")
    output_format: OutputFormat = Field(default="json", description="Output format.")
    log_level: str = Field(default="WARNING", description="Logging level.")
    log_file: Path | None = Field(default=None, description="Optional log file path.")


class NotationReport(BaseModel):
    """Description of one parsed notation."""

    input: str
    kind: NotationKind
    shape: RangeShape | None = None
    rendered: str
    short: str
    width: int | None = None
    height: int | None = None


def main(argv: list[str] | None = None, *, stdout: TextIO | None = None) -> int:
    """Run the a1notation command.

    Args:
        argv: Optional CLI arguments for testing.
        stdout: Optional output stream for testing.

    Returns:
        Exit code (0 when every notation parsed, 1 otherwise).
    """
    config = _parse_args(argv)
    _configure_logging(config)
    out = stdout or sys.stdout
    exit_code = 0
    for text in config.notations:
        try:
            report = describe(text)
        except ValueError as exc:
            logger.error("Invalid A1 notation %r: %s", text, exc)
            exit_code = 1
            continue
        out.write(_format_report(report, config.output_format) + "\n")
    return exit_code


def describe(text: str) -> NotationReport:
    """Parse a notation and summarize it.

    Raises:
        ValueError: If the text is not a supported A1 notation.
    """
    notation = parse(text)
    return NotationReport(
        input=text,
        kind=notation.kind,
        shape=notation.shape() if isinstance(notation, RangeRef) else None,
        rendered=notation.render(),
        short=notation.render_short(),
        width=_bounded(notation, "width"),
        height=_bounded(notation, "height"),
    )


def _bounded(notation: CellRef | RangeRef | SheetRef, axis: str) -> int | None:
    """Return the width or height, or None when that axis is unbounded."""
    measure = notation.width if axis == "width" else notation.height
    try:
        return measure()
    except UnboundedDimensionError:
        logger.debug("%s of %s is unbounded.", axis, notation)
        return None


def _format_report(report: NotationReport, output_format: OutputFormat) -> str:
    """Render one report as a JSON line or a tab-separated text line."""
    if output_format == "json":
        return report.model_dump_json()
    width = "-" if report.width is None else str(report.width)
    height = "-" if report.height is None else str(report.height)
    kind = report.kind if report.shape is None else f"{report.kind}/{report.shape}"
    return f"{report.rendered}\t{kind}\twidth={width}\theight={height}"


def _parse_args(argv: list[str] | None) -> CliConfig:
    """Parse CLI arguments into a config."""
    parser = argparse.ArgumentParser(
        prog="a1notation", description="Inspect spreadsheet A1 notation strings."
    )
    parser.add_argument("notations", nargs="+", help="A1 notation, e.g. Sheet1!A1:C3.")
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=["json", "text"],
        default="json",
        help="Output format (json/text).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )
    parser.add_argument("--log-file", type=Path, help="Optional log file path.")
    args = parser.parse_args(argv)
    return CliConfig(
        notations=list(args.notations),
        output_format=args.output_format,
        log_level=args.log_level,
        log_file=args.log_file,
    )


def _configure_logging(config: CliConfig) -> None:
    """Configure root logging from the CLI config."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.log_file is not None:
        handlers.append(logging.FileHandler(config.log_file))
    logging.basicConfig(
        level=config.log_level.upper(),
        handlers=handlers,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
