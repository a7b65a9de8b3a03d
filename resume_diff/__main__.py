"""Main entry point for Resume-Diff."""

import argparse
import json
import sys
from datetime import UTC, datetime
from pathlib import Path

from pydantic import ValidationError

from resume_diff import __version__
from resume_diff.config.settings import Settings
from resume_diff.utils.logging import configure_logging


def _threshold(value: str) -> float:
    threshold = float(value)
    if not (0.0 <= threshold <= 1.0):
        raise argparse.ArgumentTypeError("--threshold must be between 0.0 and 1.0")
    return threshold


def _timestamp_run_id(prefix: str) -> str:
    timestamp = datetime.now(UTC).strftime("%Y%m%d_%H%M%S")
    return f"{prefix}_{timestamp}"


def _resolve_run_dir(
    settings: Settings, *, prefix: str, out_run_dir: Path | None
) -> Path:
    if out_run_dir is not None:
        run_dir = out_run_dir
    else:
        run_dir = settings.output_dir / "runs" / _timestamp_run_id(prefix)
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def _write_json(path: Path, payload: object) -> None:
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="resume-diff",
        description="Resume-Diff: review what tailoring changed in a resume",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m resume_diff diff original.json tailored.json
  python -m resume_diff diff original.yaml tailored.json --threshold 0.7
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="mode",
        title="modes",
        description="Available commands",
    )

    diff_parser = subparsers.add_parser(
        "diff",
        help="Compare an original resume with a tailored bundle",
    )
    diff_parser.add_argument(
        "original",
        type=Path,
        help="Path to the original resume (JSON or YAML)",
    )
    diff_parser.add_argument(
        "bundle",
        type=Path,
        help="Path to the tailored bundle (JSON or YAML)",
    )
    diff_parser.add_argument(
        "--threshold",
        type=_threshold,
        default=None,
        help="Significance threshold override (0.0-1.0)",
    )
    diff_parser.add_argument(
        "--out-run-dir",
        type=Path,
        default=None,
        help="Directory for diff_report.json (default: <output_dir>/runs/diff_<timestamp>)",
    )

    return parser


def main(args: list[str] | None = None) -> int:
    """Run the CLI and return the exit code."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    settings = Settings()

    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level)

    if parsed.mode is None:
        parser.print_help()
        return 0

    logger.info(f"Resume-Diff v{__version__} running {parsed.mode}")

    if parsed.mode == "diff":
        from resume_diff.diffing.config import DiffConfig, get_diff_config
        from resume_diff.diffing.documents import (
            OriginalResume,
            TailoredBundle,
            load_document,
        )
        from resume_diff.diffing.service import ResumeDiffService

        try:
            original = OriginalResume.from_dict(load_document(parsed.original))
            bundle = TailoredBundle.from_dict(load_document(parsed.bundle))
        except (FileNotFoundError, ValueError, ValidationError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        config = get_diff_config()
        if parsed.threshold is not None:
            config = DiffConfig(significance_threshold=parsed.threshold)

        service = ResumeDiffService(config=config)
        report = service.compare(original, bundle)

        print(service.format_report(report))

        run_dir = _resolve_run_dir(
            settings,
            prefix="diff",
            out_run_dir=parsed.out_run_dir,
        )
        report_path = run_dir / "diff_report.json"
        _write_json(report_path, report.to_dict())
        print(f"Wrote: {report_path}")

        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
