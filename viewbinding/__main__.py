from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.logging import RichHandler

from .base import GenerationOptions
from .engine import run_generation
from .errors import GenerationError

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="python -m viewbinding",
        description="Generate <Owner>_ViewBinding classes from a resolved element model.",
    )
    parser.add_argument("--model-dir", required=True, help="Directory containing .json model files.")
    parser.add_argument("--out", required=True, help="Output directory for generated sources.")
    parser.add_argument(
        "--config",
        help="Optional JSON config file providing generation options.",
    )
    parser.add_argument(
        "--option",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override or add a single option (may be repeated).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when a marker sits in a class without @BindContentView.",
    )
    parser.add_argument(
        "--report",
        default=None,
        metavar="NAME",
        help="Write a JSON report with this file name under --out.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def _parse_extra_options(config_path: str | None, options: list[str]) -> dict:
    extra: dict[str, object] = {}

    if config_path:
        config_file = Path(config_path)
        payload = json.loads(config_file.read_text(encoding="utf-8"))
        if isinstance(payload, dict):
            extra.update(payload)
        else:
            raise ValueError(f"Config file {config_file} must contain a JSON object.")

    for item in options or []:
        if "=" not in item:
            raise ValueError(f"Invalid --option value '{item}'. Expected KEY=VALUE.")
        key, raw_value = item.split("=", 1)
        key = key.strip()
        if not key:
            raise ValueError(f"Invalid --option value '{item}': empty key.")

        # Best-effort type coercion: bool -> int -> float -> str.
        # Whitespace is kept so that indent=\t survives.
        stripped = raw_value.strip()
        lowered = stripped.lower()
        if lowered in {"true", "false"}:
            value: object = lowered == "true"
        elif not stripped:
            value = raw_value
        else:
            try:
                value = int(stripped)
            except ValueError:
                try:
                    value = float(stripped)
                except ValueError:
                    value = stripped
        extra[key] = value

    return extra


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    model_dir = Path(args.model_dir)
    output_dir = Path(args.out)
    try:
        extra = _parse_extra_options(args.config, args.option)
        options = GenerationOptions.from_extra(model_dir, output_dir, extra)
    except (OSError, ValueError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2
    if args.strict:
        options.strict = True
    for key in sorted(options.extra):
        logger.warning("Ignoring unknown option '%s'", key)

    try:
        result = run_generation(model_dir=model_dir, output_dir=output_dir, options=options)
    except GenerationError as exc:
        print(f"Generation failed: {exc}", file=sys.stderr)
        return 1

    if args.report:
        report_path = output_dir / args.report
        report_payload = {
            "bound_classes": [record.owner.qualified_name for record in result.records],
            "artifacts": [
                {"type": artifact.type_name, "path": str(artifact.path)}
                for artifact in result.artifacts
            ],
            "failures": [
                {"type": failure.artifact_name, "owner": failure.owner, "cause": failure.cause}
                for failure in result.failures
            ],
        }
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text(json.dumps(report_payload, indent=2), encoding="utf-8")
        print(f"Wrote report: {report_path}")

    print(f"Generated {len(result.artifacts)} artifact(s) to {output_dir}")
    for failure in result.failures:
        print(f"Failed: {failure.describe()}", file=sys.stderr)
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
