"""Command line interface for bucket_uploader."""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Optional, Sequence

from rich.logging import RichHandler

from . import __version__
from .cli_output import mask_secret, render_configuration_summary, render_upload_result
from .errors import BucketError, ConfigError
from .models import ClientConfig
from .services.api_client import BucketClient


class CLIError(RuntimeError):
    """Raised when CLI validation/execution fails."""


def _setup_logging(debug: bool, silent: bool, log_level: Optional[str]) -> str:
    """
    Configure logging.

    Default behavior is silent unless --debug or --log-level is provided.
    Returns a string describing effective mode.
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    logging.disable(logging.NOTSET)

    if silent or (not debug and not log_level):
        logging.disable(logging.CRITICAL)
        root_logger.setLevel(logging.CRITICAL + 1)
        return "silent"

    if debug:
        level = logging.DEBUG
    else:
        level = getattr(logging, log_level.upper(), logging.INFO)

    handler = RichHandler(
        rich_tracebacks=True,
        markup=False,
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
    return logging.getLevelName(level)


def _strip_optional_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        return value[1:-1]
    return value


def _load_env_file(path: Path, override: bool = False) -> None:
    if not path.exists():
        raise CLIError(f"env file not found: {path}")
    if not path.is_file():
        raise CLIError(f"env path is not a file: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CLIError(f"could not read env file {path}: {exc}") from exc

    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :].strip()
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        if not key:
            continue

        value = _strip_optional_quotes(value.strip())
        if override or key not in os.environ:
            os.environ[key] = value


def _resolve_default_env_file() -> Optional[Path]:
    default_env = Path(".env")
    return default_env if default_env.exists() and default_env.is_file() else None


def _build_config(
    api_key: Optional[str],
    base_url: Optional[str],
    timeout: Optional[float],
) -> ClientConfig:
    """Flags win over BUCKET_* environment variables."""
    env = dict(os.environ)
    if api_key:
        env["BUCKET_API_KEY"] = api_key
    if base_url:
        env["BUCKET_BASE_URL"] = base_url
    if timeout is not None:
        env["BUCKET_TIMEOUT"] = str(timeout)
    return ClientConfig.from_env(env)


def _run_upload(source: Path, config: ClientConfig, as_json: bool) -> int:
    with BucketClient(config=config) as client:
        result = client.upload(source)

    if as_json:
        payload = asdict(result)
        payload["status"] = result.status.value
        print(json.dumps(payload, indent=2))
    else:
        render_upload_result(result)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bucket-up",
        description="Upload a file to Bucket storage.",
    )
    parser.add_argument("source", nargs="?", type=Path, help="File to upload")
    parser.add_argument(
        "-k",
        "--api-key",
        default=None,
        help="API key (default from BUCKET_API_KEY)",
    )
    parser.add_argument(
        "-u",
        "--base-url",
        default=None,
        help="Service origin (default from BUCKET_BASE_URL or the public service)",
    )
    parser.add_argument(
        "-t",
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (default from BUCKET_TIMEOUT or 30)",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Load environment variables from this .env file",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--debug", action="store_true", help="Enable debug logs")
    parser.add_argument("--silent", action="store_true", help="Only print errors")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Explicit log level (DEBUG/INFO/WARNING/ERROR)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"bucket-up {__version__}",
    )
    return parser


def run_cli(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    used_env_file = args.env_file or _resolve_default_env_file()
    if used_env_file is not None:
        try:
            _load_env_file(Path(used_env_file))
        except CLIError as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            return 1

    effective_log_mode = _setup_logging(
        debug=args.debug,
        silent=args.silent,
        log_level=args.log_level,
    )

    if args.source is None:
        parser.print_help()
        return 0

    source = Path(args.source).expanduser()

    try:
        config = _build_config(args.api_key, args.base_url, args.timeout)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if not args.json:
        render_configuration_summary(
            {
                "Source": str(source),
                "Endpoint": config.upload_url,
                "API Key": mask_secret(config.api_key),
                "Timeout": f"{config.timeout:g}s",
                "Env File": str(used_env_file) if used_env_file else "-",
                "Logging": effective_log_mode,
            }
        )

    try:
        return _run_upload(source, config, as_json=args.json)
    except BucketError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("Cancelled.", file=sys.stderr)
        return 130


def main() -> None:
    raise SystemExit(run_cli())


if __name__ == "__main__":
    main()
