from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from dlconv.config.loader import ConfigError, load_config, resolve_config_path
from dlconv.errors import ConversionError
from dlconv.logging.init import log_summary, set_debug, setup_logging
from dlconv.services.converter import convert
from dlconv.services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env (DLCONV_CONFIG may point at the config file)
- Load config (optional YAML, defaults otherwise)
- Convert the CSV given as the only positional argument
- Print the SUMMARY line

Any failure is logged as a single ERROR line and exits with EXIT_FATAL.
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env using python-dotenv (values override the process environment)."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="dlconv", description="Dive log CSV -> Markdown converter")
    # Optional here so that a missing path is reported like every other fatal error
    p.add_argument("input", nargs="?", help="CSV export of the dive log")
    p.add_argument("--config", help="YAML config file (default: config/dlconv.yml)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # Only read sys.argv when no argv is given; [] means "no arguments"
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    _load_env_file(Path('.env'), override=True)

    if not args.input:
        logger.error("input file not provided")
        return EXIT_FATAL

    config_path, required = resolve_config_path(args.config)
    try:
        cfg = load_config(config_path, required=required)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL
    logger.debug(f"config: title={cfg.title!r} output={cfg.output_file}")

    input_path = Path(args.input)
    logger.info(f"Converting dive log: {input_path}")
    try:
        result = convert(input_path, cfg)
    except ConversionError as e:
        logger.error(f"conversion: {e}")
        return EXIT_FATAL

    # log_summary adds the "SUMMARY " label itself
    log_summary(render_summary_line(result).removeprefix("SUMMARY "))
    return EXIT_SUCCESS
