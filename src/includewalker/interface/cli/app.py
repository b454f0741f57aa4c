from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, persisted session, command-line overrides), analysis execution
and result rendering.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from includewalker.core.pipeline.components.writer import render_json, render_text, render_users
from includewalker.core.pipeline.engine import run_analysis
from includewalker.core.pipeline.stages.validator import validate_config
from includewalker.domain.config import get_default_config, load_config, save_config
from includewalker.infra.fs import normalize_path
from includewalker.infra.logging import LoggingConfig, configure_logging, get_logger
from includewalker.interface.cli import args as cli_args

logger = get_logger(__name__)

_MERGE_KEYS = [
    "input_path", "recursive", "exclude_patterns", "with_external",
    "output_format", "save_error_log", "error_log_path",
]

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 ok, 1 analysis failure, 2 invalid input,
             130 interrupted).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    base_conf = get_default_config() if args.use_defaults else load_config()
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(base_conf, overrides)

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    input_path = normalize_path(clean_conf["input_path"], os.getcwd())
    if not os.path.isdir(input_path):
        msg = f"Input directory does not exist: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    if args.save_config:
        save_config(clean_conf)

    try:
        result, forest = run_analysis(clean_conf)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    if clean_conf["output_format"] == "json":
        print(render_json(result))
    else:
        stream = sys.stdout if result.ok else sys.stderr
        for line in render_text(result):
            print(line, file=stream)

    if args.who_uses and forest is not None:
        print()
        for line in render_users(forest, args.who_uses):
            print(line)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known, non-None override values into the base config.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in _MERGE_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


if __name__ == "__main__":
    sys.exit(main())
