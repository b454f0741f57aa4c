from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed argparse namespaces
into configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the includewalker CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="includewalker",
        description="Derive the include order of a C/C++ source tree and detect include cycles.",
    )

    # --- Scan Scope ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Root directory of the source tree (default: last session or cwd).",
    )
    p.add_argument(
        "--no-recursive",
        action="store_true",
        help="Scan only the files directly inside the input directory.",
    )
    p.add_argument(
        "--exclude",
        dest="exclude_patterns",
        default=None,
        help="Comma-separated regexes; matching file or directory names are skipped.",
    )

    # --- Ordering and Queries ---
    p.add_argument(
        "--no-external",
        action="store_true",
        help="Leave out headers that were included but not found under the input.",
    )
    p.add_argument(
        "--who-uses",
        dest="who_uses",
        default=None,
        metavar="KEY",
        help="List the files that include the node KEY (e.g. vector_hdr).",
    )

    # --- Output ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the analysis result as JSON.",
    )
    p.add_argument(
        "--error-log",
        dest="error_log_path",
        default=None,
        metavar="PATH",
        help="Write skipped files and directories to a report file (relative to the current directory).",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the persisted configuration.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration as the new session.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        metavar="PATH",
        help="Also write log records to a rotating file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path

    if args.no_recursive:
        overrides["recursive"] = False
    if args.no_external:
        overrides["with_external"] = False
    if args.exclude_patterns is not None:
        overrides["exclude_patterns"] = _split_csv(args.exclude_patterns)
    if args.json_output:
        overrides["output_format"] = "json"
    if args.error_log_path:
        overrides["save_error_log"] = True
        overrides["error_log_path"] = args.error_log_path

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
