from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates parsed argparse
namespaces into session configuration overrides.
"""

import argparse
from typing import Any, Dict

from treeforge.domain.constants import SUPPORTED_LOCALES
from treeforge.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the TreeForge CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="treeforge",
        description=i18n.t("app.description"),
    )

    # --- Inputs ---
    p.add_argument(
        "-s", "--structure",
        dest="structure_file",
        default=None,
        help=i18n.t("cli.args.structure"),
    )
    p.add_argument(
        "-t", "--target",
        dest="target_path",
        default=None,
        help=i18n.t("cli.args.target"),
    )

    # --- Naming policy ---
    prefix_group = p.add_mutually_exclusive_group()
    prefix_group.add_argument(
        "--prefix",
        dest="prefix",
        default=None,
        help=i18n.t("cli.args.prefix"),
    )
    prefix_group.add_argument(
        "--no-prefix",
        action="store_true",
        help=i18n.t("cli.args.no_prefix"),
    )

    # --- Modes ---
    p.add_argument("--count", action="store_true", help=i18n.t("cli.args.count"))
    p.add_argument("--dump-structure", action="store_true", help=i18n.t("cli.args.dump_structure"))
    p.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump"))

    # --- Configuration and diagnostics ---
    p.add_argument("--use-defaults", action="store_true", help=i18n.t("cli.args.defaults"))
    p.add_argument("--save-session", action="store_true", help=i18n.t("cli.args.save_session"))
    p.add_argument(
        "--locale",
        choices=SUPPORTED_LOCALES,
        default=None,
        help=i18n.t("cli.args.locale"),
    )
    p.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))

    # --- Format selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into session configuration overrides.

    Keys whose argument was not given map to None and are ignored when merged.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "structure_file": args.structure_file,
        "target_path": args.target_path,
        "prefix": None,
        "prefix_enabled": None,
    }

    if args.prefix is not None:
        overrides["prefix"] = args.prefix
        overrides["prefix_enabled"] = True
    elif args.no_prefix:
        overrides["prefix"] = ""
        overrides["prefix_enabled"] = False

    return overrides
