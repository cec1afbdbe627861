from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of configuration
sources (defaults, saved session, command-line overrides), structure
loading, the generation run itself and result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from treeforge.core.analysis.structure_parser import load_structure_file
from treeforge.core.pipeline.engine import run_generation
from treeforge.core.pipeline.validator import validate_config
from treeforge.core.services.report import format_entry, format_summary
from treeforge.core.services.summary import count_nodes
from treeforge.domain import config as cfg
from treeforge.domain.errors import StructureError
from treeforge.domain.generation_models import GenerationResult, LogEntry
from treeforge.domain.tree_models import NamePolicy, tree_to_mapping
from treeforge.infra.fs import normalize_path
from treeforge.infra.logging import LoggingConfig, configure_logging, get_logger
from treeforge.interface.cli import args as cli_args
from treeforge.utils.i18n import DEFAULT_LOCALE, i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing, with help text in the saved locale
    saved_locale = cfg.load_app_state()["app_settings"].get("locale", DEFAULT_LOCALE)
    i18n.load_locale(saved_locale)
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    configure_logging(LoggingConfig.for_cli(debug=args.debug))

    # 3. Configuration hierarchy
    if args.use_defaults:
        i18n.load_locale(args.locale or DEFAULT_LOCALE)
        base_conf = cfg.get_default_config()
    else:
        i18n.load_locale(args.locale or saved_locale)
        base_conf = cfg.load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Structure loading
    structure_file = clean_conf["structure_file"]
    if not structure_file:
        print(f"ERROR: {i18n.t('cli.errors.no_structure')}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    try:
        tree = load_structure_file(structure_file)
    except StructureError as e:
        logger.debug(f"Structure load failed: {e!r}")
        print(f"ERROR: {e.message}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    expected = count_nodes(tree)

    if args.dump_structure:
        print(json.dumps(tree_to_mapping(tree), ensure_ascii=False, indent=2))
        return EXIT_OK

    if args.count:
        print(i18n.t("cli.status.expected", count=expected))
        return EXIT_OK

    # 5. Session resolution
    target_path = normalize_path(clean_conf["target_path"], os.getcwd())
    policy = NamePolicy(enabled=clean_conf["prefix_enabled"], prefix=clean_conf["prefix"])

    if args.save_session:
        session = dict(clean_conf)
        session["target_path"] = target_path
        session["structure_file"] = os.path.abspath(structure_file)
        cfg.save_config(session)

    # 6. Generation run
    on_entry = None
    if not args.json_output:
        print(i18n.t("cli.status.start", path=target_path))
        print(i18n.t("cli.status.expected", count=expected))
        if policy.active:
            print(i18n.t("cli.status.prefix", prefix=policy.prefix))
        print()
        on_entry = _print_entry

    try:
        result = run_generation(target_path, tree, policy, on_entry=on_entry)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        msg = i18n.t("cli.errors.run_fail", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_FAILURE

    # 7. Output rendering
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return EXIT_OK if result.ok else EXIT_FAILURE

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None overrides of known session keys into base.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in cfg.get_default_config():
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_entry(entry: LogEntry) -> None:
    print(format_entry(entry), flush=True)


def _print_human_summary(result: GenerationResult) -> None:
    print()
    for line in format_summary(result.summary):
        print(line)
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
