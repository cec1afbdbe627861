from __future__ import annotations

"""
Unit tests for CLI argument parsing and override mapping.
"""

import pytest

from treeforge.interface.cli.args import args_to_overrides, build_parser


def test_defaults_produce_no_overrides() -> None:
    """No flags means every override is None."""
    args = build_parser().parse_args([])
    assert args_to_overrides(args) == {
        "structure_file": None,
        "target_path": None,
        "prefix": None,
        "prefix_enabled": None,
    }
    assert not args.count and not args.json_output


def test_paths_and_prefix() -> None:
    """Short flags map to session keys; --prefix enables the policy."""
    args = build_parser().parse_args(["-s", "tree.yaml", "-t", "/out", "--prefix", "C_"])
    overrides = args_to_overrides(args)

    assert overrides["structure_file"] == "tree.yaml"
    assert overrides["target_path"] == "/out"
    assert overrides["prefix"] == "C_"
    assert overrides["prefix_enabled"] is True


def test_no_prefix_disables_policy() -> None:
    """--no-prefix clears a saved prefix."""
    overrides = args_to_overrides(build_parser().parse_args(["--no-prefix"]))
    assert overrides["prefix"] == ""
    assert overrides["prefix_enabled"] is False


def test_prefix_flags_are_mutually_exclusive() -> None:
    """--prefix and --no-prefix cannot be combined."""
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--prefix", "A", "--no-prefix"])


def test_locale_choices() -> None:
    """Only shipped locales are accepted."""
    assert build_parser().parse_args(["--locale", "zh"]).locale == "zh"
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--locale", "fr"])
