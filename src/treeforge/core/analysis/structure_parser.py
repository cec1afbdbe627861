from __future__ import annotations

"""
Directory Structure Parser.

Decodes JSON or YAML documents into the immutable DirectoryTree model.
The raw decoder output is validated and converted in a single pass, so the
materializer never has to inspect untyped values. Any structural problem
fails the whole load; there is no partial tree.
"""

import json
import logging
import os
from typing import Any, Dict, List, Mapping, Optional, Set

import yaml
from yaml.constructor import ConstructorError

from treeforge.domain.constants import FORMAT_FAMILIES, SUPPORTED_FORMATS
from treeforge.domain.errors import (
    EmptyFileError,
    EmptyStructureError,
    FileUnreadableError,
    StructureDecodeError,
    UnsupportedFormatError,
)
from treeforge.domain.tree_models import DirNode, DirectoryTree
from treeforge.utils.i18n import i18n

logger = logging.getLogger(__name__)

_YAML_NULL_TAG = "tag:yaml.org,2002:null"


class _FolderMappingLoader(yaml.SafeLoader):
    """
    SafeLoader variant for structure documents.

    Mapping keys keep their literal source text ('01', '0755', 'on' stay as
    written) instead of being resolved to numbers, booleans or dates.
    Collection keys and keys repeated within one mapping are rejected.
    Values are still resolved normally, so non-mapping values can be reported.
    """

    def construct_mapping(self, node: yaml.Node, deep: bool = False) -> Dict[Optional[str], Any]:
        if not isinstance(node, yaml.MappingNode):
            raise ConstructorError(
                None, None, f"expected a mapping node, but found {node.id}", node.start_mark
            )

        # Keys merged in with '<<' may be overridden; explicit keys may not repeat
        explicit = {id(key_node) for key_node, _ in node.value}
        self.flatten_mapping(node)

        mapping: Dict[Optional[str], Any] = {}
        seen: Set[Optional[str]] = set()
        for key_node, value_node in node.value:
            if not isinstance(key_node, yaml.ScalarNode):
                raise ConstructorError(
                    "while constructing a mapping", node.start_mark,
                    f"found unacceptable key ({key_node.id})", key_node.start_mark,
                )
            key = None if key_node.tag == _YAML_NULL_TAG else key_node.value

            if id(key_node) in explicit:
                if key in seen:
                    raise ConstructorError(
                        "while constructing a mapping", node.start_mark,
                        f"mapping key '{key_node.value}' already defined", key_node.start_mark,
                    )
                seen.add(key)
            mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_structure(data: bytes, format_hint: str) -> DirectoryTree:
    """
    Decode a structure document into a DirectoryTree.

    Args:
        data: Raw document bytes.
        format_hint: Format identifier, usually the file extension
                     ('json', 'yaml', 'yml'; case and leading dot ignored).

    Returns:
        DirectoryTree: Non-empty immutable tree.

    Raises:
        EmptyFileError: data is empty.
        UnsupportedFormatError: format_hint is not a supported format.
        StructureDecodeError: Syntax error or a value that is not a folder mapping.
        EmptyStructureError: The document defines no folders.
    """
    if not data:
        raise EmptyFileError()

    hint = normalize_format_hint(format_hint)
    family = FORMAT_FAMILIES.get(hint)
    if family is None:
        raise UnsupportedFormatError(format_hint, SUPPORTED_FORMATS)

    if family == "json":
        raw = _decode_json(data)
    else:
        raw = _decode_yaml(data)

    if raw is None:
        raise EmptyStructureError()
    if not isinstance(raw, Mapping):
        raise StructureDecodeError(
            family, i18n.t("errors.top_level", type=_type_label(raw))
        )
    if not raw:
        raise EmptyStructureError()

    return _convert(raw, [], family)


def load_structure_file(file_path: str) -> DirectoryTree:
    """
    Read a structure file from disk and parse it by its extension.

    Args:
        file_path: Path to a .json, .yaml or .yml file.

    Returns:
        DirectoryTree: The parsed tree.

    Raises:
        FileUnreadableError: The file is missing or cannot be read.
        StructureError: Any parse failure (see parse_structure).
    """
    if not os.path.isfile(file_path):
        raise FileUnreadableError(file_path, "file not found")

    try:
        with open(file_path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise FileUnreadableError(file_path, e.strerror or str(e)) from e

    _, ext = os.path.splitext(file_path)
    tree = parse_structure(data, ext)
    logger.info(f"Structure loaded from {file_path} ({len(tree)} top-level folders).")
    return tree


def normalize_format_hint(format_hint: str) -> str:
    """Lower-case a format hint and strip its leading dot."""
    return (format_hint or "").strip().lower().lstrip(".")

# -----------------------------------------------------------------------------
# DECODERS
# -----------------------------------------------------------------------------

def _decode_json(data: bytes) -> Any:
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise StructureDecodeError("json", i18n.t("errors.encoding", detail=str(e))) from e

    try:
        return json.loads(text)
    except (ValueError, RecursionError) as e:
        logger.debug(f"JSON decoder rejected structure: {e}")
        raise StructureDecodeError("json", str(e)) from e


def _decode_yaml(data: bytes) -> Any:
    try:
        return yaml.load(data, Loader=_FolderMappingLoader)
    except (yaml.YAMLError, RecursionError) as e:
        logger.debug(f"YAML decoder rejected structure: {e}")
        raise StructureDecodeError("yaml", str(e)) from e

# -----------------------------------------------------------------------------
# VALIDATION AND CONVERSION
# -----------------------------------------------------------------------------

def _convert(mapping: Mapping[Any, Any], parents: List[str], family: str) -> DirectoryTree:
    """Validate one mapping level and build its nodes."""
    nodes: List[DirNode] = []
    for key, value in mapping.items():
        name = _as_name(key, parents, family)
        here = parents + [name]

        if value is None:
            children: DirectoryTree = ()
        elif isinstance(value, Mapping):
            children = _convert(value, here, family)
        else:
            raise StructureDecodeError(
                family,
                i18n.t("errors.invalid_value", path="/".join(here), type=_type_label(value)),
            )
        nodes.append(DirNode(name=name, children=children))
    return tuple(nodes)


def _as_name(key: Any, parents: List[str], family: str) -> str:
    if isinstance(key, str):
        return key
    raise StructureDecodeError(
        family,
        i18n.t("errors.invalid_key", path="/".join(parents) or "/", type=_type_label(key)),
    )


def _type_label(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "list"
    return type(value).__name__
