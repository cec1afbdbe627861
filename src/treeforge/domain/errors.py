from __future__ import annotations

"""
Structure Loading Error Taxonomy.

Defines the exceptions raised while turning a structure file into a
DirectoryTree. Every load-time failure is fatal to the load and carries a
user-facing message resolved through the active locale.
"""

from typing import Sequence

from treeforge.utils.i18n import i18n


class StructureError(Exception):
    """Base class for every failure while loading a directory structure."""

    i18n_key = "errors.structure"

    def __init__(self, message: str = "") -> None:
        self.message = message or i18n.t(self.i18n_key)
        super().__init__(self.message)


class FileUnreadableError(StructureError):
    """The structure file is missing or cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(i18n.t("errors.file_unreadable", path=path, reason=reason))


class EmptyFileError(StructureError):
    """The structure file contains no bytes."""

    i18n_key = "errors.empty_file"


class UnsupportedFormatError(StructureError):
    """The format hint (file extension) is not a known structure format."""

    def __init__(self, hint: str, supported: Sequence[str]) -> None:
        self.hint = hint
        self.supported = tuple(supported)
        formats = ", ".join(f".{s}" for s in self.supported)
        super().__init__(i18n.t("errors.unsupported_format", hint=hint, formats=formats))


class StructureDecodeError(StructureError):
    """The decoder rejected the document or its shape is not a folder tree."""

    def __init__(self, fmt: str, detail: str) -> None:
        self.fmt = fmt
        self.detail = detail
        key = "errors.decode_yaml" if fmt == "yaml" else "errors.decode_json"
        super().__init__(i18n.t(key, detail=detail))


class EmptyStructureError(StructureError):
    """The document decoded successfully but defines no folders."""

    i18n_key = "errors.empty_structure"
