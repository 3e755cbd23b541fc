#!/usr/bin/env python3
"""
PODLINT CORE MODELS
-------------------
Defines the fundamental data structures shared by the loader, the
validator and the CLI: the parsed document tree and the diagnostics
produced while walking it.

Author: PodLint Team
Date: 2026-10-17
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple, Union, Dict, Any

INT_TAG = "tag:yaml.org,2002:int"
STR_TAG = "tag:yaml.org,2002:str"
NULL_TAG = "tag:yaml.org,2002:null"


@dataclass(frozen=True)
class ScalarNode:
    """A leaf of the document tree (string, int, bool, null...)."""
    value: str              # Raw scalar text exactly as written (unquoted)
    tag: str = STR_TAG      # Resolved YAML tag, e.g. 'tag:yaml.org,2002:int'
    line: int = 0           # 1-based source line

    @property
    def is_int(self) -> bool:
        return self.tag == INT_TAG


@dataclass(frozen=True)
class MappingNode:
    """An ordered mapping. Pairs keep the order they were written in."""
    pairs: Tuple[Tuple["Node", "Node"], ...] = ()
    line: int = 0


@dataclass(frozen=True)
class SequenceNode:
    """An ordered sequence of nodes."""
    items: Tuple["Node", ...] = ()
    line: int = 0


Node = Union[ScalarNode, MappingNode, SequenceNode]


def scalar_text(node: Node) -> str:
    """Scalar content of a node; collections have none and read as ''."""
    if isinstance(node, ScalarNode):
        return node.value
    return ""


class DiagnosticKind(str, Enum):
    REQUIRED_FIELD = "RequiredField"
    UNSUPPORTED_VALUE = "UnsupportedValue"
    INVALID_FORMAT = "InvalidFormat"
    OUT_OF_RANGE = "OutOfRange"
    TYPE_MISMATCH = "TypeMismatch"


@dataclass(frozen=True)
class SourcePaths:
    """
    The two renderings of the input file used in diagnostics.

    `relative` is the path relative to the file's own directory (its base
    name); `absolute` is the fully resolved path.
    """
    relative: str
    absolute: str

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> "SourcePaths":
        file_path = str(file_path)
        parent = os.path.dirname(file_path) or "."
        return cls(
            relative=os.path.relpath(file_path, parent),
            absolute=os.path.abspath(file_path),
        )


@dataclass(frozen=True)
class Diagnostic:
    """
    One schema violation. Rendering via str() follows the fixed
    templates relied upon by downstream tooling, so keep them stable.
    """
    kind: DiagnosticKind
    field: str
    line: Optional[int] = None
    path: Optional[str] = None
    detail: Optional[str] = None

    def __str__(self) -> str:
        if self.line is None:
            # Only a missing field without a location lands here
            return f"{self.field} is required"

        prefix = f"{self.path}:{self.line} {self.field}"
        if self.kind is DiagnosticKind.REQUIRED_FIELD:
            return f"{prefix} is required"
        if self.kind is DiagnosticKind.TYPE_MISMATCH:
            return f"{prefix} must be {self.detail}"
        if self.kind is DiagnosticKind.OUT_OF_RANGE:
            return f"{prefix} value out of range"
        if self.kind is DiagnosticKind.INVALID_FORMAT:
            return f"{prefix} has invalid format '{self.detail}'"
        return f"{prefix} has unsupported value '{self.detail}'"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "field": self.field,
            "line": self.line,
            "path": self.path,
            "detail": self.detail,
            "message": str(self),
        }
