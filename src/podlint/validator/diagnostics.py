"""Append-only diagnostic collector for a single validation run."""

import logging
from typing import Iterator, List, Optional

from podlint.core.models import Diagnostic, DiagnosticKind, SourcePaths

logger = logging.getLogger("podlint.validator")


class DiagnosticSink:
    """
    Collects diagnostics in traversal order and stamps each one with the
    path variant its kind renders: absolute for InvalidFormat, relative
    for everything else that carries a line.
    """

    def __init__(self, paths: SourcePaths):
        self.paths = paths
        self._items: List[Diagnostic] = []

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def _add(self, kind: DiagnosticKind, field_name: str, line: Optional[int],
             path: Optional[str] = None, detail: Optional[str] = None) -> None:
        diagnostic = Diagnostic(kind=kind, field=field_name, line=line, path=path, detail=detail)
        logger.debug("diagnostic: %s", diagnostic)
        self._items.append(diagnostic)

    def missing_field(self, field_name: str) -> None:
        self._add(DiagnosticKind.REQUIRED_FIELD, field_name, None)

    def required_field(self, field_name: str, line: int) -> None:
        self._add(DiagnosticKind.REQUIRED_FIELD, field_name, line, self.paths.relative)

    def type_mismatch(self, field_name: str, expected: str, line: int) -> None:
        self._add(DiagnosticKind.TYPE_MISMATCH, field_name, line, self.paths.relative, expected)

    def out_of_range(self, field_name: str, line: int) -> None:
        self._add(DiagnosticKind.OUT_OF_RANGE, field_name, line, self.paths.relative)

    def invalid_format(self, field_name: str, value: str, line: int) -> None:
        self._add(DiagnosticKind.INVALID_FORMAT, field_name, line, self.paths.absolute, value)

    def unsupported_value(self, field_name: str, value: str, line: int) -> None:
        self._add(DiagnosticKind.UNSUPPORTED_VALUE, field_name, line, self.paths.relative, value)

    def to_list(self) -> List[Diagnostic]:
        return list(self._items)
