#!/usr/bin/env python3
"""
PODLINT VALIDATOR - The Judge
-----------------------------
Walks a parsed Pod manifest level by level and records every schema
violation it finds. The validator never stops early: each mapping is
visited once, its pairs are checked in source order, and only after the
whole mapping (including everything nested under it) has been walked are
its missing required fields reported.

Author: PodLint Team
Date: 2026-10-17
"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from podlint.core.models import (
    Diagnostic, MappingNode, Node, ScalarNode, SequenceNode, SourcePaths, scalar_text,
)
from podlint.validator import checks
from podlint.validator.diagnostics import DiagnosticSink
from podlint.validator.scope import FieldTracker

logger = logging.getLogger("podlint.validator")

ROOT_REQUIRED = ("apiVersion", "kind", "metadata", "spec")
METADATA_REQUIRED = ("name",)
SPEC_REQUIRED = ("containers",)
CONTAINER_REQUIRED = ("name", "image", "resources")
CONTAINER_PORT_REQUIRED = ("containerPort",)
PROBE_REQUIRED = ("httpGet",)
HTTP_GET_REQUIRED = ("path", "port")

SUPPORTED_API_VERSION = "v1"
SUPPORTED_KIND = "Pod"


def _pairs(node: Node) -> Iterator[Tuple[ScalarNode, str, Node]]:
    """(key node, key name, value node) for each pair of a mapping scope."""
    if not isinstance(node, MappingNode):
        return
    for key, value in node.pairs:
        yield key, scalar_text(key), value


def _elements(node: Node) -> Tuple[Node, ...]:
    if isinstance(node, SequenceNode):
        return node.items
    return ()


class PodValidator:
    """
    Enforces the fixed Pod schema on parsed documents.

    A single instance may be reused: every call to `validate` starts a
    fresh DiagnosticSink, so no state leaks from one run to the next.
    """

    def __init__(self, paths: SourcePaths):
        """
        Args:
            paths: Relative and absolute renderings of the source file,
                   used to prefix line-bearing diagnostics.
        """
        self.paths = paths

    def validate(self, roots: Iterable[Node]) -> List[Diagnostic]:
        sink = DiagnosticSink(self.paths)
        for index, root in enumerate(roots):
            before = len(sink)
            self._validate_root(root, sink)
            logger.debug("document %d: %d diagnostic(s)", index, len(sink) - before)
        return sink.to_list()

    # --- Scope protocol ---

    def _open_scope(self, level: str, node: Node, required: Tuple[str, ...] = ()) -> FieldTracker:
        """First phase of every level: a fresh tracker for this mapping."""
        logger.debug("enter %s scope at line %d", level, node.line)
        return FieldTracker(required)

    def _close_scope(self, tracker: FieldTracker, sink: DiagnosticSink) -> None:
        """Second phase of every level: report what the loop never saw."""
        for field_name in tracker.missing_required():
            sink.missing_field(field_name)

    def _check_int(self, key: ScalarNode, value: Node, sink: DiagnosticSink,
                   minimum: Optional[int] = None, maximum: Optional[int] = None) -> None:
        """Integer-tag check followed by a range check on the same value."""
        if not isinstance(value, ScalarNode) or not value.is_int:
            sink.type_mismatch(key.value, "int", key.line)
            return
        number = checks.parse_int(value.value)
        if number is None:
            sink.type_mismatch(key.value, "int", key.line)
            return
        if not checks.in_range(number, minimum, maximum):
            sink.out_of_range(key.value, key.line)

    # --- Level validators ---

    def _validate_root(self, node: Node, sink: DiagnosticSink) -> None:
        tracker = self._open_scope("root", node, ROOT_REQUIRED)

        for key, name, value in _pairs(node):
            if name == "apiVersion":
                if scalar_text(value) != SUPPORTED_API_VERSION:
                    sink.unsupported_value(name, scalar_text(value), key.line)
            elif name == "kind":
                if scalar_text(value) != SUPPORTED_KIND:
                    sink.unsupported_value(name, scalar_text(value), key.line)
            elif name == "metadata":
                self._validate_metadata(value, sink)
            elif name == "spec":
                self._validate_spec(value, sink)
            else:
                continue
            tracker.mark_seen(name)

        self._close_scope(tracker, sink)

    def _validate_metadata(self, node: Node, sink: DiagnosticSink) -> None:
        tracker = self._open_scope("metadata", node, METADATA_REQUIRED)

        for key, name, value in _pairs(node):
            if name == "name":
                if scalar_text(value) == "":
                    sink.required_field(name, key.line)
            elif name == "namespace":
                pass
            elif name == "labels":
                self._validate_labels(value, sink)
            else:
                continue
            tracker.mark_seen(name)

        self._close_scope(tracker, sink)

    def _validate_labels(self, node: Node, sink: DiagnosticSink) -> None:
        self._open_scope("labels", node)
        for key, name, value in _pairs(node):
            if not isinstance(value, ScalarNode):
                sink.type_mismatch(name, "string", key.line)

    def _validate_spec(self, node: Node, sink: DiagnosticSink) -> None:
        tracker = self._open_scope("spec", node, SPEC_REQUIRED)

        for key, name, value in _pairs(node):
            if name == "os":
                if not checks.is_one_of(scalar_text(value), checks.POD_OS_VALUES):
                    sink.unsupported_value(name, scalar_text(value), key.line)
            elif name == "containers":
                for container in _elements(value):
                    self._validate_container(container, sink)
            else:
                continue
            tracker.mark_seen(name)

        self._close_scope(tracker, sink)

    def _validate_container(self, node: Node, sink: DiagnosticSink) -> None:
        tracker = self._open_scope("container", node, CONTAINER_REQUIRED)

        for key, name, value in _pairs(node):
            text = scalar_text(value)
            if name == "name":
                if text == "":
                    sink.required_field(name, key.line)
                elif not checks.is_snake_case(text):
                    sink.invalid_format(name, text, key.line)
            elif name == "image":
                if not checks.is_valid_image(text):
                    sink.invalid_format(name, text, key.line)
            elif name == "ports":
                for port in _elements(value):
                    self._validate_container_port(port, sink)
            elif name in ("readinessProbe", "livenessProbe"):
                self._validate_probe(value, sink)
            elif name == "resources":
                self._validate_resources(value, sink)
            else:
                continue
            tracker.mark_seen(name)

        self._close_scope(tracker, sink)

    def _validate_container_port(self, node: Node, sink: DiagnosticSink) -> None:
        tracker = self._open_scope("containerPort", node, CONTAINER_PORT_REQUIRED)

        for key, name, value in _pairs(node):
            if name == "containerPort":
                self._check_int(key, value, sink, checks.PORT_MIN, checks.PORT_MAX)
            elif name == "protocol":
                if not checks.is_one_of(scalar_text(value), checks.PROTOCOL_VALUES):
                    sink.unsupported_value(name, scalar_text(value), key.line)
            else:
                continue
            tracker.mark_seen(name)

        self._close_scope(tracker, sink)

    def _validate_probe(self, node: Node, sink: DiagnosticSink) -> None:
        tracker = self._open_scope("probe", node, PROBE_REQUIRED)

        for key, name, value in _pairs(node):
            if name == "httpGet":
                self._validate_http_get(value, sink)
                tracker.mark_seen(name)

        self._close_scope(tracker, sink)

    def _validate_http_get(self, node: Node, sink: DiagnosticSink) -> None:
        tracker = self._open_scope("httpGet", node, HTTP_GET_REQUIRED)

        for key, name, value in _pairs(node):
            if name == "path":
                if not checks.has_path_prefix(scalar_text(value)):
                    sink.invalid_format(name, scalar_text(value), key.line)
            elif name == "port":
                self._check_int(key, value, sink, checks.PORT_MIN, checks.PORT_MAX)
            else:
                continue
            tracker.mark_seen(name)

        self._close_scope(tracker, sink)

    def _validate_resources(self, node: Node, sink: DiagnosticSink) -> None:
        # No required fields; requests and limits share one declaration schema
        self._open_scope("resources", node)
        for key, name, value in _pairs(node):
            if name in ("requests", "limits"):
                self._validate_resource_declaration(value, sink)

    def _validate_resource_declaration(self, node: Node, sink: DiagnosticSink) -> None:
        self._open_scope("resourceDeclaration", node)
        for key, name, value in _pairs(node):
            if name == "cpu":
                self._check_int(key, value, sink, minimum=1)
            elif name == "memory":
                text = scalar_text(value)
                amount = checks.parse_memory(text)
                if amount is None:
                    sink.invalid_format(name, text, key.line)
                    continue
                number = checks.parse_int(amount)
                if number is None:
                    sink.type_mismatch(name, "int", key.line)
                elif number < 1:
                    sink.out_of_range(name, key.line)


def validate(roots: Iterable[Node], paths: SourcePaths) -> List[Diagnostic]:
    """Validate parsed document roots and return every diagnostic in order."""
    return PodValidator(paths).validate(roots)
