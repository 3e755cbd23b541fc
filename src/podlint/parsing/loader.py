#!/usr/bin/env python3
"""
PODLINT LOADER - Document Tree Builder
--------------------------------------
Turns raw YAML text into the immutable node tree consumed by the
validator. ruamel.yaml does the heavy lifting: we only *compose* the
stream (no construction into Python objects), which keeps key order,
duplicate keys, resolved scalar tags and source marks intact.

Author: PodLint Team
Date: 2026-10-17
"""

import logging
from pathlib import Path
from typing import Dict, List, Set, Union

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from ruamel.yaml import nodes as yaml_nodes

from podlint.core.exceptions import ManifestParseError
from podlint.core.models import NULL_TAG, MappingNode, Node, ScalarNode, SequenceNode

logger = logging.getLogger("podlint.loader")


class ManifestLoader:
    """
    Composes every document of a YAML stream into podlint nodes.
    A file may hold several documents separated by '---'.
    """

    def __init__(self):
        self.yaml = YAML(typ="rt")

    def load(self, text: str) -> List[Node]:
        # Strip a stray BOM so the first key keeps its real name
        text = text.lstrip("\ufeff")
        try:
            composed = list(self.yaml.compose_all(text))
        except YAMLError as e:
            mark = getattr(e, "problem_mark", None)
            line = mark.line + 1 if mark is not None else None
            problem = getattr(e, "problem", None) or str(e)
            raise ManifestParseError(problem, line) from e

        documents = [
            self._convert(node, {}, set())
            for node in composed
            if node is not None and not self._is_empty_document(node)
        ]
        logger.debug("composed %d document(s)", len(documents))
        return documents

    @staticmethod
    def _is_empty_document(node: yaml_nodes.Node) -> bool:
        """A bare '---' with no content composes to an empty null scalar."""
        return (
            isinstance(node, yaml_nodes.ScalarNode)
            and str(node.tag) == NULL_TAG
            and node.value == ""
        )

    def load_file(self, path: Union[str, Path], encoding: str = "utf-8-sig") -> List[Node]:
        return self.load(Path(path).read_text(encoding=encoding))

    def _convert(self, node: yaml_nodes.Node, memo: Dict[int, Node], active: Set[int]) -> Node:
        """
        Recursively converts a composed node. Aliased nodes are converted
        once and shared through `memo`.
        """
        key = id(node)
        if key in memo:
            return memo[key]
        if key in active:
            raise ManifestParseError("recursive alias", node.start_mark.line + 1)

        line = node.start_mark.line + 1
        active.add(key)
        if isinstance(node, yaml_nodes.MappingNode):
            result: Node = MappingNode(
                pairs=tuple(
                    (self._convert(k, memo, active), self._convert(v, memo, active))
                    for k, v in node.value
                ),
                line=line,
            )
        elif isinstance(node, yaml_nodes.SequenceNode):
            result = SequenceNode(
                items=tuple(self._convert(item, memo, active) for item in node.value),
                line=line,
            )
        else:
            result = ScalarNode(value=str(node.value), tag=str(node.tag), line=line)
        active.discard(key)

        memo[key] = result
        return result


def load_documents(text: str) -> List[Node]:
    return ManifestLoader().load(text)


def load_file(path: Union[str, Path]) -> List[Node]:
    return ManifestLoader().load_file(path)
