#!/usr/bin/env python3
"""
PODLINT ENGINE - The Orchestrator
---------------------------------
The LintEngine drives a single lint run: it resolves the input path,
reads the manifest (BOM-aware), composes its documents and hands them to
the PodValidator. Anything that goes wrong before validation starts is
raised as a ManifestError; schema problems come back as diagnostics.

Author: PodLint Team
Date: 2026-10-17
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, List, Union

from podlint.core.exceptions import ManifestNotFoundError, ManifestReadError
from podlint.core.models import Diagnostic, SourcePaths
from podlint.parsing.loader import ManifestLoader
from podlint.validator.validator import PodValidator

logger = logging.getLogger("podlint.engine")


@dataclass
class LintReport:
    """Outcome of linting one manifest file."""
    file_path: str
    paths: SourcePaths
    documents: int = 0
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def summary(self) -> Dict[str, int]:
        """Number of diagnostics per kind, in first-seen order."""
        return dict(Counter(d.kind.value for d in self.diagnostics))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_path": self.file_path,
            "documents": self.documents,
            "ok": self.ok,
            "summary": self.summary(),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


class LintEngine:
    """
    Principal orchestrator for manifest validation.
    Holds the loader; a fresh validator is built per file because the
    diagnostic paths depend on the file being linted.
    """

    def __init__(self, encoding: str = "utf-8-sig"):
        self.encoding = encoding
        self.loader = ManifestLoader()

    def lint_file(self, file_path: Union[str, Path]) -> LintReport:
        """
        Performs a full read + validate cycle on one manifest.

        Raises:
            ManifestNotFoundError: the path does not exist.
            ManifestReadError: the path is not a readable text file.
            ManifestParseError: the content is not valid YAML.
        """
        path = Path(file_path)
        if not path.exists():
            logger.error("Manifest missing: %s", path)
            raise ManifestNotFoundError(str(file_path))

        try:
            raw_text = path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Unable to read %s: %s", path, e)
            raise ManifestReadError(f"cannot read {file_path}: {e}") from e

        paths = SourcePaths.from_file(file_path)
        return self.lint_text(raw_text, paths, file_path=str(file_path))

    def lint_text(self, raw_text: str, paths: SourcePaths, file_path: str = "") -> LintReport:
        """Validates already-read manifest text; `paths` drive diagnostic prefixes."""
        roots = self.loader.load(raw_text)
        diagnostics = PodValidator(paths).validate(roots)

        logger.info("%s: %d document(s), %d diagnostic(s)",
                    file_path or paths.relative, len(roots), len(diagnostics))
        return LintReport(
            file_path=file_path or paths.relative,
            paths=paths,
            documents=len(roots),
            diagnostics=diagnostics,
        )
