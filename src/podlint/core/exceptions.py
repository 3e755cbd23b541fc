#!/usr/bin/env python3
"""
PODLINT EXCEPTIONS
------------------
Setup failures that abort a run before validation starts. Schema
violations are never exceptions; they are collected as Diagnostics.

Author: PodLint Team
Date: 2026-10-17
"""

from typing import Optional


class ManifestError(RuntimeError):
    """Base class for every unrecoverable input problem."""


class ManifestNotFoundError(ManifestError):
    def __init__(self, path: str):
        super().__init__(f"{path} does not exist")
        self.path = path


class ManifestReadError(ManifestError):
    """The file exists but could not be read or decoded."""


class ManifestParseError(ManifestError):
    """The input is not a structurally valid YAML stream."""

    def __init__(self, message: str, line: Optional[int] = None):
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(f"cannot parse manifest: {message}")
        self.line = line
