#!/usr/bin/env python3
"""
PODLINT CLI - Pod Manifest Linter
---------------------------------
Thin command-line wrapper around the LintEngine. Takes exactly one
manifest path, prints diagnostics one per line to stdout and exits 0;
validation findings are advisory unless --fail-on-diagnostics is given.
Setup problems (bad path, unreadable or unparseable file) abort with a
message on stderr and a non-zero status.

Author: PodLint Team
Date: 2026-10-17
"""

import sys
import logging
import argparse
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from podlint.cli.formatter import ReportFormatter
from podlint.core.engine import LintEngine
from podlint.core.exceptions import ManifestError

__version__ = "1.0.0"

EXIT_OK = 0
EXIT_SETUP_ERROR = 1
EXIT_DIAGNOSTICS = 3

# Errors and banners go to stderr; stdout is reserved for diagnostics
err_console = Console(stderr=True)
logger = logging.getLogger("podlint.cli")


class PodLintCLI:
    """
    CLI wrapper that translates user arguments into an Engine run and
    renders the resulting report.
    """

    def __init__(self):
        """Initializes the CLI and sets up the argument parser."""
        self.parser = argparse.ArgumentParser(
            prog="podlint",
            description="PodLint - schema diagnostics for Pod manifests",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self._setup_args()

    def _setup_args(self):
        """Configures the command-line flags."""
        self.parser.add_argument("--version", action="version", version=f"podlint v{__version__}")
        self.parser.add_argument("path", help="Path to a YAML manifest (may hold several documents)")
        self.parser.add_argument(
            "--format", choices=ReportFormatter.FORMATS, default="text",
            help="Output format (default: text, one diagnostic per line)"
        )
        self.parser.add_argument(
            "--fail-on-diagnostics", action="store_true",
            help=f"Exit with status {EXIT_DIAGNOSTICS} when any diagnostic is reported"
        )
        self.parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")

    def _configure_logging(self, verbose: bool):
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary entry point. Returns the process exit status."""
        args = self.parser.parse_args(argv)
        self._configure_logging(args.verbose)

        engine = LintEngine()
        try:
            report = engine.lint_file(args.path)
        except ManifestError as e:
            logger.debug("setup failure", exc_info=True)
            err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
            return EXIT_SETUP_ERROR

        ReportFormatter().render(report, args.format)

        if args.fail_on_diagnostics and not report.ok:
            return EXIT_DIAGNOSTICS
        return EXIT_OK


def main(argv: Optional[List[str]] = None):
    """Application entry point with interrupt handling."""
    try:
        sys.exit(PodLintCLI().run(argv))
    except KeyboardInterrupt:
        err_console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(130)


if __name__ == "__main__":
    main()
