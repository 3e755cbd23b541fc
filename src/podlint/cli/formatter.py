# src/podlint/cli/formatter.py
import json
from typing import List

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from podlint.core.engine import LintReport
from podlint.core.models import DiagnosticKind

KIND_STYLES = {
    DiagnosticKind.REQUIRED_FIELD: "bold red",
    DiagnosticKind.UNSUPPORTED_VALUE: "yellow",
    DiagnosticKind.INVALID_FORMAT: "magenta",
    DiagnosticKind.OUT_OF_RANGE: "cyan",
    DiagnosticKind.TYPE_MISMATCH: "blue",
}


class ReportFormatter:
    """
    ReportFormatter: turns a LintReport into terminal output.
    The plain text form is the stable, one-diagnostic-per-line contract;
    json and table are conveniences for CI logs and humans.
    """

    FORMATS = ("text", "json", "table")

    def __init__(self, console: Console = None):
        # No highlighting: diagnostic text must come out uncoloured
        self.console = console or Console(highlight=False)

    def render(self, report: LintReport, fmt: str = "text"):
        if fmt == "json":
            self.render_json(report)
        elif fmt == "table":
            self.render_table(report)
        else:
            self.render_text(report)

    def text_lines(self, report: LintReport) -> List[str]:
        return [str(d) for d in report.diagnostics]

    def render_text(self, report: LintReport):
        for line in self.text_lines(report):
            print(line)

    def render_json(self, report: LintReport):
        print(json.dumps(report.to_dict(), indent=2))

    def render_table(self, report: LintReport):
        """
        Builds the findings table followed by a per-kind summary panel.
        """
        if report.ok:
            self.console.print(f"[bold green]✅ {escape(report.file_path)}: no problems found.[/bold green]")
            return

        table = Table(title=f"PodLint Report: {escape(report.file_path)}", show_header=True, header_style="bold magenta")
        table.add_column("Line", justify="right", style="dim")
        table.add_column("Field", style="white")
        table.add_column("Kind")
        table.add_column("Message")

        for d in report.diagnostics:
            style = KIND_STYLES.get(d.kind, "white")
            table.add_row(
                "-" if d.line is None else str(d.line),
                escape(d.field),
                f"[{style}]{d.kind.value}[/{style}]",
                escape(str(d)),
            )
        self.console.print(table)

        counts = "\n".join(f"{kind:<18} {count}" for kind, count in report.summary().items())
        self.console.print(Panel(
            f"[bold white]Summary[/bold white]\n"
            f"════════════════════════════════════════\n"
            f"Documents:         {report.documents}\n"
            f"Diagnostics:       [red]{len(report.diagnostics)}[/red]\n"
            f"{counts}",
            border_style="dim"
        ))
