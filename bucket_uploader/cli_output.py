"""Console rendering helpers for the bucket-up CLI."""
from __future__ import annotations

from typing import Any, Dict

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .models import UploadResult

console = Console()


def _human_size(value: int) -> str:
    size = float(max(value, 0))
    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024 or unit == "GB":
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GB"


def mask_secret(value: str, visible: int = 4) -> str:
    if not value:
        return "(missing)"
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]


def render_configuration_summary(config: Dict[str, Any]) -> None:
    """Render startup configuration summary."""
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold cyan", justify="right")
    table.add_column(style="white")

    for key, value in config.items():
        rendered = "-" if value is None else str(value)
        table.add_row(key, rendered)

    panel = Panel(
        table,
        title="[bold green]bucket-up[/bold green]",
        subtitle="[dim]bucket uploader CLI[/dim]",
        border_style="blue",
    )
    console.print(panel)


def render_upload_result(result: UploadResult) -> None:
    meta = result.metadata
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold cyan", justify="right")
    table.add_column(style="white")
    table.add_row("URL", result.url)
    table.add_row("Name", meta.original_name or "-")
    table.add_row("Type", meta.file_type or "-")
    table.add_row("Size", _human_size(meta.file_size))
    table.add_row("Uploaded", meta.upload_time or "-")

    console.print(
        Panel(table, title="[bold green]Upload complete[/bold green]", border_style="green")
    )
