"""Summary tab composition."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Label, Static

from model import WiFiSettings
import ui.ids as ids

if TYPE_CHECKING:
    from controller.schema import FieldRule


def format_active_fields(schema: dict[str, FieldRule]) -> str:
    """One line per active field: label and whether it must be filled in."""
    labels = {name: f.label for name, f in WiFiSettings.get_ui_fields().items()}
    return "\n".join(
        f"• {labels[name]}{' (required)' if rule.required else ''}"
        for name, rule in schema.items()
    )


def compose_summary_tab(summary: str, active_fields: str) -> ComposeResult:
    """Compose the summary tab content.

    Args:
        summary: Settings summary text (password redacted)
        active_fields: Listing of the fields that will be validated

    Yields:
        Textual widgets for the summary tab
    """
    with VerticalScroll(id=ids.SUMMARY_TAB_CONTENT):
        yield Label("Settings to save", classes="section-label")
        yield Static(summary, id=ids.SETTINGS_SUMMARY)
        yield Label("Checked on save", classes="section-label")
        yield Static(active_fields, id=ids.ACTIVE_FIELDS)
