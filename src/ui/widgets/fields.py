"""Settings field widgets: FieldRow, OptionCard."""

from textual.app import ComposeResult
from textual.containers import Container
from textual.widgets import Checkbox, Input, Label, Static

from model.ui_field import UIField
from ui.ids import error_id, row_id


class FieldRow(Container):
    """Label on row 1, input on row 2, explanation or error on row 3."""

    def __init__(self, field: UIField, value: str = "") -> None:
        """Create a FieldRow from a UIField.

        Args:
            field: The UIField descriptor containing metadata
            value: Initial input value
        """
        super().__init__(id=row_id(field.input_id), classes="field-row")
        self.field = field
        self._value = value

    def compose(self) -> ComposeResult:
        yield Label(self.field.label, classes="field-label")
        yield Input(
            value=self._value,
            placeholder=self.field.placeholder,
            password=self.field.secret,
            id=self.field.input_id,
        )
        yield Static(self.field.explanation, classes="option-explanation")
        yield Static("", classes="field-error hidden", id=error_id(self.field.input_id))

    def show_error(self, message: str | None) -> None:
        """Show a validation message, or clear it with None."""
        error = self.query_one(f"#{error_id(self.field.input_id)}", Static)
        if message:
            error.update(message)
            error.remove_class("hidden")
            self.add_class("invalid")
        else:
            error.update("")
            error.add_class("hidden")
            self.remove_class("invalid")


class OptionCard(Container):
    """A checkbox with label on row 1, explanation on row 2."""

    def __init__(self, field: UIField, value: bool | None = None) -> None:
        super().__init__(classes="option-card")
        self.field = field
        self._value = field.default if value is None else value

    def compose(self) -> ComposeResult:
        yield Checkbox(self.field.label, value=self._value, id=self.field.input_id)
        yield Static(self.field.explanation, classes="option-explanation")
