"""Checkbox table over one selectable collection."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Checkbox, Label

from importprep.models.import_data import ImportChannel, ImportUser
from importprep.models.selection import Selection


class SelectionTable(Widget):
    """Rows with a tri-state header checkbox."""

    class Changed(Message):
        """The selection was edited."""

        def __init__(self, table: "SelectionTable") -> None:
            super().__init__()
            self.table = table

    DEFAULT_CSS = """
    SelectionTable {
        height: auto;
        margin-bottom: 1;
    }

    SelectionTable .selection-row {
        height: auto;
    }

    SelectionTable .selection-detail {
        color: $text-muted;
        margin-left: 2;
        padding-top: 1;
    }

    SelectionTable .selection-tag {
        color: $error;
        margin-left: 2;
        padding-top: 1;
    }
    """

    def __init__(self, selection: Selection, tag: str, id: str | None = None) -> None:
        super().__init__(id=id)
        self.selection = selection
        self.tag = tag
        self._row_ids = {f"row-{index}": item_id for index, item_id in enumerate(selection.ids)}

    def compose(self) -> ComposeResult:
        """Create the table layout."""
        with Vertical():
            yield Checkbox(self._header_label(), self.selection.checked, id="select-all")
            for row_id, item_id in self._row_ids.items():
                item = self.selection.get(item_id)
                with Horizontal(classes="selection-row"):
                    yield Checkbox(self._row_label(item), item.do_import, id=row_id)
                    if isinstance(item, ImportUser):
                        yield Label(item.email, classes="selection-detail")
                    if item.is_excluded:
                        yield Label(self.tag, classes="selection-tag")

    def _row_label(self, item: ImportUser | ImportChannel) -> str:
        if isinstance(item, ImportUser):
            return item.username
        return item.name

    def _header_label(self) -> str:
        if self.selection.indeterminate:
            return f"Select all ({self.selection.selected_count}/{len(self.selection)})"
        return "Select all"

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        """Apply a checkbox click to the selection."""
        event.stop()
        checkbox_id = event.checkbox.id
        if checkbox_id == "select-all":
            self.selection.toggle_all()
        elif checkbox_id in self._row_ids:
            self.selection.set_selected(self._row_ids[checkbox_id], event.value)
        else:
            return

        self.sync()
        self.post_message(self.Changed(self))

    def sync(self) -> None:
        """Push the selection flags back into the checkboxes."""
        with self.prevent(Checkbox.Changed):
            header = self.query_one("#select-all", Checkbox)
            header.value = self.selection.checked
            header.label = self._header_label()
            for row_id, item_id in self._row_ids.items():
                self.query_one(f"#{row_id}", Checkbox).value = self.selection.get(item_id).do_import
