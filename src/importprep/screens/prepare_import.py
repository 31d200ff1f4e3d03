"""Import preparation screen."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Label, LoadingIndicator, ProgressBar
from textual import work

from importprep.services.orchestrator import PrepareImportOrchestrator
from importprep.widgets.selection_table import SelectionTable


def format_progress(rate: float) -> str:
    """Percentage label for a progress rate."""
    return f"{rate:.0f}%"


class PrepareImportScreen(Screen):
    """Shows preparation progress, then the users and channels to import."""

    DEFAULT_CSS = """
    PrepareImportScreen #prepare-header {
        height: auto;
        padding: 0 1;
    }

    PrepareImportScreen #prepare-header Button {
        margin-right: 1;
    }

    PrepareImportScreen #progress-box {
        height: auto;
        align: center middle;
    }

    PrepareImportScreen .section-header {
        text-style: bold;
        margin-top: 1;
    }

    PrepareImportScreen .count-label {
        color: $text-muted;
    }
    """

    def __init__(self, orchestrator: PrepareImportOrchestrator) -> None:
        super().__init__()
        self.orchestrator = orchestrator
        self._rendered_selection = False

    def compose(self) -> ComposeResult:
        """Create the screen layout."""
        yield Header()
        with Horizontal(id="prepare-header"):
            yield Button("Back to imports", variant="default", id="back")
            yield Button("Start import", variant="primary", id="start", disabled=True)
        with VerticalScroll(id="prepare-body"):
            with Vertical(id="progress-box"):
                yield LoadingIndicator(id="throbber")
                yield ProgressBar(total=1000, show_eta=False, id="progress-bar")
                yield Label("", id="progress-label")
        yield Footer()

    def on_mount(self) -> None:
        """Start loading once the screen is shown."""
        self.orchestrator.mount()
        self.refresh_view()

    def on_unmount(self) -> None:
        """Drop pending polls and progress events."""
        self.orchestrator.teardown()

    def refresh_view(self) -> None:
        """Re-render from the orchestrator state."""
        state = self.orchestrator.state
        if not self.is_mounted:
            return

        start = self.query_one("#start", Button)
        start.disabled = state.is_preparing or state.is_importing

        if state.is_preparing:
            has_rate = bool(state.progress_rate)
            self.query_one("#throbber", LoadingIndicator).display = not has_rate
            bar = self.query_one("#progress-bar", ProgressBar)
            bar.display = has_rate
            label = self.query_one("#progress-label", Label)
            label.display = has_rate
            if has_rate:
                bar.update(progress=round(state.progress_rate * 10))
                label.update(format_progress(state.progress_rate))
            return

        if not self._rendered_selection:
            self._rendered_selection = True
            self.query_one("#progress-box").remove()
            self._mount_selection()
        self._update_counts()

    def _mount_selection(self) -> None:
        state = self.orchestrator.state
        body = self.query_one("#prepare-body", VerticalScroll)
        status = state.status
        heading = getattr(status, "display_key", status) or ""
        body.mount(Label(heading, classes="section-header"))
        body.mount(Label("", id="messages-count", classes="count-label"))
        body.mount(Label("", id="users-count", classes="section-header"))
        if state.selection.users:
            body.mount(SelectionTable(state.selection.users, "Deleted", id="users-table"))
        body.mount(Label("", id="channels-count", classes="section-header"))
        if state.selection.channels:
            body.mount(SelectionTable(state.selection.channels, "Archived", id="channels-table"))

    def _update_counts(self) -> None:
        state = self.orchestrator.state
        for widget_id, text in (
            ("#messages-count", f"Messages: {state.message_count}"),
            ("#users-count", f"Users: {state.users_count}"),
            ("#channels-count", f"Channels: {state.channels_count}"),
        ):
            for label in self.query(widget_id):
                label.update(text)

    def on_selection_table_changed(self, event: SelectionTable.Changed) -> None:
        """Refresh counts after an edit."""
        self._update_counts()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "back":
            self.orchestrator.go_back()
        elif event.button.id == "start":
            self._start_import()

    @work(exclusive=True)
    async def _start_import(self) -> None:
        """Submit the selection."""
        await self.orchestrator.start_import()
