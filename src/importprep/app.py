"""Main Textual application entry point."""

from textual.app import App
from textual.binding import Binding

from importprep.config import AppConfig, get_config
from importprep.logging_setup import configure_logging
from importprep.screens.prepare_import import PrepareImportScreen
from importprep.services.importer_client import ImporterClient
from importprep.services.orchestrator import PrepareImportOrchestrator, Route
from importprep.services.progress import ProgressReceiver


class AppNotifier:
    """Shows orchestrator errors as Textual notifications."""

    def __init__(self, app: App) -> None:
        self._app = app

    def error(self, message: str) -> None:
        self._app.notify(message, severity="error")


class AppRouter:
    """Leaves the preparation screen, reporting where the operator goes next."""

    def __init__(self, app: App) -> None:
        self._app = app

    def push(self, route: Route) -> None:
        self._app.exit(route)


class ImportPrepApp(App[Route]):
    """Terminal UI for preparing a chat-server import.

    The push-channel adapter delivering importer progress is expected to
    feed each payload to ``receiver.dispatch_raw``; without one the screen
    shows the indeterminate throbber while the upload is prepared.
    """

    TITLE = "Import Preparation"
    SUB_TITLE = "Importing Data"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(self, config: AppConfig | None = None, receiver: ProgressReceiver | None = None) -> None:
        super().__init__()
        self.config = config or get_config()
        self.client = ImporterClient(self.config.server)
        self.receiver = receiver or ProgressReceiver()

    def on_mount(self) -> None:
        """Open the preparation screen."""
        screen: PrepareImportScreen | None = None

        def on_change() -> None:
            if screen is not None:
                screen.refresh_view()

        orchestrator = PrepareImportOrchestrator(
            self.client,
            self.receiver,
            AppRouter(self),
            AppNotifier(self),
            config=self.config,
            on_change=on_change,
        )
        screen = PrepareImportScreen(orchestrator)
        self.push_screen(screen)

    async def on_unmount(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()


def main() -> None:
    """Run the application."""
    config = get_config()
    configure_logging(config.log_level)
    app = ImportPrepApp(config)
    route = app.run()
    if route is not None:
        print(f"Next: {route.value}")


if __name__ == "__main__":
    main()
