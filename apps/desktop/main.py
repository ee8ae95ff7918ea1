import logging
import signal
import sys
from PySide6.QtWidgets import QApplication

from packages.core.logging_ import setup_logging
from packages.core.commands.config import register_config_commands
from packages.core.commands.registry import CommandRegistry
from packages.shared.store import ConfigStore
from .config_client import ConfigClient
from .ui.window import MainWindow

log = logging.getLogger(__name__)


def build_registry(store: ConfigStore) -> CommandRegistry:
    registry = CommandRegistry()
    register_config_commands(registry, store)
    return registry


def main() -> None:
    setup_logging()

    registry = build_registry(ConfigStore())
    log.info("Registered commands: %s", ", ".join(registry.names()))

    app = QApplication(sys.argv)
    win = MainWindow(ConfigClient(registry))
    win.show()

    # Handle Ctrl+C gracefully (works on Unix/Linux/Mac)
    # On Windows, Qt handles Ctrl+C automatically and triggers closeEvent
    def signal_handler(sig, frame):
        log.info("Received interrupt signal, shutting down")
        win.close()

    if hasattr(signal, 'SIGINT'):
        signal.signal(signal.SIGINT, signal_handler)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
