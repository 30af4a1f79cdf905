"""Main application entry point and orchestrator"""

import argparse
import sys
from typing import Optional, Sequence

from .cli import command_from_args, parse_args
from .config.manager import ConfigurationManager
from .config.paths import GamePaths
from .config.schema import AppConfiguration, TransferMode
from .core.dispatcher import CommandDispatcher
from .logging_config import enable_file_logging, get_logger, setup_logging
from . import __app_name__, __version__

logger = get_logger("app")


class SaveLoadApp:
    """Main application orchestrator.

    Resolves paths, loads configuration, applies command-line overrides,
    and runs the requested operations.
    """

    def __init__(self, args: argparse.Namespace):
        self.args = args
        self.config_manager = ConfigurationManager(args.config)
        self.config: AppConfiguration | None = None

    def run(self) -> None:
        """Run the application.

        Raises:
            MissingEnvironmentError: If %USERPROFILE% is not set
            SaveLoadError: For configuration or slot name problems
            OSError: On the first failed filesystem operation
        """
        # Fail early without a home directory, even with --base-dir
        GamePaths.home_dir()

        log_file = enable_file_logging(GamePaths.config_dir())
        logger.debug(f"Logging to {log_file}")

        self.config = self.config_manager.load_or_create()
        self._apply_overrides()

        command = command_from_args(self.args)
        if command.is_empty():
            print("Nothing to do. Run with --help to see the available operations.")
            return

        dispatcher = CommandDispatcher(self.config.settings)
        dispatcher.run(command)

    def _apply_overrides(self):
        """Apply command-line options on top of the loaded settings (not saved)."""
        settings = self.config.settings
        if self.args.move:
            settings.transfer_mode = TransferMode.MOVE
        if self.args.base_dir is not None:
            settings.base_dir = self.args.base_dir


def _show_error_dialog(message: str):
    """Show a fatal error in a message box when there is no console."""
    import tkinter as tk
    from tkinter import messagebox

    root = tk.Tk()
    root.withdraw()
    messagebox.showerror(
        "GTA V SaveLoad Error",
        f"{__app_name__} failed:\n\n{message}"
    )
    root.destroy()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Application entry point.

    Returns:
        Process exit code
    """
    args = parse_args(argv)

    # Initialize logging first
    root_logger = setup_logging(debug=args.debug)
    root_logger.info(f"Starting {__app_name__} v{__version__}")

    try:
        app = SaveLoadApp(args)
        app.run()
    except Exception as e:
        root_logger.exception("Fatal error")
        print(f"error: {e}", file=sys.stderr)
        # Windowed (PyInstaller) builds have no console to print to
        if getattr(sys, "frozen", False):
            _show_error_dialog(str(e))
        return 1
    finally:
        root_logger.info(f"{__app_name__} shutting down")

    return 0


if __name__ == "__main__":
    sys.exit(main())
