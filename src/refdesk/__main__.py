"""Main entry point for the Refdesk application."""

import argparse
import asyncio
from datetime import datetime, timezone
import glob
import json
import logging
from logging.handlers import RotatingFileHandler
import os
import sys
from types import TracebackType

from qasync import QEventLoop, QApplication  # type: ignore[import-untyped]

from tab_registry import TabRegistrySettings, TabSettingsError

from refdesk.main_window import MainWindow


SETTINGS_PATH = "~/.refdesk/settings.json"
SESSION_PATH = "~/.refdesk/session.json"


def setup_logging() -> None:
    """Configure application logging with timestamped files and rotation."""
    log_dir = os.path.expanduser("~/.refdesk/logs")
    os.makedirs(log_dir, exist_ok=True)

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d-%H-%M-%S-%f")[:23]
    log_file = os.path.join(log_dir, f"{timestamp}.log")

    # Keep up to 50 log files, max 1MB each
    handler = RotatingFileHandler(
        log_file,
        maxBytes=1024*1024,
        backupCount=49,
        encoding='utf-8'
    )

    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[handler]
    )

    cleanup_old_logs(log_dir, max_logs=50)


def cleanup_old_logs(log_dir: str, max_logs: int) -> None:
    """Remove oldest log files if we exceed maximum count."""
    log_files = glob.glob(os.path.join(log_dir, "*.log*"))
    log_files.sort(key=os.path.getctime)

    while len(log_files) > max_logs:
        try:
            os.remove(log_files.pop(0))

        except OSError:
            pass


def install_global_exception_handler() -> None:
    """Install a global exception handler for uncaught exceptions."""
    logger = logging.getLogger('GlobalExceptionHandler')

    def handle_exception(exc_type: type[BaseException], exc_value: BaseException, exc_traceback: TracebackType | None) -> None:
        """Handle uncaught exceptions and log them."""
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        logger.critical(
            "Uncaught exception",
            exc_info=(exc_type, exc_value, exc_traceback),
            stack_info=True
        )

    sys.excepthook = handle_exception


def load_settings(path: str) -> TabRegistrySettings:
    """
    Load tab registry settings, falling back to defaults.

    Args:
        path: Path to the settings file

    Returns:
        Loaded settings, or defaults if the file is missing or unreadable
    """
    logger = logging.getLogger('Settings')
    if not os.path.exists(path):
        return TabRegistrySettings.create_default()

    try:
        return TabRegistrySettings.load(path)

    except (OSError, json.JSONDecodeError, TabSettingsError) as e:
        logger.warning("Failed to load settings from '%s', using defaults: %s", path, str(e))
        return TabRegistrySettings.create_default()


def main() -> int:
    """Main function to run the application."""
    setup_logging()
    install_global_exception_handler()

    parser = argparse.ArgumentParser(prog="refdesk", description="Research reference desk")
    parser.add_argument("paths", nargs="*", help="documents to open in reader tabs")
    args, qt_args = parser.parse_known_args()

    app = QApplication([sys.argv[0], *qt_args])

    loop = QEventLoop(app)
    asyncio.set_event_loop(loop)

    window = MainWindow(
        load_settings(os.path.expanduser(SETTINGS_PATH)),
        session_path=os.path.expanduser(SESSION_PATH)
    )
    window.restore_session()
    for path in args.paths:
        window.open_document(path)

    window.show()

    try:
        with loop:
            loop.run_forever()

    except KeyboardInterrupt:
        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())
