"""
Demonstration of the shared configuration store.

Runs a fixed sequence:
- Obtain two handles to the store and show they are the same object
- Set a couple of settings through one handle, print them through the other
- Save the settings to a temporary properties file and load them back

Usage:
    python -m confstore.main
"""

import logging
import os
import sys
import tempfile
from pathlib import Path
from typing import Optional, TextIO

from dotenv import load_dotenv

# Load environment variables before importing anything else
load_dotenv()

from confstore.constants import LOG_FORMAT
from confstore.store import ConfigurationManager

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging from LOG_LEVEL (default INFO)."""
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=LOG_FORMAT,
    )


def run_demo(out: Optional[TextIO] = None) -> bool:
    """
    Run the singleton demonstration.

    Args:
        out: Stream for the demonstration output (default: stdout)

    Returns:
        True if both handles referenced the same store
    """
    out = out if out is not None else sys.stdout

    print("Singleton:", file=out)
    config1 = ConfigurationManager.get_instance()
    config2 = ConfigurationManager.get_instance()

    config1.set_setting("AppName", "My Application")
    config1.set_setting("Version", "3.4")

    config2.print_all_settings(file=out)
    same = config1 is config2
    print(f"Same object? {same}", file=out)
    print(file=out)

    print("Persistence:", file=out)
    with tempfile.TemporaryDirectory() as tmp_dir:
        path = str(Path(tmp_dir) / "app.properties")
        config1.save_to_file(path)
        loaded = config2.load_from_file(path)
        print(f"Saved and reloaded {loaded} settings via {Path(path).name}", file=out)

    return same


def main() -> int:
    """Entry point for the confstore-demo script."""
    configure_logging()
    same = run_demo()
    logger.info("Demonstration finished")
    return 0 if same else 1


if __name__ == "__main__":
    sys.exit(main())
