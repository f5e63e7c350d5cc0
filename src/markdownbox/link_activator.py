"""Default link activation: open the target outside the application."""

import logging

from PySide6.QtCore import QUrl
from PySide6.QtGui import QDesktopServices


def open_external_link(url: str) -> None:
    """
    Open a URL with the system's default handler.

    Args:
        url: The URL to open
    """
    logger = logging.getLogger("LinkActivator")
    if not QDesktopServices.openUrl(QUrl(url)):
        logger.warning("no handler opened %s", url)


def ignore_link(url: str) -> None:
    """Link activator used when links must not leave the application."""
    logging.getLogger("LinkActivator").info("link activation disabled, ignoring %s", url)
