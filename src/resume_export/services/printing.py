"""Print-dialog export path.

The platform print mechanism gives no completion signal, so triggering it
is a one-way command whose effects are unknown to the caller.  The shared
document title, which print dialogs use as the suggested filename, is
overridden only inside :func:`title_override` and always restored.
"""

from __future__ import annotations

import logging
import webbrowser
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol

logger = logging.getLogger(__name__)

__all__ = ["BrowserPrintMechanism", "DocumentTitle", "PrintMechanism", "title_override"]


class DocumentTitle:
    """Process-wide document title shared with the print dialog.

    Concurrent exports that override it are not supported; the last
    restore wins.
    """

    def __init__(self, value: str = "") -> None:
        self.value = value


@contextmanager
def title_override(title: DocumentTitle, value: str) -> Iterator[DocumentTitle]:
    """Set *title* to *value* for the duration of the block.

    The original title is restored on every exit path, failures included.
    """
    original = title.value
    title.value = value
    try:
        yield title
    finally:
        title.value = original


class PrintMechanism(Protocol):
    """Opens the platform print / save-as-PDF dialog."""

    def trigger(self) -> None:
        """Fire the print dialog; completion is never reported."""
        ...


class BrowserPrintMechanism:
    """Open the resume's print view in the default web browser.

    Args:
        url: Address of the printable resume view.
    """

    def __init__(self, url: str) -> None:
        self.url = url

    def trigger(self) -> None:
        logger.info("Opening print view %s", self.url)
        webbrowser.open_new_tab(self.url)
