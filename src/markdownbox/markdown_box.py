"""
Read-only rich text view that displays markdown.
"""

import logging
from typing import Any, Callable, Dict

from PySide6.QtCore import QUrl, Signal
from PySide6.QtGui import QImage, QTextDocument
from PySide6.QtWidgets import QTextBrowser, QWidget

from mdrender import DocumentRenderer, DocumentTree, HyperlinkRun, LinkActivator, MarkdownRenderError

from markdownbox.code_highlighter import CodeHighlighter
from markdownbox.link_activator import open_external_link
from markdownbox.qt_document_writer import QtDocumentWriter


ResourceLoader = Callable[[str], bytes | None]


class MarkdownBox(QTextBrowser):
    """
    Displays markdown text.

    Setting the text re-renders the whole document synchronously; nothing from
    the previous render is kept.
    """

    text_changed = Signal(str)

    def __init__(
        self,
        parent: QWidget | None = None,
        renderer: DocumentRenderer | None = None,
        link_activator: LinkActivator | None = None
    ) -> None:
        """
        Initialize the markdown box.

        Args:
            parent: Optional parent widget
            renderer: Renderer used for the text; one is created if not given
            link_activator: Called with the URL of an activated link when no renderer is given.
                Defaults to opening the URL with the system handler.
        """
        super().__init__(parent)
        self._logger = logging.getLogger("MarkdownBox")

        self._renderer = renderer if renderer is not None else DocumentRenderer(
            link_activator=link_activator if link_activator is not None else open_external_link
        )
        self._writer = QtDocumentWriter(self.document(), CodeHighlighter())
        self._resource_loader: ResourceLoader | None = None

        self._text = ""
        self._tree: DocumentTree | None = None
        self._hyperlinks: Dict[str, HyperlinkRun] = {}

        self.setReadOnly(True)
        self.setUndoRedoEnabled(False)

        # Links are handed to the link activator rather than followed by the browser
        self.setOpenLinks(False)
        self.setOpenExternalLinks(False)
        self.anchorClicked.connect(self._handle_anchor_clicked)

    def text(self) -> str:
        """Get the markdown text being displayed."""
        return self._text

    def set_text(self, text: str | None) -> None:
        """
        Set the markdown text and re-render the document.

        Args:
            text: The markdown source; None is treated as empty

        Raises:
            MarkdownRenderError: If the text cannot be rendered.  The document is
                left empty.
        """
        self._text = text or ""
        self._render()
        self.text_changed.emit(self._text)

    def document_tree(self) -> DocumentTree | None:
        """Get the document tree produced by the last successful render."""
        return self._tree

    def set_resource_loader(self, loader: ResourceLoader | None) -> None:
        """
        Set the function used to fetch images.

        Args:
            loader: Called with an image URL, returns the image bytes or None.  With
                no loader Qt's own resource handling is used.
        """
        self._resource_loader = loader

    def loadResource(self, resource_type: int, name: QUrl) -> Any:  # pylint: disable=invalid-name
        """Load an image through the resource loader, if one is set."""
        if self._resource_loader is None or resource_type != QTextDocument.ResourceType.ImageResource.value:
            return super().loadResource(resource_type, name)

        data = self._resource_loader(name.toString())
        if data is None:
            self._logger.warning("no image data for %s", name.toString())
            return None

        return QImage.fromData(data)

    def _render(self) -> None:
        try:
            tree = self._renderer.render(self._text)

        except MarkdownRenderError:
            self._logger.exception("failed to render markdown")
            self._tree = None
            self._hyperlinks = {}
            self.document().clear()
            raise

        self._writer.write(tree)
        self._tree = tree
        self._hyperlinks = self._writer.hyperlinks()

    def _handle_anchor_clicked(self, url: QUrl) -> None:
        """
        Activate the hyperlink run behind a clicked anchor.

        Args:
            url: The anchor URL reported by Qt
        """
        run = self._hyperlinks.get(url.toString())
        if run is None:
            self._logger.warning("clicked anchor with no hyperlink: %s", url.toString())
            return

        run.activate()
