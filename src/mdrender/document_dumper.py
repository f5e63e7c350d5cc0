"""Helpers to write a rendered document tree out as JSON for inspection."""

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from mdrender.document_element import Color, DocumentTree


class DocumentDumper:
    """Converts document trees to plain data and writes them to disk."""

    def to_data(self, tree: DocumentTree) -> Any:
        """
        Convert a document tree into JSON-compatible data.

        Every element becomes a dict with a "type" key naming its class.
        """
        return self._serialize(tree)

    def dump(self, tree: DocumentTree, path: Path) -> None:
        """Write the document tree as indented JSON."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_data(tree), indent=2), encoding="utf-8")

    def _serialize(self, value: Any) -> Any:
        if isinstance(value, Color):
            return value.name()

        if is_dataclass(value):
            data = {"type": value.__class__.__name__}
            for f in fields(value):
                # Activation callbacks are behaviour, not content
                if not f.compare:
                    continue

                data[f.name] = self._serialize(getattr(value, f.name))

            return data

        if isinstance(value, Enum):
            return value.name.lower()

        if isinstance(value, (list, tuple)):
            return [self._serialize(v) for v in value]

        return value
