"""JSON rendering and the JSON file writer."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from ElasticBuilder.core.util import recursive_to_json
from ElasticBuilder.renderers.base import OutputWriter
from ElasticBuilder.utils.log import log


def render_json(document: Any, *, indent: int = 2, ensure_ascii: bool = False) -> str:
    """Serialize a builder graph (or plain data) to JSON text.

    Args:
        document: Builder object, or data possibly containing builders.
        indent: Indentation width; 0 renders on a single line.
        ensure_ascii: Escape non-ASCII characters.

    Returns:
        JSON text.
    """
    return json.dumps(recursive_to_json(document), ensure_ascii=ensure_ascii, indent=indent or None)


class JsonFileWriter(OutputWriter):
    """Accumulate documents and write them to one JSON file on finalize.

    The file is ``<base_dir>/json/<action>_<YYYYmmdd_HHMMSS>.json`` and holds a
    list of ``{"name": ..., "body": ...}`` entries in write order.
    """

    def __init__(self, base_dir: str, *, indent: int = 2, ensure_ascii: bool = False) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Directory the output file is written to.
            indent: Indentation of the written JSON.
            ensure_ascii: Escape non-ASCII characters.
        """
        self.output_dir = Path(base_dir) / "json"
        self.indent = indent
        self.ensure_ascii = ensure_ascii
        self.documents: list[dict[str, Any]] = []

    def write_document(self, name: str, document: Any) -> None:
        """Accumulate one document."""
        self.documents.append({"name": name, "body": recursive_to_json(document)})

    def finalize(self, action: str) -> Path:
        """Write accumulated documents.

        Returns:
            Path of the written file.
        """
        payload = render_json(self.documents, indent=self.indent, ensure_ascii=self.ensure_ascii)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(payload, encoding="utf-8")
        log.info("JSON saved to %s", output_path)
        return output_path
