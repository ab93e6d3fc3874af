"""
Document Store Module.

Reads and writes the structured documents the component framework persists:
- The shared ``IDScanComponents`` config document (one section per component).
- Per-component ``ComponentInfo`` metadata documents.

Supported formats are chosen by file extension: YAML, JSON and property lists.
Writes are atomic and rewrite the whole document.
"""

from __future__ import annotations

import json
import os
import plistlib
import stat
import tempfile
from pathlib import Path
from typing import Any, Dict
from xml.parsers.expat import ExpatError

import yaml
from loguru import logger


class DocumentError(Exception):
    """Raised when a document cannot be read or parsed."""

    pass


class DocumentStore:
    """
    Key-value document persistence for component configuration.

    Each document is a mapping at the top level. Loading returns a plain
    ``dict``; writing serialises the whole mapping and atomically replaces the
    file so readers never observe a half-written document.

    Usage::

        store = DocumentStore()
        configs = store.load(Path("IDScanComponents.yaml"))
        configs["Scanner"]["BaseURL"] = "https://example.org"
        if not store.write(Path("IDScanComponents.yaml"), configs):
            ...
    """

    SUPPORTED_EXTENSIONS = {".yaml", ".yml", ".json", ".plist"}

    def load(self, path: str | Path) -> Dict[str, Any]:
        """
        Load a document from disk.

        Args:
            path: Path of the document.

        Returns:
            Parsed document as a dictionary.

        Raises:
            FileNotFoundError: If the document does not exist.
            DocumentError: If the document cannot be read or is not a mapping.
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise FileNotFoundError(f"Document not found: {file_path}")

        suffix = self._check_suffix(file_path)
        logger.debug(f"Loading document: {file_path}")

        try:
            raw = file_path.read_bytes()
        except OSError as e:
            raise DocumentError(f"Failed to read document {file_path}: {e}") from e

        # ValueError covers UnicodeDecodeError, JSONDecodeError and bad plist element content
        try:
            if suffix in {".yaml", ".yml"}:
                data = yaml.safe_load(raw.decode("utf-8"))
            elif suffix == ".json":
                data = json.loads(raw.decode("utf-8"))
            else:
                data = plistlib.loads(raw)
        except (ValueError, yaml.YAMLError, ExpatError) as e:
            raise DocumentError(f"Failed to parse {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise DocumentError(
                f"Document must contain a mapping (dict), "
                f"got {type(data).__name__}: {file_path}"
            )

        return data

    def write(self, path: str | Path, document: Dict[str, Any]) -> bool:
        """
        Atomically write a document to disk.

        The document is serialised into a temporary file next to the target
        and then moved over it. Failures are logged, never raised.

        Args:
            path: Destination path; its extension selects the format.
            document: Mapping to persist.

        Returns:
            True if the document was written, False otherwise.
        """
        file_path = Path(path)
        try:
            suffix = self._check_suffix(file_path)
            payload = self._serialise(document, suffix)
        except (DocumentError, TypeError, ValueError, OverflowError, yaml.YAMLError) as e:
            logger.error(f"Unable to serialise document for {file_path}: {e}")
            return False

        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="wb",
                dir=file_path.parent,
                prefix=f".{file_path.name}.",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
            if file_path.exists():
                os.chmod(tmp_name, stat.S_IMODE(os.stat(file_path).st_mode))
            os.replace(tmp_name, file_path)
        except OSError as e:
            logger.error(f"Unable to write document {file_path}: {e}")
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            return False

        logger.debug(f"Document written: {file_path}")
        return True

    def _check_suffix(self, file_path: Path) -> str:
        suffix = file_path.suffix.lower()
        if suffix not in self.SUPPORTED_EXTENSIONS:
            raise DocumentError(
                f"Unsupported document format '{suffix}'. "
                f"Supported: {sorted(self.SUPPORTED_EXTENSIONS)}"
            )
        return suffix

    @staticmethod
    def _serialise(document: Dict[str, Any], suffix: str) -> bytes:
        """Serialise a mapping in the format matching ``suffix``."""
        if suffix in {".yaml", ".yml"}:
            text = yaml.safe_dump(
                document, sort_keys=False, allow_unicode=True, default_flow_style=False
            )
            return text.encode("utf-8")
        if suffix == ".json":
            return json.dumps(document, indent=2, ensure_ascii=False).encode("utf-8")
        return plistlib.dumps(document, sort_keys=False)
