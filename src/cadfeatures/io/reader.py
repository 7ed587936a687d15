"""Drawing reader for loading DXF documents.

This module provides the DrawingReader class, which hands the raw DXF
payload to ezdxf and converts the model space entities into domain
entities. ezdxf does the tokenizing and parsing; nothing here interprets
DXF group codes.
"""

import base64
import binascii
import io
from pathlib import Path

import ezdxf
from ezdxf.document import Drawing
from ezdxf.lldxf.const import DXFError, DXFStructureError

from cadfeatures.domain import DrawingEntity
from cadfeatures.exceptions import DrawingFormatError, DrawingLoadError
from cadfeatures.io.converter import ezdxf_entity_to_domain


class DrawingReader:
    """Loads DXF drawings and extracts their entities.

    Example:
        reader = DrawingReader()
        entities = reader.read_file(Path("panel.dxf"))
    """

    def read_file(self, path: Path) -> list[DrawingEntity]:
        """Load a DXF file from disk.

        Args:
            path: Path to the DXF file

        Returns:
            Model space entities in file order

        Raises:
            DrawingLoadError: If the file is missing or unreadable
            DrawingFormatError: If the file is not a valid DXF document
        """
        source = str(path)
        if not path.exists():
            raise DrawingLoadError(source, "file not found")
        if not path.is_file():
            raise DrawingLoadError(source, "not a file")

        try:
            doc = ezdxf.readfile(path)
        except DXFStructureError as e:
            raise DrawingFormatError(source, str(e)) from e
        except (DXFError, OSError, UnicodeDecodeError) as e:
            raise DrawingLoadError(source, str(e)) from e

        return self._entities(doc)

    def read_text(self, content: str, source: str = "<text>") -> list[DrawingEntity]:
        """Load a DXF document from its text content.

        Args:
            content: Raw DXF text
            source: Name used in error messages

        Returns:
            Model space entities in document order

        Raises:
            DrawingFormatError: If the content is empty or not valid DXF
        """
        if not content or not content.strip():
            raise DrawingFormatError(source, "empty document")

        try:
            doc = ezdxf.read(io.StringIO(content))
        except (DXFError, ValueError, EOFError) as e:
            raise DrawingFormatError(source, str(e) or type(e).__name__) from e

        return self._entities(doc)

    def read_base64(self, payload: str, source: str = "<base64>") -> list[DrawingEntity]:
        """Load a DXF document from a base64-encoded payload.

        The text encoding is taken from the DXF header (UTF-8 from R2007 on,
        the ``$DWGCODEPAGE`` before), so non-ASCII layer names survive.

        Args:
            payload: Base64 text of the DXF file (as sent by upload forms)
            source: Name used in error messages

        Returns:
            Model space entities in document order

        Raises:
            DrawingLoadError: If the payload cannot be decoded
            DrawingFormatError: If the decoded content is not valid DXF
        """
        try:
            raw = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise DrawingLoadError(source, f"base64 decoding failed: {e}") from e

        if not raw.strip():
            raise DrawingFormatError(source, "empty document")

        try:
            doc = ezdxf.decode_base64(payload.encode("ascii"))
        except (DXFError, ValueError, EOFError) as e:
            raise DrawingFormatError(source, str(e) or type(e).__name__) from e

        return self._entities(doc)

    @staticmethod
    def _entities(doc: Drawing) -> list[DrawingEntity]:
        return [ezdxf_entity_to_domain(entity) for entity in doc.modelspace()]
