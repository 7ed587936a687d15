"""Drawing I/O layer for cadfeatures.

This module bridges the external DXF parser (ezdxf) and the engine's
domain entities. It provides a clean abstraction layer so that the engine
never sees parser-specific objects.

Key responsibilities:
- Load DXF documents from files, text or base64 payloads
- Convert ezdxf entities and plain parser records to domain entities
- Fill missing geometric fields with defaults

Key classes:
- DrawingReader: Load drawings and extract entities
"""

from cadfeatures.io.converter import (
    entity_kind,
    ezdxf_entity_to_domain,
    record_to_entity,
    records_to_entities,
)
from cadfeatures.io.reader import DrawingReader

__all__ = [
    "DrawingReader",
    "entity_kind",
    "ezdxf_entity_to_domain",
    "record_to_entity",
    "records_to_entities",
]
