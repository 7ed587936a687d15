"""Feature-extraction pipeline.

This module chains the three engine stages:

    classify -> group_holes -> summarize

and adds the upstream-failure gate: whenever the parser could not produce
an entity list, the analyzer returns an unsuccessful ``AnalysisResult``
instead of raising. Callers branch on ``result.success``.

Key components:
- analyze_entities: Pure pipeline function with explicit tunables
- DrawingAnalyzer: Settings-driven facade with file, text and base64 entry points
"""

import time
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from cadfeatures.config import AnalyzerSettings
from cadfeatures.config.settings import (
    COMPLEX_POLYLINE_THRESHOLD,
    DEFAULT_DIAMETER_TOLERANCE,
    DEFAULT_MAX_DIAMETER,
    DEFAULT_MIN_DIAMETER,
)
from cadfeatures.core.classifier import classify
from cadfeatures.core.holes import group_holes
from cadfeatures.core.summarizer import describe, summarize
from cadfeatures.domain import AnalysisResult, DrawingEntity
from cadfeatures.exceptions import DrawingLoadError
from cadfeatures.io import DrawingReader, records_to_entities
from cadfeatures.utils import AnalysisLogger

INVALID_DRAWING = "Invalid or empty drawing"


def analyze_entities(
    entities: Sequence[DrawingEntity],
    min_diameter: float = DEFAULT_MIN_DIAMETER,
    max_diameter: float = DEFAULT_MAX_DIAMETER,
    tolerance: float = DEFAULT_DIAMETER_TOLERANCE,
    polyline_threshold: int = COMPLEX_POLYLINE_THRESHOLD,
) -> AnalysisResult:
    """Run the full pipeline on an entity list.

    Args:
        entities: Parsed drawing entities
        min_diameter: Smallest grouped hole diameter (inclusive)
        max_diameter: Largest grouped hole diameter (inclusive)
        tolerance: Diameter rounding step for grouping
        polyline_threshold: Polyline count above which shapes are complex

    Returns:
        Successful analysis result
    """
    classified = classify(entities)
    grouped = group_holes(
        classified.hole_candidates,
        min_diameter=min_diameter,
        max_diameter=max_diameter,
        tolerance=tolerance,
    )
    return summarize(classified, grouped, polyline_threshold=polyline_threshold)


class DrawingAnalyzer:
    """Extracts manufacturing features from drawings.

    The analyzer holds only configuration and a statistics logger; each
    call is independent and safe to run concurrently on separate inputs.

    Example:
        analyzer = DrawingAnalyzer()
        result = analyzer.analyze_file(Path("panel.dxf"))
        print(analyzer.describe(result))
    """

    def __init__(
        self,
        settings: AnalyzerSettings | None = None,
        reader: DrawingReader | None = None,
        analysis_logger: AnalysisLogger | None = None,
    ) -> None:
        """Initialize the analyzer.

        Args:
            settings: Analyzer settings (defaults if None)
            reader: DXF reader used by the file, text and base64 entry points
            analysis_logger: Logger collecting analysis statistics
        """
        self.settings = settings if settings is not None else AnalyzerSettings()
        self.reader = reader if reader is not None else DrawingReader()
        self.analysis_logger = (
            analysis_logger if analysis_logger is not None else AnalysisLogger()
        )

    def analyze(self, entities: Sequence[DrawingEntity] | None) -> AnalysisResult:
        """Analyze an already parsed entity list.

        Args:
            entities: Parsed entities, or None when the parser found no
                entity section

        Returns:
            Analysis result; unsuccessful only when ``entities`` is None
        """
        if entities is None:
            return self._failure("<entities>", INVALID_DRAWING)

        start_time = time.perf_counter()
        holes = self.settings.holes
        result = analyze_entities(
            entities,
            min_diameter=holes.min_diameter,
            max_diameter=holes.max_diameter,
            tolerance=holes.tolerance,
            polyline_threshold=self.settings.machining.complex_polyline_threshold,
        )
        self.analysis_logger.log_drawing_analyzed(
            entity_count=result.stats.total_entities,
            hole_count=result.holes.count,
            layer_count=len(result.stats.layers),
            duration_ms=(time.perf_counter() - start_time) * 1000,
        )
        return result

    def analyze_records(
        self, records: Iterable[Mapping[str, Any]] | None
    ) -> AnalysisResult:
        """Analyze plain parser records (``{"type": "CIRCLE", ...}``)."""
        if records is None:
            return self._failure("<records>", INVALID_DRAWING)
        return self.analyze(records_to_entities(records))

    def analyze_file(self, path: Path) -> AnalysisResult:
        """Load a DXF file and analyze it."""
        try:
            entities = self.reader.read_file(path)
        except DrawingLoadError as e:
            return self._failure(e.source, e.reason)
        self.analysis_logger.log_drawing_loaded(str(path), len(entities))
        return self.analyze(entities)

    def analyze_text(self, content: str) -> AnalysisResult:
        """Analyze raw DXF text."""
        try:
            entities = self.reader.read_text(content)
        except DrawingLoadError as e:
            return self._failure(e.source, e.reason)
        self.analysis_logger.log_drawing_loaded("<text>", len(entities))
        return self.analyze(entities)

    def analyze_base64(self, payload: str) -> AnalysisResult:
        """Analyze a base64-encoded DXF payload."""
        try:
            entities = self.reader.read_base64(payload)
        except DrawingLoadError as e:
            return self._failure(e.source, e.reason)
        self.analysis_logger.log_drawing_loaded("<base64>", len(entities))
        return self.analyze(entities)

    @staticmethod
    def describe(result: AnalysisResult) -> str:
        """Render the one-line digest of a result."""
        return describe(result)

    def _failure(self, source: str, reason: str) -> AnalysisResult:
        self.analysis_logger.log_drawing_failed(source, reason)
        return AnalysisResult.failure(reason)
