"""Core feature-extraction algorithms for cadfeatures.

This module contains the three pipeline stages and the facade chaining them:

- Entity classification (hole candidates, counters, bounding box, layers)
- Hole filtering and grouping by rounded diameter
- Result summarizing and the human-readable digest

All stages are:
- Stateless
- Pure (no side effects beyond debug logging)
- Linear in the number of entities

Key functions:
- classify: Single-pass entity classifier
- filter_holes: Diameter window filter
- group_holes: Filter and group holes by rounded diameter
- summarize: Assemble the AnalysisResult
- describe: Render the one-line digest
- analyze_entities: Run the three stages in order

Key classes:
- ClassifierOutput: Classifier result
- DrawingAnalyzer: Settings-driven facade with file/text/base64 entry points
"""

from cadfeatures.core.analyzer import DrawingAnalyzer, analyze_entities
from cadfeatures.core.classifier import ClassifierOutput, classify
from cadfeatures.core.geometry import (
    expand_to_circle,
    expand_to_point,
    expand_to_points,
)
from cadfeatures.core.holes import filter_holes, group_holes, round_diameter
from cadfeatures.core.summarizer import (
    NOTHING_DETECTED,
    describe,
    has_complex_shapes,
    summarize,
)

__all__ = [
    "NOTHING_DETECTED",
    # Classifier
    "ClassifierOutput",
    "classify",
    # Analyzer
    "DrawingAnalyzer",
    "analyze_entities",
    # Summarizer
    "describe",
    # Geometry functions
    "expand_to_circle",
    "expand_to_point",
    "expand_to_points",
    # Holes
    "filter_holes",
    "group_holes",
    "has_complex_shapes",
    "round_diameter",
    "summarize",
]
