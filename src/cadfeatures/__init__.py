"""cadfeatures - Extract manufacturing features from 2D CAD drawings.

cadfeatures takes the entities of a parsed drawing (circles, arcs, lines,
polylines, splines) and derives the facts a quote needs: drill holes
grouped by diameter, complex-machining indicators, the bounding box of the
part, and a one-line digest.

Example:
    $ cadfeatures analyze panel.dxf

    Holes: 8×Ø5.0mm, 2×Ø35.0mm | Machining: 4 arcs | Dimensions: 600×400mm
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
