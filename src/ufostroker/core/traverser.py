"""Glyph set traversal.

Walks every glyph of a layer in order and applies the run's transform to the
glyphs that have at least one open contour. Transformed glyphs are written
to the same relative path under the output layer directory; every other
glyph is left alone.
"""

import time
from pathlib import Path

import structlog

from ufostroker.core.transforms import GlyphTransform, transform_glyph
from ufostroker.io import Layer, read_glyph, write_glyph
from ufostroker.utils import ProcessingLogger, ProcessingStats


def traverse(
    layer: Layer,
    input_base: Path,
    output_base: Path,
    transform: GlyphTransform,
    processing_logger: ProcessingLogger | None = None,
) -> ProcessingStats:
    """Transform every eligible glyph of a layer.

    Args:
        layer: Layer to walk
        input_base: Layer directory the glyphs are read from
        output_base: Layer directory the results are written to
        transform: Transform applied to each eligible glyph
        processing_logger: Receives one entry per transformed glyph

    Returns:
        Counts of transformed and skipped glyphs

    Raises:
        GlyphReadError: If a glyph cannot be read
        GlyphWriteError: If a glyph cannot be written
    """
    if processing_logger is None:
        processing_logger = ProcessingLogger(structlog.get_logger("ufostroker"))

    for glyph in layer:
        if not glyph.has_open_contours():
            processing_logger.record_glyph_skipped()
            continue

        start = time.perf_counter()
        relative = layer.get_path(glyph.name)
        record = read_glyph(input_base / relative)
        result = transform_glyph(record, transform)
        write_glyph(result, output_base / relative)

        processing_logger.log_glyph_transformed(
            glyph.name, (time.perf_counter() - start) * 1000
        )

    return processing_logger.stats
