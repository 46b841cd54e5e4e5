"""Tests for run orchestration."""

import math
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from conftest import open_path, write_ufo

from ufostroker.config import RunConfig
from ufostroker.core.processor import FontProcessor
from ufostroker.domain import Glyph
from ufostroker.exceptions import (
    ConfigurationError,
    FontLoadError,
    InvalidOptionError,
    PatternError,
    PatternGlyphNotFoundError,
    UnknownModeError,
)
from ufostroker.io import read_glyph


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


def _glif_bytes(ufo: Path) -> dict[str, bytes]:
    return {p.name: p.read_bytes() for p in sorted((ufo / "glyphs").glob("*.glif"))}


class TestFontProcessorInit:
    """Tests for processor construction."""

    def test_uses_given_logger(self, ufo_path: Path, logger: MagicMock) -> None:
        processor = FontProcessor(RunConfig(ufo=ufo_path), logger=logger)
        assert processor.logger is logger

    def test_configures_logging_without_logger(self, ufo_path: Path) -> None:
        with patch("ufostroker.core.processor.configure_logging") as configure:
            FontProcessor(RunConfig(ufo=ufo_path))
        configure.assert_called_once()
        assert configure.call_args.kwargs["console_level"] == "INFO"

    def test_output_path_defaults_to_input(self, ufo_path: Path, logger: MagicMock) -> None:
        assert FontProcessor(RunConfig(ufo=ufo_path), logger=logger).output_path == ufo_path


class TestNoodleRun:
    """Tests for noodle runs."""

    def test_in_place(self, ufo_path: Path, logger: MagicMock) -> None:
        before = _glif_bytes(ufo_path)
        stats = FontProcessor(RunConfig(ufo=ufo_path), logger=logger).run("noodle", {"size": "5"})
        after = _glif_bytes(ufo_path)

        assert stats.transformed_count == 1
        assert stats.skipped_count == 2
        assert after["A_.glif"] != before["A_.glif"]
        assert after["B_.glif"] == before["B_.glif"]
        assert after["P_.glif"] == before["P_.glif"]

    def test_to_output_copy(self, ufo_path: Path, tmp_path: Path, logger: MagicMock) -> None:
        output = tmp_path / "Out.ufo"
        before = _glif_bytes(ufo_path)
        FontProcessor(RunConfig(ufo=ufo_path, output=output), logger=logger).run("noodle", {})

        assert _glif_bytes(ufo_path) == before
        assert (output / "metainfo.plist").is_file()
        assert (output / "glyphs" / "B_.glif").read_bytes() == before["B_.glif"]
        assert not read_glyph(output / "glyphs" / "A_.glif").contours[0].is_open

    def test_output_equal_to_input_is_in_place(self, ufo_path: Path, logger: MagicMock) -> None:
        with patch("ufostroker.core.processor.copy_font_directory") as copy:
            FontProcessor(RunConfig(ufo=ufo_path, output=ufo_path), logger=logger).run("noodle", {})
        copy.assert_not_called()

    def test_fatal_cap_touches_nothing(self, ufo_path: Path, tmp_path: Path, logger: MagicMock) -> None:
        """An unknown cap aborts before the font is copied or any glyph is written."""
        output = tmp_path / "Out.ufo"
        before = _glif_bytes(ufo_path)
        processor = FontProcessor(RunConfig(ufo=ufo_path, output=output), logger=logger)
        with patch("ufostroker.core.processor.traverse") as traverse:
            with pytest.raises(InvalidOptionError):
                processor.run("noodle", {"capstart": "triangle"})
        traverse.assert_not_called()
        assert not output.exists()
        assert _glif_bytes(ufo_path) == before

    def test_bad_size_warns_and_runs(self, ufo_path: Path, logger: MagicMock) -> None:
        stats = FontProcessor(RunConfig(ufo=ufo_path), logger=logger).run("noodle", {"size": "big"})
        assert stats.transformed_count == 1
        logger.warning.assert_called_once()

    def test_non_finite_size_writes_finite_outline(self, ufo_path: Path, logger: MagicMock) -> None:
        """size=nan strokes with the default width rather than writing nan points."""
        stats = FontProcessor(RunConfig(ufo=ufo_path), logger=logger).run("noodle", {"size": "nan"})
        assert stats.transformed_count == 1
        logger.warning.assert_called_once()
        text = (ufo_path / "glyphs" / "A_.glif").read_text(encoding="utf-8")
        assert '"nan"' not in text
        stroked = read_glyph(ufo_path / "glyphs" / "A_.glif")
        assert all(
            math.isfinite(p.x) and math.isfinite(p.y) for c in stroked.contours for p in c.points
        )

    def test_stats_have_duration(self, ufo_path: Path, logger: MagicMock) -> None:
        stats = FontProcessor(RunConfig(ufo=ufo_path), logger=logger).run("noodle", {})
        assert stats.start_time is not None
        assert stats.end_time is not None
        assert stats.duration_seconds >= 0


class TestPatternRun:
    """Tests for pattern runs."""

    def test_pattern(self, ufo_path: Path, tmp_path: Path, logger: MagicMock) -> None:
        output = tmp_path / "Out.ufo"
        stats = FontProcessor(RunConfig(ufo=ufo_path, output=output), logger=logger).run(
            "pattern", {"pattern_glyph": "P", "spacing": "5"}
        )
        assert stats.transformed_count == 1
        result = read_glyph(output / "glyphs" / "A_.glif")
        assert len(result.contours) > 1
        assert result.lib == {"com.example.note": "stroke me"}

    def test_missing_pattern_glyph(self, ufo_path: Path, tmp_path: Path, logger: MagicMock) -> None:
        output = tmp_path / "Out.ufo"
        processor = FontProcessor(RunConfig(ufo=ufo_path, output=output), logger=logger)
        with pytest.raises(PatternGlyphNotFoundError) as exc_info:
            processor.run("pattern", {"pattern_glyph": "Z"})
        assert str(exc_info.value) == "Glyph 'Z' not found in font"
        assert not output.exists()

    def test_pattern_size_is_logged(self, ufo_path: Path, logger: MagicMock) -> None:
        FontProcessor(RunConfig(ufo=ufo_path), logger=logger).run(
            "pattern", {"pattern_glyph": "P", "sy": "2"}
        )
        loaded = [c for c in logger.debug.call_args_list if c.args == ("Pattern glyph loaded",)]
        assert len(loaded) == 1
        assert loaded[0].kwargs["width"] == 20
        assert loaded[0].kwargs["height"] == 20

    def test_pattern_glyph_required(self, ufo_path: Path, logger: MagicMock) -> None:
        with pytest.raises(ConfigurationError):
            FontProcessor(RunConfig(ufo=ufo_path), logger=logger).run("pattern", {})

    def test_empty_pattern_glyph(self, tmp_path: Path, logger: MagicMock) -> None:
        ufo = write_ufo(
            tmp_path / "Font.ufo",
            [Glyph(name="A", contours=[open_path((0, 0), (100, 0))]), Glyph(name="space")],
        )
        before = _glif_bytes(ufo)
        with pytest.raises(PatternError):
            FontProcessor(RunConfig(ufo=ufo), logger=logger).run("pattern", {"pattern_glyph": "space"})
        assert _glif_bytes(ufo) == before

    def test_open_pattern_glyph_is_transformed_too(self, tmp_path: Path, logger: MagicMock) -> None:
        """A pattern glyph with open contours is itself eligible."""
        dash = Glyph(name="dash", contours=[open_path((0, 0), (10, 0))])
        line = Glyph(name="line", contours=[open_path((0, 0), (100, 0))])
        ufo = write_ufo(tmp_path / "Font.ufo", [dash, line])
        stats = FontProcessor(RunConfig(ufo=ufo), logger=logger).run(
            "pattern", {"pattern_glyph": "dash"}
        )
        assert stats.transformed_count == 2
        assert len(read_glyph(ufo / "glyphs" / "line.glif").contours) == 10


class TestRunErrors:
    """Tests for fatal errors."""

    def test_unknown_mode(self, ufo_path: Path, logger: MagicMock) -> None:
        with pytest.raises(UnknownModeError):
            FontProcessor(RunConfig(ufo=ufo_path), logger=logger).run("scribble", {})

    def test_missing_font(self, tmp_path: Path, logger: MagicMock) -> None:
        with pytest.raises(FontLoadError):
            FontProcessor(RunConfig(ufo=tmp_path / "missing.ufo"), logger=logger).run("noodle", {})

    def test_project_closed_after_failure(self, ufo_path: Path, logger: MagicMock) -> None:
        processor = FontProcessor(RunConfig(ufo=ufo_path), logger=logger)
        with patch("ufostroker.core.processor.FontProject") as project_cls:
            project = project_cls.return_value.load.return_value
            project.default_layer.side_effect = FontLoadError(str(ufo_path), "broken")
            with pytest.raises(FontLoadError):
                processor.run("noodle", {})
        project.close.assert_called_once()
