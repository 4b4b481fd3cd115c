"""Tests for pdffontmetrics.py: CharMetrics and GlyphMetricsTable."""

import pytest
from pdfrw import PdfName

from pdfcore14.pdffontmetrics import NO_METRICS, CharMetrics, GlyphMetricsTable


def make_table():
    return GlyphMetricsTable.from_widths("Test", ["A", "B", "zerowidth"], [500, 650, 0])


class TestCharMetrics:
    def test_defaults_to_zero_advances(self):
        m = CharMetrics("A")
        assert (m.wx, m.wy) == (0, 0)

    def test_is_immutable(self):
        m = CharMetrics("A", 600, 0)
        with pytest.raises(AttributeError):
            m.wx = 500

    def test_no_metrics_is_zero_valued(self):
        assert NO_METRICS == CharMetrics("", 0, 0)


class TestGlyphMetricsTable:
    def test_lookup_present_glyph(self):
        assert make_table().lookup("B") == (CharMetrics("B", 650, 0), True)

    def test_lookup_absent_glyph(self):
        m, found = make_table().lookup("nonexistentGlyph")
        assert found is False
        assert (m.wx, m.wy) == (0, 0)

    def test_zero_width_glyph_is_found(self):
        """A zero-width glyph and a missing glyph differ only in the found flag."""
        present, foundPresent = make_table().lookup("zerowidth")
        missing, foundMissing = make_table().lookup("missing")
        assert present.wx == missing.wx == 0
        assert foundPresent is True
        assert foundMissing is False

    def test_lookup_accepts_pdf_names(self):
        assert make_table().lookup(PdfName("A")) == (CharMetrics("A", 500, 0), True)
        assert PdfName("B") in make_table()

    def test_get_width(self):
        table = make_table()
        assert table.get_width("A") == 500
        assert table.get_width("missing") is None
        assert table.get_width("missing", 250) == 250

    def test_len_and_iteration(self):
        table = make_table()
        assert len(table) == 3
        assert sorted(table) == ["A", "B", "zerowidth"]

    def test_every_key_maps_to_its_own_glyph(self):
        table = make_table()
        for gname in table:
            m, found = table.lookup(gname)
            assert found
            assert m.glyph == gname

    def test_mislabeled_metrics_rejected(self):
        with pytest.raises(ValueError):
            GlyphMetricsTable("Test", {"A": CharMetrics("B", 600, 0)})

    def test_widths_count_mismatch_rejected(self):
        with pytest.raises(ValueError):
            GlyphMetricsTable.from_widths("Test", ["A", "B"], [600])

    def test_source_dict_is_copied(self):
        source = {"A": CharMetrics("A", 600, 0)}
        table = GlyphMetricsTable("Test", source)
        source["B"] = CharMetrics("B", 600, 0)
        assert "B" not in table

    def test_metrics_view_is_read_only(self):
        table = make_table()
        with pytest.raises(TypeError):
            table.metrics["C"] = CharMetrics("C", 100, 0)
        assert "C" not in table

    def test_vertical_advance(self):
        table = GlyphMetricsTable.from_widths("Vertical", ["A"], [1000], wy=-1000)
        assert table.lookup("A") == (CharMetrics("A", 1000, -1000), True)
