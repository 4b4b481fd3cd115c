"""Tests for pdffontencoding.py: simple and /Differences-based text encoders."""

import pytest
from pdfrw import PdfArray, PdfDict, PdfName

from pdfcore14.pdffontencoding import (
    DEFAULT_ENCODING,
    PdfDifferencesEncoder,
    PdfFontEncodingStandards,
    PdfSimpleEncoder,
    PdfTextEncoder,
)


class TestEncodingVectors:
    @pytest.mark.parametrize("name", sorted(PdfFontEncodingStandards.encodingVectors))
    def test_vectors_have_256_entries(self, name):
        assert len(PdfFontEncodingStandards.encodingVectors[name]) == 256

    def test_unknown_encoding(self):
        assert PdfFontEncodingStandards.get_cc2glyphname("/NoSuchEncoding") is None

    def test_inversion_keeps_lowest_code(self):
        """WinAnsi maps both 0x20 and 0xA0 to /space."""
        cc2g = PdfFontEncodingStandards.get_cc2glyphname("/WinAnsiEncoding")
        inverted = PdfFontEncodingStandards.invert_cc2glyphname(cc2g, "/WinAnsiEncoding")
        assert inverted["/space"] == " "
        assert inverted["/hyphen"] == "-"


class TestPdfSimpleEncoder:
    def test_default_is_winansi(self):
        assert PdfSimpleEncoder().name == DEFAULT_ENCODING == "/WinAnsiEncoding"

    def test_name_without_slash(self):
        assert PdfSimpleEncoder("MacRomanEncoding") == PdfSimpleEncoder("/MacRomanEncoding")

    def test_unknown_name_rejected(self):
        with pytest.raises(ValueError):
            PdfSimpleEncoder("/NoSuchEncoding")

    def test_cc_to_glyphname(self):
        enc = PdfSimpleEncoder()
        assert enc.cc_to_glyphname(65) == PdfName("A")
        assert enc.cc_to_glyphname("A") == "/A"
        assert enc.cc_to_glyphname(0x80) == "/Euro"
        assert enc.cc_to_glyphname(0) is None

    def test_glyphname_to_cc(self):
        enc = PdfSimpleEncoder()
        assert enc.glyphname_to_cc("A") == 65
        assert enc.glyphname_to_cc("/A") == 65
        assert enc.glyphname_to_cc("space") == 0x20
        assert enc.glyphname_to_cc("Alpha") is None

    def test_winansi_bullet(self):
        assert PdfSimpleEncoder().glyphname_to_cc("bullet") == 0x95

    def test_macroman(self):
        enc = PdfSimpleEncoder("/MacRomanEncoding")
        assert enc.cc_to_glyphname(0x80) == "/Adieresis"
        assert enc.glyphname_to_cc("Euro") is None

    def test_symbol(self):
        enc = PdfSimpleEncoder("/SymbolEncoding")
        assert enc.cc_to_glyphname(ord("a")) == "/alpha"
        assert enc.glyphname_to_cc("Alpha") == ord("A")

    def test_decode(self):
        assert PdfSimpleEncoder().decode(b"Hi\x00") == ["/H", "/i", None]

    def test_encode(self):
        assert PdfSimpleEncoder().encode(["H", "/i", "Euro"]) == b"Hi\x80"

    def test_encode_missing_glyph(self):
        with pytest.raises(ValueError):
            PdfSimpleEncoder().encode(["Alpha"])

    @pytest.mark.parametrize("name", ["/WinAnsiEncoding", "/MacRomanEncoding", "/MacExpertEncoding"])
    def test_predefined_encodings_serialize_as_names(self, name):
        assert PdfSimpleEncoder(name).to_pdf_object() == PdfName(name[1:])

    def test_builtin_encoding_serializes_as_differences(self):
        obj = PdfSimpleEncoder("/ZapfDingbatsEncoding").to_pdf_object()
        assert isinstance(obj, PdfDict)
        assert obj.Type == PdfName.Encoding
        assert obj.BaseEncoding is None
        assert list(obj.Differences[:3]) == [32, "/space", "/a1"]

    def test_builtin_encoding_round_trips_through_differences(self):
        enc = PdfSimpleEncoder("/StandardEncoding")
        differences = enc.to_pdf_object().Differences
        assert PdfTextEncoder.differences_to_cc2glyphname(differences) == enc.cc2glyphname

    def test_equality(self):
        assert PdfSimpleEncoder() == PdfSimpleEncoder("/WinAnsiEncoding")
        assert PdfSimpleEncoder() != PdfSimpleEncoder("/MacRomanEncoding")


class TestDifferences:
    def test_differences_to_cc2glyphname(self):
        cc2g = PdfTextEncoder.differences_to_cc2glyphname([32, "/space", "/A", "0x41", "/B", "66", "/C"])
        assert cc2g == {" ": "/space", "!": "/A", "A": "/B", "B": "/C"}

    def test_differences_accept_pdf_objects(self):
        cc2g = PdfTextEncoder.differences_to_cc2glyphname(PdfArray([65, PdfName("Adieresis")]))
        assert cc2g == {"A": "/Adieresis"}

    @pytest.mark.parametrize("differences", [[65, ""], [65, "Adieresis"], [256, "/A"], [255, "/A", "/B"]])
    def test_malformed_differences(self, differences):
        with pytest.raises(ValueError):
            PdfTextEncoder.differences_to_cc2glyphname(differences)

    def test_cc2glyphname_to_differences(self):
        cc2g = {"D": PdfName("d"), "A": PdfName("a"), "B": PdfName("b")}
        assert PdfTextEncoder.cc2glyphname_to_differences(cc2g) == ([65, "/a", "/b", 68, "/d"], 65, 68)

    def test_cc2glyphname_to_differences_out_of_range(self):
        with pytest.raises(ValueError):
            PdfTextEncoder.cc2glyphname_to_differences({chr(300): PdfName("a")})


class TestPdfDifferencesEncoder:
    def test_over_base_encoding(self):
        enc = PdfDifferencesEncoder([65, "/Adieresis"], baseEncoding="WinAnsiEncoding")
        assert enc.cc_to_glyphname(65) == "/Adieresis"
        assert enc.cc_to_glyphname(66) == "/B"
        assert enc.glyphname_to_cc("Adieresis") == 65
        assert enc.glyphname_to_cc("A") is None

    def test_serialization_with_base_encoding(self):
        obj = PdfDifferencesEncoder([65, "/Adieresis"], baseEncoding="/MacRomanEncoding").to_pdf_object()
        assert obj.Type == PdfName.Encoding
        assert obj.BaseEncoding == PdfName.MacRomanEncoding
        assert list(obj.Differences) == [65, "/Adieresis"]

    def test_implicit_base_encoding(self):
        enc = PdfDifferencesEncoder([97, "/Alpha"], implicitEncoding="/SymbolEncoding")
        assert enc.cc_to_glyphname(97) == "/Alpha"
        assert enc.cc_to_glyphname(98) == "/beta"
        obj = enc.to_pdf_object()
        assert obj.BaseEncoding is None
        assert len(obj) == 2

    def test_builtin_base_encoding_rejected(self):
        with pytest.raises(ValueError):
            PdfDifferencesEncoder([65, "/A"], baseEncoding="/SymbolEncoding")

    def test_unknown_implicit_encoding_rejected(self):
        with pytest.raises(ValueError):
            PdfDifferencesEncoder([65, "/A"], implicitEncoding="/NoSuchEncoding")


class TestPdfTextEncoder:
    def test_base_class_has_no_pdf_representation(self):
        with pytest.raises(NotImplementedError):
            PdfTextEncoder("/Custom", {}).to_pdf_object()
