"""Unit tests for the delimited string codec.

WHY: The string codec is the native reader/writer for EDI data. A wrong
split shifts every element of a segment by one position, silently
corrupting the meaning of every later field.

HOW: Exercise parse_string / serialize_string directly and through the
StringCodec class, including blank fragments, empty elements,
multi-character separators, and parse/serialize round-trips.
"""

import pytest

from edi_converter.codecs.string_codec import StringCodec, parse_string, serialize_string
from edi_converter.core.errors import EmptyInputError, InvalidArgumentError
from edi_converter.core.model import Document, DocumentFormat, ParsedDocument, Segment, Separators

from tests.conftest import EXAMPLE_X12, SAMPLE_STRING


class TestParseString:
    """parse_string() tests."""

    def test_element_positionality(self):
        parsed = parse_string("ProductID*4*8*15*16*23~", "~", "*")
        assert parsed.segments == [
            Segment(name="ProductID", elements=["4", "8", "15", "16", "23"]),
        ]

    def test_empty_element_preserved(self):
        """A double element separator yields an empty element, not a skip."""
        parsed = parse_string("ProductID*4**8~", "~", "*")
        assert parsed.segments[0].elements == ["4", "", "8"]

    def test_trailing_empty_elements_preserved(self):
        parsed = parse_string("REF*1**~", "~", "*")
        assert parsed.segments[0].elements == ["1", "", ""]

    def test_multiple_segments_in_order(self, sample_parsed):
        assert parse_string(SAMPLE_STRING, "~", "*") == sample_parsed

    def test_blank_fragments_discarded(self):
        """Consecutive separators and whitespace-only fragments are dropped."""
        parsed = parse_string("A*1~~  ~B*2~\n", "~", "*")
        assert [s.name for s in parsed.segments] == ["A", "B"]

    def test_missing_trailing_separator(self):
        parsed = parse_string("A*1~B*2", "~", "*")
        assert [s.name for s in parsed.segments] == ["A", "B"]
        assert parsed.segments[1].elements == ["2"]

    def test_segment_without_elements(self):
        parsed = parse_string("SE~", "~", "*")
        assert parsed.segments == [Segment(name="SE", elements=[])]

    def test_kept_fragments_are_not_trimmed(self):
        parsed = parse_string("A*1~\nB*2~", "~", "*")
        assert parsed.segments[1].name == "\nB"

    def test_multi_character_separators(self):
        parsed = parse_string("A||1||2<>B||3<>", "<>", "||")
        assert parsed.segments == [
            Segment(name="A", elements=["1", "2"]),
            Segment(name="B", elements=["3"]),
        ]

    def test_other_separator_characters(self):
        parsed = parse_string("ProductID|4|8\nAddressID|42\n", "\n", "|")
        assert parsed.segments[1] == Segment(name="AddressID", elements=["42"])

    def test_whitespace_only_content_yields_no_segments(self):
        assert parse_string("   ~  ~", "~", "*").segments == []

    @pytest.mark.parametrize("content,seg,elem", [
        ("", "~", "*"),
        ("A*1~", "", "*"),
        ("A*1~", "~", ""),
    ])
    def test_missing_inputs_rejected(self, content, seg, elem):
        with pytest.raises(InvalidArgumentError, match="Content and separators are required"):
            parse_string(content, seg, elem)

    def test_example_purchase_order(self):
        parsed = parse_string(EXAMPLE_X12, "~", "*")
        names = [s.name for s in parsed.segments]
        assert names == ["ISA", "GS", "ST", "BEG", "N1", "PO1", "PO1", "CTT", "SE", "GE", "IEA"]
        assert parsed.segments[3].elements == ["00", "SA", "PO-1001", "", "20240101"]
        assert len(parsed.segments[0].elements) == 16


class TestSerializeString:
    """serialize_string() tests."""

    def test_serialize_sample(self, sample_parsed):
        assert serialize_string(sample_parsed, "~", "*") == SAMPLE_STRING

    def test_always_ends_with_segment_separator(self):
        doc = ParsedDocument(segments=[Segment(name="A", elements=["1"])])
        assert serialize_string(doc, "~", "*") == "A*1~"

    def test_empty_elements_serialized(self):
        doc = ParsedDocument(segments=[Segment(name="ProductID", elements=["4", "", "8"])])
        assert serialize_string(doc, "~", "*") == "ProductID*4**8~"

    def test_segment_without_elements(self):
        doc = ParsedDocument(segments=[Segment(name="SE"), Segment(name="GE", elements=["1"])])
        assert serialize_string(doc, "~", "*") == "SE~GE*1~"

    def test_different_separators(self, sample_parsed):
        result = serialize_string(sample_parsed, "\n", "|")
        assert result.startswith("ProductID|4|8|15|16|23\n")
        assert result.endswith("AddressID|42|108|3|14\n")

    def test_empty_document_rejected(self):
        with pytest.raises(EmptyInputError, match="No segments to serialize"):
            serialize_string(ParsedDocument(), "~", "*")

    def test_empty_separator_rejected(self, sample_parsed):
        with pytest.raises(InvalidArgumentError):
            serialize_string(sample_parsed, "~", "")

    def test_idempotent(self, sample_parsed):
        first = serialize_string(sample_parsed, "~", "*")
        second = serialize_string(sample_parsed, "~", "*")
        assert first == second


class TestRoundTrip:
    """parse(serialize(P)) == P for documents without blank segments."""

    @pytest.mark.parametrize("seg,elem", [("~", "*"), ("\n", "|"), ("'", "+"), ("<>", "::")])
    def test_round_trip(self, sample_parsed, seg, elem):
        text = serialize_string(sample_parsed, seg, elem)
        assert parse_string(text, seg, elem) == sample_parsed

    def test_round_trip_with_empty_elements(self):
        doc = ParsedDocument(segments=[
            Segment(name="BEG", elements=["00", "", "", "X"]),
            Segment(name="SE", elements=[]),
            Segment(name="REF", elements=["", ""]),
        ])
        assert parse_string(serialize_string(doc, "~", "*"), "~", "*") == doc

    def test_example_round_trip_is_exact(self):
        parsed = parse_string(EXAMPLE_X12, "~", "*")
        assert serialize_string(parsed, "~", "*") == EXAMPLE_X12


class TestStringCodec:
    """StringCodec class wiring."""

    def test_metadata(self):
        codec = StringCodec()
        assert codec.format is DocumentFormat.STRING
        assert codec.name == "EDI X12 string"

    def test_decode(self, sample_string_document, sample_parsed):
        assert StringCodec().decode(sample_string_document) == sample_parsed

    def test_decode_rejects_other_format(self):
        with pytest.raises(InvalidArgumentError, match="cannot read a 'xml' document"):
            StringCodec().decode(Document.xml("<root/>"))

    @pytest.mark.parametrize("seg,elem", [(None, "*"), ("~", None), ("", "*")])
    def test_decode_requires_both_separators(self, seg, elem):
        document = Document(format=DocumentFormat.STRING, content="A*1~",
                            segment_separator=seg, element_separator=elem)
        with pytest.raises(InvalidArgumentError, match="Content and separators are required"):
            StringCodec().decode(document)

    def test_encode_carries_separators(self, sample_parsed):
        result = StringCodec().encode(sample_parsed, Separators(segment="\n", element="|"))
        assert result.format is DocumentFormat.STRING
        assert result.segment_separator == "\n"
        assert result.element_separator == "|"
        assert result.content.endswith("\n")

    def test_encode_requires_separators(self, sample_parsed):
        with pytest.raises(InvalidArgumentError, match="separators are required"):
            StringCodec().encode(sample_parsed)
