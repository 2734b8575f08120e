"""Shared test fixtures for the edi_converter test suite.

WHY: Every codec and the orchestrator are checked against the same small
product/address document in all three encodings, so a mismatch between
modules shows up as a mismatch between fixtures.

HOW: Module-level constants hold the canonical encodings; pytest fixtures
hand out fresh copies so tests can mutate them freely.

RULES:
- SAMPLE_STRING, SAMPLE_JSON, SAMPLE_XML and the sample ParsedDocument
  describe exactly the same three segments
- EXAMPLE_X12 is a realistic 850 purchase order using "~" and "*"
"""

import copy
from typing import Dict, List

import pytest

from edi_converter.core.model import Document, ParsedDocument, Segment


SAMPLE_STRING = "ProductID*4*8*15*16*23~ProductID*a*b*c*d*e~AddressID*42*108*3*14~"

SAMPLE_JSON: Dict[str, List[Dict[str, str]]] = {
    "ProductID": [
        {"ProductID1": "4", "ProductID2": "8", "ProductID3": "15", "ProductID4": "16", "ProductID5": "23"},
        {"ProductID1": "a", "ProductID2": "b", "ProductID3": "c", "ProductID4": "d", "ProductID5": "e"},
    ],
    "AddressID": [
        {"AddressID1": "42", "AddressID2": "108", "AddressID3": "3", "AddressID4": "14"},
    ],
}

SAMPLE_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<root>
  <ProductID>
    <ProductID1>4</ProductID1>
    <ProductID2>8</ProductID2>
    <ProductID3>15</ProductID3>
    <ProductID4>16</ProductID4>
    <ProductID5>23</ProductID5>
  </ProductID>
  <ProductID>
    <ProductID1>a</ProductID1>
    <ProductID2>b</ProductID2>
    <ProductID3>c</ProductID3>
    <ProductID4>d</ProductID4>
    <ProductID5>e</ProductID5>
  </ProductID>
  <AddressID>
    <AddressID1>42</AddressID1>
    <AddressID2>108</AddressID2>
    <AddressID3>3</AddressID3>
    <AddressID4>14</AddressID4>
  </AddressID>
</root>"""

EXAMPLE_X12 = (
    "ISA*00*          *00*          *ZZ*SENDER         *ZZ*RECEIVER       "
    "*240101*1200*U*00401*000000001*0*P*>~"
    "GS*PO*SENDER*RECEIVER*20240101*1200*1*X*004010~"
    "ST*850*0001~"
    "BEG*00*SA*PO-1001**20240101~"
    "N1*ST*Acme Warehouse*92*0042~"
    "PO1*1*10*EA*9.95**VP*WIDGET-1*BP*A&B<1>~"
    "PO1*2*5*CS*24.50**VP*GADGET-2~"
    "CTT*2~"
    "SE*7*0001~"
    "GE*1*1~"
    "IEA*1*000000001~"
)


def make_sample_parsed() -> ParsedDocument:
    return ParsedDocument(segments=[
        Segment(name="ProductID", elements=["4", "8", "15", "16", "23"]),
        Segment(name="ProductID", elements=["a", "b", "c", "d", "e"]),
        Segment(name="AddressID", elements=["42", "108", "3", "14"]),
    ])


@pytest.fixture
def sample_parsed():
    """The sample document as a ParsedDocument IR."""
    return make_sample_parsed()


@pytest.fixture
def sample_string_document():
    return Document.string(SAMPLE_STRING, "~", "*")


@pytest.fixture
def sample_json_document():
    return Document.json(copy.deepcopy(SAMPLE_JSON))


@pytest.fixture
def sample_xml_document():
    return Document.xml(SAMPLE_XML)


@pytest.fixture
def example_x12_document():
    """A realistic X12 850 purchase order as a string Document."""
    return Document.string(EXAMPLE_X12, "~", "*")
