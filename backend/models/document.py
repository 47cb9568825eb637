"""
SheetsProjects API - Document model (Google Docs)

Typed view of a Google Docs API `documents.get` response, limited to what
the HTML renderer understands: paragraphs (with heading level and inline
styles) and tables. Everything else in the body is kept as UNKNOWN.

parse_document() is the only place that reads the raw JSON. It never
raises: any missing or malformed level falls back to its default.
"""

from typing import Any, List, Optional
from enum import Enum
from pydantic import BaseModel, Field

UNTITLED_DOCUMENT = "Untitled Document"


class HeadingLevel(str, Enum):
    """Block level of a paragraph, from its namedStyleType"""
    NORMAL = "NORMAL"
    H1 = "HEADING_1"
    H2 = "HEADING_2"
    H3 = "HEADING_3"
    H4 = "HEADING_4"
    H5 = "HEADING_5"
    H6 = "HEADING_6"

    @classmethod
    def from_named_style(cls, named_style: Optional[str]) -> "HeadingLevel":
        # NORMAL_TEXT, TITLE, SUBTITLE and unknown tags all render as <p>
        for level in cls:
            if level is not cls.NORMAL and level.value == named_style:
                return level
        return cls.NORMAL

    @property
    def tag(self) -> str:
        if self is HeadingLevel.NORMAL:
            return "p"
        return "h" + self.value.rsplit("_", 1)[1]


class ElementKind(str, Enum):
    PARAGRAPH = "paragraph"
    TABLE = "table"
    UNKNOWN = "unknown"


class TextRun(BaseModel):
    content: str = ""
    bold: bool = False
    italic: bool = False
    underline: bool = False
    link_url: Optional[str] = None


class Paragraph(BaseModel):
    style: HeadingLevel = HeadingLevel.NORMAL
    elements: List[TextRun] = Field(default_factory=list)


class TableCell(BaseModel):
    content: List[Paragraph] = Field(default_factory=list)


class TableRow(BaseModel):
    cells: List[TableCell] = Field(default_factory=list)


class Table(BaseModel):
    rows: List[TableRow] = Field(default_factory=list)


class StructuralElement(BaseModel):
    kind: ElementKind = ElementKind.UNKNOWN
    paragraph: Optional[Paragraph] = None
    table: Optional[Table] = None


class DocumentTree(BaseModel):
    title: str = UNTITLED_DOCUMENT
    document_id: Optional[str] = None
    revision_id: Optional[str] = None
    content: List[StructuralElement] = Field(default_factory=list)


# ==================== ADAPTER (raw JSON -> model) ====================

def _mapping(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _sequence(value: Any) -> list:
    return value if isinstance(value, list) else []


def _optional_str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


def read_title(raw: Any) -> str:
    """Document title, "Untitled Document" when absent or not a string"""
    return _optional_str(_mapping(raw).get("title")) or UNTITLED_DOCUMENT


def read_revision_id(raw: Any) -> Optional[str]:
    return _optional_str(_mapping(raw).get("revisionId"))


def parse_text_run(raw: Any) -> Optional[TextRun]:
    """
    Paragraph element -> TextRun.
    Returns None for non text elements (inlineObjectElement, pageBreak...)
    and for runs without content.
    """
    text_run = _mapping(_mapping(raw).get("textRun"))
    content = text_run.get("content")
    if not isinstance(content, str) or not content:
        return None

    text_style = _mapping(text_run.get("textStyle"))
    link = _mapping(text_style.get("link"))

    return TextRun(
        content=content,
        bold=bool(text_style.get("bold")),
        italic=bool(text_style.get("italic")),
        underline=bool(text_style.get("underline")),
        link_url=_optional_str(link.get("url")),
    )


def parse_paragraph(raw: Any) -> Paragraph:
    raw = _mapping(raw)
    paragraph_style = _mapping(raw.get("paragraphStyle"))
    named_style = paragraph_style.get("namedStyleType")

    runs = []
    for elem in _sequence(raw.get("elements")):
        run = parse_text_run(elem)
        if run is not None:
            runs.append(run)

    return Paragraph(
        style=HeadingLevel.from_named_style(named_style if isinstance(named_style, str) else None),
        elements=runs,
    )


def parse_table(raw: Any) -> Table:
    rows = []
    for raw_row in _sequence(_mapping(raw).get("tableRows")):
        cells = []
        for raw_cell in _sequence(_mapping(raw_row).get("tableCells")):
            # Only paragraphs are read inside a cell
            paragraphs = [
                parse_paragraph(cell_element["paragraph"])
                for cell_element in _sequence(_mapping(raw_cell).get("content"))
                if isinstance(cell_element, dict) and isinstance(cell_element.get("paragraph"), dict)
            ]
            cells.append(TableCell(content=paragraphs))
        rows.append(TableRow(cells=cells))
    return Table(rows=rows)


def parse_structural_element(raw: Any) -> StructuralElement:
    raw = _mapping(raw)

    if isinstance(raw.get("paragraph"), dict):
        return StructuralElement(kind=ElementKind.PARAGRAPH, paragraph=parse_paragraph(raw["paragraph"]))

    if isinstance(raw.get("table"), dict):
        return StructuralElement(kind=ElementKind.TABLE, table=parse_table(raw["table"]))

    # sectionBreak, tableOfContents, ...
    return StructuralElement(kind=ElementKind.UNKNOWN)


def parse_document(raw: Any) -> Optional[DocumentTree]:
    """
    Google Docs API response -> DocumentTree.

    Returns None when there is nothing to render: no document, no body,
    or no body.content list.
    """
    if not isinstance(raw, dict):
        return None

    body = raw.get("body")
    if not isinstance(body, dict):
        return None

    content = body.get("content")
    if not isinstance(content, list):
        return None

    return DocumentTree(
        title=read_title(raw),
        document_id=_optional_str(raw.get("documentId")),
        revision_id=read_revision_id(raw),
        content=[parse_structural_element(element) for element in content],
    )
