"""
╔══════════════════════════════════════════════════════════════════════════════╗
║  SheetsProjects API - Models Package                                         ║
║                                                                              ║
║  Exports tous les modèles pour import facile                                 ║
║  from models import DocumentTree, parse_document, PolicyDocResponse, etc.    ║
╚══════════════════════════════════════════════════════════════════════════════╝
"""

# Document (Google Docs)
from .document import (
    UNTITLED_DOCUMENT,
    HeadingLevel,
    ElementKind,
    TextRun,
    Paragraph,
    TableCell,
    TableRow,
    Table,
    StructuralElement,
    DocumentTree,
    parse_document,
)

# Policy pages (API)
from .policy import (
    PolicyDocData,
    PolicyDocResponse,
    PolicyDocError,
    PolicyTypeInfo,
    PolicyTypeListResponse,
)

__all__ = [
    # Document
    "UNTITLED_DOCUMENT",
    "HeadingLevel",
    "ElementKind",
    "TextRun",
    "Paragraph",
    "TableCell",
    "TableRow",
    "Table",
    "StructuralElement",
    "DocumentTree",
    "parse_document",
    # Policy
    "PolicyDocData",
    "PolicyDocResponse",
    "PolicyDocError",
    "PolicyTypeInfo",
    "PolicyTypeListResponse",
]
