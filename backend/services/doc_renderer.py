"""
SheetsProjects API - Google Doc -> HTML

Renders a DocumentTree as an HTML fragment for the policy pages.
Pure function: no I/O, no state, never raises.

Rules:
- Paragraph: h1..h6 from the heading level, <p> otherwise
- Inline styles wrapped in a fixed order: bold, italic, underline, link
- Empty paragraph (whitespace only) -> <br/>, never an empty tag pair
- Table: raw cell text only, inline styles are NOT applied in cells
- Unknown elements are skipped
"""

from typing import Any, Optional

from models.document import DocumentTree, ElementKind, Paragraph, Table, TextRun, parse_document

NO_CONTENT_HTML = "<p>No content available</p>"

LINK_CLASS = "text-brand-primary hover:text-brand-primary/80 font-medium"

TABLE_OPEN = (
    '<table border="1" cellpadding="8" '
    'style="border-collapse: collapse; width: 100%; margin: 20px 0;"><tbody>'
)
TABLE_CLOSE = "</tbody></table>"
CELL_OPEN = '<td style="border: 1px solid #ddd; padding: 8px;">'
CELL_CLOSE = "</td>"


def render_text_run(run: TextRun) -> str:
    text = run.content

    # Each wrap applies to the output of the previous one
    if run.bold:
        text = f"<strong>{text}</strong>"
    if run.italic:
        text = f"<em>{text}</em>"
    if run.underline:
        text = f"<u>{text}</u>"
    if run.link_url:
        text = (
            f'<a href="{run.link_url}" class="{LINK_CLASS}" '
            f'target="_blank" rel="noopener noreferrer">{text}</a>'
        )

    return text


def render_paragraph(paragraph: Paragraph) -> str:
    inner_html = "".join(render_text_run(run) for run in paragraph.elements)

    if not inner_html.strip():
        # Empty paragraph for spacing
        return "<br/>"

    tag = paragraph.style.tag
    return f"<{tag}>{inner_html}</{tag}>"


def render_table(table: Table) -> str:
    html = TABLE_OPEN
    for row in table.rows:
        html += "<tr>"
        for cell in row.cells:
            html += CELL_OPEN
            for paragraph in cell.content:
                html += "".join(run.content for run in paragraph.elements)
            html += CELL_CLOSE
        html += "</tr>"
    html += TABLE_CLOSE
    return html


def render(doc: Optional[DocumentTree]) -> str:
    """DocumentTree -> HTML. None (nothing to render) -> placeholder."""
    if doc is None:
        return NO_CONTENT_HTML

    html = ""
    for element in doc.content:
        if element.kind is ElementKind.PARAGRAPH and element.paragraph is not None:
            html += render_paragraph(element.paragraph)
        elif element.kind is ElementKind.TABLE and element.table is not None:
            html += render_table(element.table)

    return html


def doc_to_html(raw: Any) -> str:
    """Raw Google Docs API response -> HTML"""
    return render(parse_document(raw))
