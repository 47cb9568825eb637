"""
Builders for raw Google Docs API payloads (documents.get shape).
"""


def text_run(content, bold=False, italic=False, underline=False, url=None):
    style = {}
    if bold:
        style["bold"] = True
    if italic:
        style["italic"] = True
    if underline:
        style["underline"] = True
    if url:
        style["link"] = {"url": url}
    return {"startIndex": 1, "endIndex": 1 + len(content), "textRun": {"content": content, "textStyle": style}}


def paragraph(*runs, style="NORMAL_TEXT"):
    return {"paragraph": {"elements": list(runs), "paragraphStyle": {"namedStyleType": style}}}


def table(*rows):
    """rows: lists of cell texts, or lists of lists of text_run dicts"""
    table_rows = []
    for row in rows:
        cells = []
        for cell in row:
            runs = [text_run(cell)] if isinstance(cell, str) else list(cell)
            cells.append({"content": [paragraph(*runs)]})
        table_rows.append({"tableCells": cells})
    return {"table": {"rows": len(rows), "columns": len(rows[0]) if rows else 0, "tableRows": table_rows}}


def section_break():
    return {"sectionBreak": {"sectionStyle": {"columnSeparatorStyle": "NONE"}}}


def document(*elements, title="Privacy Policy", revision="rev-42", document_id="doc-123"):
    doc = {"documentId": document_id, "body": {"content": list(elements)}}
    if title is not None:
        doc["title"] = title
    if revision is not None:
        doc["revisionId"] = revision
    return doc
