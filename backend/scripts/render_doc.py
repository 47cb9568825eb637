"""
SheetsProjects API — Render a saved Google Docs export to HTML (offline).
Useful to preview a policy page without Google credentials.

Run: cd backend && python3 scripts/render_doc.py export.json [-o page.html]

export.json is the raw documents.get response (e.g. from the API Explorer).
"""

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from models.document import ElementKind, parse_document
from services.doc_renderer import render


def summarize(raw) -> dict:
    tree = parse_document(raw)
    if tree is None:
        return {"title": None, "revision": None, "paragraphs": 0, "tables": 0, "skipped": 0}

    kinds = [element.kind for element in tree.content]
    return {
        "title": tree.title,
        "revision": tree.revision_id,
        "paragraphs": kinds.count(ElementKind.PARAGRAPH),
        "tables": kinds.count(ElementKind.TABLE),
        "skipped": kinds.count(ElementKind.UNKNOWN),
    }


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Render a Google Docs JSON export to HTML")
    parser.add_argument("export", help="documents.get JSON response")
    parser.add_argument("-o", "--output", help="write the HTML here instead of stdout")
    args = parser.parse_args(argv)

    try:
        raw = json.loads(Path(args.export).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        print(f"Cannot read {args.export}: {e}", file=sys.stderr)
        return 1

    html = render(parse_document(raw))
    report = summarize(raw)

    if args.output:
        Path(args.output).write_text(html, encoding="utf-8")
    else:
        print(html)

    print("\n════════════════════════════════════", file=sys.stderr)
    print("  RENDER REPORT", file=sys.stderr)
    print("════════════════════════════════════", file=sys.stderr)
    print(f"  Title:       {report['title']}", file=sys.stderr)
    print(f"  Revision:    {report['revision']}", file=sys.stderr)
    print(f"  Paragraphs:  {report['paragraphs']}", file=sys.stderr)
    print(f"  Tables:      {report['tables']}", file=sys.stderr)
    print(f"  Skipped:     {report['skipped']}", file=sys.stderr)
    print("════════════════════════════════════", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
