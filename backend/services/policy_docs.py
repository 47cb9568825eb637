"""
SheetsProjects API - Service Policy Docs

Pages légales (CGV, confidentialité, ...) rédigées dans Google Docs.
Chaque type de page pointe vers un Google Doc ID (config.POLICY_DOC_IDS).

Results are plain dicts, never exceptions:
    success: {"success": True, "title", "html", "lastModified"}
    failure: {"success": False, "error", "message"}
"""

import logging
from typing import Dict, List, Optional

from config import POLICY_DOC_IDS
from models.document import parse_document, read_revision_id, read_title
from services.doc_renderer import render
from services.google_docs import DocumentFetcher

logger = logging.getLogger("policy_docs")

NOT_CONFIGURED_MESSAGE = (
    "This page is not yet configured. "
    "Please add the Google Doc ID to your environment variables."
)

# Template values left in .env.example
PLACEHOLDER_MARKERS = ("YOUR_", "_HERE")


class DocumentNotConfiguredError(Exception):
    """Google Doc ID absent ou encore au format placeholder"""


def is_placeholder_document_id(document_id: Optional[str]) -> bool:
    if not document_id:
        return True
    return any(marker in document_id for marker in PLACEHOLDER_MARKERS)


async def fetch_google_doc(document_id: Optional[str], fetcher: DocumentFetcher) -> Dict:
    """
    Récupère un Google Doc et le convertit en HTML.
    Never raises: every failure is returned as a failure dict.
    """
    try:
        if is_placeholder_document_id(document_id):
            raise DocumentNotConfiguredError("Document ID not configured")

        content = await fetcher.fetch_by_id(document_id)

        tree = parse_document(content)

        # Title/revision are read even when the body is missing
        return {
            "success": True,
            "title": tree.title if tree else read_title(content),
            "html": render(tree),
            "lastModified": tree.revision_id if tree else read_revision_id(content)
        }

    except DocumentNotConfiguredError as e:
        logger.error(f"Error fetching Google Doc: {str(e)}")
        return {
            "success": False,
            "error": "Document not configured",
            "message": NOT_CONFIGURED_MESSAGE
        }

    except Exception as e:
        logger.error(f"Error fetching Google Doc {document_id}: {str(e)}")
        return {
            "success": False,
            "error": str(e),
            "message": "Failed to fetch document content"
        }


async def fetch_policy_doc(
    policy_type: str,
    fetcher: DocumentFetcher,
    doc_ids: Optional[Dict[str, Optional[str]]] = None
) -> Dict:
    """Policy type (privacy, terms, ...) -> Google Doc -> HTML"""
    doc_ids = POLICY_DOC_IDS if doc_ids is None else doc_ids

    document_id = doc_ids.get(policy_type)

    if not document_id:
        return {
            "success": False,
            "error": "Invalid policy type",
            "message": f'Policy type "{policy_type}" not found'
        }

    return await fetch_google_doc(document_id, fetcher)


def list_policy_types(doc_ids: Optional[Dict[str, Optional[str]]] = None) -> List[Dict]:
    """Types supportés + état de configuration (pour l'admin / le footer)"""
    doc_ids = POLICY_DOC_IDS if doc_ids is None else doc_ids

    return [
        {"type": policy_type, "configured": not is_placeholder_document_id(document_id)}
        for policy_type, document_id in doc_ids.items()
    ]
