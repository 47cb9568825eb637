"""
Routes pour les pages légales (Google Docs -> HTML)
- GET /policy-docs            : types supportés
- GET /policy-docs/{policy_type} : document rendu en HTML

Supported types: shipping-policy, terms, cancellations-refunds, privacy,
about, refund-policy, pricing-policy
"""

import logging
from functools import lru_cache

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from config import google_service_account_info
from models.policy import PolicyDocError, PolicyDocResponse, PolicyTypeListResponse
from services.event_logger import log_event
from services.google_docs import DocumentFetcher, GoogleDocsClient
from services.policy_docs import fetch_policy_doc, list_policy_types

router = APIRouter(prefix="/policy-docs", tags=["Policy Docs"])
logger = logging.getLogger("policy_docs")


@lru_cache
def get_document_fetcher() -> DocumentFetcher:
    """Client Google Docs partagé (token OAuth réutilisé entre requêtes)"""
    return GoogleDocsClient(service_account_info=google_service_account_info())


@router.get("", response_model=PolicyTypeListResponse)
async def get_policy_types():
    """Liste des types de pages et leur état de configuration"""
    return {"success": True, "data": list_policy_types()}


@router.get(
    "/{policy_type}",
    response_model=PolicyDocResponse,
    responses={404: {"model": PolicyDocError}, 500: {"model": PolicyDocError}}
)
async def get_policy_doc(policy_type: str, fetcher: DocumentFetcher = Depends(get_document_fetcher)):
    """
    Récupère un document de politique par type.
    404 si le type est inconnu, non configuré ou si Google Docs échoue.
    """
    try:
        logger.info(f"Fetching policy document for type: {policy_type}")

        result = await fetch_policy_doc(policy_type, fetcher)

        if result["success"]:
            await log_event(
                "policy_doc_fetch", "policy_doc", policy_type,
                details={"title": result["title"], "revision": result["lastModified"]}
            )
            return {
                "success": True,
                "data": {
                    "title": result["title"],
                    "html": result["html"],
                    "lastModified": result["lastModified"]
                }
            }

        await log_event(
            "policy_doc_fetch_failed", "policy_doc", policy_type,
            details={"error": result.get("error")}
        )
        return JSONResponse(
            status_code=404,
            content={
                "success": False,
                "message": result.get("message") or "Failed to fetch policy document",
                "error": result.get("error")
            }
        )

    except Exception as e:
        logger.error(f"Error in get_policy_doc: {str(e)}")
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "message": "Server error while fetching policy document",
                "error": str(e)
            }
        )
