"""
SheetsProjects API - Backend
Pages légales servies depuis Google Docs

Démarre avec:
    uvicorn server:app --host 0.0.0.0 --port 5004 --reload
"""

import os
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import CORS_ORIGINS, client

# Configuration logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("sheetsprojects")

API_VERSION = "1.0.0"

# Créer l'app
app = FastAPI(
    title="SheetsProjects API",
    description="Policy pages rendered from Google Docs",
    version=API_VERSION
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ==================== IMPORT DES ROUTES ====================

from routes import policy_docs

# Routes avec préfixe /api
app.include_router(policy_docs.router, prefix="/api")

# ==================== ROUTE RACINE ====================

@app.get("/")
async def root():
    return {
        "name": "SheetsProjects API",
        "version": API_VERSION,
        "status": "running",
        "docs": "/docs"
    }


# ==================== ERREURS ====================

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        message = "Route not found"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": message}
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Something went wrong!"}
    )


# ==================== STARTUP ====================

@app.on_event("startup")
async def startup():
    logger.info("🚀 SheetsProjects API démarrée")

    from services.event_logger import ensure_indexes

    try:
        await ensure_indexes()
        logger.info("✅ Index MongoDB créés")
    except Exception as e:
        # The policy pages do not need MongoDB, only the audit trail does
        logger.warning(f"MongoDB indisponible, event_log désactivé de fait: {str(e)}")


@app.on_event("shutdown")
async def shutdown_db_client():
    client.close()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get("PORT", 5004)))
