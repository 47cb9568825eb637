"""
SheetsProjects API - Configuration et utilitaires partagés

Everything is read from the environment (backend/.env is loaded first):
- MongoDB connection (audit trail)
- Google service account (FIREBASE_* variables, shared with Firebase Admin)
- Google Doc IDs for each policy page
"""

import os
from datetime import datetime, timezone
from typing import Dict, Optional
from motor.motor_asyncio import AsyncIOMotorClient
from dotenv import load_dotenv
from pathlib import Path

# Charger .env
ROOT_DIR = Path(__file__).parent
load_dotenv(ROOT_DIR / '.env')

# MongoDB
MONGO_URL = os.environ.get('MONGO_URL', 'mongodb://localhost:27017')
DB_NAME = os.environ.get('DB_NAME', 'sheetsprojects')

client = AsyncIOMotorClient(MONGO_URL, serverSelectionTimeoutMS=5000)
db = client[DB_NAME]

# CORS
DEFAULT_CORS_ORIGINS = [
    "http://localhost:5174",
    "http://localhost:5173",
    "http://localhost:3000",
    "https://sheetsprojects.com",
    "https://www.sheetsprojects.com",
    "https://sheetsprojects.netlify.app",
    "https://sheetsprojectsdemo.netlify.app",
]
CORS_ORIGINS = [
    o.strip() for o in os.environ.get('CORS_ORIGINS', ','.join(DEFAULT_CORS_ORIGINS)).split(',')
    if o.strip()
]

# Audit trail kill switch
EVENT_LOG_ENABLED = os.environ.get('EVENT_LOG_ENABLED', 'true').strip().lower() not in ("0", "false", "no")


# ==================== GOOGLE DOCS ====================

GOOGLE_DOCS_API_URL = os.environ.get('GOOGLE_DOCS_API_URL', 'https://docs.googleapis.com/v1')

GOOGLE_DOCS_SCOPES = [
    'https://www.googleapis.com/auth/documents.readonly',
    'https://www.googleapis.com/auth/drive.readonly',
]

# policy type (URL key) -> env variable holding the Google Doc ID
POLICY_DOC_ENV_VARS = {
    'shipping-policy': 'SHIPPING_POLICY_DOC_ID',
    'terms': 'TERMS_CONDITIONS_DOC_ID',
    'cancellations-refunds': 'CANCELLATIONS_REFUNDS_DOC_ID',
    'privacy': 'PRIVACY_POLICY_DOC_ID',
    'about': 'ABOUT_US_DOC_ID',
    'refund-policy': 'REFUND_POLICY_DOC_ID',
    'pricing-policy': 'PRICING_POLICY_DOC_ID',
}

POLICY_DOC_IDS: Dict[str, Optional[str]] = {
    policy_type: os.environ.get(env_var)
    for policy_type, env_var in POLICY_DOC_ENV_VARS.items()
}


def google_service_account_info() -> dict:
    """
    Service account credentials built from the FIREBASE_* variables.
    The private key is stored on one line in .env, with literal "\\n".
    """
    private_key = os.environ.get('FIREBASE_PRIVATE_KEY')
    if private_key:
        private_key = private_key.replace('\\n', '\n')

    return {
        "type": "service_account",
        "project_id": os.environ.get('FIREBASE_PROJECT_ID'),
        "private_key_id": os.environ.get('FIREBASE_PRIVATE_KEY_ID'),
        "private_key": private_key,
        "client_email": os.environ.get('FIREBASE_CLIENT_EMAIL'),
        "client_id": os.environ.get('FIREBASE_CLIENT_ID'),
        "auth_uri": os.environ.get('FIREBASE_AUTH_URI'),
        "token_uri": os.environ.get('FIREBASE_TOKEN_URI', 'https://oauth2.googleapis.com/token'),
        "auth_provider_x509_cert_url": os.environ.get('FIREBASE_AUTH_PROVIDER_X509_CERT_URL'),
        "client_x509_cert_url": os.environ.get('FIREBASE_CLIENT_X509_CERT_URL'),
    }


# ==================== HELPERS ====================

def now_iso() -> str:
    """Retourne la date/heure actuelle en ISO"""
    return datetime.now(timezone.utc).isoformat()
