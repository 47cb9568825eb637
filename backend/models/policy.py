"""
SheetsProjects API - Policy pages response models
"""

from typing import List, Optional
from pydantic import BaseModel


class PolicyDocData(BaseModel):
    """Rendered document, as consumed by the frontend PolicyPage"""
    title: str
    html: str
    lastModified: Optional[str] = None


class PolicyDocResponse(BaseModel):
    success: bool = True
    data: PolicyDocData


class PolicyDocError(BaseModel):
    success: bool = False
    message: str
    error: Optional[str] = None


class PolicyTypeInfo(BaseModel):
    type: str
    configured: bool


class PolicyTypeListResponse(BaseModel):
    success: bool = True
    data: List[PolicyTypeInfo]
