# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""Pydantic response models for the RBAC endpoints."""

from typing import Dict, List

from pydantic import BaseModel

from models.user import Role


class NavItemRow(BaseModel):
    label: str
    path: str
    icon: str

    model_config = {"from_attributes": True}


class NavigationResponse(BaseModel):
    role: Role
    items: List[NavItemRow]


class PermissionsResponse(BaseModel):
    role: Role
    permissions: List[str]  # sorted ids


class PermissionRow(BaseModel):
    id: str
    name: str
    description: str
    category: str

    model_config = {"from_attributes": True}


class PermissionCatalogResponse(BaseModel):
    categories: Dict[str, List[PermissionRow]]


class RoleDetailResponse(BaseModel):
    role: Role
    label: str
    navigation: List[NavItemRow]
    permissions: List[str]
