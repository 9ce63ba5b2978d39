"""
RBAC (Role-Based Access Control) for FastAPI.

This module provides:
- Permission enum and role-to-permissions mapping
- Plain guard functions used by services (ownership and email checks)
- Dependency factories for route protection
"""

from __future__ import annotations

from enum import Enum
from typing import Set

from fastapi import Depends

from primekart.middleware.auth import Principal, get_current_principal
from primekart.services.exceptions import ForbiddenError


class Role(str, Enum):
    ADMIN = "admin"
    USER = "user"


class Permission(str, Enum):
    """Available permissions in the system."""

    # Admin-only permissions
    ADMIN_FULL = "admin:full"
    MANAGE_PRODUCTS = "manage:products"
    MANAGE_ORDERS = "manage:orders"
    VIEW_SUMMARY = "view:summary"

    # Every authenticated user
    PLACE_ORDERS = "place:orders"
    VIEW_OWN_ORDERS = "view:own_orders"
    EDIT_OWN_PROFILE = "edit:own_profile"


ROLE_PERMISSIONS: dict[str, Set[Permission]] = {
    Role.ADMIN.value: set(Permission),
    Role.USER.value: {
        Permission.PLACE_ORDERS,
        Permission.VIEW_OWN_ORDERS,
        Permission.EDIT_OWN_PROFILE,
    },
}


def get_role_permissions(role: str) -> Set[Permission]:
    """Get all permissions for a given role."""
    return ROLE_PERMISSIONS.get(role, set())


def has_permission(role: str, permission: Permission) -> bool:
    """Check if a role has a specific permission."""
    return permission in get_role_permissions(role)


def ensure_admin(principal: Principal) -> None:
    """Raise ForbiddenError unless the principal is an admin."""
    if not has_permission(principal.role, Permission.ADMIN_FULL):
        raise ForbiddenError("Admin role required")


def ensure_self_or_admin(principal: Principal, owner_id: str) -> None:
    """Allow admins, or the principal acting on their own resource."""
    if has_permission(principal.role, Permission.ADMIN_FULL):
        return
    if principal.id != owner_id:
        raise ForbiddenError("Not allowed")


def ensure_email_match(principal: Principal, email: str) -> None:
    """Allow only the principal whose token email is ``email``.

    Applies to admins too: the per-user order listing is keyed by the caller's
    own email even though it appears in the URL.
    """
    if principal.email != email:
        raise ForbiddenError("Forbidden - Email mismatch")


class RequirePermission:
    """
    Dependency class for requiring specific permissions.

    Usage:
        @router.post("/admin/products")
        def create(principal: Principal = Depends(RequirePermission(Permission.MANAGE_PRODUCTS))):
            ...
    """

    def __init__(self, *permissions: Permission, detail: str = "Admin role required"):
        self.permissions = set(permissions)
        self.detail = detail

    async def __call__(self, principal: Principal = Depends(get_current_principal)) -> Principal:
        """Check that the principal's role grants every required permission."""
        if not self.permissions.issubset(get_role_permissions(principal.role)):
            raise ForbiddenError(self.detail)
        return principal


require_manage_products = RequirePermission(Permission.MANAGE_PRODUCTS)
require_manage_orders = RequirePermission(Permission.MANAGE_ORDERS)
require_view_summary = RequirePermission(Permission.VIEW_SUMMARY)

require_place_orders = RequirePermission(Permission.PLACE_ORDERS, detail="Not allowed")
require_view_own_orders = RequirePermission(Permission.VIEW_OWN_ORDERS, detail="Not allowed")
require_edit_own_profile = RequirePermission(Permission.EDIT_OWN_PROFILE, detail="Not allowed")
