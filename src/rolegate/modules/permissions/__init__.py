"""Permissions module: catalog browsing and explicit grants."""

from fastapi import APIRouter


router = APIRouter(prefix="/permissions", tags=["permissions"])

from rolegate.modules.permissions import routes  # noqa: F401, E402
