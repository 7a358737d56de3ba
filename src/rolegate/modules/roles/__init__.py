"""Roles module: read-only view of the role hierarchy."""

from fastapi import APIRouter


router = APIRouter(prefix="/roles", tags=["roles"])

from rolegate.modules.roles import routes  # noqa: F401, E402
