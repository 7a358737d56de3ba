"""Users module: principal management and role assignment."""

from fastapi import APIRouter


router = APIRouter(prefix="/users", tags=["users"])

# Import routes to register them (must be after router is defined)
from rolegate.modules.users import routes  # noqa: F401, E402
