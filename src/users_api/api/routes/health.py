"""
Health check API route
"""

from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException

from users_api.api.routes.users import get_users_service
from users_api.services.users_service import UsersService
from users_api.utils.errors import StoreError

router = APIRouter()


@router.get("/")
async def health_check(users_service: UsersService = Depends(get_users_service)):
    """Health check - reports unhealthy only when the database is unreachable"""
    try:
        await users_service.ping()
    except StoreError as e:
        raise HTTPException(status_code=503, detail=f"Health check failed: {e.operation}")

    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "database": "connected"
    }
