"""
Health check API route
"""

from datetime import datetime
from fastapi import APIRouter

from actions import ACTIONS

router = APIRouter()

@router.get("/")
async def health_check():
    """
    Health check for the local runner

    Does not contact Cloudant: every action connects on its own at
    invocation time.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "actions": sorted(ACTIONS),
    }
