"""
Local action runner
Serves the Cloudant document actions over HTTP for development and testing.
"""

import logging
from fastapi import FastAPI

from api.routes import health, actions
from utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Cloudant Document Actions",
    description="Create, read, update, delete and delete-all actions for Cloudant databases",
    version="1.0.0",
)

# Setup centralized error handling
setup_error_handling(app)

# Include API routes
app.include_router(health.router, tags=["Health"])
app.include_router(actions.router, prefix="/actions", tags=["Actions"])

# FastAPI app instance is exported for use by uvicorn
# Server startup is handled by main.py at the project root
