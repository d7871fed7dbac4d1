"""
FastAPI application for the Excessive Cancellations Detection Engine.

Endpoints:
    POST /upload  — Accept trades CSV, return flagged companies as JSON
    GET  /health  — System health check
    GET  /metrics — Processing statistics

Time Complexity: Dominated by the window scan (see services/processing_service.py)
Memory: O(n) during processing, released after response
"""

import logging

from fastapi import FastAPI

from api.routes import router
from app.config import APP_VERSION, LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s: %(message)s")

app = FastAPI(
    title="Excessive Cancellations Detection Engine",
    description="Flags trading companies whose cancellations exceed one third of their orders within any 60 second window.",
    version=APP_VERSION,
)

app.include_router(router)
