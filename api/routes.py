"""
API Routes — upload, health, and metrics endpoints.
"""

import io
import logging
import time

from fastapi import APIRouter, File, HTTPException, UploadFile
from fastapi.responses import JSONResponse

from app.config import APP_VERSION, INPUT_ENCODING
from services.processing_service import ExcessiveCancellationsChecker
from utils.metrics import MetricsTracker
from utils.validators import validate_trade_upload

logger = logging.getLogger(__name__)

router = APIRouter()
metrics_tracker = MetricsTracker()


@router.get("/health")
async def health():
    """Return system health status."""
    return {"status": "healthy", "version": APP_VERSION}


@router.get("/metrics")
async def metrics():
    """Return processing statistics from the most recent run."""
    return metrics_tracker.get_metrics()


@router.post("/upload")
async def upload_csv(file: UploadFile = File(...)):
    """
    Accept a trades CSV upload, run the excessive cancellation check,
    and return the flagged companies with a processing summary.
    """
    contents = await file.read()

    validation_error = validate_trade_upload(file.filename, contents)
    if validation_error:
        logger.warning("Rejected upload %r: %s", file.filename, validation_error)
        raise HTTPException(status_code=400, detail=validation_error)

    # Universal newlines, the same line splitting open() applies to file sources
    lines = io.StringIO(contents.decode(INPUT_ENCODING), newline=None)

    start_time = time.time()
    checker = ExcessiveCancellationsChecker(lines)
    result = checker.report()
    processing_time = round(time.time() - start_time, 2)

    result["summary"]["processing_time_seconds"] = processing_time
    metrics_tracker.record(result["summary"])

    return JSONResponse(content=result)
