# tennis_league/api/diagnostics.py
import logging

from bson import json_util
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from pymongo.errors import PyMongoError

from ..models import Collections
from ..storage import MongoDbContext
from .dependencies import get_db_context

logger = logging.getLogger("TennisLeague.API")

router = APIRouter()

SCRATCH_DOCUMENT_NAME = "Test Document"


# Plain def: pymongo blocks, so FastAPI runs this in its threadpool.
@router.get("/test-mongo", response_class=PlainTextResponse)
def mongo_round_trip(db_context: MongoDbContext = Depends(get_db_context)):
    """Writes one document to the scratch collection and reads it back as Extended JSON."""
    collection = db_context.get_collection(Collections.SCRATCH)
    try:
        collection.insert_one({"Name": SCRATCH_DOCUMENT_NAME})
        found = collection.find_one({"Name": SCRATCH_DOCUMENT_NAME})
    except PyMongoError as e:
        logger.exception(f"Error during scratch collection round-trip: {e}")
        raise HTTPException(status_code=500, detail=f"Database operation failed: {e}")

    if found is None:
        logger.warning("Inserted scratch document was not found on read-back.")
    return PlainTextResponse(json_util.dumps(found))
