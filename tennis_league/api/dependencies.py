# tennis_league/api/dependencies.py
from fastapi import Request

from ..storage import MongoDbContext


def get_db_context(request: Request) -> MongoDbContext:
    """Returns the database context created by the application lifespan."""
    return request.app.state.db_context
