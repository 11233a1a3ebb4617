from .context import MongoDbContext, TypedCollection

__all__ = ["MongoDbContext", "TypedCollection"]
