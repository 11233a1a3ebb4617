# tennis_league/storage/context.py
import logging
from typing import Any, Dict, Generic, Mapping, Optional, Type, TypeVar, Union, overload

from bson import ObjectId
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from ..config import Settings
from ..errors import ConfigurationError
from ..models import Entity

logger = logging.getLogger("TennisLeague.Storage")

T = TypeVar("T", bound=Entity)


class TypedCollection(Generic[T]):
    """A collection handle that reads and writes one record type."""

    def __init__(self, collection: Collection, model: Type[T]):
        self.collection = collection
        self.model = model

    @property
    def name(self) -> str:
        return self.collection.name

    def insert_one(self, record: T) -> str:
        """Stores the record and writes the assigned id back onto it."""
        result = self.collection.insert_one(record.to_document())
        record.id = str(result.inserted_id)
        return record.id

    def find_one(self, filter: Optional[Mapping[str, Any]] = None) -> Optional[T]:
        document = self.collection.find_one(filter or {})
        return self.model.from_document(document) if document is not None else None

    def find_by_id(self, record_id: str) -> Optional[T]:
        key: Union[ObjectId, str] = ObjectId(record_id) if ObjectId.is_valid(record_id) else record_id
        return self.find_one({"_id": key})

    def count_documents(self, filter: Optional[Mapping[str, Any]] = None) -> int:
        return self.collection.count_documents(filter or {})


class MongoDbContext:
    """Holds the MongoDB client for the process and hands out collections by name."""

    def __init__(self, settings: Settings, client: Optional[MongoClient] = None):
        if not settings.database_name:
            raise ConfigurationError("DatabaseName is not configured.")
        if client is None:
            if not settings.connection_string:
                raise ConfigurationError("ConnectionStrings:MongoDb is not configured.")
            try:
                client = MongoClient(
                    settings.connection_string,
                    serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
                )
            except PyMongoError as e:
                logger.error(f"Failed to create MongoDB client: {e}")
                raise ConfigurationError(f"Invalid MongoDB connection string: {e}") from e
        self.client = client
        self.database_name = settings.database_name
        self.db = self.client[self.database_name]

    @overload
    def get_collection(self, name: str) -> Collection: ...

    @overload
    def get_collection(self, name: str, model: Type[T]) -> TypedCollection[T]: ...

    def get_collection(self, name: str, model: Optional[Type[T]] = None) -> Union[Collection, TypedCollection[T]]:
        """Returns the named collection, typed to ``model`` when one is given."""
        collection = self.db[name]
        if model is None:
            return collection
        return TypedCollection(collection, model)

    def ping(self) -> Dict[str, Any]:
        """Round-trips to the server; raises if the store is unreachable."""
        try:
            return self.client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise

    def close(self):
        self.client.close()
        logger.info("MongoDB connection closed.")
