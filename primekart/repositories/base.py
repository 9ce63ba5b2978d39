from __future__ import annotations

"""Base repository pattern for MongoDB operations"""

from abc import ABC
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import BaseModel
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

T = TypeVar("T", bound=BaseModel)


class BaseRepository(ABC, Generic[T]):
    """Base repository providing common CRUD operations for MongoDB collections"""

    def __init__(self, db: Database, collection_name: str, model_class: Type[T]):
        self.db = db
        self.collection: Collection = db[collection_name]
        self.model_class = model_class

    def find_by_id(self, entity_id: str | ObjectId) -> Optional[T]:
        """Find a document by its ID. Malformed ids match nothing."""
        identifier = self._to_object_id(entity_id)
        if identifier is None:
            return None
        doc = self.collection.find_one({"_id": identifier})
        return self._to_model(doc)

    def find_one(self, query: Dict[str, Any]) -> Optional[T]:
        """Find a single document matching the query"""
        doc = self.collection.find_one(query)
        return self._to_model(doc)

    def find_many(
        self,
        query: Dict[str, Any],
        sort: Optional[List[tuple]] = None,
        limit: int = 0,
    ) -> List[T]:
        """Find multiple documents matching the query, in store order unless sorted"""
        cursor = self.collection.find(query)
        if sort:
            cursor = cursor.sort(sort)
        if limit:
            cursor = cursor.limit(limit)
        return [self._to_model(doc) for doc in cursor if doc]

    def insert_one(self, document: Union[T, Dict[str, Any]]) -> T:
        """Insert a single document"""
        if isinstance(document, BaseModel):
            doc_dict = document.model_dump(by_alias=True, exclude_none=True)
        else:
            doc_dict = dict(document)

        result = self.collection.insert_one(doc_dict)
        doc_dict["_id"] = result.inserted_id
        return self._to_model(doc_dict)

    def update_one(self, entity_id: str | ObjectId, updates: Dict[str, Any]) -> Optional[T]:
        """Set fields on a document by ID and return the updated document.

        Returns None when the id is malformed or matches nothing; the update
        is a single atomic find-and-modify.
        """
        identifier = self._to_object_id(entity_id)
        if identifier is None:
            return None
        return self.find_one_and_update({"_id": identifier}, {"$set": updates})

    def delete_one(self, entity_id: str | ObjectId) -> bool:
        """Delete a document by ID"""
        identifier = self._to_object_id(entity_id)
        if identifier is None:
            return False
        result = self.collection.delete_one({"_id": identifier})
        return result.deleted_count > 0

    def count(self, query: Dict[str, Any] = None) -> int:
        """Count documents matching the query"""
        if query is None:
            query = {}
        return self.collection.count_documents(query)

    def find_one_and_update(
        self,
        query: Dict[str, Any],
        update: Dict[str, Any],
    ) -> Optional[T]:
        """
        Atomically find and update a document.

        Args:
            query: Filter to find the document
            update: Update operations (e.g., {"$set": {...}})

        Returns:
            The updated document, or None when nothing matched
        """
        doc = self.collection.find_one_and_update(
            query,
            update,
            return_document=ReturnDocument.AFTER,
        )
        return self._to_model(doc)

    def _to_model(self, doc: Optional[Dict[str, Any]]) -> Optional[T]:
        """Convert a dictionary to a model instance"""
        if not doc:
            return None
        return self.model_class.model_validate(doc)

    @staticmethod
    def _to_object_id(value: str | ObjectId | None) -> ObjectId | None:
        """Convert a string ID to ObjectId"""
        if value is None:
            return None
        if isinstance(value, ObjectId):
            return value
        if isinstance(value, str):
            try:
                return ObjectId(value)
            except (InvalidId, TypeError):
                return None
        return None

    @staticmethod
    def is_valid_id(value: str) -> bool:
        return ObjectId.is_valid(value)
