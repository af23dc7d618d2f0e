"""
Product Management API — Generic Document Controller
======================================================

What:  Create / list / get / update / delete for one MongoDB collection.
Why:   Category and product controllers share the exact same contract; only
       the collection, schemas and document builder differ.
How:   Each operation makes a single motor call, catches any failure once,
       logs it, and returns a `Result`. Nothing is raised to the caller.

Status mapping (applied later by the route boundary):
    ┌───────────┬─────────┬──────────────┬───────────┬──────────────────┐
    │ operation │ success │ invalid body │ not found │ store failure    │
    ├───────────┼─────────┼──────────────┼───────────┼──────────────────┤
    │ create    │ 201     │ 400          │ —         │ 400 (write)      │
    │ list      │ 200     │ —            │ —         │ 500 (read)       │
    │ get       │ 200     │ —            │ 404       │ 500 (read)       │
    │ update    │ 200     │ 400          │ 404       │ 400 (write)      │
    │ delete    │ 200     │ —            │ 404       │ 500 (read)       │
    └───────────┴─────────┴──────────────┴───────────┴──────────────────┘

A malformed ObjectId in the path is a store failure, never a crash.
"""

import logging
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pydantic import BaseModel
from pymongo import ReturnDocument

from product_api.exceptions import (
    NotFoundError,
    PersistenceError,
    ProductManagementError,
)
from product_api.results import Err, Ok, Result
from product_api.validation import validate

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=BaseModel)


def parse_object_id(value: str) -> ObjectId:
    """
    Convert a path identifier to an ObjectId.

    Raises:
        InvalidId with a cast message naming the bad value.
    """
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise InvalidId(f'Cast to ObjectId failed for value "{value}" at path "_id"')


class DocumentService(Generic[D]):
    """
    CRUD over a single collection, returning tagged results.

    Subclasses set the class attributes below; `build_document` is a
    staticmethod that adds generated fields (such as `_id`) on insert.
    """

    collection_name: str
    label: str
    document_model: Type[D]
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    build_document: Callable[[Dict[str, Any]], Dict[str, Any]]

    def __init__(self, database: AsyncIOMotorDatabase):
        self.database = database

    @property
    def collection(self) -> AsyncIOMotorCollection:
        return self.database[self.collection_name]

    # ── Helpers ───────────────────────────────────────────────────────────

    def _not_found(self, document_id: str) -> Err[ProductManagementError]:
        return Err(NotFoundError(resource=self.label, resource_id=document_id))

    def _store_failure(self, action: str, exc: Exception, write: bool, **context: Any) -> Err[ProductManagementError]:
        if write or isinstance(exc, InvalidId):
            # Reported to the client as 400 / cast failure; no traceback
            logger.warning("%s %s failed: %s", self.label, action, exc)
        else:
            logger.error("%s %s failed: %s", self.label, action, exc, exc_info=True)
        return Err(
            PersistenceError(
                message=str(exc),
                write=write,
                context={"operation": action, "error_type": type(exc).__name__, **context},
            )
        )

    @staticmethod
    def _payload(model: BaseModel, partial: bool) -> Dict[str, Any]:
        """Validated fields to store; `_id` can never come from the client."""
        data = model.model_dump(exclude_unset=partial, exclude_none=True)
        data.pop("_id", None)
        return data

    # ── Operations ────────────────────────────────────────────────────────

    async def create(self, payload: Any) -> Result[D, ProductManagementError]:
        validated = validate(self.create_schema, payload)
        if isinstance(validated, Err):
            return validated

        document = self.build_document(self._payload(validated.value, partial=False))
        try:
            await self.collection.insert_one(document)
            created = self.document_model.model_validate(document)
        except Exception as exc:
            return self._store_failure("create", exc, write=True)

        logger.info("%s created: %s", self.label, created.id)
        return Ok(created)

    async def list(self) -> Result[List[D], ProductManagementError]:
        try:
            documents = await self.collection.find().to_list(length=None)
            return Ok([self.document_model.model_validate(doc) for doc in documents])
        except Exception as exc:
            return self._store_failure("list", exc, write=False)

    async def get(self, document_id: str) -> Result[D, ProductManagementError]:
        try:
            document = await self.collection.find_one({"_id": parse_object_id(document_id)})
            if document is None:
                return self._not_found(document_id)
            return Ok(self.document_model.model_validate(document))
        except Exception as exc:
            return self._store_failure("get", exc, write=False, document_id=document_id)

    async def update(self, document_id: str, payload: Any) -> Result[D, ProductManagementError]:
        validated = validate(self.update_schema, payload)
        if isinstance(validated, Err):
            return validated

        changes = self._payload(validated.value, partial=True)
        try:
            query = {"_id": parse_object_id(document_id)}
            if changes:
                document: Optional[Dict[str, Any]] = await self.collection.find_one_and_update(
                    query,
                    {"$set": changes},
                    return_document=ReturnDocument.AFTER,
                )
            else:
                # Nothing to set; report the current state
                document = await self.collection.find_one(query)
            if document is None:
                return self._not_found(document_id)
            updated = self.document_model.model_validate(document)
        except Exception as exc:
            return self._store_failure("update", exc, write=True, document_id=document_id)

        logger.info("%s updated: %s (%s)", self.label, document_id, ", ".join(sorted(changes)) or "no changes")
        return Ok(updated)

    async def delete(self, document_id: str) -> Result[str, ProductManagementError]:
        try:
            document = await self.collection.find_one_and_delete({"_id": parse_object_id(document_id)})
        except Exception as exc:
            return self._store_failure("delete", exc, write=False, document_id=document_id)

        if document is None:
            return self._not_found(document_id)
        logger.info("%s deleted: %s", self.label, document_id)
        return Ok(f"{self.label} deleted successfully")
