"""
Base document model and MongoDB conversion helpers.

Provides createdAt/updatedAt timestamps and the `_id` <-> `id` mapping
shared by every stored record. Extend BaseDocument for
application-specific records.

Example:
    from common.database.documents import BaseDocument

    class Note(BaseDocument):
        text: str

    doc = Note(text="hi").to_document()
    await collection.insert_one(doc)
"""

from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, Optional, Type, TypeVar, Union

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T", bound="BaseDocument")


def utcnow() -> datetime:
    """Get current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


def to_object_id(value: Union[str, ObjectId]) -> Union[str, ObjectId]:
    """
    Convert a hex string to ObjectId when it is one.

    Ids issued outside MongoDB (e.g. by an external auth service) are kept
    as plain strings.
    """
    if isinstance(value, ObjectId):
        return value
    if ObjectId.is_valid(value):
        return ObjectId(value)
    return value


def to_document(data: Dict[str, Any], object_id_fields: tuple = ()) -> Dict[str, Any]:
    """
    Prepare a plain dict for insertion.

    Drops a None `id` and converts the named reference fields to ObjectId.
    """
    doc = dict(data)
    doc_id = doc.pop("id", None)
    if doc_id is not None:
        doc["_id"] = to_object_id(doc_id)
    for field in object_id_fields:
        if doc.get(field) is not None:
            doc[field] = to_object_id(doc[field])
    return doc


def from_document(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Turn a raw MongoDB document into a dict with string ids."""
    data = dict(doc)
    if "_id" in data:
        data["id"] = str(data.pop("_id"))
    for key, value in data.items():
        if isinstance(value, ObjectId):
            data[key] = str(value)
    return data


class BaseDocument(BaseModel):
    """
    Base document with common fields.

    All records extending this class will have:
    - id: MongoDB `_id` as a string (None until inserted)
    - createdAt: Timestamp when the record was created
    - updatedAt: Timestamp when the record was last modified
    """

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    # Reference fields stored as ObjectId
    OBJECT_ID_FIELDS: ClassVar[tuple] = ()

    id: Optional[str] = None
    createdAt: datetime = Field(default_factory=utcnow)
    updatedAt: datetime = Field(default_factory=utcnow)

    def to_document(self) -> Dict[str, Any]:
        """Dump to a dict ready for `insert_one`."""
        return to_document(self.model_dump(), self.OBJECT_ID_FIELDS)

    @classmethod
    def from_document(cls: Type[T], doc: Dict[str, Any]) -> T:
        """Build a record from a raw MongoDB document."""
        return cls.model_validate(from_document(doc))

    def to_response(self) -> Dict[str, Any]:
        """JSON-safe dict for API responses."""
        return self.model_dump(mode="json")
