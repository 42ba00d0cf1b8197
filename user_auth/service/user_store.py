from datetime import datetime, timezone
from typing import Optional
from bson import ObjectId
from pymongo.errors import DuplicateKeyError
from ..helper.exceptions import ConflictError
from ..helper.utils import normalize_email, setup_logging
from ..models.models import UserInDB

logger = setup_logging() # initialize logger

EMAIL_INDEX_NAME = "email_unique"


class UserStore:
    """
    User records in a MongoDB collection.

    Emails are normalized on every read and write; the unique index on
    ``email`` is what guarantees one record per address, so two concurrent
    registrations cannot both succeed.
    """

    def __init__(self, collection):
        self.collection = collection

    async def ensure_indexes(self):
        await self.collection.create_index("email", unique=True, name=EMAIL_INDEX_NAME)

    async def create(self, name: str, email: str, password_hash: str) -> UserInDB:
        document = {
            "name": name,
            "email": normalize_email(email),
            "passwordHash": password_hash,
            "createdAt": datetime.now(timezone.utc),
        }
        try:
            result = await self.collection.insert_one(document)
        except DuplicateKeyError:
            raise ConflictError()
        document["_id"] = result.inserted_id
        return UserInDB.from_document(document)

    async def find_by_email(self, email: str) -> Optional[UserInDB]:
        document = await self.collection.find_one({"email": normalize_email(email)})
        if document is None:
            return None
        return UserInDB.from_document(document)

    async def find_by_id(self, user_id: str) -> Optional[UserInDB]:
        if not ObjectId.is_valid(user_id):
            return None
        document = await self.collection.find_one({"_id": ObjectId(user_id)})
        if document is None:
            return None
        return UserInDB.from_document(document)

    async def delete_by_email(self, email: str) -> None:
        result = await self.collection.delete_one({"email": normalize_email(email)})
        if result.deleted_count:
            logger.info(f"Deleted user record for {normalize_email(email)}")
