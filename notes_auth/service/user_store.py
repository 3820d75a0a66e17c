from typing import Optional
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError
from ..helper.exceptions import UserAlreadyExists


class UserStore:
    """User documents in the `user` collection, keyed by unique email."""

    def __init__(self, collection):
        self.collection = collection

    async def ensure_indexes(self):
        await self.collection.create_index([("email", ASCENDING)], unique=True, name="email_unique")

    async def find_by_email(self, email: str) -> Optional[dict]:
        return await self.collection.find_one({"email": email})

    async def create(self, email: str, password_hash: str) -> dict:
        document = {"email": email, "password": password_hash}
        try:
            result = await self.collection.insert_one(document)
        except DuplicateKeyError as e:
            # lost a race against a concurrent signup for the same email
            raise UserAlreadyExists() from e
        document["_id"] = result.inserted_id
        return document
