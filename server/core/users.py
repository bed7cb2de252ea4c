# server/core/users.py

from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from server.core.errors import DuplicateUser, StoreUnavailable
from server.logger import get_logger
from server.models.user import UserRecord


logger = get_logger("users")


class UserStore:
    """
    Exact-match lookup and insert over the credential collection.
    Driver failures surface as StoreUnavailable; a unique-index violation as DuplicateUser.
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    def find_by_email(self, email: str) -> UserRecord | None:
        try:
            doc = self.collection.find_one({"email": email})
        except PyMongoError:
            logger.exception("User lookup failed")
            raise StoreUnavailable()
        if doc is None:
            return None
        return UserRecord.from_document(doc)

    def insert(self, record: UserRecord) -> str:
        try:
            result = self.collection.insert_one(record.to_document())
        except DuplicateKeyError:
            raise DuplicateUser()
        except PyMongoError:
            logger.exception("User insert failed")
            raise StoreUnavailable()
        return str(result.inserted_id)
