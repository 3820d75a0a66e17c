from motor.motor_asyncio import AsyncIOMotorClient
from .settings import get_settings

settings = get_settings()

# connect to MongoDB with error handling
try:
    mongo_client = AsyncIOMotorClient(settings.MONGO_URI)
except Exception as e:
    raise ConnectionError("Failed to connect to MongoDB") from e


def get_user_collection():
    return mongo_client[settings.MONGO_DB].user
