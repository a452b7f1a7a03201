from app.db.storage import MemStorage
from app.db.seed import seed_storage
import logging

logger = logging.getLogger("storage")

# Process-wide store; swap MemStorage for a database-backed IStorage here
storage = MemStorage()
seed_storage(storage)
logger.info("In-memory storage initialised")
