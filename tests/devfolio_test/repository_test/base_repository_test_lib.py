import os
import tempfile
import unittest
from unittest.mock import MagicMock

from devfolio.common.base import Base
from devfolio.common.database import Database
from devfolio.repository.entity_store import EntityStore


class BaseRepositoryTestLib(unittest.IsolatedAsyncioTestCase):
    """
    A reusable base test class for Entity Store tests.

    Features:
      - Each test gets its own SQLite database file, created from Base.metadata.
      - Provides an EntityStore bound to that database and a mocked logger.
      - Provides a helper to insert entities directly, bypassing the store.
    """

    async def asyncSetUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        database_path = os.path.join(self.tmp_dir.name, "portfolio.db")
        self.db = Database(f"sqlite+aiosqlite:///{database_path}")

        async with self.db.get_engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        self.logger = MagicMock()
        self.store = EntityStore(database=self.db, logger=self.logger)

    async def asyncTearDown(self):
        await self.db.close()
        self.tmp_dir.cleanup()

    async def insert_entities(self, entities):
        """Insert ORM entities in their own committed session."""
        async with self.db.session() as session:
            session.add_all(entities)
            await session.commit()
