import unittest

from sqlalchemy import text

from devfolio.common.database import Database


class TestDatabase(unittest.IsolatedAsyncioTestCase):
    async def test_missing_url_raises(self):
        db = Database(None)

        with self.assertRaises(ValueError) as ctx:
            db.get_engine()

        self.assertEqual(str(ctx.exception), "DATABASE_URL must be set")

    async def test_engine_is_created_lazily_and_reused(self):
        db = Database("sqlite+aiosqlite:///:memory:")

        self.assertIsNone(db._engine)
        engine = db.get_engine()
        self.assertIs(db.get_engine(), engine)

        await db.close()
        self.assertIsNone(db._engine)

    async def test_session_executes_statements(self):
        db = Database("sqlite+aiosqlite:///:memory:")

        async with db.session() as session:
            result = await session.execute(text("SELECT 1"))
            self.assertEqual(result.scalar(), 1)

        await db.close()

    async def test_session_rolls_back_on_error(self):
        db = Database("sqlite+aiosqlite:///:memory:")

        with self.assertRaises(RuntimeError):
            async with db.session():
                raise RuntimeError("boom")

        await db.close()

    async def test_close_without_engine(self):
        await Database(None).close()


if __name__ == "__main__":
    unittest.main()
