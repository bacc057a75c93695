from devfolio.common.database import Database
from devfolio.common.base import Base
import argparse
import os
from devfolio.common.environment_constants import DATABASE_URL
import asyncio
import pkgutil
import importlib
import devfolio.entity
from devfolio.common.logger import get_logger

logger = get_logger()


def load_all_entities():
    """
    Automatically scan and import all modules under devfolio.entity.

    Importing these modules ensures that all SQLAlchemy model classes
    and their associated Table objects are registered into Base.metadata.
    """
    package = devfolio.entity
    prefix = package.__name__ + "."

    for _, name, _ in pkgutil.iter_modules(package.__path__, prefix):
        logger.info("Auto importing model: %s", name)
        importlib.import_module(name)


async def init_database(database_url: str | None, reset: bool = False):
    """
    Create the seven portfolio tables.

    Args:
        database_url (str | None): SQLAlchemy async URL of the target database.
        reset (bool): Drop the portfolio tables first. Every row is lost.
    """
    load_all_entities()

    db = Database(database_url, echo=False)
    engine = db.get_engine()

    async with engine.begin() as conn:
        if reset:
            logger.info("Dropping portfolio tables...")
            await conn.run_sync(Base.metadata.drop_all)

        logger.info("Creating all tables from Base.metadata...")
        await conn.run_sync(Base.metadata.create_all)

    await db.close()
    logger.info("Database initialization complete.")


def main():
    parser = argparse.ArgumentParser(description="Create the portfolio tables.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="drop existing portfolio tables before creating them",
    )
    args = parser.parse_args()

    asyncio.run(init_database(os.getenv(DATABASE_URL), reset=args.reset))


if __name__ == "__main__":
    main()
