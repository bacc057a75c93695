from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError

from devfolio.common.constants import PortfolioTable
from devfolio.common.exceptions import EntityStoreError
from devfolio.entity.column_types import new_entity_id, utc_now
from devfolio.entity.profile_entity import ProfileEntity
from devfolio.repository.table_registry import OWNER_COLUMNS, entity_for

# (column name, descending)
OrderBy = list[tuple[str, bool]]


class EntityStore:
    """
    Minimal four-operation contract over the seven portfolio tables.

    Every call opens its own session from the shared Database handle, so reads
    issued concurrently by the aggregator never share a session. Writes commit
    in their own transaction. Database failures are logged and re-raised as
    EntityStoreError.
    """

    def __init__(self, database, logger):
        """
        Args:
            database (Database): Shared database handle providing `session()`.
            logger: The logger instance for logging messages.
        """
        self.database = database
        self.logger = logger

    async def select(
        self,
        table: PortfolioTable,
        filters: dict | None = None,
        order: OrderBy | None = None,
        limit: int | None = None,
    ) -> list:
        """
        Read rows matching equality filters, in the requested order.

        Descending columns place NULLs last so undated rows sink to the bottom
        on every backend.

        Args:
            table (PortfolioTable): Table to read.
            filters (dict | None): Column name -> required value.
            order (OrderBy | None): Sequence of (column, descending) pairs.
            limit (int | None): Optional row limit.

        Returns:
            list: Matching entities, possibly empty.
        """
        entity_cls = entity_for(table)
        statement = select(entity_cls)
        for column, value in (filters or {}).items():
            statement = statement.where(getattr(entity_cls, column) == value)
        for column, descending in order or []:
            attribute = getattr(entity_cls, column)
            statement = statement.order_by(
                attribute.desc().nulls_last() if descending else attribute.asc()
            )
        if limit is not None:
            statement = statement.limit(limit)

        try:
            async with self.database.session() as session:
                result = await session.execute(statement)
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            self._raise_store_error("select", table, e)

    async def first(self, table: PortfolioTable, order: OrderBy | None = None):
        """Return the first row of a table, or None when it is empty."""
        rows = await self.select(table, order=order, limit=1)
        return rows[0] if rows else None

    async def insert(self, table: PortfolioTable, row: dict):
        """
        Insert a row, generating its id and creation timestamp.

        Returns:
            The persisted entity.
        """
        entity_cls = entity_for(table)
        entity = entity_cls(id=new_entity_id(), created_at=utc_now(), **row)
        try:
            async with self.database.session() as session:
                session.add(entity)
                await session.commit()
        except SQLAlchemyError as e:
            self._raise_store_error("insert", table, e)

        self.logger.info(
            "[EntityStore] inserted row %s into %s", entity.id, table.value
        )
        return entity

    async def update(
        self, table: PortfolioTable, entity_id: str, row: dict, owner_id: str
    ):
        """
        Update a row by id, restricted to rows owned by `owner_id`.

        Returns:
            The updated entity, or None when no owned row matches.
        """
        entity_cls = entity_for(table)
        owner_column = getattr(entity_cls, OWNER_COLUMNS[table])
        statement = (
            update(entity_cls)
            .where(entity_cls.id == entity_id, owner_column == owner_id)
            .values(**row)
            .execution_options(synchronize_session=False)
        )
        try:
            async with self.database.session() as session:
                result = await session.execute(statement)
                if result.rowcount == 0:
                    await session.rollback()
                    return None
                await session.commit()
                refreshed = await session.execute(
                    select(entity_cls).where(entity_cls.id == entity_id)
                )
                return refreshed.scalars().one()
        except SQLAlchemyError as e:
            self._raise_store_error("update", table, e)

    async def delete(self, table: PortfolioTable, entity_id: str, owner_id: str) -> bool:
        """
        Delete a row by id, restricted to rows owned by `owner_id`.

        Returns:
            bool: True if a row was removed.
        """
        entity_cls = entity_for(table)
        owner_column = getattr(entity_cls, OWNER_COLUMNS[table])
        statement = (
            delete(entity_cls)
            .where(entity_cls.id == entity_id, owner_column == owner_id)
            .execution_options(synchronize_session=False)
        )
        try:
            async with self.database.session() as session:
                result = await session.execute(statement)
                await session.commit()
        except SQLAlchemyError as e:
            self._raise_store_error("delete", table, e)

        removed = result.rowcount > 0
        self.logger.info(
            "[EntityStore] delete %s from %s removed=%s",
            entity_id,
            table.value,
            removed,
        )
        return removed

    async def upsert_profile(self, owner_id: str, row: dict) -> ProfileEntity:
        """
        Insert the owner's profile on first save, update it afterwards.

        The profile id is always the owner id; `updated_at` is refreshed on
        every save.
        """
        try:
            async with self.database.session() as session:
                entity = await session.get(ProfileEntity, owner_id)
                now = utc_now()
                if entity is None:
                    entity = ProfileEntity(id=owner_id, created_at=now, **row)
                    session.add(entity)
                else:
                    for column, value in row.items():
                        setattr(entity, column, value)
                entity.updated_at = now
                await session.commit()
        except SQLAlchemyError as e:
            self._raise_store_error("upsert", PortfolioTable.PROFILES, e)

        self.logger.info("[EntityStore] upserted profile %s", owner_id)
        return entity

    def _raise_store_error(self, operation: str, table: PortfolioTable, error):
        self.logger.error(
            "[EntityStore] %s on %s failed: %s", operation, table.value, str(error)
        )
        raise EntityStoreError(f"Failed to {operation} {table.value}") from error
