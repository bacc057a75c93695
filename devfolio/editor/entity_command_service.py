from devfolio.common.constants import EDITABLE_SECTIONS, PortfolioTable
from devfolio.common.exceptions import DeleteNotConfirmedError, EntityNotFoundError
from devfolio.dto.base_request_dto import BaseRequestDto


class EntityCommandService:
    """
    Write side of the dashboard.

    Every write is bound to the owner id taken from the authenticated session;
    row payloads never carry an owner of their own.
    """

    def __init__(self, entity_store, logger):
        """
        Args:
            entity_store (EntityStore): Store used for reads and writes.
            logger: The logger instance for logging messages.
        """
        self.entity_store = entity_store
        self.logger = logger

    async def load(self, table: PortfolioTable, owner_id: str, entity_id: str):
        """
        Load one owned row for editing.

        Raises:
            EntityNotFoundError: If the row does not exist for this owner.
        """
        self._require_editable(table)
        rows = await self.entity_store.select(
            table, filters={"id": entity_id, "user_id": owner_id}, limit=1
        )
        if not rows:
            raise EntityNotFoundError(f"No {table.value} entry with id {entity_id}")
        return rows[0]

    async def load_profile(self, owner_id: str):
        """Return the owner's profile row, or None before the first save."""
        rows = await self.entity_store.select(
            PortfolioTable.PROFILES, filters={"id": owner_id}, limit=1
        )
        return rows[0] if rows else None

    async def save(
        self,
        table: PortfolioTable,
        owner_id: str,
        request: BaseRequestDto,
        entity_id: str | None = None,
    ):
        """
        Insert a new row, or update `entity_id` when given.

        Raises:
            EntityNotFoundError: If `entity_id` is not a row of this owner.
            EntityStoreError: If the write fails.
        """
        self._require_editable(table)
        row = request.to_row()

        if entity_id is None:
            self.logger.info(
                "[EntityCommandService] creating %s row for owner %s",
                table.value,
                owner_id,
            )
            return await self.entity_store.insert(table, {**row, "user_id": owner_id})

        self.logger.info(
            "[EntityCommandService] updating %s row %s for owner %s",
            table.value,
            entity_id,
            owner_id,
        )
        updated = await self.entity_store.update(table, entity_id, row, owner_id)
        if updated is None:
            raise EntityNotFoundError(f"No {table.value} entry with id {entity_id}")
        return updated

    async def save_profile(self, owner_id: str, request: BaseRequestDto):
        """Upsert the owner's profile; its id is always the owner id."""
        self.logger.info(
            "[EntityCommandService] saving profile for owner %s", owner_id
        )
        return await self.entity_store.upsert_profile(owner_id, request.to_row())

    async def delete(
        self,
        table: PortfolioTable,
        owner_id: str,
        entity_id: str,
        confirmed: bool = False,
    ) -> None:
        """
        Delete an owned row. Deletion is immediate and cannot be undone.

        Raises:
            DeleteNotConfirmedError: If `confirmed` is not set; nothing is sent.
            EntityNotFoundError: If the row does not exist for this owner.
        """
        self._require_editable(table)
        if not confirmed:
            raise DeleteNotConfirmedError(
                "Deletion must be confirmed with confirm=true"
            )

        removed = await self.entity_store.delete(table, entity_id, owner_id)
        if not removed:
            raise EntityNotFoundError(f"No {table.value} entry with id {entity_id}")
        self.logger.info(
            "[EntityCommandService] deleted %s row %s for owner %s",
            table.value,
            entity_id,
            owner_id,
        )

    def _require_editable(self, table: PortfolioTable):
        if table not in EDITABLE_SECTIONS:
            raise ValueError(f"{table.value} is not an editable section")
