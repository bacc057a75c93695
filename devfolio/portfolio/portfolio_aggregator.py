import asyncio

from devfolio.common.constants import PortfolioStatus, PortfolioTable
from devfolio.dto.portfolio_view_model_dto import (
    PortfolioStateDto,
    PortfolioViewModelDto,
)

# Per-table ordering as (column, descending) pairs.
SECTION_ORDERING = {
    PortfolioTable.EDUCATION: [("start_date", True)],
    PortfolioTable.EXPERIENCES: [("start_date", True)],
    PortfolioTable.PROJECTS: [("created_at", True)],
    PortfolioTable.SKILLS: [("category", False), ("created_at", False)],
    PortfolioTable.CERTIFICATIONS: [("issue_date", True)],
    PortfolioTable.INTERESTS: [("created_at", True)],
}

PUBLIC_PROFILE_ORDERING = [("created_at", False)]


class PortfolioAggregator:
    """
    Assembles the portfolio view model for one owner.

    The profile and the six related tables are read concurrently and joined
    by owner. The aggregator waits for every read to settle before returning,
    and a failed read degrades to an empty section instead of failing the
    whole portfolio. It keeps no state between calls, so it is safe to call
    again after every edit as a full re-synchronization.
    """

    def __init__(self, entity_store, portfolio_mapper, logger):
        """
        Args:
            entity_store (EntityStore): Store offering `select` and `first`.
            portfolio_mapper (PortfolioMapper): Entity -> typed record mapper.
            logger: The logger instance for logging messages.
        """
        self.entity_store = entity_store
        self.portfolio_mapper = portfolio_mapper
        self.logger = logger
        self._section_mappers = {
            PortfolioTable.EDUCATION: portfolio_mapper.map_education,
            PortfolioTable.EXPERIENCES: portfolio_mapper.map_experience,
            PortfolioTable.PROJECTS: portfolio_mapper.map_project,
            PortfolioTable.SKILLS: portfolio_mapper.map_skill,
            PortfolioTable.CERTIFICATIONS: portfolio_mapper.map_certification,
            PortfolioTable.INTERESTS: portfolio_mapper.map_interest,
        }

    async def fetch_portfolio(self, owner_id: str | None) -> PortfolioStateDto:
        """
        Fetch the complete portfolio of `owner_id`.

        An absent owner yields the explicit "no portfolio" state. An owner
        without a profile row still gets their sections, with `profile=None`.

        Args:
            owner_id (str | None): Owner whose rows are read.

        Returns:
            PortfolioStateDto: status, view model and the names of failed sections.
        """
        if not owner_id:
            return PortfolioStateDto(status=PortfolioStatus.NO_PORTFOLIO)

        return await self._collect(owner_id, self._read_profile(owner_id))

    async def _collect(self, owner_id: str, profile_read) -> PortfolioStateDto:
        tables = [PortfolioTable.PROFILES, *SECTION_ORDERING.keys()]
        reads = [profile_read] + [
            self._read_section(table, owner_id) for table in SECTION_ORDERING
        ]
        results = await asyncio.gather(*reads, return_exceptions=True)

        sections = {}
        failed_sections = []
        for table, result in zip(tables, results):
            # A cancelled read comes back as a BaseException, not an Exception.
            if isinstance(result, BaseException):
                self.logger.error(
                    "[PortfolioAggregator] read of %s for owner %s failed: %s",
                    table.value,
                    owner_id,
                    str(result),
                )
                failed_sections.append(table.value)
                result = None if table == PortfolioTable.PROFILES else []
            sections[table] = result

        view_model = PortfolioViewModelDto(
            owner_id=owner_id,
            profile=sections[PortfolioTable.PROFILES],
            education=sections[PortfolioTable.EDUCATION] or [],
            experiences=sections[PortfolioTable.EXPERIENCES] or [],
            projects=sections[PortfolioTable.PROJECTS] or [],
            skills=sections[PortfolioTable.SKILLS] or [],
            certifications=sections[PortfolioTable.CERTIFICATIONS] or [],
            interests=sections[PortfolioTable.INTERESTS] or [],
        )
        return PortfolioStateDto(
            status=PortfolioStatus.READY,
            view_model=view_model,
            failed_sections=failed_sections,
        )

    async def fetch_public_portfolio(
        self, owner_id: str | None = None
    ) -> PortfolioStateDto:
        """
        Fetch the portfolio shown on the public page.

        With an explicit `owner_id` (route-resolved owner) that owner's profile
        must exist. Without one, the first existing profile is used as a
        stand-in for slug routing. Either way, no profile means "no portfolio".
        """
        if owner_id:
            state = await self.fetch_portfolio(owner_id)
            if state.view_model.profile is None:
                self.logger.info(
                    "[PortfolioAggregator] no public profile for owner %s", owner_id
                )
                return PortfolioStateDto(
                    status=PortfolioStatus.NO_PORTFOLIO,
                    failed_sections=state.failed_sections,
                )
            return state

        try:
            profile_entity = await self.entity_store.first(
                PortfolioTable.PROFILES, order=PUBLIC_PROFILE_ORDERING
            )
        except Exception as e:
            self.logger.error(
                "[PortfolioAggregator] public profile lookup failed: %s", str(e)
            )
            return PortfolioStateDto(
                status=PortfolioStatus.NO_PORTFOLIO,
                failed_sections=[PortfolioTable.PROFILES.value],
            )

        if profile_entity is None:
            self.logger.info("[PortfolioAggregator] no public profile found")
            return PortfolioStateDto(status=PortfolioStatus.NO_PORTFOLIO)

        return await self._collect(
            profile_entity.id, self._known_profile(profile_entity)
        )

    async def _known_profile(self, profile_entity):
        return self.portfolio_mapper.map_profile(profile_entity)

    async def _read_profile(self, owner_id: str):
        rows = await self.entity_store.select(
            PortfolioTable.PROFILES, filters={"id": owner_id}, limit=1
        )
        return self.portfolio_mapper.map_profile(rows[0] if rows else None)

    async def _read_section(self, table: PortfolioTable, owner_id: str) -> list:
        rows = await self.entity_store.select(
            table, filters={"user_id": owner_id}, order=SECTION_ORDERING[table]
        )
        mapper = self._section_mappers[table]
        # Rows of another owner never reach the view model.
        return [mapper(row) for row in rows or [] if row.user_id == owner_id]
