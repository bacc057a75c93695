import asyncio
from unittest.mock import MagicMock

from devfolio.common.constants import PortfolioStatus, PortfolioTable
from devfolio.common.exceptions import EntityNotFoundError
from devfolio.dto.editor_request_dto import (
    ProfileRequestDto,
    ProjectRequestDto,
    SkillRequestDto,
)
from devfolio.editor.entity_command_service import EntityCommandService
from devfolio.portfolio.portfolio_aggregator import PortfolioAggregator
from devfolio.portfolio.portfolio_mapper import PortfolioMapper
from tests.devfolio_test.repository_test.base_repository_test_lib import (
    BaseRepositoryTestLib,
)

OWNER_A = "owner-a"
OWNER_B = "owner-b"


class TestPortfolioStoreIntegration(BaseRepositoryTestLib):
    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.aggregator = PortfolioAggregator(
            entity_store=self.store,
            portfolio_mapper=PortfolioMapper(),
            logger=MagicMock(),
        )
        self.command_service = EntityCommandService(
            entity_store=self.store, logger=MagicMock()
        )

        await self.command_service.save_profile(
            OWNER_A, ProfileRequestDto(full_name="Ada")
        )
        await self.command_service.save_profile(
            OWNER_B, ProfileRequestDto(full_name="Bob")
        )

    async def test_owner_with_no_rows_gets_empty_sections(self):
        state = await self.aggregator.fetch_portfolio(OWNER_A)

        self.assertEqual(state.status, PortfolioStatus.READY)
        self.assertEqual(state.view_model.profile.full_name, "Ada")
        for section in (
            state.view_model.education,
            state.view_model.experiences,
            state.view_model.projects,
            state.view_model.skills,
            state.view_model.certifications,
            state.view_model.interests,
        ):
            self.assertEqual(section, [])

    async def test_writes_stay_with_their_owner(self):
        await self.command_service.save(
            PortfolioTable.PROJECTS,
            OWNER_A,
            ProjectRequestDto(title="Ada's project", technologies="Flutter, Dart"),
        )
        await self.command_service.save(
            PortfolioTable.SKILLS,
            OWNER_B,
            SkillRequestDto(category="Other", name="Git", level=2),
        )

        state_a = await self.aggregator.fetch_portfolio(OWNER_A)
        state_b = await self.aggregator.fetch_portfolio(OWNER_B)

        self.assertEqual([p.title for p in state_a.view_model.projects], ["Ada's project"])
        self.assertEqual(state_a.view_model.projects[0].technologies, ["Flutter", "Dart"])
        self.assertEqual(state_a.view_model.skills, [])
        self.assertEqual(state_b.view_model.projects, [])
        self.assertEqual([s.name for s in state_b.view_model.skills], ["Git"])

    async def test_concurrent_write_is_invisible_to_other_owner(self):
        skill_b = await self.command_service.save(
            PortfolioTable.SKILLS,
            OWNER_B,
            SkillRequestDto(category="Other", name="Git", level=2),
        )

        created_a, overwrite_a, state_b = await asyncio.gather(
            self.command_service.save(
                PortfolioTable.PROJECTS,
                OWNER_A,
                ProjectRequestDto(title="Ada's project"),
            ),
            self.command_service.save(
                PortfolioTable.SKILLS,
                OWNER_A,
                SkillRequestDto(category="Cloud", name="AWS", level=5),
                entity_id=skill_b.id,
            ),
            self.aggregator.fetch_portfolio(OWNER_B),
            return_exceptions=True,
        )

        self.assertEqual(created_a.user_id, OWNER_A)
        self.assertIsInstance(overwrite_a, EntityNotFoundError)
        self.assertEqual(state_b.failed_sections, [])
        self.assertEqual(state_b.view_model.projects, [])
        self.assertEqual(
            [(s.id, s.name, s.level) for s in state_b.view_model.skills],
            [(skill_b.id, "Git", 2)],
        )

        state_b_after = await self.aggregator.fetch_portfolio(OWNER_B)
        state_a_after = await self.aggregator.fetch_portfolio(OWNER_A)
        self.assertEqual(state_b_after.view_model.projects, [])
        self.assertEqual(
            [(s.name, s.category, s.level) for s in state_b_after.view_model.skills],
            [("Git", "Other", 2)],
        )
        self.assertEqual(
            [p.title for p in state_a_after.view_model.projects], ["Ada's project"]
        )
        self.assertEqual(state_a_after.view_model.skills, [])

    async def test_deleted_row_is_absent_from_next_fetch(self):
        saved = await self.command_service.save(
            PortfolioTable.PROJECTS, OWNER_A, ProjectRequestDto(title="Short-lived")
        )

        await self.command_service.delete(
            PortfolioTable.PROJECTS, OWNER_A, saved.id, confirmed=True
        )
        state = await self.aggregator.fetch_portfolio(OWNER_A)

        self.assertEqual(state.view_model.projects, [])

    async def test_public_portfolio_uses_first_profile(self):
        state = await self.aggregator.fetch_public_portfolio()

        self.assertEqual(state.view_model.owner_id, OWNER_A)
        self.assertEqual(state.view_model.profile.full_name, "Ada")
