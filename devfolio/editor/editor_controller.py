from http import HTTPStatus

from fastapi import APIRouter, Body, Query

from devfolio.common.api_endpoints import (
    DASHBOARD_ENTITY_ENDPOINT,
    DASHBOARD_ENTITY_FORM_ENDPOINT,
    DASHBOARD_PROFILE_ENDPOINT,
    DASHBOARD_SECTION_ENDPOINT,
)
from devfolio.common.constants import EDITABLE_SECTIONS, PortfolioTable
from devfolio.common.exceptions import EntityNotFoundError
from devfolio.common.fast_api_response_wrapper import api_response
from devfolio.dto.user_context_dto import UserContextDto
from devfolio.editor.entity_editor import EntityEditor, ProfileEditor
from devfolio.utils.permission_decorators import authenticate


class EditorController:
    """
    FastAPI controller for the dashboard editors.

    Each write runs through an editor bound to the session owner. A
    successful save re-fetches the whole portfolio and returns the refreshed
    dashboard; a failed save returns the editor with the submitted values so
    the form can be corrected and resubmitted.
    """

    def __init__(
        self, entity_command_service, portfolio_aggregator, portfolio_renderer, logger
    ):
        """
        Args:
            entity_command_service (EntityCommandService): Owner-bound write service.
            portfolio_aggregator (PortfolioAggregator): Used to re-fetch after writes.
            portfolio_renderer (PortfolioRenderer): Renders the refreshed dashboard.
            logger: The logger instance for logging messages.
        """
        self.router = APIRouter(tags=["dashboard"])
        self.entity_command_service = entity_command_service
        self.portfolio_aggregator = portfolio_aggregator
        self.portfolio_renderer = portfolio_renderer
        self.logger = logger

        self.router.add_api_route(
            DASHBOARD_PROFILE_ENDPOINT,
            endpoint=authenticate()(self.save_profile),
            methods=["PUT"],
            response_model=None,
        )
        self.router.add_api_route(
            DASHBOARD_ENTITY_FORM_ENDPOINT,
            endpoint=authenticate()(self.get_entity_form),
            methods=["GET"],
            response_model=None,
        )
        self.router.add_api_route(
            DASHBOARD_SECTION_ENDPOINT,
            endpoint=authenticate()(self.create_entity),
            methods=["POST"],
            response_model=None,
        )
        self.router.add_api_route(
            DASHBOARD_ENTITY_ENDPOINT,
            endpoint=authenticate()(self.update_entity),
            methods=["PUT"],
            response_model=None,
        )
        self.router.add_api_route(
            DASHBOARD_ENTITY_ENDPOINT,
            endpoint=authenticate()(self.delete_entity),
            methods=["DELETE"],
            response_model=None,
        )

    async def save_profile(self, current_user: UserContextDto, body: dict = Body(...)):
        """
        Upsert the owner's profile from the profile tab.
        """
        refreshed = {}
        editor = ProfileEditor(
            current_user.owner_id,
            self.entity_command_service,
            self.logger,
            on_saved=self._refresh_into(refreshed, current_user),
        )
        existing = await self.entity_command_service.load_profile(current_user.owner_id)
        editor.open(existing, default_email=current_user.primary_email)
        return await self._submit(editor, body, refreshed, "Profile saved successfully")

    async def get_entity_form(
        self, section: str, entity_id: str, current_user: UserContextDto
    ):
        """
        Load the edit-form values of one owned row.
        """
        table = self._editable_table(section)
        existing = await self.entity_command_service.load(
            table, current_user.owner_id, entity_id
        )
        editor = EntityEditor(
            table, current_user.owner_id, self.entity_command_service, self.logger
        )
        editor.open(existing)
        return api_response(
            message="Editor loaded successfully", data={"editor": editor.snapshot()}
        )

    async def create_entity(
        self, section: str, current_user: UserContextDto, body: dict = Body(...)
    ):
        """
        Create a row in `section` for the session owner.
        """
        table = self._editable_table(section)
        refreshed = {}
        editor = EntityEditor(
            table,
            current_user.owner_id,
            self.entity_command_service,
            self.logger,
            on_saved=self._refresh_into(refreshed, current_user),
        )
        editor.open()
        return await self._submit(
            editor,
            body,
            refreshed,
            f"{table.value} entry created successfully",
            success_status=HTTPStatus.CREATED,
        )

    async def update_entity(
        self,
        section: str,
        entity_id: str,
        current_user: UserContextDto,
        body: dict = Body(...),
    ):
        """
        Update an owned row; fields missing from the body keep their values.
        """
        table = self._editable_table(section)
        existing = await self.entity_command_service.load(
            table, current_user.owner_id, entity_id
        )
        refreshed = {}
        editor = EntityEditor(
            table,
            current_user.owner_id,
            self.entity_command_service,
            self.logger,
            on_saved=self._refresh_into(refreshed, current_user),
        )
        editor.open(existing)
        return await self._submit(
            editor, body, refreshed, f"{table.value} entry updated successfully"
        )

    async def delete_entity(
        self,
        section: str,
        entity_id: str,
        current_user: UserContextDto,
        confirm: bool = Query(False),
    ):
        """
        Delete an owned row. The request must carry `confirm=true`.
        """
        table = self._editable_table(section)
        await self.entity_command_service.delete(
            table, current_user.owner_id, entity_id, confirmed=confirm
        )
        dashboard = await self._render_dashboard(current_user)
        return api_response(
            message=f"{table.value} entry deleted successfully",
            data={"dashboard": dashboard},
        )

    async def _submit(
        self,
        editor: EntityEditor,
        body: dict,
        refreshed: dict,
        success_message: str,
        success_status: HTTPStatus = HTTPStatus.OK,
    ):
        if await editor.submit(body):
            return api_response(
                message=success_message,
                data={
                    "editor": editor.snapshot(),
                    "entityId": getattr(editor.saved, "id", None),
                    "dashboard": refreshed.get("dashboard"),
                },
                status_code=success_status,
            )

        return api_response(
            success=False,
            message=editor.error,
            data={"editor": editor.snapshot()},
            status_code=self._failure_status(editor.failure),
        )

    def _refresh_into(self, refreshed: dict, current_user: UserContextDto):
        async def refresh():
            refreshed["dashboard"] = await self._render_dashboard(current_user)

        return refresh

    async def _render_dashboard(self, current_user: UserContextDto) -> dict:
        state = await self.portfolio_aggregator.fetch_portfolio(current_user.owner_id)
        return self.portfolio_renderer.render_dashboard(
            state, user_email=current_user.primary_email
        )

    def _editable_table(self, section: str) -> PortfolioTable:
        try:
            table = PortfolioTable(section)
        except ValueError:
            raise EntityNotFoundError(f"Unknown dashboard section {section}")
        if table not in EDITABLE_SECTIONS:
            raise EntityNotFoundError(f"Unknown dashboard section {section}")
        return table

    @staticmethod
    def _failure_status(failure: Exception | None) -> HTTPStatus:
        if isinstance(failure, EntityNotFoundError):
            return HTTPStatus.NOT_FOUND
        if isinstance(failure, ValueError):
            return HTTPStatus.BAD_REQUEST
        return HTTPStatus.SERVICE_UNAVAILABLE
