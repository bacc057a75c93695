from fastapi import APIRouter

from devfolio.common.api_endpoints import (
    DASHBOARD_ENDPOINT,
    OWNER_PORTFOLIO_ENDPOINT,
    PUBLIC_PORTFOLIO_ENDPOINT,
)
from devfolio.common.constants import PortfolioStatus
from devfolio.common.fast_api_response_wrapper import api_response
from devfolio.dto.user_context_dto import UserContextDto
from devfolio.utils.permission_decorators import authenticate


class PortfolioController:
    """
    FastAPI controller exposing the two read views of the portfolio.

    The public page is read-only and needs no authentication; the dashboard
    is always rendered for the session owner.
    """

    def __init__(self, portfolio_aggregator, portfolio_renderer):
        """
        Args:
            portfolio_aggregator (PortfolioAggregator): Fetches the view model.
            portfolio_renderer (PortfolioRenderer): Renders public and dashboard pages.
        """
        self.router = APIRouter(tags=["portfolio"])
        self.portfolio_aggregator = portfolio_aggregator
        self.portfolio_renderer = portfolio_renderer

        self.router.add_api_route(
            PUBLIC_PORTFOLIO_ENDPOINT,
            self.get_public_portfolio,
            methods=["GET"],
            response_model=None,
        )
        self.router.add_api_route(
            OWNER_PORTFOLIO_ENDPOINT,
            self.get_owner_portfolio,
            methods=["GET"],
            response_model=None,
        )
        self.router.add_api_route(
            DASHBOARD_ENDPOINT,
            endpoint=authenticate()(self.get_dashboard),
            methods=["GET"],
            response_model=None,
        )

    async def get_public_portfolio(self):
        """
        Render the public portfolio of the first existing profile.
        """
        state = await self.portfolio_aggregator.fetch_public_portfolio()
        return self._public_response(state)

    async def get_owner_portfolio(self, owner_id: str):
        """
        Render the public portfolio of a route-resolved owner.
        """
        state = await self.portfolio_aggregator.fetch_public_portfolio(owner_id)
        return self._public_response(state)

    async def get_dashboard(self, current_user: UserContextDto):
        """
        Render the dashboard of the currently authenticated owner.
        """
        state = await self.portfolio_aggregator.fetch_portfolio(current_user.owner_id)
        page = self.portfolio_renderer.render_dashboard(
            state, user_email=current_user.primary_email
        )
        return api_response(
            message="Dashboard retrieved successfully", data={"dashboard": page}
        )

    def _public_response(self, state):
        page = self.portfolio_renderer.render_public(state)
        message = (
            "No portfolio found"
            if state.status == PortfolioStatus.NO_PORTFOLIO
            else "Portfolio retrieved successfully"
        )
        return api_response(message=message, data={"portfolio": page})
