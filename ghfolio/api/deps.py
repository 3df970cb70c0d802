"""API dependencies."""

from typing import Annotated

from fastapi import Depends, Request

from ghfolio.services.portfolio.session import PortfolioSession


def get_portfolio_session(request: Request) -> PortfolioSession:
    """The process-wide session created in the app lifespan."""
    session: PortfolioSession = request.app.state.portfolio_session
    return session


Session = Annotated[PortfolioSession, Depends(get_portfolio_session)]
