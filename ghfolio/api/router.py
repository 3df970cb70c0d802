from fastapi import APIRouter

from ghfolio.api.v1 import portfolio

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(portfolio.router)
