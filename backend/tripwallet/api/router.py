"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from tripwallet.api.routes import (
    auth, data, finances, expenses, incomes, places, summary, planner
)

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(data.router)
api_router.include_router(finances.router)
api_router.include_router(expenses.router)
api_router.include_router(incomes.router)
api_router.include_router(places.router)
api_router.include_router(summary.router)
api_router.include_router(planner.router)
