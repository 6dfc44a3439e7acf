from fastapi import APIRouter

from app.api.endpoints import vehicles

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(vehicles.router)
