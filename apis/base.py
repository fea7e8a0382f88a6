from fastapi import APIRouter
from apis.v1.route_playground import router as playground_router

api_router = APIRouter()
api_router.include_router(playground_router, prefix="/api/playground", tags=["playground"])
