from fastapi import APIRouter

from hospital.api.routes import district, utils

api_router = APIRouter()
api_router.include_router(utils.router)
api_router.include_router(district.router)
