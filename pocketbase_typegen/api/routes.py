from fastapi import APIRouter
from pocketbase_typegen.api.routes_health import router as health_router
from pocketbase_typegen.api.routes_typegen import router as typegen_router

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(typegen_router, tags=["typegen"])
