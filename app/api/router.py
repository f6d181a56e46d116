from fastapi import APIRouter
from api.routes.system import router as system_router
from api.routes.locale import router as locale_router
from api.routes.pages import router as pages_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(locale_router)
# Pages last: "/{lang}/{page:path}" would shadow anything registered after it.
api_router.include_router(pages_router)
