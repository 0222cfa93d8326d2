from fastapi import APIRouter
from api.v1.routes.translations import router as translations_router
from api.v1.routes.extract import router as extract_router
from api.v1.routes.generate import router as generate_router
from api.v1.routes.translate import router as translate_router


# Main v1 router (includes all endpoints)
router = APIRouter()
router.include_router(translations_router)
router.include_router(extract_router)
router.include_router(generate_router)
router.include_router(translate_router)
