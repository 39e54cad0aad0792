"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from app.presentation.api.v1.endpoints.health import router as health_router
from app.presentation.api.v1.endpoints.auth import router as auth_router
from app.presentation.api.v1.endpoints.users import router as users_router
from app.presentation.api.v1.endpoints.cards import router as cards_router
from app.presentation.api.v1.endpoints.public_cards import router as public_cards_router
from app.presentation.api.v1.endpoints.contacts import router as contacts_router
from app.presentation.api.v1.endpoints.segments import router as segments_router
from app.presentation.api.v1.endpoints.templates import router as templates_router
from app.presentation.api.v1.endpoints.audit_logs import router as audit_logs_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(users_router)
router.include_router(cards_router)
router.include_router(public_cards_router)
router.include_router(contacts_router)
router.include_router(segments_router)
router.include_router(templates_router)
router.include_router(audit_logs_router)
