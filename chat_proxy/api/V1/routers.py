from fastapi import APIRouter

from chat_proxy.api.V1.endpoint.Chat.Chat import router as chat_router
from chat_proxy.api.V1.endpoint.Models.Models import router as models_router

router = APIRouter()
router.include_router(chat_router)
router.include_router(models_router)
