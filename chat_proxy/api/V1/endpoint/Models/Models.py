from fastapi import APIRouter

from chat_proxy.core.ModelCatalog import MODEL_CATALOG
from chat_proxy.schemas.chat import ModelCatalogResponse

router = APIRouter(prefix="/models", tags=["Models"])


@router.get("", response_model=ModelCatalogResponse)
def list_models():
    """엔드포인트별 사용 가능한 모델 목록 (참고용)"""
    return ModelCatalogResponse(endpoints=MODEL_CATALOG)
