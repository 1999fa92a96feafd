"""Diet template routes"""

from fastapi import APIRouter, Depends

from api.dependencies import get_template_service
from api.responses import ERROR_RESPONSES
from domain.schemas.template_schemas import TemplateFullResponse
from services.template_service import TemplateService

router = APIRouter(prefix="/api/templates", tags=["Diet Templates"])


@router.get(
    "/{template_id}/full",
    response_model=TemplateFullResponse,
    responses=ERROR_RESPONSES,
)
def get_template_full(
    template_id: int,
    service: TemplateService = Depends(get_template_service),
):
    """
    Get a template with all of its days, meals and meal items.

    Days are ordered by day_number, meals by meal_order and items by their
    sort order. At most 100 days per template and 50 meals per day are
    returned. A day or meal whose children could not be loaded is returned
    with an empty list instead of failing the request.

    Raises:
        404: template does not exist
        500: template or its days could not be read
    """
    template = service.get_template_full(template_id)
    return TemplateFullResponse(template=template)
