"""Write-throughput benchmark routes"""

from fastapi import APIRouter, Depends, Request, status
import anyio

from api.dependencies import get_benchmark_service
from api.responses import ERROR_RESPONSES
from domain.schemas.benchmark_schemas import BulkInsertResponse
from services.benchmark_service import BenchmarkService

router = APIRouter(prefix="/api/benchmark", tags=["Benchmark"])


@router.post(
    "/bulk-insert",
    response_model=BulkInsertResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
async def bulk_insert(
    request: Request,
    service: BenchmarkService = Depends(get_benchmark_service),
):
    """
    Insert a batch of meal items, one statement per item.

    Body: {"meal_id": int, "items": [{"food_item_id", "portion_grams_min",
    "portion_grams_max", "sort_order"?}]}

    Items with a missing or non-numeric field are skipped and rows the
    database rejects are not counted; inserted_count may be 0. The batch is
    not atomic.

    Raises:
        400: "Missing request body", "Invalid JSON" or "Invalid request format"
    """
    body = await request.body()
    payload = service.parse_request(body)

    # The insert loop blocks on the query gate, keep it off the event loop
    inserted = await anyio.to_thread.run_sync(
        service.bulk_insert, payload.meal_id, payload.items
    )
    return BulkInsertResponse(inserted_count=inserted)
