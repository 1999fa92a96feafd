"""
API dependencies for dependency injection
"""

from fastapi import Depends, Request

from adapters.sql_adapter import QueryGate
from app.context import AppContext
from app.exceptions import NotConnectedError
from services import BenchmarkService, FoodService, TemplateService


def get_context(request: Request) -> AppContext:
    """
    Process-scoped context created by the application lifespan.

    Usage:
        @router.get("/example")
        def example(context: AppContext = Depends(get_context)):
            ...
    """
    context = getattr(request.app.state, "context", None)
    if context is None:
        raise NotConnectedError("Application context not initialized")
    return context


def get_gate(context: AppContext = Depends(get_context)) -> QueryGate:
    return context.gate


def get_template_service(context: AppContext = Depends(get_context)) -> TemplateService:
    return TemplateService(
        context.gate,
        max_days=context.settings.max_template_days,
        max_meals=context.settings.max_day_meals,
    )


def get_benchmark_service(gate: QueryGate = Depends(get_gate)) -> BenchmarkService:
    return BenchmarkService(gate)


def get_food_service(context: AppContext = Depends(get_context)) -> FoodService:
    return FoodService(
        context.gate,
        default_limit=context.settings.foods_default_limit,
        max_limit=context.settings.foods_max_limit,
    )
