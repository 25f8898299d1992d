# facet_counts/handlers/filter_counts_handler.py
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response
from ..services import AttributeCountService, CategoryService, FacetService, ItemService

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Client-Info, Apikey",
}

DEFAULT_ERROR_MESSAGE = "An error occurred"

router = APIRouter()


def get_facet_service(request: Request) -> FacetService:
    """FacetService wired to the application's database pool"""
    db = request.app.state.db
    return FacetService(CategoryService(db), AttributeCountService(db), ItemService(db))


@router.options("/get-filter-counts")
async def filter_counts_preflight():
    return Response(status_code=200, headers=CORS_HEADERS)


@router.api_route("/get-filter-counts", methods=["GET", "POST"])
async def get_filter_counts(
    category_id: Optional[str] = None,
    facet_service: FacetService = Depends(get_facet_service),
):
    """Facet counts for the filter sidebar of a category (all categories if omitted)"""
    try:
        response = await facet_service.get_filter_counts(category_id)
    except Exception as e:
        logger.error(f"Error fetching filter counts: {e}", exc_info=True)
        return JSONResponse(
            {"error": str(e) or DEFAULT_ERROR_MESSAGE},
            status_code=500,
            headers=CORS_HEADERS,
        )
    return JSONResponse(response.to_payload(), headers=CORS_HEADERS)
