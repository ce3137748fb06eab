import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends, Path, Request
from pydantic import BaseModel

from faq_service.exceptions import NotFoundError, StorageError
from faq_service.models import utc_now_iso
from faq_service.services.faq_store import FAQStore
from faq_service.services.validation import normalize_category, validate_payload

logger = logging.getLogger(__name__)

router = APIRouter()
debug_router = APIRouter(prefix="/api/debug")

# bool listed first so JSON true/false is kept as a bool instead of coerced to 1/0
FieldValue = Optional[Union[bool, str, int, float]]

# SQLite INTEGER range
FAQId = Path(..., ge=-(2 ** 63), le=2 ** 63 - 1)


class FAQRequest(BaseModel):
    """Request body for creating or updating an FAQ"""

    question: FieldValue = None
    answer: FieldValue = None
    category: FieldValue = None


def get_store(request: Request) -> FAQStore:
    """Storage handle owned by the running application"""
    return request.app.state.store


@router.get("/health")
def health_check(request: Request):
    """Health check endpoint"""
    return {"status": "ok", "app": request.app.title}


@router.get("/api/faq")
def list_faqs(store: FAQStore = Depends(get_store)):
    """List all FAQs, newest first"""
    faqs = store.list_all()
    return [
        {**faq.to_dict(), "category": normalize_category(faq.category)}
        for faq in faqs
    ]


@router.post("/api/faq")
def create_faq(request: FAQRequest, store: FAQStore = Depends(get_store)):
    """
    Create an FAQ.

    - Validate question/answer and normalize category
    - Insert with fresh created_at/updated_at
    - Read the row back and return it
    """
    logger.info(f"POST /api/faq body: {request.model_dump()}")
    clean = validate_payload(request.question, request.answer, request.category)

    now = utc_now_iso()
    logger.info(f"Executing insert with params: {[clean.question, clean.answer, clean.category, now, now]}")
    faq_id = store.insert(clean.question, clean.answer, clean.category, now, now)
    logger.info(f"FAQ inserted successfully, ID: {faq_id}")

    try:
        faq = store.get_by_id(faq_id)
    except StorageError:
        faq = None

    if faq is None:
        return {
            "success": True,
            "id": faq_id,
            "message": "FAQ created but could not retrieve details",
        }

    return {"success": True, "id": faq_id, "data": faq.to_dict()}


@router.put("/api/faq/{faq_id}")
def update_faq(request: FAQRequest, faq_id: int = FAQId, store: FAQStore = Depends(get_store)):
    """Replace question, answer and category of an existing FAQ"""
    clean = validate_payload(request.question, request.answer, request.category)

    now = utc_now_iso()
    logger.info(f"UPDATE FAQ: {[clean.question, clean.answer, clean.category, now, faq_id]}")
    changes = store.update(faq_id, clean.question, clean.answer, clean.category, now)

    if changes == 0:
        raise NotFoundError()

    try:
        faq = store.get_by_id(faq_id)
    except StorageError:
        faq = None

    if faq is None:
        return {
            "success": True,
            "id": faq_id,
            "message": "FAQ updated but could not retrieve details",
        }

    return {"success": True, "id": faq_id, "data": faq.to_dict()}


@router.delete("/api/faq/{faq_id}")
def delete_faq(faq_id: int = FAQId, store: FAQStore = Depends(get_store)):
    """Delete an FAQ permanently"""
    changes = store.delete(faq_id)

    if changes == 0:
        raise NotFoundError()

    logger.info(f"FAQ deleted, ID: {faq_id}")
    return {"success": True, "id": faq_id}


@debug_router.get("/schema")
def debug_schema(store: FAQStore = Depends(get_store)):
    """Column metadata of the faq table"""
    columns = store.table_info()
    return {"table": "faq", "columns": columns, "count": len(columns)}


@debug_router.get("/tables")
def debug_tables(store: FAQStore = Depends(get_store)):
    return {"tables": store.table_names()}
