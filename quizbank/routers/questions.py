"""Fetch-all and replace-all endpoints for the question editor."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from quizbank.domain import questions as qjson
from quizbank.repositories.base import QuestionStore, StoreError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/questions", tags=["questions"])

SAVE_FAILED_MESSAGE = "Failed to save data to server."
INVALID_BODY_MESSAGE = "Request body must be valid JSON."


def _get_store(request: Request) -> QuestionStore:
    store = getattr(getattr(request.app, "state", None), "question_store", None)
    if store is None:
        raise RuntimeError("Question store is not configured")
    return store


@router.get("/load")
async def load_questions(request: Request):
    store = _get_store(request)
    questions = await store.load()
    return JSONResponse(questions)


@router.post("/save")
async def save_questions(request: Request):
    store = _get_store(request)
    try:
        candidate = qjson.loads(await request.body())
    except (ValueError, UnicodeDecodeError):
        logger.warning("save rejected: request body is not valid JSON")
        return JSONResponse({"success": False, "message": INVALID_BODY_MESSAGE}, status_code=400)
    try:
        result = await store.replace_all(candidate)
    except StoreError:
        return JSONResponse({"success": False, "message": SAVE_FAILED_MESSAGE}, status_code=500)
    return JSONResponse(
        {
            "success": True,
            "message": f"Saved {result.count} questions.",
            "count": result.count,
        }
    )
