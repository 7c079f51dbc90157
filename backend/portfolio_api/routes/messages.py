"""
Portfolio Backend — Contact Message Route
===========================================

What:  POST /api/messages (JSON body). There is no read endpoint; stored
       messages are inspected directly in the database.
"""

from fastapi import APIRouter, Depends

from portfolio_api.dependencies import get_message_service
from portfolio_api.schemas.portfolio import ErrorResponse, MessageCreate, StatusMessage
from portfolio_api.services.message_service import MessageService

router = APIRouter(prefix="/api", tags=["Messages"])


@router.post(
    "/messages",
    status_code=201,
    response_model=StatusMessage,
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="Submit a contact message",
)
async def create_message(
    payload: MessageCreate,
    service: MessageService = Depends(get_message_service),
) -> StatusMessage:
    await service.submit_message(payload)
    return StatusMessage(message="Message sent successfully")
