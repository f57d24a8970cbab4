"""Farming assistant chat endpoint"""
from fastapi import APIRouter

from farmhub.schemas import ChatRequest, ChatResponse
from farmhub.services.assistant import reply_to

router = APIRouter()


@router.post("/assistant/chat", response_model=ChatResponse)
def chat(request: ChatRequest):
    return ChatResponse(reply=reply_to(request.message))
