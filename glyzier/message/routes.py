from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from ..core.database import get_db
from ..auth.authentication import get_current_user
from ..user.models import User
from .schemas import CreateConversationRequest, SendMessageRequest, ConversationResponse, MessageResponse
from . import crud

# Clients poll these endpoints; there is no push channel
router = APIRouter(tags=["Messaging"])


def _raise_http(e: Exception):
    if isinstance(e, PermissionError):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    if isinstance(e, LookupError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/conversations", response_model=List[ConversationResponse])
async def get_conversations(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return [crud.to_conversation_response(c, current_user) for c in crud.get_user_conversations(db, current_user)]


@router.get("/conversations/{conversation_id}", response_model=ConversationResponse)
async def get_conversation(
    conversation_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        conversation = crud.get_conversation_for_user(db, conversation_id, current_user)
    except (LookupError, PermissionError) as e:
        _raise_http(e)
    return crud.to_conversation_response(conversation, current_user)


@router.post("/conversations", response_model=ConversationResponse, status_code=status.HTTP_201_CREATED)
async def create_conversation(
    request: CreateConversationRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        conversation = crud.get_or_create_conversation(db, current_user, request.recipient_user_id)
    except (ValueError, LookupError) as e:
        _raise_http(e)
    return crud.to_conversation_response(conversation, current_user)


@router.get("/messages/{conversation_id}", response_model=List[MessageResponse])
async def get_messages(
    conversation_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        messages = crud.get_messages(db, conversation_id, current_user)
    except (LookupError, PermissionError) as e:
        _raise_http(e)
    return [crud.to_message_response(m) for m in messages]


@router.post("/messages", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def send_message(
    request: SendMessageRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        message = crud.send_message(db, current_user, request.conversation_id, request.content)
    except (ValueError, LookupError, PermissionError) as e:
        _raise_http(e)
    return crud.to_message_response(message)
