from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class CreateConversationRequest(BaseModel):
    recipient_user_id: int


class SendMessageRequest(BaseModel):
    conversation_id: int
    content: str


class ConversationResponse(BaseModel):
    conversation_id: int
    other_user_id: int
    other_user_name: Optional[str] = None
    other_user_email: str
    seller_shop_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MessageResponse(BaseModel):
    message_id: int
    conversation_id: int
    sender_id: int
    sender_name: Optional[str] = None
    content: str
    sent_at: Optional[datetime] = None
