from sqlalchemy.orm import Session
from sqlalchemy import or_, and_
from typing import List
from .models import Conversation, Message
from ..user.models import User
from ..core.database import utcnow
import logging

logger = logging.getLogger(__name__)


def get_user_conversations(db: Session, user: User) -> List[Conversation]:
    return db.query(Conversation).filter(
        or_(Conversation.user1_id == user.user_id, Conversation.user2_id == user.user_id)
    ).order_by(Conversation.updated_at.desc(), Conversation.conversation_id.desc()).all()


def get_conversation_for_user(db: Session, conversation_id: int, user: User) -> Conversation:
    """
    Load a conversation the user takes part in.

    Raises:
        LookupError: no such conversation
        PermissionError: the user is not one of the two participants
    """
    conversation = db.query(Conversation).filter(Conversation.conversation_id == conversation_id).first()
    if not conversation:
        raise LookupError("Conversation not found")
    if not conversation.has_participant(user.user_id):
        raise PermissionError("You are not a participant in this conversation")
    return conversation


def get_or_create_conversation(db: Session, user: User, recipient_user_id: int) -> Conversation:
    if recipient_user_id == user.user_id:
        raise ValueError("Cannot start a conversation with yourself")
    if not db.query(User).filter(User.user_id == recipient_user_id).first():
        raise LookupError("Recipient user not found")

    # One conversation per pair, whichever side started it
    existing = db.query(Conversation).filter(or_(
        and_(Conversation.user1_id == user.user_id, Conversation.user2_id == recipient_user_id),
        and_(Conversation.user1_id == recipient_user_id, Conversation.user2_id == user.user_id)
    )).first()
    if existing:
        return existing

    now = utcnow()
    conversation = Conversation(user1_id=user.user_id, user2_id=recipient_user_id, created_at=now, updated_at=now)
    db.add(conversation)
    db.commit()
    db.refresh(conversation)
    logger.info(f"Conversation {conversation.conversation_id} started between {user.user_id} and {recipient_user_id}")
    return conversation


def get_messages(db: Session, conversation_id: int, user: User) -> List[Message]:
    get_conversation_for_user(db, conversation_id, user)
    return db.query(Message).filter(Message.conversation_id == conversation_id) \
        .order_by(Message.sent_at.asc(), Message.message_id.asc()).all()


def send_message(db: Session, user: User, conversation_id: int, content: str) -> Message:
    if not content or not content.strip():
        raise ValueError("Message content cannot be empty")
    conversation = get_conversation_for_user(db, conversation_id, user)

    now = utcnow()
    message = Message(conversation_id=conversation.conversation_id, sender_id=user.user_id,
                      content=content.strip(), sent_at=now)
    db.add(message)
    conversation.updated_at = now
    db.commit()
    db.refresh(message)
    return message


def to_conversation_response(conversation: Conversation, viewer: User) -> dict:
    other = conversation.other_user(viewer.user_id)
    return {
        "conversation_id": conversation.conversation_id,
        "other_user_id": other.user_id,
        "other_user_name": other.display_name,
        "other_user_email": other.email,
        "seller_shop_name": other.seller.seller_name if other.seller else None,
        "created_at": conversation.created_at,
        "updated_at": conversation.updated_at,
    }


def to_message_response(message: Message) -> dict:
    return {
        "message_id": message.message_id,
        "conversation_id": message.conversation_id,
        "sender_id": message.sender_id,
        "sender_name": message.sender.display_name if message.sender else None,
        "content": message.content,
        "sent_at": message.sent_at,
    }
