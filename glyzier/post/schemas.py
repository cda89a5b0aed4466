from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class CreatePostRequest(BaseModel):
    content: str = Field(..., min_length=1, max_length=500)


class CreateCommentRequest(BaseModel):
    content: str = Field(..., min_length=1, max_length=200)


class PostResponse(BaseModel):
    post_id: int
    content: str
    created_at: Optional[datetime] = None
    user_id: int
    user_display_name: Optional[str] = None
    like_count: int = 0
    comment_count: int = 0
    liked: bool = False


class CommentResponse(BaseModel):
    comment_id: int
    post_id: int
    content: str
    created_at: Optional[datetime] = None
    user_id: int
    user_display_name: Optional[str] = None


class LikeResponse(BaseModel):
    like_count: int
    liked: bool
