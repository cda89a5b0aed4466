from sqlalchemy.orm import Session
from typing import Optional, List, Tuple
from .models import Post, Comment, PostLike
from ..user.models import User
import logging

logger = logging.getLogger(__name__)


def _clean(content: str, limit: int) -> str:
    text = (content or "").strip()
    if not text:
        raise ValueError("Content cannot be empty")
    if len(text) > limit:
        raise ValueError(f"Content must be at most {limit} characters")
    return text


def require_post(db: Session, post_id: int) -> Post:
    post = db.query(Post).filter(Post.post_id == post_id).first()
    if not post:
        raise LookupError("Post not found")
    return post


def create_post(db: Session, user: User, content: str) -> Post:
    post = Post(user_id=user.user_id, content=_clean(content, 500))
    db.add(post)
    db.commit()
    db.refresh(post)
    return post


def get_posts(db: Session) -> List[Post]:
    return db.query(Post).order_by(Post.created_at.desc(), Post.post_id.desc()).all()


def delete_post(db: Session, post_id: int, user: User) -> None:
    post = require_post(db, post_id)
    if post.user_id != user.user_id and not user.is_admin:
        raise PermissionError("You do not have permission to delete this post")
    db.delete(post)
    db.commit()
    logger.info(f"Post {post_id} deleted by user {user.user_id}")


def toggle_like(db: Session, post_id: int, user: User) -> Tuple[int, bool]:
    """Like the post, or unlike it when already liked. Returns (like_count, liked)."""
    post = require_post(db, post_id)
    existing = db.query(PostLike).filter(PostLike.post_id == post_id, PostLike.user_id == user.user_id).first()
    if existing:
        db.delete(existing)
        liked = False
    else:
        db.add(PostLike(post_id=post.post_id, user_id=user.user_id))
        liked = True
    db.commit()
    count = db.query(PostLike).filter(PostLike.post_id == post_id).count()
    return count, liked


def add_comment(db: Session, post_id: int, user: User, content: str) -> Comment:
    post = require_post(db, post_id)
    comment = Comment(post_id=post.post_id, user_id=user.user_id, content=_clean(content, 200))
    db.add(comment)
    db.commit()
    db.refresh(comment)
    return comment


def get_comments(db: Session, post_id: int) -> List[Comment]:
    require_post(db, post_id)
    return db.query(Comment).filter(Comment.post_id == post_id) \
        .order_by(Comment.created_at.asc(), Comment.comment_id.asc()).all()


def to_post_response(post: Post, viewer: Optional[User] = None) -> dict:
    return {
        "post_id": post.post_id,
        "content": post.content,
        "created_at": post.created_at,
        "user_id": post.user_id,
        "user_display_name": post.user.display_name if post.user else None,
        "like_count": len(post.likes),
        "comment_count": len(post.comments),
        "liked": viewer is not None and any(like.user_id == viewer.user_id for like in post.likes),
    }


def to_comment_response(comment: Comment) -> dict:
    return {
        "comment_id": comment.comment_id,
        "post_id": comment.post_id,
        "content": comment.content,
        "created_at": comment.created_at,
        "user_id": comment.user_id,
        "user_display_name": comment.user.display_name if comment.user else None,
    }
