"""ORM model for comments on writings and blog posts."""

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, Text, func
from sqlalchemy.orm import relationship

from poetsite.models.base import Base


class Comment(Base):
    """
    Comment attached to exactly one parent: a writing or a blog post.

    user_id is the author; only the author may edit or delete it.
    """

    __tablename__ = "comments"
    __table_args__ = (
        CheckConstraint(
            "(writing_id IS NULL) <> (blog_post_id IS NULL)",
            name="ck_comments_single_parent",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    content = Column(Text, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    writing_id = Column(Integer, ForeignKey("writings.id", ondelete="CASCADE"), nullable=True, index=True)
    blog_post_id = Column(Integer, ForeignKey("blog_posts.id", ondelete="CASCADE"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    user = relationship("User", lazy="joined")
