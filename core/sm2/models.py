"""
SQLAlchemy ORM Models for the Review Database

Defines the review_items table. Columns map one-to-one to ReviewItem fields.
"""

from sqlalchemy import Column, DateTime, Float, Index, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class ReviewItemRow(Base):
    """
    Persistent SM-2 state for a single review item.
    """
    __tablename__ = 'review_items'

    id = Column(String(36), primary_key=True)
    owner_id = Column(String(255), nullable=False)
    task_id = Column(String(255), nullable=True)

    title = Column(Text, nullable=False)
    content = Column(Text, nullable=True)

    # SM-2 parameters
    ease_factor = Column(Float, nullable=False, default=2.5)
    interval_days = Column(Integer, nullable=False, default=1)
    repetitions = Column(Integer, nullable=False, default=0)

    next_review_at = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index('idx_review_items_owner_next_review', 'owner_id', 'next_review_at'),
    )

    def __repr__(self):
        return f"<ReviewItemRow({self.id}, owner={self.owner_id}, next={self.next_review_at})>"
