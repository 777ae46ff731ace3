"""Category model for the database."""

from enum import Enum

from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from components.core.database import Base


class TransactionType(str, Enum):
    income = "income"
    expense = "expense"


class Category(Base):
    """Spending or income bucket, optionally firing a monthly transaction."""
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)  # NULL for legacy categories
    name = Column(String(100), nullable=False)
    type = Column(String(20), nullable=False)
    description = Column(Text, nullable=True)
    color = Column(String(9), nullable=True)
    is_deleted = Column(Boolean, nullable=False, default=False)

    # Recurrence
    registration_date = Column(Integer, nullable=True)  # Day of month, 1-31
    registration_next_date = Column(Date, nullable=True, index=True)
    amount = Column(Numeric(10, 2), nullable=True)

    # Relationships
    user = relationship("User", back_populates="categories")
    transactions = relationship("Transaction", back_populates="category")
