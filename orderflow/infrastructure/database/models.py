"""SQLAlchemy ORM models for the Order entity."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, relationship


class Base(DeclarativeBase):
    pass


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=False)
    total_cents = Column(Integer, nullable=False)

    # Relationship to items
    items = relationship(
        "LineItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="LineItemModel.position",
    )


class LineItemModel(Base):
    """SQLAlchemy ORM model for order_line_items table."""

    __tablename__ = "order_line_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    name = Column(String(500), nullable=False)
    price_cents = Column(Integer, nullable=False)

    # Relationship back to order
    order = relationship("OrderModel", back_populates="items")
