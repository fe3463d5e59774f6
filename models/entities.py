"""
SQLAlchemy ORM Entity Models

These tables are the app's local storage:

- ShoppingItems: the current shopping list, rewritten in full after every
  add or delete
- Orders: the list as it was at the last checkout, rewritten in full on
  every checkout

Both tables keep a SortOrder column so the list comes back in the order
it was saved.
"""

from sqlalchemy import BigInteger, Column, Integer, String

from config.database import Base


class ShoppingItem(Base):
    """
    A shopping list entry.

    DateAdded is stored so that a reloaded list keeps its day grouping.
    """
    __tablename__ = "ShoppingItems"

    ShoppingItemId = Column(Integer, primary_key=True, autoincrement=True)
    Name = Column(String(200), nullable=False)
    Amount = Column(Integer, nullable=False, default=0)
    ImageUrl = Column(String(1000), nullable=True)
    DateAdded = Column(BigInteger, nullable=True)  # ms since epoch, NULL on legacy rows
    SortOrder = Column(Integer, nullable=False)


class Order(Base):
    """
    A checked-out item.

    Only name, amount and image are kept at checkout.
    """
    __tablename__ = "Orders"

    OrderId = Column(Integer, primary_key=True, autoincrement=True)
    Name = Column(String(200), nullable=False)
    Amount = Column(Integer, nullable=False, default=0)
    ImageUrl = Column(String(1000), nullable=True)
    SortOrder = Column(Integer, nullable=False)
