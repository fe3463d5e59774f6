"""
Order Repository - Data access for checked-out orders.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.entities import Order
from models.items import OrderRecord
from models.repositories.errors import PersistenceError

logger = logging.getLogger(__name__)


class OrderRepository:
    """Repository for the orders saved at checkout."""

    def __init__(self, db: Session):
        """Initialize with a database session."""
        self.db = db

    def load(self) -> list[OrderRecord]:
        """Load saved orders in checkout order."""
        try:
            rows = self.db.query(Order).order_by(Order.SortOrder).all()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Could not load orders: {e}") from e

        return [
            OrderRecord(name=row.Name, amount=row.Amount or 0, image_url=row.ImageUrl)
            for row in rows
        ]

    def save(self, records: list[OrderRecord]) -> None:
        """
        Replace saved orders.

        An empty list clears any previous orders.
        """
        try:
            self.db.query(Order).delete()
            for index, record in enumerate(records):
                self.db.add(Order(
                    Name=record.name,
                    Amount=record.amount,
                    ImageUrl=record.image_url,
                    SortOrder=index,
                ))
            self.db.commit()
        except (SQLAlchemyError, OverflowError) as e:
            # OverflowError comes from the driver for ints the column cannot hold
            self.db.rollback()
            raise PersistenceError(f"Could not save orders: {e}") from e
        logger.debug(f"Saved {len(records)} orders")
