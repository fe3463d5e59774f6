"""
Shopping Item Repository - Data access for the current shopping list.

The list is always written as a whole: save() replaces every stored row,
so saving the same list twice leaves the same table contents.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.entities import ShoppingItem
from models.items import Item, now_millis
from models.repositories.errors import PersistenceError

logger = logging.getLogger(__name__)


class ShoppingItemRepository:
    """Repository for the stored shopping list."""

    def __init__(self, db: Session):
        """Initialize with a database session."""
        self.db = db

    def load(self) -> list[Item]:
        """
        Load the stored list in saved order.

        Returns an empty list when nothing has been saved yet.
        """
        try:
            rows = self.db.query(ShoppingItem).order_by(ShoppingItem.SortOrder).all()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Could not load shopping list: {e}") from e

        fallback_date = now_millis()
        items = []
        for row in rows:
            date_added = row.DateAdded
            if date_added is None:
                logger.warning(f"Shopping item '{row.Name}' has no DateAdded, using load time")
                date_added = fallback_date
            items.append(Item(
                name=row.Name,
                amount=row.Amount or 0,
                image_url=row.ImageUrl,
                date_added=date_added,
            ))
        return items

    def save(self, items: list[Item]) -> None:
        """Replace the stored list with the given items."""
        try:
            self.db.query(ShoppingItem).delete()
            for index, item in enumerate(items):
                self.db.add(ShoppingItem(
                    Name=item.name,
                    Amount=item.amount,
                    ImageUrl=item.image_url,
                    DateAdded=item.date_added,
                    SortOrder=index,
                ))
            self.db.commit()
        except (SQLAlchemyError, OverflowError) as e:
            # OverflowError comes from the driver for ints the column cannot hold
            self.db.rollback()
            raise PersistenceError(f"Could not save shopping list: {e}") from e
        logger.debug(f"Saved {len(items)} shopping items")
