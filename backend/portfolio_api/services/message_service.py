"""Contact message submission: one INSERT, no read path through the API."""

import logging

from portfolio_api.exceptions import DatabaseError
from portfolio_api.schemas.portfolio import MessageCreate
from portfolio_api.store import PortfolioStore

logger = logging.getLogger(__name__)


class MessageService:

    def __init__(self, store: PortfolioStore):
        self.store = store

    async def submit_message(self, payload: MessageCreate) -> int:
        try:
            return await self.store.insert_message(
                payload.name, payload.email, payload.message
            )
        except Exception as e:
            logger.error("Error adding message: %s", str(e))
            raise DatabaseError(
                message="Error adding message",
                context={"error_type": type(e).__name__},
            )
