"""PostgreSQL implementation of Transaction."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.domain.repository import Transaction
from showcase.persistence.database import translate_store_errors


class PostgresTransaction(Transaction):
    """Commits the request-scoped SQLAlchemy session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @translate_store_errors
    async def commit(self) -> None:
        """Commit the session, releasing any advisory locks it holds."""
        await self.session.commit()
        logfire.debug("Transaction committed")
