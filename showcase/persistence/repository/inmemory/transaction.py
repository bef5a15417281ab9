"""In-memory implementation of Transaction."""

from showcase.domain.repository import Transaction

from .database import InMemoryDatabase


class InMemoryTransaction(Transaction):
    """In-memory writes apply immediately; a commit only counts itself."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def commit(self) -> None:
        self.database.commits += 1
