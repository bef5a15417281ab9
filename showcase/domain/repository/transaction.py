"""Transaction interface."""

from abc import ABC, abstractmethod


class Transaction(ABC):
    """Unit of work spanning the repositories of one request.

    Write use cases commit through it before they return, so a failed commit
    surfaces as an error response instead of following a success response.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Commit the pending writes.

        Raises:
            InfrastructureError: If the store rejects the commit
        """
        pass
