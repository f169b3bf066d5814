from dataclasses import asdict
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import OperationNotFoundError
from app.core.logging_config import get_logger
from app.models.database import Operation
from app.models.schemas import CipherType, Direction
from app.services.engines.base import Parameters, TransformSuccess

logger = get_logger("history")


class HistoryStore:
    """
    Recent-operations log.

    Builds Operation records from successful transforms and keeps only the
    newest `limit` of them. The cipher engine never touches this store.
    """

    def __init__(self, session: AsyncSession, limit: int = 50):
        self.session = session
        self.limit = limit

    async def record(
        self,
        cipher_type: CipherType,
        direction: Direction,
        input_text: str,
        result: TransformSuccess,
        params: Parameters = None,
    ) -> Operation:
        """
        Save a successful transform.

        Args:
            cipher_type: Cipher kind used
            direction: Encode or decode
            input_text: Text sent to the engine
            result: The engine's success result
            params: Parameters the engine was called with

        Returns:
            The persisted Operation
        """
        operation = Operation(
            cipher_type=cipher_type.value,
            direction=direction.value,
            input_text=input_text,
            output_text=result.output,
            parameters=self._parameters_dict(params),
            details=dict(result.metadata),
        )
        self.session.add(operation)
        await self.session.flush()
        await self._prune()
        await self.session.commit()

        logger.debug("Recorded operation %d (%s %s)", operation.id, cipher_type.value, direction.value)
        return operation

    async def list_recent(self, page: int = 1, page_size: int = 20) -> tuple[list[Operation], int]:
        """Return one page of operations, most recent first, and the total count."""
        total_result = await self.session.execute(select(func.count()).select_from(Operation))
        total = total_result.scalar() or 0

        offset = (page - 1) * page_size
        query = (
            select(Operation)
            .order_by(Operation.id.desc())
            .offset(offset)
            .limit(page_size)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all()), total

    async def get(self, operation_id: int) -> Operation:
        """Fetch one operation or raise OperationNotFoundError."""
        result = await self.session.execute(
            select(Operation).where(Operation.id == operation_id)
        )
        operation = result.scalar_one_or_none()

        if operation is None:
            raise OperationNotFoundError(operation_id)

        return operation

    async def clear(self) -> int:
        """Delete every operation and return how many were removed."""
        result = await self.session.execute(delete(Operation))
        await self.session.commit()
        logger.info("Cleared %d operations from history", result.rowcount)
        return result.rowcount

    async def _prune(self) -> None:
        """Drop everything older than the newest `limit` operations."""
        result = await self.session.execute(
            select(Operation.id)
            .order_by(Operation.id.desc())
            .offset(self.limit)
            .limit(1)
        )
        cutoff = result.scalar_one_or_none()

        if cutoff is not None:
            await self.session.execute(
                delete(Operation)
                .where(Operation.id <= cutoff)
                .execution_options(synchronize_session=False)
            )

    @staticmethod
    def _parameters_dict(params: Parameters) -> dict[str, Any]:
        if params is None:
            return {}
        return {name: value for name, value in asdict(params).items() if value is not None}
