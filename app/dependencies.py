from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings, get_settings
from app.db.session import get_db_session
from app.services.engines.dispatcher import CipherDispatcher
from app.services.history.store import HistoryStore


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Database session dependency
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session."""
    async with get_db_session() as session:
        yield session

DbSessionDep = Annotated[AsyncSession, Depends(get_db)]


# Cipher engine dependency
def get_dispatcher() -> CipherDispatcher:
    """Get a cipher dispatcher. Stateless, so a fresh one per request is fine."""
    return CipherDispatcher()

DispatcherDep = Annotated[CipherDispatcher, Depends(get_dispatcher)]


# History store dependency
def get_history_store(db: DbSessionDep, settings: SettingsDep) -> HistoryStore:
    """Get the operation history bound to this request's session."""
    return HistoryStore(db, limit=settings.history_limit)

HistoryDep = Annotated[HistoryStore, Depends(get_history_store)]
