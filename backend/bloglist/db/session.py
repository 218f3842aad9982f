"""Session factories shared by the app, scripts and test fixtures.

Invariants:
    - expire_on_commit=False everywhere: committed blogs/users stay readable
      for the response without another round-trip
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Bind a session factory to an existing engine."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
