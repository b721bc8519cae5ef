from userhub.db.database import engine, Base
from userhub.models import User  # noqa: F401  registers the users table


async def init_db() -> None:
    """Initialize database tables"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
