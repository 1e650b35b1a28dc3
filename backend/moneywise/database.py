from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from .config import DATABASE_URL

# SQLite connections are bound to the event loop that opened them, so don't pool them
_engine_kwargs = {"poolclass": NullPool} if DATABASE_URL.startswith("sqlite") else {}

engine = create_async_engine(DATABASE_URL, echo=False, **_engine_kwargs)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False
)

Base = declarative_base()

# Dependency for Routes
async def get_db():
    async with AsyncSessionLocal() as session:
        yield session

# Creates missing tables; called from the app lifespan
async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
