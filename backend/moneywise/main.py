import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from .config import CORS_ORIGINS, LOG_LEVEL
from .database import init_db
from .routers import insights, analytics, transactions, categories, budgets, goals, accounts

logger = logging.getLogger(__name__)


def configure_logging():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("Server starting... checking tables.")
    await init_db()
    yield
    logger.info("Server shutting down.")

app = FastAPI(title="Moneywise API", lifespan=lifespan)

# Wildcard origins can't be combined with credentials
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register Routers
app.include_router(insights.router)
app.include_router(analytics.router)
app.include_router(transactions.router)
app.include_router(categories.router)
app.include_router(budgets.router)
app.include_router(goals.router)
app.include_router(accounts.router)

@app.get("/")
def read_root():
    return {"status": "API is running"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
