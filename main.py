import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core import config
from app.core.exceptions import register_exception_handlers
from app.core.throttling import register_rate_limiting
from app.database import Base, engine

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

# import models so they are registered on the metadata
import app.models  # noqa: F401,E402

from app.graphql.schema import graphql_app  # noqa: E402
from app.routes.employees import router as employees_router  # noqa: E402

app = FastAPI(title="Dynasty API")

# Added before CORS so CORS stays outermost and 429 responses keep their CORS headers
register_rate_limiting(app)

# Configure CORS; credentials are required for the auth cookie
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Create tables (after models are imported)
Base.metadata.create_all(bind=engine)

app.include_router(graphql_app, prefix="/graphql")
app.include_router(employees_router, prefix="/api/employees", tags=["employees"])


@app.get("/")
def read_root():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting Dynasty API on port {config.PORT} ({config.APP_ENV})")
    uvicorn.run("main:app", host="0.0.0.0", port=config.PORT)
