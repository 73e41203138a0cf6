"""
Database initialization script
Creates the Dynasty tables (admins, customers, carts, employees, attendance,
products, sales) from the ORM metadata
"""
import logging

from app.core import config
from app.database import engine, Base
import app.models  # noqa: F401

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)


def init_db():
    """Create every missing table; existing tables are left untouched"""
    try:
        logger.info(f"Creating tables on {engine.url.render_as_string(hide_password=True)}")
        Base.metadata.create_all(bind=engine)
        logger.info(f"✓ Tables ready: {', '.join(sorted(Base.metadata.tables))}")
    except Exception as e:
        logger.error(f"✗ Error initializing database: {str(e)}")
        raise


if __name__ == "__main__":
    init_db()
