import os
import urllib.parse
import importlib
import logging
import traceback
from typing import Generator, Optional

import pymysql
from dotenv import load_dotenv
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, URL
from sqlalchemy.orm import sessionmaker, Session, declarative_base

load_dotenv()

# Database configuration (env defaults)
DATABASE_URL = os.getenv("DATABASE_URL")
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_USER = os.getenv("DB_USER", "root")
DB_PASSWORD = os.getenv("DB_PASSWORD", "")
DB_NAME = os.getenv("DB_NAME", "ppe_tracker")
DB_PORT = int(os.getenv("DB_PORT", 3306))
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", 5))

logger = logging.getLogger(__name__)

Base = declarative_base()

# keep these in sync with files inside ppe_tracker/models
MODEL_MODULES = [
    "equipment_type_model",
    "manager_model",
    "inspection_status_model",
    "equipment_model",
    "inspection_model",
]

DEFAULT_INSPECTION_STATUSES = ["Operational", "Needs repair", "Scrapped"]


def build_database_url() -> str:
    """DATABASE_URL wins; otherwise assemble a MySQL URL from the DB_* variables."""
    if DATABASE_URL:
        return DATABASE_URL
    password_enc = urllib.parse.quote_plus(DB_PASSWORD)
    return f"mysql+pymysql://{DB_USER}:{password_enc}@{DB_HOST}:{DB_PORT}/{DB_NAME}"


def create_db_engine(url: Optional[str] = None) -> Engine:
    url = url or build_database_url()
    if url.startswith("sqlite"):
        return create_engine(url, echo=False, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        echo=False,
        pool_size=DB_POOL_SIZE,
        max_overflow=0,
        pool_pre_ping=True,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Generator[Session, None, None]:
    """One session per request, taken from the factory the app was built with."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


# ---------------------------------------------------------------------------
# init_db: create database, create ORM tables, and seed master data
# ---------------------------------------------------------------------------

def create_database_if_missing(url: URL) -> None:
    """Connect to the MySQL server without a schema and CREATE DATABASE IF NOT EXISTS."""
    try:
        conn = pymysql.connect(
            host=url.host or DB_HOST,
            user=url.username or DB_USER,
            password=url.password or "",
            port=url.port or DB_PORT,
            autocommit=False,
        )
    except pymysql.MySQLError:
        logger.error("ERROR: Could not connect to MySQL server to create database.")
        logger.error(traceback.format_exc())
        return

    try:
        with conn.cursor() as cur:
            cur.execute(
                f"CREATE DATABASE IF NOT EXISTS `{url.database}` "
                "DEFAULT CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
            )
            conn.commit()
            logger.info(f"Database `{url.database}` ensured.")
    except pymysql.MySQLError:
        logger.error(f"ERROR: Could not create database `{url.database}`.")
        logger.error(traceback.format_exc())
        conn.rollback()
    finally:
        conn.close()


def seed_inspection_statuses(session_factory: sessionmaker) -> None:
    """Insert the default inspection statuses (only runs if the table is empty)."""
    from ppe_tracker.models.inspection_status_model import InspectionStatus

    db = session_factory()
    try:
        if db.query(InspectionStatus).count() > 0:
            return
        for label in DEFAULT_INSPECTION_STATUSES:
            db.add(InspectionStatus(label=label))
        db.commit()
        logger.info("Inserted default rows into inspection_status.")
    finally:
        db.close()


def init_db(engine: Engine, session_factory: Optional[sessionmaker] = None) -> None:
    # 1) Create database if missing (MySQL only)
    if engine.url.get_backend_name() == "mysql":
        create_database_if_missing(engine.url)

    # 2) Import all models so Base.metadata knows the schema
    for mod in MODEL_MODULES:
        importlib.import_module(f"ppe_tracker.models.{mod}")
        logger.debug(f"Imported model module: ppe_tracker.models.{mod}")

    # 3) Create all tables via SQLAlchemy ORM
    Base.metadata.create_all(bind=engine)
    logger.info("Base.metadata.create_all() executed.")

    # 4) Seed lookup data
    seed_inspection_statuses(session_factory or create_session_factory(engine))
