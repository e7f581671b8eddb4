# create_tables.py
from app.core.config import Settings
from app.core.logging_config import setup_logging
from app.database import create_db_engine, init_db


def create_db_and_tables():
    settings = Settings()
    setup_logging(settings.log_level)
    engine = create_db_engine(settings)
    try:
        init_db(engine)
    finally:
        engine.dispose()

if __name__ == "__main__":
    create_db_and_tables()
