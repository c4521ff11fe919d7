from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "work_attribution"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from dotenv import load_dotenv

from config import get_settings_module

from work_attribution.core.logging_config import configure_logging, get_logger
from work_attribution.database.bootstrap import apply_schema, list_tables
from work_attribution.database.connection import DBConfig, DatabaseConnection

logger = get_logger("scripts.init_db")


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(level=getattr(settings, "LOG_LEVEL", "INFO"))

    db_config = DBConfig.from_mapping(settings.DB_CONFIG)
    conn = DatabaseConnection(db_config)
    apply_schema(conn)
    tables = list_tables(conn)
    logger.info(
        "schema applied to %s@%s:%s/%s (tables=%d)",
        db_config.user,
        db_config.host,
        db_config.port,
        db_config.database,
        len(tables),
    )


if __name__ == "__main__":
    main()
