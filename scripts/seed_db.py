from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.school_admin.school_admin.common.logging_config import setup_logging
from src.school_admin.school_admin.database.bootstrap import apply_seed_sql
from src.school_admin.school_admin.database.connection import parse_database_settings


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = parse_database_settings(settings.DATABASE_URL, settings.DATABASE_KEY)

    seed_path = REPO_ROOT / "database" / "seed.sql"
    apply_seed_sql(db_config, seed_path=seed_path)

    print(f"OK: Seeded database -> {db_config.user}@{db_config.host}:{db_config.port}/{db_config.database}")


if __name__ == "__main__":
    main()
