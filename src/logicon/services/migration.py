"""Schema bootstrap: apply pending Alembic migrations to the logistics database."""

import io
import logging
from pathlib import Path

from alembic.config import Config as AlembicConfig

from alembic import command
from logicon.config import Config, get_config
from logicon.db.credentials import resolve_db_credentials

logger = logging.getLogger(__name__)


def build_alembic_config(config: Config) -> AlembicConfig:
    """Alembic config pointed at the migration scripts next to ``config.alembic_config``.

    The database URL comes from the shared credential lookup, so a configured
    Secrets Manager secret is honoured without touching the environment.
    """
    ini_path = Path(config.alembic_config)
    cfg = AlembicConfig(str(ini_path))
    cfg.set_main_option("script_location", str(ini_path.parent / "alembic"))

    url = resolve_db_credentials(config).sqlalchemy_url.render_as_string(hide_password=False)
    # ConfigParser interpolation treats "%" specially
    cfg.set_main_option("sqlalchemy.url", url.replace("%", "%%"))
    return cfg


def run_migrations(config: Config | None = None) -> dict[str, str]:
    config = config or get_config()
    cfg = build_alembic_config(config)

    output_buf = io.StringIO()
    stream_handler = logging.StreamHandler(output_buf)
    alembic_logger = logging.getLogger("alembic")
    alembic_logger.addHandler(stream_handler)

    try:
        command.upgrade(cfg, "head")
        output = output_buf.getvalue()
        logger.info("Migrations applied against %s: %s", config.environment, output)
        return {"status": "success", "output": output}
    except Exception as e:
        logger.error("Migration failed: %s", e)
        raise
    finally:
        alembic_logger.removeHandler(stream_handler)
