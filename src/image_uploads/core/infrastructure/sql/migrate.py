"""Apply the Alembic migrations shipped in `image_uploads.migrations`."""

from alembic import command
from alembic.config import Config
from aws_lambda_powertools import Logger

from image_uploads.core.config import DatabaseConfig

logger = Logger(utc=True)

MIGRATIONS_LOCATION = "image_uploads:migrations"


def alembic_config(url: str) -> Config:
    """Build an Alembic config pointing at the packaged migrations."""
    config = Config()
    config.set_main_option("script_location", MIGRATIONS_LOCATION)
    # ConfigParser interpolation treats % as special (URL-encoded passwords)
    config.set_main_option("sqlalchemy.url", url.replace("%", "%%"))
    return config


def upgrade_database(url: str | None = None, revision: str = "head") -> None:
    """Upgrade the schema to `revision`; the URL defaults to DATABASE_URL."""
    url = url or DatabaseConfig.from_env().url

    logger.info("Applying database migrations", extra={"revision": revision})
    command.upgrade(alembic_config(url), revision)
    logger.info("Database migrations applied", extra={"revision": revision})


def main() -> None:
    upgrade_database()
