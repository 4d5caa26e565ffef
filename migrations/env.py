from logging.config import fileConfig

from sqlalchemy import engine_from_config
from sqlalchemy import pool

from alembic import context

from app.config import init_settings
from app.managers.base import BaseSchema
# Import managers to register their tables
from app.managers.reportManager import DiseaseReportSchema  # noqa: F401
from app.managers.weatherAlertManager import WeatherAlertSchema  # noqa: F401
from app.managers.userProfileManager import UserProfileSchema  # noqa: F401

config = context.config

if config.config_file_name is not None: fileConfig(config.config_file_name)

# Initialize settings
settings = init_settings()

# for 'autogenerate' support
target_metadata = BaseSchema.metadata

config.set_main_option("sqlalchemy.url", settings.SYNC_DATABASE_URI)


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode.

    Configures the context with just a URL, so no DBAPI is needed;
    context.execute() emits the SQL to the script output.
    """
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode against a live connection."""
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        # sqlite cannot ALTER most things in place
        context.configure(
            connection=connection, target_metadata=target_metadata,
            render_as_batch=True,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
