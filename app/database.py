from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from app.config import init_settings

settings = init_settings()


def build_engine(url: str = None, echo: bool = None) -> AsyncEngine:
    url = url or settings.SQLALCHEMY_DATABASE_URI
    connect_args = {}
    if url.startswith("sqlite"):
        # one process, many concurrent requests on the same file
        connect_args["check_same_thread"] = False
    return create_async_engine(
        url,
        echo=settings.DB_ECHO if echo is None else echo,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


engine = build_engine()
