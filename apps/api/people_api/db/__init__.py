from .session import engine, Base, async_session, build_engine
from . import models  # noqa: F401

__all__ = ["engine", "Base", "async_session", "build_engine", "models"]
