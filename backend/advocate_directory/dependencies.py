from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from advocate_directory.database import SessionLocal
from advocate_directory.repositories.advocate_repository import AdvocateRepository
from advocate_directory.services.advocate_service import AdvocateService


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    return SessionLocal


def get_advocate_repository(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> AdvocateRepository:
    return AdvocateRepository(session_factory)


def get_advocate_service(
    repository: AdvocateRepository = Depends(get_advocate_repository),
) -> AdvocateService:
    return AdvocateService(repository)
