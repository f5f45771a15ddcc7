import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from wallboard.adapter.database import create_tables, enable_sqlite_foreign_keys
from wallboard.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from wallboard.depends import get_unit_of_work
from wallboard.domain.entities import Team


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    enable_sqlite_foreign_keys(engine)
    await create_tables(engine)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def teams(db_session):
    """Two teams with ids 1 and 2"""
    created = [Team(id=1, team_name="Alpha"), Team(id=2, team_name="Bravo")]
    db_session.add_all(created)
    await db_session.commit()
    return created


@pytest_asyncio.fixture
async def client(db_session, teams):
    from httpx import ASGITransport
    from wallboard.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
