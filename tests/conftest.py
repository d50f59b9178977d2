import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from rpnbot import model as m


@pytest.fixture
def session():
    engine = create_engine('sqlite://')
    m.Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine)()
    yield session
    session.close()
    engine.dispose()
