from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, close_all_sessions, sessionmaker
from sqlalchemy.pool import StaticPool


class Database:
    def __init__(self, db_uri="sqlite:///:memory:"):
        engine_args = {}
        if db_uri.startswith("sqlite"):
            # Una sola conexion compartida, si no la base en memoria se pierde
            engine_args = {
                "connect_args": {"check_same_thread": False},
                "poolclass": StaticPool,
            }
        self.engine = create_engine(db_uri, **engine_args)
        self.session = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self.create_tables()

    def get_session(self):
        return self.session()

    def create_tables(self):
        Base.metadata.create_all(bind=self.engine)

    def close(self):
        close_all_sessions()
        self.engine.dispose()


class Base(DeclarativeBase):
    pass
