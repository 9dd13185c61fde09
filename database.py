import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from config import SQLALCHEMY_DATABASE_URL
# DB 연결 설정

logger = logging.getLogger(__name__)

# 모든 ORM 모델은 이 Base를 상속받아야 테이블로 인식된다.
Base = declarative_base()


class TodoStore:
    """앱 시작 시 열고 종료 시 닫는 DB 핸들.

    모듈 전역 엔진 대신 create_app()에서 만들어 app.state에 붙인다.
    """

    def __init__(self, database_url: str = SQLALCHEMY_DATABASE_URL):
        self.database_url = database_url
        self.engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def is_open(self) -> bool:
        return self.engine is not None

    def open(self) -> None:
        if self.is_open:
            return
        kwargs = {}
        if self.database_url.startswith('sqlite'):
            # FastAPI는 sync 엔드포인트를 스레드풀에서 돌리기에 제한을 풀어줌
            kwargs['connect_args'] = {'check_same_thread': False}
        if self.database_url in ('sqlite://', 'sqlite:///:memory:'):
            # 메모리 DB는 커넥션마다 따로 생기므로 하나만 공유
            kwargs['poolclass'] = StaticPool
        self.engine = create_engine(self.database_url, **kwargs)
        self._session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
        )
        import models  # noqa: F401  Todo 테이블을 Base에 등록
        Base.metadata.create_all(bind=self.engine)
        logger.info('Opened todo store at %s', self.database_url)

    def close(self) -> None:
        if not self.is_open:
            return
        self.engine.dispose()
        self.engine = None
        self._session_factory = None
        logger.info('Closed todo store at %s', self.database_url)

    @contextmanager
    def session(self) -> Iterator[Session]:
        if self._session_factory is None:
            raise RuntimeError('TodoStore is not open')
        db: Session = self._session_factory()
        try:
            yield db
        finally:
            # 예외 발생 여부와 관계 없이 항상 close
            db.close()


# FastAPI Depends에서 사용할 의존성 함수
# 요청이 끝날 때마다 세션이 자동 종료되도록
def get_db(request: Request) -> Iterator[Session]:
    store: TodoStore = request.app.state.store
    with store.session() as db:
        yield db
