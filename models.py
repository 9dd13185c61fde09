from sqlalchemy import Boolean, Column, Integer, Text, false

from database import Base
# DB 테이블 구조 정의


class Todo(Base):
    __tablename__ = 'todos'

    # id는 insert 시 자동 생성되고 이후 바뀌지 않는다.
    id = Column(Integer, primary_key=True, index=True)
    content = Column(Text, nullable=False)
    completed = Column(Boolean, nullable=False, default=False, server_default=false())

    def __repr__(self) -> str:
        return f'<Todo id={self.id} completed={self.completed}>'
