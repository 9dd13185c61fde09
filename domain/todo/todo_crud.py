import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from models import Todo

logger = logging.getLogger(__name__)


# 전체 목록 조회 (정렬 보장 없음)
def get_todo_list(db: Session) -> List[Todo]:
    return db.query(Todo).all()


def get_todo(db: Session, todo_id: int) -> Optional[Todo]:
    return db.query(Todo).filter(Todo.id == todo_id).first()


def create_todo(db: Session, content: str) -> Todo:
    todo = Todo(content=content, completed=False)
    db.add(todo)
    db.commit()
    # insert 후 생성된 id를 다시 읽어온다
    db.refresh(todo)
    logger.info('Created todo %s', todo.id)
    return todo


def update_todo(db: Session, todo_id: int, **fields) -> Optional[Todo]:
    """id에 해당하는 항목의 필드를 바꾸고 갱신된 항목을 반환한다.

    항목이 없으면 None. id는 바꿀 수 없다.
    """
    if 'id' in fields:
        raise ValueError('id cannot be updated')
    todo = get_todo(db, todo_id)
    if todo is None:
        return None
    return _save(db, todo, **fields)


# 완료 여부 뒤집기: 한 번 읽은 행을 그대로 갱신한다
def toggle_todo(db: Session, todo_id: int) -> Optional[Todo]:
    todo = get_todo(db, todo_id)
    if todo is None:
        return None
    return _save(db, todo, completed=not todo.completed)


def _save(db: Session, todo: Todo, **fields) -> Todo:
    for name, value in fields.items():
        setattr(todo, name, value)
    db.commit()
    db.refresh(todo)
    return todo


def delete_todo(db: Session, todo_id: int) -> bool:
    # 없는 id여도 에러 없이 지나간다
    deleted = db.query(Todo).filter(Todo.id == todo_id).delete()
    db.commit()
    if deleted:
        logger.info('Deleted todo %s', todo_id)
    return bool(deleted)
