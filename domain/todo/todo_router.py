import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse, Response
from sqlalchemy.orm import Session

from database import get_db
from domain.todo import todo_crud, todo_views
from domain.todo.todo_schema import TodoCreate, parse_todo_create

logger = logging.getLogger(__name__)

# 모든 응답은 JSON이 아니라 HTML 조각
router = APIRouter(
    tags=['todos'],
    default_response_class=HTMLResponse,
)


@router.get('/', name='index')
def index() -> HTMLResponse:
    # 로드되자마자 /todos를 불러오는 빈 페이지 셸
    return HTMLResponse(todo_views.render_page())


@router.post('/clicked', name='clicked')
def clicked() -> HTMLResponse:
    return HTMLResponse('<div class="text-blue-600">I\'m from the server!</div>')


#  GET 목록 조회
@router.get('/todos', name='todo_list')
def todo_list(db: Session = Depends(get_db)) -> HTMLResponse:
    todos = todo_crud.get_todo_list(db)
    return HTMLResponse(todo_views.render_todo_list(todos))


#  POST 할 일 생성
@router.post('/todos', name='create_todo')
def todo_create(
    payload: TodoCreate = Depends(parse_todo_create),
    db: Session = Depends(get_db),
) -> HTMLResponse:
    todo = todo_crud.create_todo(db, content=payload.content)
    return HTMLResponse(todo_views.render_todo_item(todo))


#  POST 완료 여부 뒤집기
@router.post('/todos/toggle/{todo_id}', name='toggle_todo')
def todo_toggle(todo_id: int, db: Session = Depends(get_db)) -> HTMLResponse:
    todo = todo_crud.toggle_todo(db, todo_id)
    if todo is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail='Todo not found',
        )
    logger.info('Toggled todo %s to completed=%s', todo.id, todo.completed)
    return HTMLResponse(todo_views.render_todo_item(todo))


#  DELETE 삭제 (없는 id도 200, 빈 본문)
@router.delete('/todos/{todo_id}', name='delete_todo')
def todo_delete(todo_id: int, db: Session = Depends(get_db)) -> Response:
    todo_crud.delete_todo(db, todo_id)
    return Response(status_code=status.HTTP_200_OK)
