from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ConfigDict, Field, ValidationError


# 할 일 생성 요청 스키마
class TodoCreate(BaseModel):
    content: str = Field(..., min_length=1)


# ORM 객체를 읽어올 때 쓰는 스키마
class TodoSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    completed: bool = False


async def parse_todo_create(request: Request) -> TodoCreate:
    """POST /todos 본문을 TodoCreate로 검증한다.

    htmx 폼은 form-urlencoded로, 다른 클라이언트는 JSON 객체로 보낼 수 있다.
    실패하면 핸들러가 실행되기 전에 422로 끝난다.
    """
    content_type = request.headers.get('content-type', '').lower()
    try:
        if content_type.startswith('application/json'):
            payload = await request.json()
        else:
            payload = dict(await request.form())
    except ValueError:
        raise RequestValidationError([{
            'type': 'body_decode',
            'loc': ('body',),
            'msg': 'Request body could not be decoded',
            'input': None,
        }])

    try:
        return TodoCreate.model_validate(payload)
    except ValidationError as exc:
        # 업로드 파일 같은 입력값은 응답에 그대로 싣지 않는다
        raise RequestValidationError(exc.errors(include_url=False, include_input=False))
