from typing import Iterable

from markupsafe import Markup

from config import PAGE_TITLE, SCRIPT_URLS
from domain.todo.todo_schema import TodoSchema
# HTML 조각(fragment) 렌더러
# Markup.format()이 인자를 모두 이스케이프하므로 사용자 입력이 그대로 태그가 되지 않는다.

ITEM_TEMPLATE = Markup(
    '<div class="flex flex-row space-x-3">'
    '<p>{content}</p>'
    '<input type="checkbox"{checked} hx-post="/todos/toggle/{id}"'
    ' hx-target="closest div" hx-swap="outerHTML">'
    '<button class="text-red-500" hx-delete="/todos/{id}"'
    ' hx-swap="outerHTML" hx-target="closest div">X</button>'
    '</div>'
)

FORM_HTML = Markup(
    '<form class="flex flex-row space-x-3" hx-post="/todos" hx-swap="beforebegin"'
    ' _="on submit target.reset()">'
    '<input type="text" name="content" class="border border-black">'
    '<button type="submit">Add</button>'
    '</form>'
)

PAGE_TEMPLATE = Markup(
    '<!DOCTYPE html>\n'
    '<html lang="en">\n'
    '<head>\n'
    '    <meta charset="UTF-8">\n'
    '    <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
    '    <title>{title}</title>\n'
    '{scripts}'
    '</head>\n'
    '<body class="flex w-full h-screen justify-center items-center"'
    ' hx-get="/todos" hx-trigger="load" hx-swap="innerHTML">{body}</body>\n'
    '</html>\n'
)

SCRIPT_TEMPLATE = Markup('    <script src="{src}"></script>\n')


def render_todo_item(todo) -> Markup:
    """한 항목: 내용, 토글 체크박스, 삭제 버튼.

    체크박스와 버튼은 가장 가까운 div(자기 컨테이너)를 응답으로 교체한다.
    """
    item = TodoSchema.model_validate(todo)
    return ITEM_TEMPLATE.format(
        id=item.id,
        content=item.content,
        checked=Markup(' checked') if item.completed else '',
    )


def render_todo_form() -> Markup:
    # 응답은 폼 바로 앞에 삽입되고, 제출 후 입력칸은 비워진다
    return FORM_HTML


def render_todo_list(todos: Iterable) -> Markup:
    items = Markup('').join(render_todo_item(todo) for todo in todos)
    return Markup('<div>{}{}</div>').format(items, render_todo_form())


def render_page(body: Markup = Markup('')) -> Markup:
    # body는 이미 렌더링된 조각이어야 한다. 일반 str이면 이스케이프된다.
    scripts = Markup('').join(SCRIPT_TEMPLATE.format(src=src) for src in SCRIPT_URLS)
    return PAGE_TEMPLATE.format(title=PAGE_TITLE, scripts=scripts, body=body)
