# 서비스 전역 설정값 (환경변수는 사용하지 않는다)

# 현재 폴더(./)의 todos.db 파일을 SQLite DB로 사용
SQLALCHEMY_DATABASE_URL = 'sqlite:///./todos.db'

# 모든 인터페이스, 3000번 포트
HOST = '0.0.0.0'
PORT = 3000

PAGE_TITLE = 'BETH ToDo'

# 페이지 셸에 들어가는 클라이언트 스크립트 (htmx, tailwind, hyperscript)
SCRIPT_URLS = (
    'https://unpkg.com/htmx.org@1.9.3',
    'https://cdn.tailwindcss.com',
    'https://unpkg.com/hyperscript.org@0.9.9',
)
