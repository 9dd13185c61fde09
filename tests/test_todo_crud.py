import unittest

from database import TodoStore
from domain.todo import todo_crud


class TodoStoreTests(unittest.TestCase):
    def test_session_requires_open_store(self):
        store = TodoStore('sqlite://')
        with self.assertRaises(RuntimeError):
            with store.session():
                pass

    def test_close_is_safe_to_repeat(self):
        store = TodoStore('sqlite://')
        store.open()
        self.assertTrue(store.is_open)
        store.close()
        store.close()
        self.assertFalse(store.is_open)


class TodoCrudTests(unittest.TestCase):
    def setUp(self):
        self.store = TodoStore('sqlite://')
        self.store.open()
        self.addCleanup(self.store.close)

    def test_create_assigns_id_and_defaults(self):
        with self.store.session() as db:
            todo = todo_crud.create_todo(db, 'Buy milk')
            self.assertIsNotNone(todo.id)
            self.assertFalse(todo.completed)
        with self.store.session() as db:
            self.assertEqual(todo_crud.get_todo(db, todo.id).content, 'Buy milk')

    def test_list_and_get_missing(self):
        with self.store.session() as db:
            todo_crud.create_todo(db, 'one')
            todo_crud.create_todo(db, 'two')
            contents = {todo.content for todo in todo_crud.get_todo_list(db)}
            self.assertEqual(contents, {'one', 'two'})
            self.assertIsNone(todo_crud.get_todo(db, 12345))

    def test_update_returns_updated_record(self):
        with self.store.session() as db:
            todo = todo_crud.create_todo(db, 'read')
            updated = todo_crud.update_todo(db, todo.id, completed=True)
            self.assertTrue(updated.completed)
            self.assertIsNone(todo_crud.update_todo(db, 999, completed=True))

    def test_toggle_flips_completed_and_misses_return_none(self):
        with self.store.session() as db:
            todo = todo_crud.create_todo(db, 'walk')
            self.assertTrue(todo_crud.toggle_todo(db, todo.id).completed)
            self.assertFalse(todo_crud.toggle_todo(db, todo.id).completed)
            self.assertIsNone(todo_crud.toggle_todo(db, 999))

    def test_update_refuses_id_change(self):
        with self.store.session() as db:
            todo = todo_crud.create_todo(db, 'read')
            with self.assertRaises(ValueError):
                todo_crud.update_todo(db, todo.id, id=42)

    def test_delete_reports_whether_a_row_went_away(self):
        with self.store.session() as db:
            todo = todo_crud.create_todo(db, 'gone')
            self.assertTrue(todo_crud.delete_todo(db, todo.id))
            self.assertFalse(todo_crud.delete_todo(db, todo.id))
            self.assertEqual(todo_crud.get_todo_list(db), [])


if __name__ == '__main__':
    unittest.main()
