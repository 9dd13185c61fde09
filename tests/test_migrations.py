import os
import tempfile
import unittest
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

BASE_DIR = Path(__file__).resolve().parent.parent


class MigrationTests(unittest.TestCase):
    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.url = 'sqlite:///' + os.path.join(tmp.name, 'migrated.db')
        self.config = Config(str(BASE_DIR / 'alembic.ini'))
        self.config.set_main_option('script_location', str(BASE_DIR / 'alembic'))
        self.config.set_main_option('sqlalchemy.url', self.url)

    def test_upgrade_creates_todos_table(self):
        command.upgrade(self.config, 'head')
        engine = create_engine(self.url)
        self.addCleanup(engine.dispose)
        columns = {col['name']: col for col in inspect(engine).get_columns('todos')}
        self.assertEqual(set(columns), {'id', 'content', 'completed'})
        self.assertFalse(columns['content']['nullable'])
        self.assertFalse(columns['completed']['nullable'])

    def test_downgrade_drops_todos_table(self):
        command.upgrade(self.config, 'head')
        command.downgrade(self.config, 'base')
        engine = create_engine(self.url)
        self.addCleanup(engine.dispose)
        self.assertNotIn('todos', inspect(engine).get_table_names())


if __name__ == '__main__':
    unittest.main()
