import unittest

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.database import Base
from employee.models import Employee
from employee.repository import EmployeeRepository


class EmployeeRepositoryTests(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine("sqlite:///:memory:", future=True)
        Base.metadata.create_all(self.engine)
        TestingSession = sessionmaker(bind=self.engine, expire_on_commit=False, future=True)
        self.db = TestingSession()
        self.repo = EmployeeRepository(self.db)

        saved = self.repo.save(Employee(name="Anna", email="anna@example.com", phone="555-0101"))
        self.anna_id = saved.id

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    def test_save_without_id_inserts(self):
        saved = self.repo.save(Employee(name="Bjorn", email="bjorn@example.com"))
        self.assertIsNotNone(saved.id)
        self.assertNotEqual(saved.id, self.anna_id)

    def test_save_with_id_overwrites_row(self):
        self.repo.save(Employee(id=self.anna_id, name="Anna B", email="anna@example.com", phone=None))
        self.db.expire_all()
        row = self.repo.find_by_id(self.anna_id)
        self.assertEqual(row.name, "Anna B")
        self.assertIsNone(row.phone)

    def test_find_by_email(self):
        self.assertEqual(self.repo.find_by_email("anna@example.com").id, self.anna_id)
        self.assertIsNone(self.repo.find_by_email("nobody@example.com"))

    def test_exists_by_id(self):
        self.assertTrue(self.repo.exists_by_id(self.anna_id))
        self.assertFalse(self.repo.exists_by_id(12345))

    def test_delete_by_id_missing_is_noop(self):
        self.repo.delete_by_id(12345)
        self.assertEqual(len(self.repo.find_all()), 1)

    def test_delete_by_id(self):
        self.repo.delete_by_id(self.anna_id)
        self.assertIsNone(self.repo.find_by_id(self.anna_id))

    def test_delete_all(self):
        self.repo.save(Employee(name="Bjorn", email="bjorn@example.com"))
        self.repo.delete_all()
        self.assertEqual(self.repo.find_all(), [])


if __name__ == "__main__":
    unittest.main()
