"""
Student persistence.

StudentRepository is the contract the service layer depends on.
SqlModelStudentRepository implements it over a SQLModel Session.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from sqlmodel import Session, select

from student_management.models.student import Student

logger = logging.getLogger(__name__)

# INTEGER primary keys are signed 64-bit; ids outside this range cannot be stored
MIN_STUDENT_ID = -(2**63)
MAX_STUDENT_ID = 2**63 - 1


def is_storable_id(student_id: int) -> bool:
    return MIN_STUDENT_ID <= student_id <= MAX_STUDENT_ID


class StudentRepository(ABC):
    """Storage for Student records keyed by id"""

    @abstractmethod
    def find_all(self) -> List[Student]:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    @abstractmethod
    def save(self, student: Student) -> Student:
        """Insert or update by id and return the persisted record."""
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, student_id: int) -> None:
        """Remove the record if present. Missing ids are ignored."""
        raise NotImplementedError


class SqlModelStudentRepository(StudentRepository):
    def __init__(self, session: Session):
        self.session = session

    def find_all(self) -> List[Student]:
        return list(self.session.exec(select(Student).order_by(Student.id)).all())

    def find_by_id(self, student_id: int) -> Optional[Student]:
        if not is_storable_id(student_id):
            return None
        return self.session.get(Student, student_id)

    def save(self, student: Student) -> Student:
        self.session.add(student)
        self.session.commit()
        self.session.refresh(student)
        return student

    def delete_by_id(self, student_id: int) -> None:
        student = self.find_by_id(student_id)
        if student is None:
            logger.debug("delete_by_id: no student with id %s", student_id)
            return
        self.session.delete(student)
        self.session.commit()
        logger.info("Deleted student %s", student_id)
