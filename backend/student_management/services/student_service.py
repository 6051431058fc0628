"""
Student CRUD service.

Maps list/get/create/update/delete onto a StudentRepository. The only
domain logic is copying name/email/course on update and raising
StudentNotFoundError for a missing id.
"""

import logging
from typing import List

from student_management.models.student import Student
from student_management.repositories.student_repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentNotFoundError(Exception):
    """Raised when no student exists with the requested id"""

    def __init__(self, student_id: int):
        self.student_id = student_id
        super().__init__(f"Student not found with id: {student_id}")


class StudentService:
    def __init__(self, repository: StudentRepository):
        self.repository = repository

    def get_all_students(self) -> List[Student]:
        students = self.repository.find_all()
        logger.debug("Listed %d students", len(students))
        return students

    def get_student_by_id(self, student_id: int) -> Student:
        """
        Get a student by id.

        Raises:
            StudentNotFoundError if no student has this id
        """
        student = self.repository.find_by_id(student_id)
        if student is None:
            logger.debug("Student %s not found", student_id)
            raise StudentNotFoundError(student_id)
        logger.debug("Fetched student %s", student_id)
        return student

    def create_student(self, student: Student) -> Student:
        """
        Persist a new student. Any id on the input is ignored; the store assigns one.

        No field validation is done here.
        """
        new_student = Student(name=student.name, email=student.email, course=student.course)
        saved = self.repository.save(new_student)
        logger.info("Created student %s", saved.id)
        return saved

    def update_student(self, student_id: int, student: Student) -> Student:
        """
        Overwrite name, email and course of an existing student.

        The id is preserved. Raises StudentNotFoundError (before any write)
        if the student does not exist.
        """
        existing = self.get_student_by_id(student_id)
        existing.name = student.name
        existing.email = student.email
        existing.course = student.course
        saved = self.repository.save(existing)
        logger.info("Updated student %s", student_id)
        return saved

    def delete_student(self, student_id: int) -> None:
        # No existence check: deleting an unknown id is a no-op
        self.repository.delete_by_id(student_id)
        logger.info("Delete requested for student %s", student_id)
