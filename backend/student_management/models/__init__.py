from student_management.models.student import Student

__all__ = [
    "Student",
]
