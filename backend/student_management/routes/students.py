"""
Student Management API Routes
Provides CRUD operations for students.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict
from sqlmodel import Session

from student_management.database import get_session
from student_management.models.student import Student
from student_management.repositories.student_repository import SqlModelStudentRepository
from student_management.services.student_service import StudentNotFoundError, StudentService

router = APIRouter()


# ============================================================================
# Request/Response Models
# ============================================================================


class StudentCreateRequest(BaseModel):
    name: str
    email: str
    course: str


class StudentUpdateRequest(BaseModel):
    name: str
    email: str
    course: str


class StudentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    course: str


def get_student_service(session: Session = Depends(get_session)) -> StudentService:
    return StudentService(SqlModelStudentRepository(session))


# ============================================================================
# Student CRUD Endpoints
# ============================================================================


@router.get("/students", response_model=List[StudentResponse])
def list_students(service: StudentService = Depends(get_student_service)):
    """List all students"""
    return service.get_all_students()


@router.get("/students/{student_id}", response_model=StudentResponse)
def get_student(student_id: int, service: StudentService = Depends(get_student_service)):
    """Get a student by ID"""
    try:
        return service.get_student_by_id(student_id)
    except StudentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/students", response_model=StudentResponse, status_code=201)
def create_student(student_data: StudentCreateRequest, service: StudentService = Depends(get_student_service)):
    """Create a new student"""
    return service.create_student(Student(**student_data.model_dump()))


@router.put("/students/{student_id}", response_model=StudentResponse)
def update_student(
    student_id: int,
    student_data: StudentUpdateRequest,
    service: StudentService = Depends(get_student_service),
):
    """Replace name, email and course of a student"""
    try:
        return service.update_student(student_id, Student(**student_data.model_dump()))
    except StudentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/students/{student_id}", status_code=204)
def delete_student(student_id: int, service: StudentService = Depends(get_student_service)):
    """Delete a student. Unknown IDs are ignored."""
    service.delete_student(student_id)
    return None
