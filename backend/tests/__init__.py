# Force SQLModel table registration at test discovery time
# This ensures all models are registered before any test database creation
from student_management.models.student import Student  # noqa: F401
