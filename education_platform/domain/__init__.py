"""
DOMAIN LAYER - The heart of the education platform

This layer contains:
- Entities: Course, Chapter, Lesson, Person, CourseProgress, LessonProgress
- Value Objects: Identifier, Name, Email, Duration, Index, DocumentId, ...
- Ports: Interfaces that infrastructure implements
- Services: Pure domain logic (validation, segmentation, event dispatch)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, SQLAlchemy, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
"""
