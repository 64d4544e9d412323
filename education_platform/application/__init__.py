"""
APPLICATION LAYER - Use cases

- commands/ → write operations on the Course, Person and CourseProgress aggregates
- queries/  → read operations
- dto/      → Pydantic models handed to the API layer
- common/   → Command/Query base classes
"""
