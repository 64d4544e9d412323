"""
COMMANDS - Write operations (CQRS)

Commands change aggregate state. Each command has:
- Command class: Input data for the operation
- Handler class: Loads the aggregate, applies the change, saves it

Subfolders:
- courses/  → create_course, add/remove/reorder chapter, add/remove/reorder/update lesson
- people/   → register_person
- progress/ → start_course_progress, toggle_lesson_completion
"""
