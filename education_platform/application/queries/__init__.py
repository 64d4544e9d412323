"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- courses/  → get_course
- people/   → group_people_by_segment
- progress/ → get_progress_summary
"""
