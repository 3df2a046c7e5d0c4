"""
filters.py - Filter values
Single responsibility: name the visibility filters a task list can show.
"""

FILTER_ALL = "all"
FILTER_ACTIVE = "active"
FILTER_COMPLETED = "completed"

# Display order of the filter controls
FILTER_VALUES: tuple[str, ...] = (FILTER_ALL, FILTER_ACTIVE, FILTER_COMPLETED)

DEFAULT_FILTER = FILTER_ALL


def is_valid_filter(value) -> bool:
    return value in FILTER_VALUES
