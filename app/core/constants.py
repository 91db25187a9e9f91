"""Application constants."""

# Session naming by local hour of day: (start_hour, end_hour_exclusive, name)
SESSION_NAME_BY_HOUR = (
    (5, 12, "Morning Workout"),
    (12, 17, "Afternoon Workout"),
    (17, 21, "Evening Workout"),
)
DEFAULT_SESSION_NAME = "Night Workout"

MAX_EXERCISE_NAME_LENGTH = 255
MAX_SESSION_NAME_LENGTH = 255
