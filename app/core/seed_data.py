"""Built-in exercise library, inserted on first launch.

Names are unique across the whole list; the library uses the name as its key.
"""

from app.core.enums import ExerciseCategory

# ── (name, category) in display order within each category ──
SEED_EXERCISES: list[tuple[str, ExerciseCategory]] = [
    # Chest
    ("Bench Press", ExerciseCategory.CHEST),
    ("Incline Bench Press", ExerciseCategory.CHEST),
    ("Decline Bench Press", ExerciseCategory.CHEST),
    ("Dumbbell Fly", ExerciseCategory.CHEST),
    ("Cable Fly", ExerciseCategory.CHEST),
    ("Push Up", ExerciseCategory.CHEST),
    ("Chest Dips", ExerciseCategory.CHEST),
    # Back
    ("Deadlift", ExerciseCategory.BACK),
    ("Pull Up", ExerciseCategory.BACK),
    ("Chin Up", ExerciseCategory.BACK),
    ("Barbell Row", ExerciseCategory.BACK),
    ("Dumbbell Row", ExerciseCategory.BACK),
    ("Lat Pulldown", ExerciseCategory.BACK),
    ("Seated Cable Row", ExerciseCategory.BACK),
    ("Face Pull", ExerciseCategory.BACK),
    ("T-Bar Row", ExerciseCategory.BACK),
    # Shoulders
    ("Overhead Press", ExerciseCategory.SHOULDERS),
    ("Dumbbell Shoulder Press", ExerciseCategory.SHOULDERS),
    ("Lateral Raise", ExerciseCategory.SHOULDERS),
    ("Front Raise", ExerciseCategory.SHOULDERS),
    ("Rear Delt Fly", ExerciseCategory.SHOULDERS),
    ("Arnold Press", ExerciseCategory.SHOULDERS),
    ("Upright Row", ExerciseCategory.SHOULDERS),
    # Arms
    ("Barbell Curl", ExerciseCategory.ARMS),
    ("Dumbbell Curl", ExerciseCategory.ARMS),
    ("Hammer Curl", ExerciseCategory.ARMS),
    ("Preacher Curl", ExerciseCategory.ARMS),
    ("Cable Curl", ExerciseCategory.ARMS),
    ("Tricep Pushdown", ExerciseCategory.ARMS),
    ("Skull Crusher", ExerciseCategory.ARMS),
    ("Close Grip Bench Press", ExerciseCategory.ARMS),
    ("Overhead Tricep Extension", ExerciseCategory.ARMS),
    # Legs
    ("Squat", ExerciseCategory.LEGS),
    ("Front Squat", ExerciseCategory.LEGS),
    ("Romanian Deadlift", ExerciseCategory.LEGS),
    ("Leg Press", ExerciseCategory.LEGS),
    ("Lunges", ExerciseCategory.LEGS),
    ("Leg Extension", ExerciseCategory.LEGS),
    ("Leg Curl", ExerciseCategory.LEGS),
    ("Calf Raise", ExerciseCategory.LEGS),
    ("Bulgarian Split Squat", ExerciseCategory.LEGS),
    ("Hack Squat", ExerciseCategory.LEGS),
    # Core
    ("Plank", ExerciseCategory.CORE),
    ("Crunch", ExerciseCategory.CORE),
    ("Cable Crunch", ExerciseCategory.CORE),
    ("Hanging Leg Raise", ExerciseCategory.CORE),
    ("Ab Wheel Rollout", ExerciseCategory.CORE),
    ("Russian Twist", ExerciseCategory.CORE),
    ("Side Plank", ExerciseCategory.CORE),
    # Cardio
    ("Running", ExerciseCategory.CARDIO),
    ("Cycling", ExerciseCategory.CARDIO),
    ("Rowing Machine", ExerciseCategory.CARDIO),
    ("Jump Rope", ExerciseCategory.CARDIO),
    ("Elliptical", ExerciseCategory.CARDIO),
]
