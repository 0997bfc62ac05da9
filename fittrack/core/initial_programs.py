"""
Готовые шаблоны программ тренировок.
Все exercise_id должны существовать в INITIAL_EXERCISES
"""


def _exercise(exercise_id, name, sets, rep_min, rep_max, rest_seconds=90, rpe_target=8.0, notes=""):
    return {
        "exercise_id": exercise_id,
        "exercise_name": name,
        "sets": sets,
        "rep_min": rep_min,
        "rep_max": rep_max,
        "rest_seconds": rest_seconds,
        "rpe_target": rpe_target,
        "notes": notes,
    }


INITIAL_PROGRAMS = [
    {
        "id": "upper_lower_beginner",
        "name": "Upper / Lower Split",
        "subtitle": "4 days · 12 weeks",
        "description": "Classic split alternating upper and lower body days. "
                       "Good balance of frequency and recovery for new lifters.",
        "duration_weeks": 12,
        "days_per_week": 4,
        "goal": "build_muscle",
        "level": "beginner",
        "days": [
            {
                "name": "Upper A",
                "focus": "push",
                "estimated_minutes": 60,
                "exercises": [
                    _exercise("barbell_bench_press", "Barbell Bench Press", 4, 6, 8, rest_seconds=150),
                    _exercise("barbell_row", "Barbell Row", 4, 6, 8, rest_seconds=150),
                    _exercise("dumbbell_shoulder_press", "Dumbbell Shoulder Press", 3, 8, 10),
                    _exercise("lat_pulldown", "Lat Pulldown", 3, 10, 12),
                    _exercise("dumbbell_curl", "Dumbbell Curl", 2, 10, 12, rest_seconds=60),
                    _exercise("tricep_pushdown", "Tricep Pushdown", 2, 10, 12, rest_seconds=60),
                ],
            },
            {
                "name": "Lower A",
                "focus": "legs",
                "estimated_minutes": 60,
                "exercises": [
                    _exercise("barbell_squat", "Barbell Back Squat", 4, 6, 8, rest_seconds=180),
                    _exercise("romanian_deadlift", "Romanian Deadlift", 3, 8, 10, rest_seconds=120),
                    _exercise("leg_press", "Leg Press", 3, 10, 12),
                    _exercise("leg_curl", "Lying Leg Curl", 3, 10, 12, rest_seconds=60),
                    _exercise("calf_raise", "Standing Calf Raise", 4, 12, 15, rest_seconds=60),
                ],
            },
            {
                "name": "Upper B",
                "focus": "pull",
                "estimated_minutes": 60,
                "exercises": [
                    _exercise("overhead_press", "Overhead Press", 4, 6, 8, rest_seconds=150),
                    _exercise("pull_up", "Pull-Up", 4, 6, 10, rest_seconds=120, notes="Use assistance if needed"),
                    _exercise("incline_dumbbell_press", "Incline Dumbbell Press", 3, 8, 10),
                    _exercise("seated_cable_row", "Seated Cable Row", 3, 10, 12),
                    _exercise("lateral_raise", "Lateral Raise", 3, 12, 15, rest_seconds=60),
                    _exercise("face_pull", "Face Pull", 2, 12, 15, rest_seconds=60),
                ],
            },
            {
                "name": "Lower B",
                "focus": "legs",
                "estimated_minutes": 55,
                "exercises": [
                    _exercise("deadlift", "Deadlift", 3, 4, 6, rest_seconds=180, rpe_target=7.5),
                    _exercise("walking_lunge", "Walking Lunge", 3, 10, 12),
                    _exercise("leg_extension", "Leg Extension", 3, 12, 15, rest_seconds=60),
                    _exercise("calf_raise", "Standing Calf Raise", 4, 12, 15, rest_seconds=60),
                    _exercise("plank", "Plank", 3, 30, 60, rest_seconds=45, notes="Reps are seconds"),
                ],
            },
        ],
    },
    {
        "id": "full_body_beginner",
        "name": "Full Body Foundations",
        "subtitle": "3 days · 8 weeks",
        "description": "Three full body sessions a week built around basic compound lifts.",
        "duration_weeks": 8,
        "days_per_week": 3,
        "goal": "recomposition",
        "level": "beginner",
        "days": [
            {
                "name": "Full Body A",
                "focus": "full_body",
                "estimated_minutes": 50,
                "exercises": [
                    _exercise("goblet_squat", "Goblet Squat", 3, 8, 12),
                    _exercise("dumbbell_bench_press", "Dumbbell Bench Press", 3, 8, 12),
                    _exercise("dumbbell_row", "One-Arm Dumbbell Row", 3, 8, 12),
                    _exercise("plank", "Plank", 3, 30, 45, rest_seconds=45, notes="Reps are seconds"),
                ],
            },
            {
                "name": "Full Body B",
                "focus": "full_body",
                "estimated_minutes": 50,
                "exercises": [
                    _exercise("romanian_deadlift", "Romanian Deadlift", 3, 8, 10, rest_seconds=120),
                    _exercise("dumbbell_shoulder_press", "Dumbbell Shoulder Press", 3, 8, 12),
                    _exercise("lat_pulldown", "Lat Pulldown", 3, 10, 12),
                    _exercise("walking_lunge", "Walking Lunge", 2, 10, 12),
                ],
            },
            {
                "name": "Full Body C",
                "focus": "full_body",
                "estimated_minutes": 45,
                "exercises": [
                    _exercise("leg_press", "Leg Press", 3, 10, 12),
                    _exercise("push_up", "Push-Up", 3, 8, 15, rest_seconds=60),
                    _exercise("seated_cable_row", "Seated Cable Row", 3, 10, 12),
                    _exercise("kettlebell_swing", "Kettlebell Swing", 3, 12, 15, rest_seconds=60),
                ],
            },
        ],
    },
    {
        "id": "ppl_intermediate",
        "name": "Push / Pull / Legs",
        "subtitle": "6 days · 10 weeks",
        "description": "High frequency split hitting every muscle group twice a week.",
        "duration_weeks": 10,
        "days_per_week": 6,
        "goal": "build_muscle",
        "level": "intermediate",
        "days": [
            {
                "name": "Push A",
                "focus": "push",
                "exercises": [
                    _exercise("barbell_bench_press", "Barbell Bench Press", 4, 5, 8, rest_seconds=180),
                    _exercise("overhead_press", "Overhead Press", 3, 6, 10, rest_seconds=120),
                    _exercise("incline_dumbbell_press", "Incline Dumbbell Press", 3, 8, 12),
                    _exercise("lateral_raise", "Lateral Raise", 3, 12, 15, rest_seconds=60),
                    _exercise("tricep_pushdown", "Tricep Pushdown", 3, 10, 12, rest_seconds=60),
                ],
            },
            {
                "name": "Pull A",
                "focus": "pull",
                "exercises": [
                    _exercise("deadlift", "Deadlift", 3, 3, 5, rest_seconds=180),
                    _exercise("pull_up", "Pull-Up", 4, 6, 10, rest_seconds=120),
                    _exercise("seated_cable_row", "Seated Cable Row", 3, 8, 12),
                    _exercise("face_pull", "Face Pull", 3, 12, 15, rest_seconds=60),
                    _exercise("dumbbell_curl", "Dumbbell Curl", 3, 10, 12, rest_seconds=60),
                ],
            },
            {
                "name": "Legs A",
                "focus": "legs",
                "exercises": [
                    _exercise("barbell_squat", "Barbell Back Squat", 4, 5, 8, rest_seconds=180),
                    _exercise("romanian_deadlift", "Romanian Deadlift", 3, 8, 10, rest_seconds=120),
                    _exercise("leg_extension", "Leg Extension", 3, 12, 15, rest_seconds=60),
                    _exercise("calf_raise", "Standing Calf Raise", 4, 10, 15, rest_seconds=60),
                ],
            },
            {
                "name": "Push B",
                "focus": "push",
                "exercises": [
                    _exercise("dumbbell_shoulder_press", "Dumbbell Shoulder Press", 4, 8, 10),
                    _exercise("dumbbell_bench_press", "Dumbbell Bench Press", 3, 8, 12),
                    _exercise("cable_fly", "Cable Fly", 3, 12, 15, rest_seconds=60),
                    _exercise("overhead_tricep_extension", "Overhead Tricep Extension", 3, 10, 12, rest_seconds=60),
                ],
            },
            {
                "name": "Pull B",
                "focus": "pull",
                "exercises": [
                    _exercise("barbell_row", "Barbell Row", 4, 6, 10, rest_seconds=150),
                    _exercise("lat_pulldown", "Lat Pulldown", 3, 10, 12),
                    _exercise("dumbbell_row", "One-Arm Dumbbell Row", 3, 10, 12),
                    _exercise("hammer_curl", "Hammer Curl", 3, 10, 12, rest_seconds=60),
                ],
            },
            {
                "name": "Legs B",
                "focus": "legs",
                "exercises": [
                    _exercise("leg_press", "Leg Press", 4, 10, 12),
                    _exercise("walking_lunge", "Walking Lunge", 3, 10, 12),
                    _exercise("leg_curl", "Lying Leg Curl", 3, 10, 12, rest_seconds=60),
                    _exercise("hanging_leg_raise", "Hanging Leg Raise", 3, 10, 15, rest_seconds=60),
                ],
            },
        ],
    },
]
