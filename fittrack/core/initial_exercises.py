"""
Начальный справочник упражнений.
id используются в шаблонах программ и в журналах тренировок, менять их нельзя
"""

INITIAL_EXERCISES = [
    # Грудь
    {
        "id": "barbell_bench_press",
        "name": "Barbell Bench Press",
        "muscle_groups": ["chest", "triceps", "shoulders"],
        "primary_muscle": "chest",
        "equipment": ["barbell"],
        "difficulty": "intermediate",
        "category": "push",
        "instructions": [
            "Lie on the bench with eyes under the bar",
            "Grip slightly wider than shoulder width",
            "Lower the bar to mid-chest",
            "Press back up to lockout",
        ],
        "tips": ["Keep shoulder blades retracted", "Drive feet into the floor"],
        "common_mistakes": ["Bouncing the bar off the chest", "Flaring elbows to 90 degrees"],
        "is_compound": True,
        "alternatives": ["dumbbell_bench_press", "push_up"],
    },
    {
        "id": "dumbbell_bench_press",
        "name": "Dumbbell Bench Press",
        "muscle_groups": ["chest", "triceps", "shoulders"],
        "primary_muscle": "chest",
        "equipment": ["dumbbell"],
        "difficulty": "beginner",
        "category": "push",
        "instructions": ["Press the dumbbells up from chest level", "Lower under control"],
        "tips": ["Let the dumbbells travel slightly inward at the top"],
        "common_mistakes": ["Dropping the weights too fast"],
        "is_compound": True,
        "alternatives": ["barbell_bench_press", "push_up"],
    },
    {
        "id": "incline_dumbbell_press",
        "name": "Incline Dumbbell Press",
        "muscle_groups": ["chest", "shoulders", "triceps"],
        "primary_muscle": "chest",
        "equipment": ["dumbbell"],
        "difficulty": "beginner",
        "category": "push",
        "instructions": ["Set the bench to 30-45 degrees", "Press the dumbbells over the upper chest"],
        "tips": ["Keep wrists stacked over elbows"],
        "common_mistakes": ["Bench set too steep"],
        "is_compound": True,
        "alternatives": ["dumbbell_bench_press"],
    },
    {
        "id": "cable_fly",
        "name": "Cable Fly",
        "muscle_groups": ["chest"],
        "primary_muscle": "chest",
        "equipment": ["cables"],
        "difficulty": "beginner",
        "category": "push",
        "instructions": ["Bring the handles together in a wide arc"],
        "tips": ["Keep a slight bend in the elbows"],
        "common_mistakes": ["Turning the fly into a press"],
        "alternatives": ["dumbbell_bench_press"],
    },
    {
        "id": "push_up",
        "name": "Push-Up",
        "muscle_groups": ["chest", "triceps", "shoulders", "abs"],
        "primary_muscle": "chest",
        "equipment": ["bodyweight"],
        "difficulty": "beginner",
        "category": "push",
        "instructions": ["Hands under shoulders", "Lower chest to the floor", "Push back up"],
        "tips": ["Keep the body in a straight line"],
        "common_mistakes": ["Sagging hips"],
        "is_compound": True,
        "alternatives": ["dumbbell_bench_press"],
    },

    # Плечи и руки
    {
        "id": "overhead_press",
        "name": "Overhead Press",
        "muscle_groups": ["shoulders", "triceps", "abs"],
        "primary_muscle": "shoulders",
        "equipment": ["barbell"],
        "difficulty": "intermediate",
        "category": "push",
        "instructions": ["Start with the bar on the front delts", "Press overhead to lockout"],
        "tips": ["Squeeze glutes to avoid leaning back"],
        "common_mistakes": ["Excessive lower back arch"],
        "is_compound": True,
        "alternatives": ["dumbbell_shoulder_press"],
    },
    {
        "id": "dumbbell_shoulder_press",
        "name": "Dumbbell Shoulder Press",
        "muscle_groups": ["shoulders", "triceps"],
        "primary_muscle": "shoulders",
        "equipment": ["dumbbell"],
        "difficulty": "beginner",
        "category": "push",
        "instructions": ["Press the dumbbells from shoulder height to overhead"],
        "tips": ["Do not lock the elbows aggressively"],
        "common_mistakes": ["Using leg drive"],
        "is_compound": True,
        "alternatives": ["overhead_press"],
    },
    {
        "id": "lateral_raise",
        "name": "Lateral Raise",
        "muscle_groups": ["shoulders"],
        "primary_muscle": "shoulders",
        "equipment": ["dumbbell"],
        "difficulty": "beginner",
        "category": "push",
        "instructions": ["Raise the dumbbells out to the sides to shoulder height"],
        "tips": ["Lead with the elbows"],
        "common_mistakes": ["Swinging the weights"],
        "alternatives": [],
    },
    {
        "id": "tricep_pushdown",
        "name": "Tricep Pushdown",
        "muscle_groups": ["triceps"],
        "primary_muscle": "triceps",
        "equipment": ["cables"],
        "difficulty": "beginner",
        "category": "push",
        "instructions": ["Pin the elbows to your sides", "Extend the arms fully"],
        "tips": ["Control the return"],
        "common_mistakes": ["Elbows drifting forward"],
        "alternatives": ["overhead_tricep_extension"],
    },
    {
        "id": "overhead_tricep_extension",
        "name": "Overhead Tricep Extension",
        "muscle_groups": ["triceps"],
        "primary_muscle": "triceps",
        "equipment": ["dumbbell"],
        "difficulty": "beginner",
        "category": "push",
        "instructions": ["Hold one dumbbell overhead", "Lower it behind the head and extend"],
        "tips": ["Keep elbows pointing forward"],
        "common_mistakes": ["Flaring elbows"],
        "alternatives": ["tricep_pushdown"],
    },
    {
        "id": "dumbbell_curl",
        "name": "Dumbbell Curl",
        "muscle_groups": ["biceps", "forearms"],
        "primary_muscle": "biceps",
        "equipment": ["dumbbell"],
        "difficulty": "beginner",
        "category": "pull",
        "instructions": ["Curl the dumbbells keeping elbows still"],
        "tips": ["Supinate at the top"],
        "common_mistakes": ["Swinging the torso"],
        "alternatives": ["hammer_curl"],
    },
    {
        "id": "hammer_curl",
        "name": "Hammer Curl",
        "muscle_groups": ["biceps", "forearms"],
        "primary_muscle": "biceps",
        "equipment": ["dumbbell"],
        "difficulty": "beginner",
        "category": "pull",
        "instructions": ["Curl with a neutral grip"],
        "tips": ["Keep wrists straight"],
        "common_mistakes": ["Partial range of motion"],
        "alternatives": ["dumbbell_curl"],
    },

    # Спина
    {
        "id": "barbell_row",
        "name": "Barbell Row",
        "muscle_groups": ["back", "lats", "biceps", "lower_back"],
        "primary_muscle": "back",
        "equipment": ["barbell"],
        "difficulty": "intermediate",
        "category": "pull",
        "instructions": ["Hinge to roughly 45 degrees", "Row the bar to the lower ribs"],
        "tips": ["Keep the spine neutral"],
        "common_mistakes": ["Standing too upright", "Jerking the weight"],
        "is_compound": True,
        "alternatives": ["dumbbell_row", "seated_cable_row"],
    },
    {
        "id": "dumbbell_row",
        "name": "One-Arm Dumbbell Row",
        "muscle_groups": ["back", "lats", "biceps"],
        "primary_muscle": "lats",
        "equipment": ["dumbbell"],
        "difficulty": "beginner",
        "category": "pull",
        "instructions": ["Support yourself on a bench", "Row the dumbbell to the hip"],
        "tips": ["Pull with the elbow, not the hand"],
        "common_mistakes": ["Rotating the torso"],
        "is_compound": True,
        "alternatives": ["barbell_row"],
    },
    {
        "id": "seated_cable_row",
        "name": "Seated Cable Row",
        "muscle_groups": ["back", "lats", "biceps"],
        "primary_muscle": "back",
        "equipment": ["cables"],
        "difficulty": "beginner",
        "category": "pull",
        "instructions": ["Sit tall and pull the handle to the stomach"],
        "tips": ["Squeeze shoulder blades together"],
        "common_mistakes": ["Leaning far back"],
        "is_compound": True,
        "alternatives": ["barbell_row", "dumbbell_row"],
    },
    {
        "id": "lat_pulldown",
        "name": "Lat Pulldown",
        "muscle_groups": ["lats", "biceps", "back"],
        "primary_muscle": "lats",
        "equipment": ["cables"],
        "difficulty": "beginner",
        "category": "pull",
        "instructions": ["Pull the bar to the upper chest", "Return with control"],
        "tips": ["Drive elbows down and back"],
        "common_mistakes": ["Pulling behind the neck"],
        "is_compound": True,
        "alternatives": ["pull_up"],
    },
    {
        "id": "pull_up",
        "name": "Pull-Up",
        "muscle_groups": ["lats", "biceps", "back"],
        "primary_muscle": "lats",
        "equipment": ["pullup_bar"],
        "difficulty": "intermediate",
        "category": "pull",
        "instructions": ["Hang with arms straight", "Pull until the chin clears the bar"],
        "tips": ["Start each rep from a dead hang"],
        "common_mistakes": ["Kipping", "Half reps"],
        "is_compound": True,
        "alternatives": ["lat_pulldown"],
    },
    {
        "id": "face_pull",
        "name": "Face Pull",
        "muscle_groups": ["shoulders", "traps", "back"],
        "primary_muscle": "shoulders",
        "equipment": ["cables"],
        "difficulty": "beginner",
        "category": "pull",
        "instructions": ["Pull the rope towards the face, hands ending by the ears"],
        "tips": ["Externally rotate at the end"],
        "common_mistakes": ["Using too much weight"],
        "alternatives": [],
    },
    {
        "id": "deadlift",
        "name": "Deadlift",
        "muscle_groups": ["hamstrings", "glutes", "lower_back", "back", "traps"],
        "primary_muscle": "hamstrings",
        "equipment": ["barbell"],
        "difficulty": "advanced",
        "category": "pull",
        "instructions": ["Bar over mid-foot", "Brace and push the floor away", "Lock out hips and knees together"],
        "tips": ["Keep the bar close to the legs"],
        "common_mistakes": ["Rounding the lower back", "Hips shooting up first"],
        "is_compound": True,
        "alternatives": ["romanian_deadlift"],
    },

    # Ноги
    {
        "id": "barbell_squat",
        "name": "Barbell Back Squat",
        "muscle_groups": ["quads", "glutes", "hamstrings", "lower_back"],
        "primary_muscle": "quads",
        "equipment": ["barbell"],
        "difficulty": "intermediate",
        "category": "legs",
        "instructions": ["Bar on the upper back", "Sit down between the hips", "Stand up driving through mid-foot"],
        "tips": ["Brace the core before each rep"],
        "common_mistakes": ["Knees caving in", "Heels lifting"],
        "is_compound": True,
        "alternatives": ["goblet_squat", "leg_press"],
    },
    {
        "id": "goblet_squat",
        "name": "Goblet Squat",
        "muscle_groups": ["quads", "glutes", "abs"],
        "primary_muscle": "quads",
        "equipment": ["dumbbell"],
        "difficulty": "beginner",
        "category": "legs",
        "instructions": ["Hold a dumbbell at the chest", "Squat down keeping the torso upright"],
        "tips": ["Elbows track inside the knees"],
        "common_mistakes": ["Rounding forward"],
        "is_compound": True,
        "alternatives": ["barbell_squat"],
    },
    {
        "id": "leg_press",
        "name": "Leg Press",
        "muscle_groups": ["quads", "glutes"],
        "primary_muscle": "quads",
        "equipment": ["machine"],
        "difficulty": "beginner",
        "category": "legs",
        "instructions": ["Lower the sled until knees reach 90 degrees", "Press back up"],
        "tips": ["Keep the lower back on the pad"],
        "common_mistakes": ["Locking out the knees hard"],
        "is_compound": True,
        "alternatives": ["barbell_squat", "goblet_squat"],
    },
    {
        "id": "romanian_deadlift",
        "name": "Romanian Deadlift",
        "muscle_groups": ["hamstrings", "glutes", "lower_back"],
        "primary_muscle": "hamstrings",
        "equipment": ["barbell"],
        "difficulty": "intermediate",
        "category": "legs",
        "instructions": ["Push hips back with soft knees", "Lower the bar along the thighs", "Return to standing"],
        "tips": ["Feel the stretch in the hamstrings"],
        "common_mistakes": ["Squatting the weight down"],
        "is_compound": True,
        "alternatives": ["deadlift", "leg_curl"],
    },
    {
        "id": "walking_lunge",
        "name": "Walking Lunge",
        "muscle_groups": ["quads", "glutes", "hamstrings"],
        "primary_muscle": "quads",
        "equipment": ["dumbbell"],
        "difficulty": "beginner",
        "category": "legs",
        "instructions": ["Step forward and lower the back knee", "Drive up and step through"],
        "tips": ["Keep the front heel down"],
        "common_mistakes": ["Short steps"],
        "is_compound": True,
        "alternatives": ["goblet_squat"],
    },
    {
        "id": "leg_curl",
        "name": "Lying Leg Curl",
        "muscle_groups": ["hamstrings"],
        "primary_muscle": "hamstrings",
        "equipment": ["machine"],
        "difficulty": "beginner",
        "category": "legs",
        "instructions": ["Curl the pad towards the glutes"],
        "tips": ["Pause at peak contraction"],
        "common_mistakes": ["Lifting the hips off the pad"],
        "alternatives": ["romanian_deadlift"],
    },
    {
        "id": "leg_extension",
        "name": "Leg Extension",
        "muscle_groups": ["quads"],
        "primary_muscle": "quads",
        "equipment": ["machine"],
        "difficulty": "beginner",
        "category": "legs",
        "instructions": ["Extend the knees fully", "Lower under control"],
        "tips": ["Point toes slightly up"],
        "common_mistakes": ["Swinging the weight"],
        "alternatives": ["leg_press"],
    },
    {
        "id": "calf_raise",
        "name": "Standing Calf Raise",
        "muscle_groups": ["calves"],
        "primary_muscle": "calves",
        "equipment": ["machine"],
        "difficulty": "beginner",
        "category": "legs",
        "instructions": ["Rise onto the toes", "Lower into a full stretch"],
        "tips": ["Pause at the bottom"],
        "common_mistakes": ["Bouncing"],
        "alternatives": [],
    },

    # Кор
    {
        "id": "plank",
        "name": "Plank",
        "muscle_groups": ["abs", "obliques"],
        "primary_muscle": "abs",
        "equipment": ["bodyweight"],
        "difficulty": "beginner",
        "category": "core",
        "instructions": ["Hold a straight line from head to heels on the forearms"],
        "tips": ["Squeeze glutes and brace"],
        "common_mistakes": ["Hips too high or too low"],
        "alternatives": ["hanging_leg_raise"],
    },
    {
        "id": "hanging_leg_raise",
        "name": "Hanging Leg Raise",
        "muscle_groups": ["abs", "obliques"],
        "primary_muscle": "abs",
        "equipment": ["pullup_bar"],
        "difficulty": "intermediate",
        "category": "core",
        "instructions": ["Hang from the bar", "Raise the legs to hip height or higher"],
        "tips": ["Avoid swinging"],
        "common_mistakes": ["Using momentum"],
        "alternatives": ["plank"],
    },
    {
        "id": "kettlebell_swing",
        "name": "Kettlebell Swing",
        "muscle_groups": ["glutes", "hamstrings", "lower_back"],
        "primary_muscle": "glutes",
        "equipment": ["kettlebell"],
        "difficulty": "intermediate",
        "category": "full_body",
        "instructions": ["Hike the bell back", "Snap the hips forward to float it to chest height"],
        "tips": ["It is a hinge, not a squat"],
        "common_mistakes": ["Lifting with the arms"],
        "is_compound": True,
        "alternatives": ["romanian_deadlift"],
    },
]
