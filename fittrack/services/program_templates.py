from typing import Iterable, List, Optional

from fittrack.core.exceptions import TemplateNotFoundError
from fittrack.core.initial_programs import INITIAL_PROGRAMS
from fittrack.models.program import WorkoutProgram, WorkoutDay, WorkoutExercise
from fittrack.schemas.program import ProgramTemplate


class ProgramTemplateRegistry:
    def __init__(self, templates: Iterable[ProgramTemplate]):
        self._templates = {template.id: template for template in templates}

    @classmethod
    def default(cls) -> "ProgramTemplateRegistry":
        return cls(ProgramTemplate(**data) for data in INITIAL_PROGRAMS)

    def list_templates(self) -> List[ProgramTemplate]:
        return list(self._templates.values())

    def get(self, template_id: str) -> Optional[ProgramTemplate]:
        return self._templates.get(template_id)

    def build(self, template) -> WorkoutProgram:
        """Собрать новое дерево программа -> дни -> упражнения из шаблона."""
        if isinstance(template, str):
            found = self.get(template)
            if found is None:
                raise TemplateNotFoundError(template)
            template = found

        program = WorkoutProgram(
            name=template.name,
            description=template.description,
            template_id=template.id,
            duration_weeks=template.duration_weeks,
            days_per_week=template.days_per_week,
            goal=template.goal,
            level=template.level,
        )

        for day_number, day_template in enumerate(template.days, start=1):
            day = WorkoutDay(
                name=day_template.name,
                day_number=day_number,
                focus=day_template.focus,
                estimated_minutes=day_template.estimated_minutes,
                notes=day_template.notes,
            )
            for order_index, ex in enumerate(day_template.exercises):
                day.exercises.append(WorkoutExercise(
                    exercise_id=ex.exercise_id,
                    exercise_name=ex.exercise_name,
                    sets=ex.sets,
                    rep_min=ex.rep_min,
                    rep_max=ex.rep_max,
                    rest_seconds=ex.rest_seconds,
                    rpe_target=ex.rpe_target,
                    notes=ex.notes,
                    order_index=order_index,
                    is_warmup=ex.is_warmup,
                ))
            program.days.append(day)

        return program
