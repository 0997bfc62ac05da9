import logging
from datetime import datetime
from typing import Callable, Optional, Tuple

from fittrack.models.program import WorkoutProgram, WorkoutDay
from fittrack.models.user import UserProfile
from fittrack.repositories.program_repository import ProgramRepository
from fittrack.services.program_templates import ProgramTemplateRegistry

logger = logging.getLogger(__name__)


class ProgramScheduler:
    """Указатель прогресса программы: неделя и индекс дня внутри недели."""

    def __init__(
            self,
            programs: Optional[ProgramRepository] = None,
            templates: Optional[ProgramTemplateRegistry] = None,
            now: Callable[[], datetime] = datetime.now,
    ):
        self.programs = programs
        self.templates = templates
        self._now = now

    @staticmethod
    def todays_workout(program: WorkoutProgram) -> Optional[WorkoutDay]:
        # Индекс вне диапазона = "сегодня тренировки нет", а не ошибка
        if 0 <= program.current_day_index < len(program.days):
            return program.days[program.current_day_index]
        return None

    @staticmethod
    def completion_percentage(program: WorkoutProgram) -> float:
        if program.duration_weeks <= 0 or program.days_per_week <= 0:
            return 0.0
        total_days = program.duration_weeks * program.days_per_week
        completed_days = (program.current_week - 1) * program.days_per_week + program.current_day_index
        return min(completed_days / total_days, 1.0)

    @staticmethod
    def next_position(program: WorkoutProgram) -> Tuple[int, int]:
        week = program.current_week
        day_index = program.current_day_index + 1
        if day_index >= program.days_per_week:
            day_index = 0
            # Верхней границы нет: программа может "перебежать" duration_weeks
            week += 1
        return week, day_index

    @classmethod
    def advance_to_next_day(cls, program: WorkoutProgram) -> None:
        program.current_week, program.current_day_index = cls.next_position(program)

    async def active_program(self) -> Optional[WorkoutProgram]:
        return await self.programs.get_active()

    async def activate(self, program: WorkoutProgram, profile: Optional[UserProfile] = None) -> WorkoutProgram:
        """Сделать программу единственной активной и начать её с первой недели."""
        previous = [p for p in await self.programs.list_active() if p is not program]
        for other in previous:
            other.is_active = False

        program.is_active = True
        program.start_date = self._now()
        program.current_week = 1
        program.current_day_index = 0

        if profile is not None:
            profile.active_program = program

        await self.programs.save(program, profile, *previous)
        logger.info("Активирована программа '%s' (деактивировано: %d)", program.name, len(previous))
        return program

    async def activate_template(self, template_id: str, profile: Optional[UserProfile] = None) -> WorkoutProgram:
        program = self.templates.build(template_id)
        return await self.activate(program, profile)
