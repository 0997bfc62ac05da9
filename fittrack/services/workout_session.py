"""
Активная тренировка: упражнение -> подход -> отдых -> следующее упражнение.

Состояния: idle -> exercising <-> resting -> complete -> (finish | cancel).
complete не хранится флагом, а выводится из указателя упражнения.
Все переходы и тики выполняются в одном потоке (event loop), поэтому
блокировки не нужны.
"""
import logging
from datetime import datetime
from typing import Callable, List, Optional

from pydantic import ValidationError

from fittrack.core.config import settings
from fittrack.core.exceptions import PersistenceError, SessionStateError
from fittrack.models.program import WorkoutDay, WorkoutExercise, WorkoutProgram
from fittrack.models.user import UserProfile
from fittrack.models.workout_log import WorkoutLog, ExerciseSetLog
from fittrack.repositories.workout_log_repository import WorkoutLogRepository
from fittrack.schemas.session import SessionPhase, SessionSnapshot, SetInput
from fittrack.services.overload import ProgressiveOverloadAdvisor
from fittrack.services.scheduler import ProgramScheduler
from fittrack.services.ticker import AsyncioTicker, Ticker

logger = logging.getLogger(__name__)

SessionListener = Callable[[SessionSnapshot], None]


class WorkoutSession:
    def __init__(
            self,
            advisor: ProgressiveOverloadAdvisor,
            workouts: WorkoutLogRepository,
            scheduler: Optional[ProgramScheduler] = None,
            ticker_factory: Callable[[], Ticker] = AsyncioTicker,
            now: Callable[[], datetime] = datetime.now,
    ):
        self.advisor = advisor
        self.workouts = workouts
        self.scheduler = scheduler or ProgramScheduler()
        self.elapsed_ticker = ticker_factory()
        self.rest_ticker = ticker_factory()
        self._now = now
        self._listeners: List[SessionListener] = []

        # RPE переживает подходы и тренировки, как положение слайдера
        self.pending_rpe: float = settings.DEFAULT_RPE
        self._reset()

    def _reset(self) -> None:
        self.active_day: Optional[WorkoutDay] = None
        self.active_log: Optional[WorkoutLog] = None
        self.program_name: Optional[str] = None
        self.current_exercise_index = 0
        self.current_set_index = 0
        self.rest_seconds_remaining = 0
        self.is_resting = False
        self.elapsed_seconds = 0
        self.pending_weight = ""
        self.pending_reps = ""

    # ==========================
    # СОСТОЯНИЕ
    # ==========================

    @property
    def is_active(self) -> bool:
        return self.active_log is not None

    @property
    def phase(self) -> SessionPhase:
        if not self.is_active:
            return SessionPhase.idle
        if self.is_resting:
            return SessionPhase.resting
        if self.current_exercise_index >= len(self.active_day.exercises):
            return SessionPhase.complete
        return SessionPhase.exercising

    @property
    def current_exercise(self) -> Optional[WorkoutExercise]:
        if self.active_day is None or self.current_exercise_index >= len(self.active_day.exercises):
            return None
        return self.active_day.exercises[self.current_exercise_index]

    @property
    def elapsed_text(self) -> str:
        mins, secs = divmod(self.elapsed_seconds, 60)
        return f"{mins:02d}:{secs:02d}"

    def snapshot(self) -> SessionSnapshot:
        exercise = self.current_exercise
        return SessionSnapshot(
            phase=self.phase,
            program_name=self.program_name,
            day_name=self.active_day.name if self.active_day is not None else None,
            current_exercise_index=self.current_exercise_index,
            current_set_index=self.current_set_index,
            exercise_count=len(self.active_day.exercises) if self.active_day is not None else 0,
            current_exercise_id=exercise.exercise_id if exercise is not None else None,
            current_exercise_name=exercise.exercise_name if exercise is not None else None,
            rest_seconds_remaining=self.rest_seconds_remaining,
            elapsed_seconds=self.elapsed_seconds,
            sets_logged=len(self.active_log.sets) if self.active_log is not None else 0,
            pending_weight=self.pending_weight,
            pending_reps=self.pending_reps,
            pending_rpe=self.pending_rpe,
        )

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Подписаться на снимки состояния; возвращает функцию отписки."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self) -> SessionSnapshot:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
        return snapshot

    # ==========================
    # ПЕРЕХОДЫ
    # ==========================

    async def start(self, day: WorkoutDay, program_name: str) -> SessionSnapshot:
        if self.is_active:
            raise SessionStateError("A workout session is already active")

        # История грузится до смены состояния: при ошибке хранилища сессия остаётся idle
        await self.advisor.load_previous_sets(day)

        self._reset()
        self.active_day = day
        self.program_name = program_name
        self.active_log = WorkoutLog(program_name=program_name, day_name=day.name, date=self._now())
        self.elapsed_ticker.start(self.on_elapsed_tick)

        logger.info("Тренировка начата: %s / %s (%d упражнений)", program_name, day.name, len(day.exercises))
        return self._emit()

    def log_set(self, weight=None, reps=None, rpe: Optional[float] = None) -> SessionSnapshot:
        """
        Записать подход из ожидающего ввода.

        Переданные аргументы сначала заменяют ожидающий ввод. Если ввод не
        разбирается или подход сейчас записать нельзя, ничего не меняется.
        """
        if weight is not None:
            self.pending_weight = str(weight)
        if reps is not None:
            self.pending_reps = str(reps)
        if rpe is not None:
            self.pending_rpe = rpe

        if self.phase != SessionPhase.exercising:
            logger.debug("log_set проигнорирован в состоянии %s", self.phase.value)
            return self.snapshot()

        parsed = self.parse_pending_input()
        if parsed is None:
            return self.snapshot()

        exercise = self.current_exercise
        self.active_log.sets.append(ExerciseSetLog(
            exercise_id=exercise.exercise_id,
            exercise_name=exercise.exercise_name,
            set_number=self.current_set_index + 1,
            reps=parsed.reps,
            weight_kg=parsed.weight_kg,
            rpe=parsed.rpe,
            completed_at=self._now(),
        ))

        self.current_set_index += 1
        if self.current_set_index >= exercise.sets:
            self.current_set_index = 0
            self.current_exercise_index += 1

        self._start_rest(exercise.rest_seconds)

        self.pending_weight = ""
        self.pending_reps = ""
        return self._emit()

    def parse_pending_input(self) -> Optional[SetInput]:
        try:
            return SetInput(weight_kg=self.pending_weight, reps=self.pending_reps, rpe=self.pending_rpe)
        except ValidationError:
            logger.debug("Неверный ввод подхода: weight=%r reps=%r", self.pending_weight, self.pending_reps)
            return None

    def can_log_set(self) -> bool:
        return self.phase == SessionPhase.exercising and self.parse_pending_input() is not None

    def skip_rest(self) -> SessionSnapshot:
        if not self.is_resting:
            return self.snapshot()
        self._end_rest()
        return self._emit()

    def skip_exercise(self) -> SessionSnapshot:
        if self.phase != SessionPhase.exercising:
            return self.snapshot()
        self.current_exercise_index = min(self.current_exercise_index + 1, len(self.active_day.exercises))
        self.current_set_index = 0
        return self._emit()

    async def finish(
            self,
            profile: Optional[UserProfile] = None,
            program: Optional[WorkoutProgram] = None,
    ) -> WorkoutLog:
        """
        Завершить тренировку (в том числе досрочно) и сохранить журнал.

        Рекорды, журнал и сдвиг программы сохраняются одной транзакцией.
        При PersistenceError сессия остаётся как была, вызов можно повторить.
        """
        if not self.is_active:
            raise SessionStateError("No active workout session to finish")

        log = self.active_log
        log.duration_seconds = self.elapsed_seconds
        log.bodyweight_kg = profile.weight_kg if profile is not None else None

        records = await self.advisor.detect_personal_records(log)

        position = None
        if program is not None:
            position = (program.current_week, program.current_day_index)
            self.scheduler.advance_to_next_day(program)

        try:
            await self.workouts.save_finished(log, records, restore=self._loaded_state(profile, program))
        except PersistenceError:
            if position is not None:
                program.current_week, program.current_day_index = position
            logger.warning("Не удалось сохранить тренировку '%s', сессия сохранена для повтора", log.day_name)
            raise

        self._stop_timers()
        logger.info(
            "Тренировка завершена: %s, %d подходов, %s",
            log.day_name, len(log.sets), log.duration_text,
        )
        self._reset()
        self._emit()
        return log

    def cancel(self) -> SessionSnapshot:
        if not self.is_active:
            return self.snapshot()
        self._stop_timers()
        logger.info("Тренировка отменена: %s", self.active_day.name)
        self._reset()
        return self._emit()

    # ==========================
    # ТАЙМЕРЫ
    # ==========================

    def on_elapsed_tick(self) -> None:
        if not self.is_active:
            return
        self.elapsed_seconds += 1
        self._emit()

    def on_rest_tick(self) -> None:
        if not self.is_resting:
            return
        self.rest_seconds_remaining -= 1
        if self.rest_seconds_remaining <= 0:
            self._end_rest()
        self._emit()

    def _start_rest(self, seconds: int) -> None:
        self.rest_ticker.stop()
        if seconds <= 0:
            self.is_resting = False
            self.rest_seconds_remaining = 0
            return
        self.rest_seconds_remaining = seconds
        self.is_resting = True
        self.rest_ticker.start(self.on_rest_tick)

    def _end_rest(self) -> None:
        self.rest_ticker.stop()
        self.is_resting = False
        self.rest_seconds_remaining = 0

    def _stop_timers(self) -> None:
        self.rest_ticker.stop()
        self.elapsed_ticker.stop()

    def _loaded_state(
            self,
            profile: Optional[UserProfile],
            program: Optional[WorkoutProgram],
    ) -> List[object]:
        """
        Объекты из БД, которые сессия читает и после неудачного finish.

        Откат истекает все загруженные объекты, а ленивая загрузка вне
        await невозможна, поэтому их нужно перечитать сразу после отката.
        Программа идёт первой: её перечитывание подтягивает дни и упражнения.
        """
        state: List[object] = [program, profile, self.active_day, *self.active_day.exercises]
        for sets in self.advisor.previous_sets.values():
            state.extend(sets)
        return [instance for instance in state if instance is not None]

    # ==========================
    # ПОДСКАЗКИ
    # ==========================

    def suggested_weight(self, exercise_id: str) -> Optional[float]:
        return self.advisor.suggested_weight(exercise_id)

    def previous_performance_summary(self, exercise_id: str) -> Optional[str]:
        return self.advisor.previous_performance_summary(exercise_id)

    def logged_sets_for(self, exercise_id: str) -> List[ExerciseSetLog]:
        if self.active_log is None:
            return []
        return self.active_log.sets_for(exercise_id)
