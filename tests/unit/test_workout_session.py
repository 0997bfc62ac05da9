"""
Модульные тесты для WorkoutSession.

Покрываемые сценарии:
- start: начальное состояние, повторный start, ошибка загрузки истории
- log_set: продвижение подходов и упражнений, отдых, неверный ввод
- таймеры: отдых по тикам, skip_rest, секундомер тренировки
- skip_exercise: без записи подхода, с ограничением по числу упражнений
- finish: сохранение журнала, рекорды, сдвиг программы, PersistenceError
- cancel: ничего не сохраняется, таймеры остановлены

Таймеры - ManualTicker, репозитории - AsyncMock.
"""

import pytest

from fittrack.core.exceptions import PersistenceError, SessionStateError
from fittrack.models.workout_log import WorkoutLog, ExerciseSetLog
from fittrack.schemas.session import SessionPhase
from fittrack.services.overload import ProgressiveOverloadAdvisor
from fittrack.services.ticker import ManualTicker
from fittrack.services.workout_session import WorkoutSession

pytestmark = pytest.mark.unit


@pytest.fixture
def session(mock_workouts, mock_records, now) -> WorkoutSession:
    advisor = ProgressiveOverloadAdvisor(mock_workouts, mock_records, now=now)
    return WorkoutSession(advisor, mock_workouts, ticker_factory=ManualTicker, now=now)


@pytest.fixture
async def started(session, day) -> WorkoutSession:
    await session.start(day, "Test Program")
    return session


# ---------------------------------------------------------------------------
# start
# ---------------------------------------------------------------------------

def test_new_session_is_idle(session):
    snapshot = session.snapshot()
    assert snapshot.phase == SessionPhase.idle
    assert snapshot.sets_logged == 0
    assert session.current_exercise is None


@pytest.mark.asyncio
async def test_start_enters_exercising(session, day, now):
    snapshot = await session.start(day, "Test Program")

    assert snapshot.phase == SessionPhase.exercising
    assert snapshot.program_name == "Test Program"
    assert snapshot.day_name == "Day 1"
    assert snapshot.current_exercise_index == 0
    assert snapshot.current_set_index == 0
    assert snapshot.current_exercise_id == "barbell_bench_press"
    assert snapshot.exercise_count == 2
    assert session.active_log.date == now()
    assert session.elapsed_ticker.running is True
    assert session.rest_ticker.running is False


@pytest.mark.asyncio
async def test_start_while_active_raises(started, day):
    with pytest.raises(SessionStateError):
        await started.start(day, "Other Program")
    assert started.program_name == "Test Program"


@pytest.mark.asyncio
async def test_start_keeps_idle_when_history_fails(session, day, mock_workouts):
    mock_workouts.list_recent.side_effect = PersistenceError("db locked")

    with pytest.raises(PersistenceError):
        await session.start(day, "Test Program")

    assert session.phase == SessionPhase.idle
    assert session.elapsed_ticker.running is False


# ---------------------------------------------------------------------------
# log_set
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_log_set_advances_set_and_starts_rest(started):
    snapshot = started.log_set(weight="80", reps="8")

    assert snapshot.phase == SessionPhase.resting
    assert snapshot.sets_logged == 1
    assert snapshot.current_set_index == 1
    assert snapshot.current_exercise_index == 0
    assert snapshot.rest_seconds_remaining == 60
    assert snapshot.pending_weight == ""
    assert snapshot.pending_reps == ""

    logged = started.active_log.sets[0]
    assert logged.set_number == 1
    assert logged.weight_kg == 80
    assert logged.reps == 8
    assert logged.rpe == 8.0
    assert started.rest_ticker.running is True


@pytest.mark.asyncio
async def test_last_set_moves_to_next_exercise(started):
    started.log_set(weight=80, reps=8)
    started.skip_rest()
    snapshot = started.log_set(weight=80, reps=7)

    assert snapshot.current_exercise_index == 1
    assert snapshot.current_set_index == 0
    assert snapshot.current_exercise_id == "dumbbell_curl"
    assert [s.set_number for s in started.logged_sets_for("barbell_bench_press")] == [1, 2]


@pytest.mark.asyncio
async def test_last_set_of_day_without_rest_completes(started):
    started.log_set(weight=80, reps=8)
    started.skip_rest()
    started.log_set(weight=80, reps=8)
    started.skip_rest()

    snapshot = started.log_set(weight=12, reps=10)

    # У последнего упражнения отдых 0 - сразу complete
    assert snapshot.phase == SessionPhase.complete
    assert snapshot.current_exercise_index == 2
    assert snapshot.current_exercise_id is None
    assert started.rest_ticker.running is False


@pytest.mark.asyncio
async def test_last_set_of_day_with_rest_goes_through_resting(session, day_factory):
    day = day_factory("Single", 1, [("barbell_squat", 1, 30)])
    await session.start(day, "Test Program")

    assert session.log_set(weight=100, reps=5).phase == SessionPhase.resting
    session.rest_ticker.advance(30)
    assert session.phase == SessionPhase.complete


@pytest.mark.parametrize("weight, reps", [
    ("abc", "8"),
    ("80", ""),
    ("80", "0"),
    ("80", "-3"),
    ("80", "eight"),
    ("-5", "8"),
    ("nan", "8"),
])
@pytest.mark.asyncio
async def test_invalid_input_is_ignored(started, weight, reps):
    snapshot = started.log_set(weight=weight, reps=reps)

    assert snapshot.phase == SessionPhase.exercising
    assert snapshot.sets_logged == 0
    assert snapshot.current_set_index == 0
    # Ввод остаётся в полях, чтобы его можно было поправить
    assert snapshot.pending_reps == reps


@pytest.mark.asyncio
async def test_empty_weight_means_bodyweight(started):
    started.log_set(weight="", reps="12")
    assert started.active_log.sets[0].weight_kg == 0.0
    assert started.active_log.sets[0].weight_text == "BW"


@pytest.mark.asyncio
async def test_rpe_persists_between_sets(started):
    started.log_set(weight=80, reps=8, rpe=9.5)
    started.skip_rest()
    started.log_set(weight=80, reps=8)

    assert [s.rpe for s in started.active_log.sets] == [9.5, 9.5]
    assert started.snapshot().pending_rpe == 9.5


@pytest.mark.asyncio
async def test_log_set_ignored_while_resting(started):
    started.log_set(weight=80, reps=8)
    snapshot = started.log_set(weight=80, reps=8)

    assert snapshot.phase == SessionPhase.resting
    assert snapshot.sets_logged == 1


def test_log_set_ignored_when_idle(session):
    assert session.log_set(weight=80, reps=8).phase == SessionPhase.idle
    assert session.can_log_set() is False


@pytest.mark.asyncio
async def test_can_log_set_reflects_pending_input(started):
    assert started.can_log_set() is False
    started.pending_reps = "5"
    assert started.can_log_set() is True


# ---------------------------------------------------------------------------
# Таймеры
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_rest_counts_down_and_ends(started):
    started.log_set(weight=80, reps=8)

    started.rest_ticker.advance(59)
    assert started.phase == SessionPhase.resting
    assert started.rest_seconds_remaining == 1

    started.rest_ticker.advance(5)
    assert started.phase == SessionPhase.exercising
    assert started.rest_seconds_remaining == 0
    assert started.rest_ticker.running is False


@pytest.mark.asyncio
async def test_skip_rest_zeroes_timer(started):
    started.log_set(weight=80, reps=8)
    snapshot = started.skip_rest()

    assert snapshot.phase == SessionPhase.exercising
    assert snapshot.rest_seconds_remaining == 0
    assert started.rest_ticker.running is False


@pytest.mark.asyncio
async def test_skip_rest_when_not_resting_is_noop(started):
    assert started.skip_rest().phase == SessionPhase.exercising


@pytest.mark.asyncio
async def test_elapsed_ticker_counts_seconds(started):
    started.elapsed_ticker.advance(65)
    assert started.elapsed_seconds == 65
    assert started.elapsed_text == "01:05"


# ---------------------------------------------------------------------------
# skip_exercise
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_skip_exercise_does_not_log_set(started):
    started.pending_weight = "80"
    snapshot = started.skip_exercise()

    assert snapshot.current_exercise_index == 1
    assert snapshot.current_set_index == 0
    assert snapshot.sets_logged == 0


@pytest.mark.asyncio
async def test_skip_exercise_is_capped(started):
    started.skip_exercise()
    started.skip_exercise()
    snapshot = started.skip_exercise()

    assert snapshot.phase == SessionPhase.complete
    assert snapshot.current_exercise_index == 2


# ---------------------------------------------------------------------------
# finish
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_finish_persists_log_and_advances_program(started, program, profile, mock_workouts):
    started.log_set(weight=80, reps=8)
    started.skip_rest()
    started.elapsed_ticker.advance(125)

    log = await started.finish(profile=profile, program=program)

    assert log.duration_seconds == 125
    assert log.bodyweight_kg == 80
    assert len(log.sets) == 1
    assert log.sets[0].is_personal_record is True
    assert (program.current_week, program.current_day_index) == (1, 1)

    mock_workouts.save_finished.assert_awaited_once()
    args, kwargs = mock_workouts.save_finished.call_args
    assert args[0] is log
    assert [r.exercise_id for r in args[1]] == ["barbell_bench_press"]
    # Перечитываются программа, профиль и план дня, по которым идёт сессия
    assert kwargs["restore"] == [program, profile, program.days[0], *program.days[0].exercises]

    assert started.phase == SessionPhase.idle
    assert started.elapsed_ticker.running is False
    assert started.rest_ticker.running is False


@pytest.mark.asyncio
async def test_finish_early_is_allowed(started, mock_workouts):
    log = await started.finish()

    assert log.sets == []
    assert log.bodyweight_kg is None
    mock_workouts.save_finished.assert_awaited_once()
    assert started.phase == SessionPhase.idle


@pytest.mark.asyncio
async def test_finish_when_idle_raises(session, mock_workouts):
    with pytest.raises(SessionStateError):
        await session.finish()
    mock_workouts.save_finished.assert_not_awaited()


@pytest.mark.asyncio
async def test_finish_failure_keeps_session_for_retry(started, program, mock_workouts):
    started.log_set(weight=80, reps=8)
    started.elapsed_ticker.advance(10)
    mock_workouts.save_finished.side_effect = PersistenceError("disk full")

    with pytest.raises(PersistenceError):
        await started.finish(program=program)

    assert started.is_active is True
    assert started.phase == SessionPhase.resting
    assert started.snapshot().sets_logged == 1
    assert started.elapsed_seconds == 10
    assert (program.current_week, program.current_day_index) == (1, 0)
    assert started.elapsed_ticker.running is True

    # Повтор после восстановления хранилища
    mock_workouts.save_finished.side_effect = lambda log, records=(), restore=(): log
    await started.finish(program=program)
    assert (program.current_week, program.current_day_index) == (1, 1)
    assert started.phase == SessionPhase.idle


@pytest.mark.asyncio
async def test_pending_rpe_survives_finish(started):
    started.log_set(weight=80, reps=8, rpe=6.5)
    await started.finish()
    assert started.pending_rpe == 6.5


# ---------------------------------------------------------------------------
# cancel
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_cancel_discards_without_persisting(started, mock_workouts):
    started.log_set(weight=80, reps=8)

    snapshot = started.cancel()

    assert snapshot.phase == SessionPhase.idle
    assert snapshot.sets_logged == 0
    assert started.active_log is None
    assert started.elapsed_ticker.running is False
    assert started.rest_ticker.running is False
    mock_workouts.save_finished.assert_not_awaited()


def test_cancel_when_idle_is_noop(session):
    assert session.cancel().phase == SessionPhase.idle


# ---------------------------------------------------------------------------
# Подписчики и подсказки
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_subscribers_receive_snapshots(session, day):
    received = []
    unsubscribe = session.subscribe(received.append)

    await session.start(day, "Test Program")
    session.log_set(weight=80, reps=8)
    unsubscribe()
    session.skip_rest()

    assert [s.phase for s in received] == [SessionPhase.exercising, SessionPhase.resting]


@pytest.mark.asyncio
async def test_suggestions_come_from_previous_workout(session, day, mock_workouts):
    previous = WorkoutLog(program_name="Test Program", day_name="Day 1")
    previous.sets.append(ExerciseSetLog(
        exercise_id="barbell_bench_press", exercise_name="Bench", set_number=1, reps=8, weight_kg=80, rpe=6,
    ))
    mock_workouts.list_recent.return_value = [previous]

    await session.start(day, "Test Program")

    assert session.suggested_weight("barbell_bench_press") == 82.5
    assert session.previous_performance_summary("barbell_bench_press") == "Last: 80.0 kg · 8 total reps"
    assert session.suggested_weight("dumbbell_curl") is None
