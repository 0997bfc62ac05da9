import logging

from pydantic import BaseModel, ConfigDict

from fittrack.core.database import init_database
from fittrack.core.logging_config import setup_logging
from fittrack.services.exercise_catalog import ExerciseCatalog
from fittrack.services.program_templates import ProgramTemplateRegistry

logger = logging.getLogger(__name__)


class AppContext(BaseModel):
    """Справочники, загруженные при запуске"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    catalog: ExerciseCatalog
    templates: ProgramTemplateRegistry


async def startup(reset_database: bool = None) -> AppContext:
    """Запуск: логирование, схема БД, справочники"""
    setup_logging()
    await init_database(reset=reset_database)

    context = AppContext(
        catalog=ExerciseCatalog.default(),
        templates=ProgramTemplateRegistry.default(),
    )
    logger.info(
        "FitTrack запущен: %d упражнений, %d шаблонов программ",
        len(context.catalog),
        len(context.templates.list_templates()),
    )
    return context
