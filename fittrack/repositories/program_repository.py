from typing import List, Optional

from sqlalchemy import select

from fittrack.models.program import WorkoutProgram
from fittrack.repositories.base import BaseRepository


class ProgramRepository(BaseRepository):
    async def get_by_id(self, program_id: int) -> Optional[WorkoutProgram]:
        return await self._scalar_one_or_none(select(WorkoutProgram).where(WorkoutProgram.id == program_id))

    async def get_active(self) -> Optional[WorkoutProgram]:
        return await self._scalar_one_or_none(
            select(WorkoutProgram)
            .where(WorkoutProgram.is_active.is_(True))
            .order_by(WorkoutProgram.start_date.desc())
        )

    async def list_active(self) -> List[WorkoutProgram]:
        return await self._scalars(select(WorkoutProgram).where(WorkoutProgram.is_active.is_(True)))

    async def save(self, *instances) -> None:
        for instance in instances:
            if instance is not None:
                self.add(instance)
        await self.commit(restore=instances)
