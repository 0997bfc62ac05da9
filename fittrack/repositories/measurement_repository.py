from typing import List, Optional

from sqlalchemy import select

from fittrack.models.measurement import BodyMeasurement
from fittrack.repositories.base import BaseRepository


class MeasurementRepository(BaseRepository):
    async def create(self, measurement: BodyMeasurement) -> BodyMeasurement:
        self.add(measurement)
        await self.commit()
        return measurement

    async def list_with_weight(self) -> List[BodyMeasurement]:
        return await self._scalars(
            select(BodyMeasurement)
            .where(BodyMeasurement.weight_kg.is_not(None))
            .order_by(BodyMeasurement.date.asc())
        )

    async def latest(self) -> Optional[BodyMeasurement]:
        return await self._scalar_one_or_none(
            select(BodyMeasurement).order_by(BodyMeasurement.date.desc()).limit(1)
        )
