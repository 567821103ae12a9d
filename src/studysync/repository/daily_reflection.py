# SPDX-License-Identifier: MIT

from typing import Any, Optional

import pendulum

from studysync import configuration, time
from studysync.model.daily_reflection import DailyReflection
from studysync.repository.entity import EntityRepository


class ReflectionRepository(EntityRepository[DailyReflection]):
    def _convert_for_serialization(self, record: DailyReflection) -> dict[str, Any]:
        serializable_reflection = super()._convert_for_serialization(record)
        serializable_reflection["date"] = time.date_to_str(
            serializable_reflection["date"]
        )
        return serializable_reflection

    def _convert_for_deserialization(
        self, record: dict[str, Any]
    ) -> DailyReflection:
        record["date"] = time.date_from_str(record["date"])
        return super()._convert_for_deserialization(record)

    def find_by_date(self, date: pendulum.Date) -> Optional[DailyReflection]:
        for reflection in self.records:
            if reflection["date"] == date:
                return self.find_by_id(reflection["id"])  # type: ignore[arg-type]
        return None

    def find_recent(self, since: pendulum.Date) -> list[DailyReflection]:
        """Reflections dated on or after a day, most recent first."""
        return sorted(
            [
                reflection
                for reflection in self.find_all()
                if reflection["date"] >= since
            ],
            key=lambda reflection: reflection["date"],
            reverse=True,
        )

    def delete_by_date(self, date: pendulum.Date) -> Optional[DailyReflection]:
        reflection = self.find_by_date(date)
        if reflection is not None:
            self.delete_by_id(reflection["id"])  # type: ignore[arg-type]
        return reflection


REFLECTION_REPO = ReflectionRepository(lambda: configuration.DATA_REFLECTIONS_DIR)
