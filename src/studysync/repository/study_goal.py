# SPDX-License-Identifier: MIT

from typing import Any

import pendulum

from studysync import configuration, time
from studysync.model.study_goal import StudyGoal
from studysync.repository.entity import EntityRepository


class GoalRepository(EntityRepository[StudyGoal]):
    def _convert_for_serialization(self, record: StudyGoal) -> dict[str, Any]:
        serializable_goal = super()._convert_for_serialization(record)
        serializable_goal["date"] = time.date_to_str(serializable_goal["date"])
        return serializable_goal

    def _convert_for_deserialization(self, record: dict[str, Any]) -> StudyGoal:
        record["date"] = time.date_from_str(record["date"])
        return super()._convert_for_deserialization(record)

    def find_by_date(self, date: pendulum.Date) -> list[StudyGoal]:
        return sorted(
            [goal for goal in self.find_all() if goal["date"] == date],
            key=lambda goal: goal["created"],
        )

    def find_unachieved_by_date(self, date: pendulum.Date) -> list[StudyGoal]:
        return [goal for goal in self.find_by_date(date) if not goal["achieved"]]

    def find_delayed(self) -> list[StudyGoal]:
        return sorted(
            [goal for goal in self.find_all() if goal["is_delayed"]],
            key=lambda goal: goal["days_delayed"],
            reverse=True,
        )


GOAL_REPO = GoalRepository(lambda: configuration.DATA_GOALS_DIR)
