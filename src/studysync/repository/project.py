# SPDX-License-Identifier: MIT

from typing import Any

from studysync import configuration, time
from studysync.model.project import Project
from studysync.repository.entity import EntityRepository


class ProjectRepository(EntityRepository[Project]):
    def _convert_for_serialization(self, record: Project) -> dict[str, Any]:
        serializable_project = super()._convert_for_serialization(record)
        serializable_project["target_end_date"] = time.date_to_str_optional(
            serializable_project["target_end_date"]
        )
        serializable_project["last_worked_on"] = time.datetime_to_iso_str_optional(
            serializable_project["last_worked_on"]
        )
        return serializable_project

    def _convert_for_deserialization(self, record: dict[str, Any]) -> Project:
        record["target_end_date"] = time.date_from_str_optional(
            record["target_end_date"]
        )
        record["last_worked_on"] = time.datetime_from_str_optional(
            record["last_worked_on"]
        )
        return super()._convert_for_deserialization(record)

    def find_active(self) -> list[Project]:
        return [project for project in self.find_all() if project["status"] == "active"]


PROJECT_REPO = ProjectRepository(lambda: configuration.DATA_PROJECTS_DIR)
