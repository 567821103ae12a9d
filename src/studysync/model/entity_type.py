# SPDX-License-Identifier: MIT


class EntityType:
    STUDY_SESSION = "study_session"
    PROJECT_SESSION = "project_session"
    STUDY_GOAL = "study_goal"
    PROJECT = "project"
    DAILY_REFLECTION = "daily_reflection"
