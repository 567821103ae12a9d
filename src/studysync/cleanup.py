# SPDX-License-Identifier: MIT

import atexit

from studysync.repository.configuration import CONFIGURATION_REPO
from studysync.repository.daily_reflection import REFLECTION_REPO
from studysync.repository.id_map import ID_MAP_REPO
from studysync.repository.project import PROJECT_REPO
from studysync.repository.session import PROJECT_SESSION_REPO, STUDY_SESSION_REPO
from studysync.repository.study_goal import GOAL_REPO


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()
    ID_MAP_REPO.flush()

    # Flush entity repositories
    STUDY_SESSION_REPO.flush()
    PROJECT_SESSION_REPO.flush()
    GOAL_REPO.flush()
    PROJECT_REPO.flush()
    REFLECTION_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
