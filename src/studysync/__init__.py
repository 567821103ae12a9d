# SPDX-License-Identifier: MIT

from studysync.cleanup import register_cleanup
from studysync.initialize import initialize
from studysync.repository.configuration import CONFIGURATION_REPO
from studysync.repository.study_goal import GOAL_REPO
from studysync.service.goal import GoalDelayReconciler
from studysync.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()

    if CONFIGURATION_REPO.get_config()["reconcile_on_startup"]:
        GoalDelayReconciler(GOAL_REPO).reconcile()

    run()


if __name__ == "__main__":
    main()
