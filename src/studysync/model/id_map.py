# SPDX-License-Identifier: MIT

from typing import Literal, TypeAlias, TypedDict

from studysync.model.entity_id import EntityId

EntityType = Literal[
    "study_sessions",
    "project_sessions",
    "goals",
    "projects",
]


IdMapDict: TypeAlias = dict[EntityType, "IdMapMapping"]


class IdMap(TypedDict):
    """
    All dictionaries are mapped in the following way:

    Synthetic id : real entity id.

    The terminal shows short synthetic ids (1, 2, 3, ...) and translates
    them back to the uuid of the record when a command receives one.

    Example:

    Goal with an id of "0b5e...".
    Synthetic id for that goal is 7.

    real_goal_id = id_map["goals"]["synthetic_to_real"][7]  # returns "0b5e..."
    """

    study_sessions: "IdMapMapping"
    project_sessions: "IdMapMapping"
    goals: "IdMapMapping"
    projects: "IdMapMapping"


class IdMapMapping(TypedDict):
    synthetic_to_real: dict[int, EntityId]
    real_to_synthetic: dict[EntityId, int]
