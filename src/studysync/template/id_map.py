# SPDX-License-Identifier: MIT

from studysync.model.id_map import IdMap


def get_id_map_template() -> IdMap:
    return {
        "study_sessions": {"synthetic_to_real": {}, "real_to_synthetic": {}},
        "project_sessions": {"synthetic_to_real": {}, "real_to_synthetic": {}},
        "goals": {"synthetic_to_real": {}, "real_to_synthetic": {}},
        "projects": {"synthetic_to_real": {}, "real_to_synthetic": {}},
    }
