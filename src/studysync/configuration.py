# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Literal, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "studysync"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

LOG_PATH: Path = platformdirs.user_log_path(APP_NAME)
LOG_FILE_PATH: Path = LOG_PATH / "studysync.log"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_ID_MAP_PATH: Path = DATA_PATH / "id_map.yaml"
DATA_STUDY_SESSIONS_DIR: Path = DATA_PATH / "study_sessions"
DATA_PROJECT_SESSIONS_DIR: Path = DATA_PATH / "project_sessions"
DATA_GOALS_DIR: Path = DATA_PATH / "goals"
DATA_PROJECTS_DIR: Path = DATA_PATH / "projects"
DATA_REFLECTIONS_DIR: Path = DATA_PATH / "reflections"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    strict_transitions: bool  # Raise on out-of-order session transitions
    reconcile_on_startup: bool  # Run the goal delay pass on every invocation
    log_level: LogLevel


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "show_header": True,
        "strict_transitions": False,
        "reconcile_on_startup": True,
        "log_level": "INFO",
    }


def set_data_path(data_path: Path) -> None:
    global \
        DATA_PATH, \
        DATA_ID_MAP_PATH, \
        DATA_STUDY_SESSIONS_DIR, \
        DATA_PROJECT_SESSIONS_DIR, \
        DATA_GOALS_DIR, \
        DATA_PROJECTS_DIR, \
        DATA_REFLECTIONS_DIR

    DATA_PATH = data_path
    DATA_ID_MAP_PATH = DATA_PATH / "id_map.yaml"
    DATA_STUDY_SESSIONS_DIR = DATA_PATH / "study_sessions"
    DATA_PROJECT_SESSIONS_DIR = DATA_PATH / "project_sessions"
    DATA_GOALS_DIR = DATA_PATH / "goals"
    DATA_PROJECTS_DIR = DATA_PATH / "projects"
    DATA_REFLECTIONS_DIR = DATA_PATH / "reflections"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories load their data.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting).expanduser())
