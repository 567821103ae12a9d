# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from studysync import configuration
from studysync.logging_setup import setup_logger
from studysync.repository.configuration import CONFIGURATION_REPO
from studysync.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    setup_logger(config["log_level"])
    view_state.set_show_header(config["show_header"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))


def __ensure_data_files() -> None:
    # Directory-based entity stores (one file per entity)
    for data_dir in (
        configuration.DATA_STUDY_SESSIONS_DIR,
        configuration.DATA_PROJECT_SESSIONS_DIR,
        configuration.DATA_GOALS_DIR,
        configuration.DATA_PROJECTS_DIR,
        configuration.DATA_REFLECTIONS_DIR,
    ):
        if not data_dir.is_dir():
            data_dir.mkdir(parents=True, exist_ok=True)
            (data_dir / ".gitkeep").touch()
