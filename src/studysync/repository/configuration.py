# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from studysync import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        loaded: Optional[configuration.Configuration] = None
        if configuration.APP_CONFIG_PATH.is_file():
            loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        # Back-fill keys missing from older or hand-edited config files
        self._config = configuration.get_default_configuration()
        if loaded is not None:
            self._config.update(loaded)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        show_header: Optional[bool] = None,
        strict_transitions: Optional[bool] = None,
        reconcile_on_startup: Optional[bool] = None,
        log_level: Optional[configuration.LogLevel] = None,
    ) -> None:
        self.is_dirty = True

        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if show_header is not None:
            self.config["show_header"] = show_header
        if strict_transitions is not None:
            self.config["strict_transitions"] = strict_transitions
        if reconcile_on_startup is not None:
            self.config["reconcile_on_startup"] = reconcile_on_startup
        if log_level is not None:
            self.config["log_level"] = log_level


CONFIGURATION_REPO = ConfigurationRepository()
