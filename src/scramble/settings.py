"""Settings for the command line driver.  Values start from the
defaults in scramble.config and may be overridden by a YAML file.
"""
import io
import logging
logging.basicConfig()
log = logging.getLogger(__name__)

import yaml
try:
    from yaml import CLoader as Loader, CDumper as Dumper
except ImportError:
    logging.info("Using pure Python version of yaml loader")
    from yaml import Loader, Dumper

import scramble.config as config

DEFAULTS = {
    "app_name": config.APP_NAME,
    "log_level": config.LOG_LEVEL,
}

LOG_LEVELS = {"DEBUG": logging.DEBUG, "INFO": logging.INFO, "WARNING": logging.WARNING,
              "ERROR": logging.ERROR, "CRITICAL": logging.CRITICAL}


class Settings:
    """Basically a key-value store, with a few bells and whistles."""
    def __init__(self):
        self.values = dict(DEFAULTS)

    # Make it look like a dict, not like an object, to
    # avoid infinite recursion on getattribute
    def __getitem__(self, item: str) -> object:
        return self.values.get(item)

    def __setitem__(self, key: str, value: object):
        self.values[key] = value

    def read_yaml(self, f: io.IOBase):
        try:
            data = yaml.load(f, Loader=Loader)
        except yaml.YAMLError as e:
            raise ValueError(f"Settings file {getattr(f, 'name', f)} is not valid YAML: {e}") from e
        if data is None:
            # Empty file, keep the defaults
            return
        if not isinstance(data, dict):
            raise ValueError(f"Settings file {getattr(f, 'name', f)} does not represent a table")
        for key, value in data.items():
            if key not in DEFAULTS:
                log.warning(f"Ignoring unknown setting '{key}'")
                continue
            self.values[key] = value

    def dump_yaml(self) -> str:
        return yaml.dump(self.values, Dumper=Dumper)

    def log_level(self) -> int:
        """The logging level named by the 'log_level' setting"""
        name = str(self.values["log_level"]).upper()
        if name not in LOG_LEVELS:
            raise ValueError(f"Logging level must be one of Python's logger levels "
                             f"{list(LOG_LEVELS)}. Got {self.values['log_level']}")
        return LOG_LEVELS[name]
