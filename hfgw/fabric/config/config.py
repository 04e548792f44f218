import copy
import logging

import yaml

from hfgw.fabric.config.default import DEFAULT
from hfgw.fabric.errors import ConfigurationError

_logger = logging.getLogger(__name__)


# config is a singleton object
class Config(object):

    class __Config:
        def __init__(self):
            self._file_stores = []
            self._files = {}
            self._overrides = {}
            self._config = copy.deepcopy(DEFAULT)

    instance = None

    def __init__(self):

        if not Config.instance:
            Config.instance = Config.__Config()

    def _reorder_file_stores(self, path, settings, bottom=False):
        if path in self.instance._file_stores:
            self.instance._file_stores.remove(path)

        if bottom:
            self.instance._file_stores.insert(0, path)
        else:
            self.instance._file_stores.append(path)

        self.instance._files[path] = settings

        # later files override earlier ones, set() values override all files
        merged = copy.deepcopy(DEFAULT)
        for file_store in self.instance._file_stores:
            merged.update(self.instance._files[file_store])
        merged.update(self.instance._overrides)
        self.instance._config = merged

    def file(self, path, bottom=False):
        """Load a YAML settings file on top of the current settings."""
        if not isinstance(path, str):
            raise ConfigurationError('The "path" parameter must be a string')

        with open(path, 'r') as f:
            settings = yaml.safe_load(f) or {}

        if not isinstance(settings, dict):
            raise ConfigurationError(f'Settings file {path} must contain a mapping')

        _logger.debug(f'file - loaded {len(settings)} settings from {path}')
        self._reorder_file_stores(path, settings, bottom)

    def get(self, name, default_value=None):
        return self.instance._config.get(name, default_value)

    def set(self, name, value):
        self.instance._overrides[name] = value
        self.instance._config[name] = value

    @staticmethod
    def reset():
        Config.instance = Config.__Config()
