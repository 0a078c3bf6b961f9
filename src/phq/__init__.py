import collections.abc
import configparser
import json
import logging
import os
import pathlib

from phq.core import iotools
from phq.core.systems import UnitSystem
from phq.core.text import Precision


# read version from installed package
from importlib.metadata import version
__version__ = version("phq")


logger = logging.getLogger(__name__)


class Environment(collections.abc.Mapping):
    """A collection of environmental settings."""

    def __init__(self, name: str='phq') -> None:
        self.name = name
        """The name of the configuration section to select."""
        self._package = f"{__package__}.{self.name}"
        home = pathlib.Path('~').expanduser()
        paths = [
            pathlib.Path.cwd(), # The current working directory
            home, # The user's home directory
            home / '.config', # Linux standard (local)
            '/etc/phq', # Linux standard (global)
            os.environ.get('PHQ_INI'), # A known environment variable
            pathlib.Path(__file__).parent, # The package top
        ]
        path = iotools.search(paths, 'phq.ini')
        if path is None:
            raise iotools.NonExistentPathError("phq.ini")
        config = configparser.ConfigParser()
        config.read(path, encoding='utf-8')
        self._config = config[self.name]
        self.path = path
        logger.debug("Loaded [%s] from %s", self.name, path)

    def __len__(self) -> int:
        """The number of available parameter values."""
        return len(self._config)

    def __iter__(self):
        """Iterate over available parameter values."""
        yield from self._config

    def __getitem__(self, key: str):
        """Access parameter values by mapping key."""
        if key in self._config:
            return self._config[key]
        raise KeyError(
            f"{self._package} has no value for {key!r}"
        ) from None

    @property
    def system(self) -> UnitSystem:
        """The configured default unit system."""
        return self._parse('system', UnitSystem)

    @property
    def precision(self) -> Precision:
        """The configured default floating-point precision."""
        return self._parse('precision', Precision)

    def _parse(self, key: str, enumeration):
        """Convert a parameter value into a member of `enumeration`."""
        value = self[key]
        parsed = enumeration.parse(value)
        if parsed is None:
            raise ValueError(
                f"{self._package}: {value!r} is not a valid {key}"
            ) from None
        return parsed

    def __str__(self) -> str:
        return json.dumps(
            dict(self._config),
            indent=4,
            sort_keys=True,
            ensure_ascii=False,
        )

    def __repr__(self) -> str:
        return f"{self._package}({self.path}):\n{self}"
