import logging
import os

import yaml

from parsable import constants
from parsable import exceptions
from parsable.pattern import Pattern

log = logging.getLogger(__name__)


class PatternResolver:
    @classmethod
    def from_environment(cls):
        """
        Reads the environment variable for a file to load the configuration from

        :raise ConfigError: if the environment variable is not set or set to a
                            non-existent file
        :rtype: PatternResolver
        """
        path = os.getenv(constants.ENV_VAR)
        if not path or not os.path.exists(path):
            raise exceptions.ConfigError(
                'Invalid environment path for parsable configuration: '
                '{}={}'.format(constants.ENV_VAR, path)
            )
        return cls.from_file(path)

    @classmethod
    def from_file(cls, filepath):
        """
        :param str  filepath:
        :rtype: PatternResolver
        """
        with open(filepath) as f:
            config = yaml.safe_load(f)
        if not isinstance(config, dict):
            raise exceptions.ConfigError(
                'Configuration file must contain a mapping: {}'.format(filepath)
            )
        log.debug('Loading patterns from %s', filepath)
        return cls(config)

    def __init__(self, config):
        """
        :param dict[str, dict]  config:
        """
        try:
            pattern_config = config[constants.KEY_PATTERN]
        except KeyError:
            raise exceptions.ConfigError(
                'Configuration is missing the {!r} key'.format(constants.KEY_PATTERN)
            )

        self._patterns = {}
        for name, config_string in (pattern_config or {}).items():
            if not isinstance(config_string, str):
                raise exceptions.ConfigError('Pattern {!r} must be a string, got {}'.format(
                    name, type(config_string)
                ))
            pattern = Pattern(name, config_string)
            # Fail on load rather than on first use
            pattern.validate()
            self._patterns[name] = pattern
        log.debug('Loaded %d patterns', len(self._patterns))

    @property
    def patterns(self):
        """
        :rtype: dict[str, Pattern]
        """
        return self._patterns.copy()

    def format(self, pattern_name, host):
        """
        :raise MissingPatternError: if no pattern exists with the name
        :raise FieldNotFoundError: if the host is missing a field
        :param str                  pattern_name:
        :param FieldHost|Mapping    host:
        :rtype: str
        """
        return self.get_pattern(pattern_name).format(host)

    def get_pattern(self, pattern_name):
        """
        :param str  pattern_name:
        :rtype: Pattern
        """
        try:
            return self._patterns[pattern_name]
        except KeyError:
            raise exceptions.MissingPatternError(
                'Pattern {!r} does not exist'.format(pattern_name)
            )
