class ParsableError(Exception):
    """ Generic base exception for all parsable errors """


class FormatError(ParsableError):
    """ Failure to format a pattern """


class MalformedPatternError(FormatError):
    """ Unbalanced section or field delimiters in a pattern """


class FieldNotFoundError(FormatError, KeyError):
    """ A field token references a name the host does not provide """

    def __str__(self):
        # KeyError repr-quotes its message, keep the plain text
        return Exception.__str__(self)


class ConfigError(ParsableError):
    """ Any errors raised from reading a pattern configuration """


class MissingPatternError(ConfigError):
    """ Error with a missing pattern """
