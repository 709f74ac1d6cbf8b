import logging

from parsable import exceptions
from parsable import field
from parsable.host import as_host
from parsable.scanner import FIELD_SCANNER, SECTION_SCANNER

log = logging.getLogger(__name__)


def render(pattern, host):
    """
    Formats the pattern using the host's fields. Sections are only kept if a
    field inside them, at any depth, resolves to a non-empty string. Fields
    outside of any section are always kept.

    :raise FieldNotFoundError: if the pattern references an unknown field
    :raise MalformedPatternError: if the pattern's delimiters are unbalanced
    :param str                  pattern:
    :param FieldHost|Mapping    host:
    :rtype: str
    """
    string, _ = resolve(pattern, as_host(host))
    log.debug('Rendered %r -> %r', pattern, string)
    return string


def resolve(pattern, host):
    """
    Resolves a single level of the pattern, recursing into each section.

    :param str          pattern:
    :param FieldHost    host:
    :rtype: tuple[str, bool]
    :return: Tuple of (rendered string, whether any field had a value)
    """
    had_value = False

    def on_field(token):
        nonlocal had_value
        value = field.bind(token, host)
        had_value = had_value or bool(value)
        return value

    def on_section(text):
        nonlocal had_value
        string, section_value = resolve(text, host)
        if not section_value:
            return ''
        had_value = True
        return string

    string = SECTION_SCANNER.parse(
        pattern, on_section, lambda text: FIELD_SCANNER.parse(text, on_field)
    )
    return string, had_value


class Pattern:
    def __init__(self, name, config_string):
        """
        :param str  name:
        :param str  config_string:
        """
        self._name = name
        self._config_string = config_string
        self._fields = None     # type: tuple

    def __repr__(self):
        return 'Pattern({!r}, {!r})'.format(self._name, self._config_string)

    def __str__(self):
        return '{}({})'.format(self._name, self._config_string)

    @property
    def fields(self):
        """
        Names of the fields in the order they first appear in the pattern

        :raise MalformedPatternError: if the pattern is invalid
        :rtype: tuple[str]
        """
        if self._fields is None:
            names = []
            for name in _iter_fields(self._config_string):
                if name not in names:
                    names.append(name)
            self._fields = tuple(names)
        return self._fields

    @property
    def name(self):
        """
        :rtype: str
        """
        return self._name

    @property
    def pattern(self):
        """
        :rtype: str
        """
        return self._config_string

    def format(self, host):
        """
        :raise FieldNotFoundError: if the host is missing a field
        :param FieldHost|Mapping    host:
        :rtype: str
        """
        try:
            return render(self._config_string, host)
        except exceptions.MalformedPatternError as e:
            raise exceptions.MalformedPatternError('Invalid pattern {}: {}'.format(self, e))

    def missing(self, host):
        """
        :param FieldHost|Mapping    host:
        :rtype: tuple[str]
        :return: Names of the pattern's fields the host cannot provide
        """
        host = as_host(host)
        missing = []
        for name in self.fields:
            try:
                host.get_field(name)
            except exceptions.FieldNotFoundError:
                missing.append(name)
        return tuple(missing)

    def validate(self):
        """
        :raise MalformedPatternError: if the pattern's delimiters are unbalanced
        """
        try:
            self.fields
        except exceptions.MalformedPatternError as e:
            raise exceptions.MalformedPatternError('Invalid pattern {}: {}'.format(self, e))


def _iter_fields(pattern):
    for is_section, text in SECTION_SCANNER.split(pattern):
        if is_section:
            yield from _iter_fields(text)
            continue
        for is_field, token in FIELD_SCANNER.split(text):
            if is_field:
                yield field.split_token(token)[0]
