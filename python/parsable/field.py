from collections.abc import Iterable, Mapping

from parsable import constants


def bind(token, host):
    """
    Resolves a field token, the text between two field delimiters, to the
    string value of the host's field. Multi-valued fields are joined with the
    token's separator, if one is given.

    :raise FieldNotFoundError: if the host has no such field
    :param str          token:  Eg, 'name' or 'tags|, '
    :param FieldHost    host:
    :rtype: str
    """
    name, separator = split_token(token)
    value = host.get_field(name)
    if separator is None or not is_multi_valued(value):
        return stringify(value)
    values = [stringify(v) for v in value]
    if separator == constants.ENUMERATION:
        return join_enumeration(values)
    return separator.join(values)


def is_multi_valued(value):
    """
    :param value:
    :rtype: bool
    """
    return (isinstance(value, Iterable)
            and not isinstance(value, (str, bytes, bytearray, Mapping)))


def join_enumeration(values):
    """
    Joins values as a natural language list, eg, 'A, B and C'

    :param Iterable values:
    :rtype: str
    """
    values = [str(v) for v in values]
    if len(values) < 2:
        return ''.join(values)
    return constants.ENUMERATION_JOIN.join(values[:-1]) + constants.ENUMERATION_LAST + values[-1]


def split_token(token):
    """
    Splits a field token on the first separator character. Anything after it,
    including further separator characters, is the separator. The field name
    is kept exactly as written, the host decides whether it exists.

    :param str  token:
    :rtype: tuple[str, str]
    :return: Tuple of (field name, separator or None)
    """
    name, sep, separator = token.partition(constants.SEPARATOR)
    return name, separator if sep else None


def stringify(value):
    """
    :param value:
    :rtype: str
    """
    return '' if value is None else str(value)
