from collections.abc import Mapping

from parsable import exceptions


class FieldHost:
    """
    Base for objects exposing named fields to patterns. Subclasses list the
    attribute names they expose in FIELDS, or override get_field.
    """
    FIELDS = ()  # type: tuple[str]

    def get_field(self, name):
        """
        :raise FieldNotFoundError: if the name is not an exposed field, or the
                                   exposed attribute is not set
        :param str  name:
        :return: The field's value
        """
        fields = self.FIELDS
        # A lone name written without the trailing comma
        if isinstance(fields, str):
            fields = (fields,)
        if name not in fields:
            raise exceptions.FieldNotFoundError(
                'No field {!r} on {}'.format(name, self.__class__.__name__)
            )
        try:
            return getattr(self, name)
        except AttributeError:
            raise exceptions.FieldNotFoundError(
                'Field {!r} is not set on {}'.format(name, self.__class__.__name__)
            )


class FieldMap(FieldHost):
    def __init__(self, accessors):
        """
        :param Mapping[str, object] accessors:  Field values, or zero argument
                                                callables returning them
        """
        self._accessors = dict(accessors)

    def __repr__(self):
        return 'FieldMap({!r})'.format(sorted(self._accessors))

    @property
    def fields(self):
        """
        :rtype: tuple[str]
        """
        return tuple(self._accessors)

    def get_field(self, name):
        try:
            accessor = self._accessors[name]
        except KeyError:
            raise exceptions.FieldNotFoundError('No field {!r} in {}'.format(name, self))
        return accessor() if callable(accessor) else accessor


class Parsable(FieldHost):
    def format_pattern(self, pattern):
        """
        Formats this object using the given pattern

        :raise FieldNotFoundError: if the pattern contains an unknown field
        :param str  pattern:
        :rtype: str
        """
        # Deferred, the pattern module depends on this one
        from parsable.pattern import render
        return render(pattern, self)


def as_host(obj):
    """
    :raise TypeError: if obj cannot provide named fields
    :param FieldHost|Mapping obj:
    :rtype: FieldHost
    """
    if callable(getattr(obj, 'get_field', None)):
        return obj
    if isinstance(obj, Mapping):
        return FieldMap(obj)
    raise TypeError('Cannot look up fields on unsupported datatype: {}'.format(type(obj)))
