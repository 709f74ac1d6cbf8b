from parsable import constants
from parsable import exceptions


class DelimiterScanner:
    def __init__(self, start, end=None):
        """
        :param str  start:  Character opening a delimited region
        :param str  end:    Character closing a delimited region. If omitted
                            or identical to start, regions cannot nest.
        """
        if end is None:
            end = start
        if len(start) != 1 or len(end) != 1:
            raise ValueError('Delimiters must be single characters: {!r}, {!r}'.format(
                start, end
            ))
        self._start = start
        self._end = end

    def __repr__(self):
        if self.nesting:
            return '{}({!r}, {!r})'.format(self.__class__.__name__, self._start, self._end)
        return '{}({!r})'.format(self.__class__.__name__, self._start)

    @property
    def end(self):
        """
        :rtype: str
        """
        return self._end

    @property
    def nesting(self):
        """
        Whether regions may contain further regions of the same delimiters

        :rtype: bool
        """
        return self._start != self._end

    @property
    def start(self):
        """
        :rtype: str
        """
        return self._start

    def parse(self, string, on_region, on_literal=None):
        """
        Rebuilds the string, replacing each delimited region with the result of
        on_region and each literal segment with the result of on_literal.

        :raise MalformedPatternError: if the delimiters are unbalanced
        :param str      string:
        :param callable on_region:  Called with the region's text, excluding
                                    the delimiters
        :param callable on_literal: Called with each literal segment. Literals
                                    are kept as they are if not given.
        :rtype: str
        """
        parts = []
        for is_region, text in self.split(string):
            if is_region:
                parts.append(on_region(text))
            elif on_literal is not None:
                parts.append(on_literal(text))
            else:
                parts.append(text)
        return ''.join(parts)

    def split(self, string):
        """
        Splits the string into alternating literal and delimited segments in
        the order they appear. Empty literals are omitted, empty regions are
        kept.

        :raise MalformedPatternError: if the delimiters are unbalanced
        :param str  string:
        :rtype: list[tuple[bool, str]]
        :return: List of (is_region, text) tuples
        """
        if self.nesting:
            return self._split_nesting(string)
        return self._split_flat(string)

    def _split_flat(self, string):
        parts = string.split(self._start)
        # Every region needs a closing delimiter, so an odd count leaves the
        # final region open
        if len(parts) % 2 == 0:
            raise exceptions.MalformedPatternError(
                'Unmatched {!r} at index {} in {!r}'.format(
                    self._start, string.rfind(self._start), string
                )
            )
        return [(bool(idx % 2), part) for idx, part in enumerate(parts)
                if part or idx % 2]

    def _split_nesting(self, string):
        segments = []
        depth = 0
        opened = 0
        last_idx = 0
        for idx, char in enumerate(string):
            if char == self._start:
                if depth == 0:
                    if idx > last_idx:
                        segments.append((False, string[last_idx:idx]))
                    opened = idx
                depth += 1
            elif char == self._end:
                if depth == 0:
                    raise exceptions.MalformedPatternError(
                        'Unexpected {!r} at index {} in {!r}'.format(char, idx, string)
                    )
                depth -= 1
                if depth == 0:
                    segments.append((True, string[opened + 1:idx]))
                    last_idx = idx + 1

        if depth:
            raise exceptions.MalformedPatternError(
                'Unclosed {!r} at index {} in {!r}'.format(self._start, opened, string)
            )
        if last_idx < len(string):
            segments.append((False, string[last_idx:]))
        return segments


FIELD_SCANNER = DelimiterScanner(constants.FIELD_DELIMITER)
SECTION_SCANNER = DelimiterScanner(constants.SECTION_START, constants.SECTION_END)
