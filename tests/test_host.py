import pytest

from parsable import exceptions
from parsable.host import FieldHost, FieldMap, Parsable, as_host


class Album(Parsable):
    FIELDS = ('title', 'artists', 'year')

    def __init__(self, title, artists, year=None):
        self.title = title
        self.artists = artists
        self.year = year

    @property
    def label(self):
        return 'unexposed'


def test_field_host():
    album = Album('Blue', ['Joni Mitchell'], 1971)
    assert album.get_field('title') == 'Blue'
    assert album.get_field('year') == 1971
    with pytest.raises(exceptions.FieldNotFoundError):
        album.get_field('label')


def test_field_host_empty():
    with pytest.raises(exceptions.FieldNotFoundError):
        FieldHost().get_field('anything')


def test_field_host_unset():
    class Track(FieldHost):
        FIELDS = ('title', 'duration')

        def __init__(self, title):
            self.title = title

    track = Track('River')
    assert track.get_field('title') == 'River'
    with pytest.raises(exceptions.FieldNotFoundError):
        track.get_field('duration')


def test_field_host_single_name():
    class Track(FieldHost):
        FIELDS = ('title')
        title = 'River'
        t = 'unexposed'

    assert Track().get_field('title') == 'River'
    with pytest.raises(exceptions.FieldNotFoundError):
        Track().get_field('t')


def test_field_map():
    calls = []

    def count():
        calls.append(None)
        return len(calls)

    host = FieldMap({'name': 'Bob', 'count': count})
    assert host.fields == ('name', 'count')
    assert host.get_field('name') == 'Bob'
    assert host.get_field('count') == 1
    assert host.get_field('count') == 2
    assert repr(host) == "FieldMap(['count', 'name'])"


def test_field_map_fail():
    host = FieldMap({})
    with pytest.raises(exceptions.FieldNotFoundError) as exc_info:
        host.get_field('bogus')
    # Also usable wherever a KeyError is expected
    assert isinstance(exc_info.value, KeyError)
    assert str(exc_info.value) == "No field 'bogus' in FieldMap([])"


def test_as_host():
    album = Album('Blue', [])
    assert as_host(album) is album
    host = as_host({'a': 1})
    assert isinstance(host, FieldMap)
    assert host.get_field('a') == 1
    with pytest.raises(TypeError):
        as_host(None)
    with pytest.raises(TypeError):
        as_host('string')


@pytest.mark.parametrize('artists, year, expected', (
    (['Joni Mitchell'], 1971, 'Blue by Joni Mitchell (1971)'),
    (['A', 'B'], None, 'Blue by A and B'),
    (['A', 'B', 'C'], None, 'Blue by A, B and C'),
    ([], 1971, 'Blue (1971)'),
))
def test_format_pattern(artists, year, expected):
    album = Album('Blue', artists, year)
    assert album.format_pattern('%title%{ by %artists|enumeration%}{ (%year%)}') == expected


def test_format_pattern_fail():
    with pytest.raises(exceptions.FieldNotFoundError):
        Album('Blue', []).format_pattern('%label%')
