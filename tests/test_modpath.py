import os
from pathlib import Path

import pytest

from witc import modpath
from witc.errors import InvalidModuleNameError


def test_derive_from_underscored_name():
    path = modpath.derive('wit/lunatic_timer.wit')

    assert path.module == 'lunatic::timer'
    assert path.parts == ('lunatic', 'timer')
    assert path.package == 'timer'
    assert path.directory == os.path.join('lunatic', 'timer')


def test_derive_single_part():
    path = modpath.derive('timer.wit')

    assert path.module == 'timer'
    assert path.parts == ('timer',)
    assert path.package == 'timer'
    assert path.directory == 'timer'


def test_derive_three_parts_from_path_object():
    path = modpath.derive(Path('defs') / 'lunatic_networking_tcp.wit')

    assert path.module == 'lunatic::networking::tcp'
    assert path.package == 'tcp'
    assert path.directory == os.path.join('lunatic', 'networking', 'tcp')


def test_only_wit_extension_is_stripped():
    assert modpath.derive('lunatic_timer').module == 'lunatic::timer'
    assert modpath.derive('lunatic_timer.txt').package == 'timer.txt'


def test_output_path():
    path = modpath.derive('wit/lunatic_timer.wit')

    assert path.output_path('out') == Path('out', 'lunatic', 'timer', 'timer.go')
    assert path.output_path('out', suffix='.txt') == Path('out', 'lunatic', 'timer', 'timer.txt')


@pytest.mark.parametrize('filename', ['lunatic__timer.wit', '_timer.wit', 'lunatic_.wit', '.wit'])
def test_empty_parts_are_rejected(filename):
    with pytest.raises(InvalidModuleNameError):
        modpath.derive(filename)
