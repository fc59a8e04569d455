from .util import compare, log
from pitchset.parsing import *

import pytest

def test_accidentals():
    compare(accidental_offsets['♯'], 1)
    compare(accidental_offsets['b'], -1)
    compare(accidental_offsets['♮'], 0)
    compare(is_sharp('#'), True)
    compare(is_sharp('♯'), True)
    compare(is_flat('♭'), True)
    compare(is_flat('#'), False)
    compare(cast_accidentals('D♭'), 'Db')
    compare(cast_accidentals('F♯'), 'F#')

def test_note_names():
    compare(len(note_names), 17)
    compare(note_names[:4], ['C', 'C#', 'Db', 'D'])
    compare(note_positions['Gb'], 6)
    compare(note_positions['F#'], 6)
    compare(flat_to_sharp['Bb'], 'A#')
    compare(sharp_to_flat['D#'], 'Eb')

def test_parse_note_name():
    compare(parse_note_name('C♯'), 'C#')
    compare(parse_note_name('Ab'), 'Ab')
    compare(is_valid_note_name('B'), True)
    compare(is_valid_note_name('Fb'), False)
    compare(is_valid_note_name(3), False)

    with pytest.raises(ValueError):
        parse_note_name('X')
    with pytest.raises(TypeError):
        parse_note_name(None)

def test_display_name():
    compare(display_name('C'), 'C')
    compare(display_name('C#'), 'C' + sh)
    compare(display_name('Eb'), 'E' + fl)
    # unicode accidentals display the same way as their ascii forms:
    compare(display_name('D♭'), display_name('Db'))
    compare(display_name('F♯'), 'F' + sh)
