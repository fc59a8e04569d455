from .util import compare, log
from pitchset.qualities import *

def test_functionality():
    compare(functionality([0, 4, 7]), 'maj')
    compare(functionality([0, 3, 7]), 'min')
    compare(functionality([0, 3, 6]), 'dim')
    compare(functionality([0, 4, 8]), 'aug')
    compare(functionality([0, 4, 7, 10]), '7')
    compare(functionality([0, 4, 7, 11]), 'maj7')
    compare(functionality([0, 3, 7, 10]), 'min7')
    compare(functionality([0, 5, 7]), 'sus4')
    compare(functionality([0, 2, 7]), 'sus4')
    compare(functionality([0, 7]), 'no3')
    compare(functionality([0, 4]), 'majno5')
    compare(functionality([0, 3, 6, 9]), '6dim')
    compare(functionality([0, 1, 4, 7]), 'majb9')
    compare(functionality([0, 3, 4, 7]), '#9')

def test_rules():
    compare(len(FUNCTIONALITY_RULES), 21)
    maj = FUNCTIONALITY_RULES[0]
    compare(maj([0, 4, 7]), 'maj')
    compare(maj([0, 4, 7, 10]), '')
    compare(maj.applies(frozenset({0, 4})), True)
    # offsets are read as pitch classes:
    compare(maj.applies([12, 16, 19]), True)

    # custom rule lists are respected:
    compare(functionality([0, 4, 7], rules=FUNCTIONALITY_RULES[1:]), '')

def test_inversion_suffixes():
    compare(inversion_suffix('maj_1stInv'), FIRST_INVERSION)
    compare(inversion_suffix('min_2ndInv'), '_2ndInv')
    compare(inversion_suffix('maj7'), ROOT_POSITION)
    compare(strip_inversion('sus4_1stInv'), 'sus4')
    compare(strip_inversion('dim'), 'dim')

    # every voicing shape belongs to one of the archetype classes:
    compare(len(INVERSION_SHAPES), 12)
    for shape, (root_place, suffix) in INVERSION_SHAPES.items():
        assert root_place in (0, 1, 2)
        assert suffix in (ROOT_POSITION,) + inversion_suffixes
