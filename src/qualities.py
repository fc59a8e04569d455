# chord functionality tagging: quality and extension names derived from
# which semitone offsets above a chord's root are present or absent
from .pitchclass import integers


class FunctionalityRule:
    """a single presence/absence test on a set of semitone offsets,
    which contributes its tag to a chord's functionality when it holds"""
    def __init__(self, tag, predicate, description=''):
        self.tag = tag
        self.predicate = predicate
        self.description = description

    def applies(self, offsets):
        """accepts an iterable of offsets (ints, PitchClasses or NoteNames)"""
        if not isinstance(offsets, frozenset):
            offsets = frozenset(integers(offsets))
        return bool(self.predicate(offsets))

    def __call__(self, offsets):
        return self.tag if self.applies(offsets) else ''

    def __str__(self):
        return f'~{self.tag}~ if {self.description}'

    def __repr__(self):
        return str(self)


# each rule is tested independently, and the tags of all the rules that hold
# are concatenated in this order:
FUNCTIONALITY_RULES = [
    FunctionalityRule('maj', lambda z: 4 in z and not (z & {3, 10, 11}) and 8 not in z,
                      'has 4, lacks 3/10/11, lacks 8'),
    FunctionalityRule('min', lambda z: 3 in z and 4 not in z and 6 not in z,
                      'has 3, lacks 4, lacks 6'),
    FunctionalityRule('6', lambda z: 9 in z,
                      'has 9'),
    FunctionalityRule('7', lambda z: 10 in z and 5 not in z,
                      'has 10, lacks 5'),
    FunctionalityRule('maj7', lambda z: 11 in z,
                      'has 11'),
    FunctionalityRule('b13', lambda z: {7, 8} <= z,
                      'has 7 and 8'),
    FunctionalityRule('sus4', lambda z: ((2 in z or 5 in z) and not (z & {3, 4}) and 7 in z) or {5, 10} <= z,
                      'has 2 or 5, lacks 3/4, has 7; or has 5 and 10'),
    FunctionalityRule('sus2/4', lambda z: {2, 5} <= z,
                      'has 2 and 5'),
    FunctionalityRule('sus2', lambda z: 5 not in z and 2 in z and not (z & {3, 4}) and 7 not in z,
                      'lacks 5, has 2, lacks 3/4, lacks 7'),
    FunctionalityRule('sus4', lambda z: 2 not in z and 5 in z and not (z & {3, 4}) and 7 not in z,
                      'lacks 2, has 5, lacks 3/4, lacks 7'),
    FunctionalityRule('add9', lambda z: {2, 3} <= z or {2, 4} <= z,
                      'has 2 and 3, or 2 and 4'),
    FunctionalityRule('add11', lambda z: {5, 3} <= z or {5, 4} <= z,
                      'has 5 and 3, or 5 and 4'),
    FunctionalityRule('b9', lambda z: 1 in z,
                      'has 1'),
    FunctionalityRule('#9', lambda z: {3, 4} <= z,
                      'has 3 and 4'),
    FunctionalityRule('#11', lambda z: 6 in z and 5 not in z and (7 in z or 8 in z),
                      'has 6, lacks 5, has 7 or 8'),
    FunctionalityRule('b5', lambda z: (6 in z and (7 not in z or 8 not in z)) and 3 not in z and not (z & {7, 8}),
                      'has 6 (and lacks 7 or 8), lacks 3, lacks 7/8'),
    FunctionalityRule('#5', lambda z: ((8 in z and 7 not in z) or {8, 9} <= z) and 4 not in z,
                      'has 8 and lacks 7 (or has 8 and 9), lacks 4'),
    FunctionalityRule('no3', lambda z: not (z & {2, 3, 4, 5}),
                      'lacks 2/3/4/5'),
    FunctionalityRule('no5', lambda z: not (z & {6, 7, 8}),
                      'lacks 6/7/8'),
    FunctionalityRule('dim', lambda z: {3, 6} <= z,
                      'has 3 and 6'),
    FunctionalityRule('aug', lambda z: {4, 8} <= z,
                      'has 4 and 8'),
    ]

def functionality(offsets, rules=FUNCTIONALITY_RULES):
    """names the quality and extensions of a chord from the semitone offsets
    above its root, e.g. [0,4,7] -> 'maj' and [0,3,7,10] -> 'min7'"""
    z = frozenset(integers(offsets))
    return ''.join([rule(z) for rule in rules])


#### inversions:

ROOT_POSITION = ''
FIRST_INVERSION = '_1stInv'
SECOND_INVERSION = '_2ndInv'
inversion_suffixes = (FIRST_INVERSION, SECOND_INVERSION)

# one triad from each set class whose inversion can be read off its voicing:
INVERSION_ARCHETYPES = ((0, 3, 7),  # major and minor
                        (0, 2, 7),  # suspended
                        (0, 3, 6))  # diminished

# voicings above the bass, mapped to the place of the root in that voicing
# and the inversion suffix:
INVERSION_SHAPES = {
    # major and minor:
    (0, 4, 7): (0, ROOT_POSITION),
    (0, 3, 7): (0, ROOT_POSITION),
    (0, 5, 9): (1, SECOND_INVERSION),
    (0, 5, 8): (1, SECOND_INVERSION),
    (0, 3, 8): (2, FIRST_INVERSION),
    (0, 4, 9): (2, FIRST_INVERSION),
    # sus4, which shares its pitch classes with sus2 a fourth below:
    (0, 5, 7): (0, ROOT_POSITION),
    (0, 5, 10): (1, SECOND_INVERSION),
    (0, 2, 7): (2, FIRST_INVERSION),
    # diminished:
    (0, 3, 6): (0, ROOT_POSITION),
    (0, 6, 9): (1, SECOND_INVERSION),
    (0, 3, 9): (2, FIRST_INVERSION),
    }

def inversion_suffix(tag):
    """the inversion suffix at the end of a functionality tag, or '' in root position"""
    for suffix in inversion_suffixes:
        if tag.endswith(suffix):
            return suffix
    return ROOT_POSITION

def strip_inversion(tag):
    """a functionality tag without its inversion suffix"""
    suffix = inversion_suffix(tag)
    return tag[:-len(suffix)] if suffix else tag
