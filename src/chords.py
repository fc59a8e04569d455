### this module contains the Chord class and the chord recognition engine,
### which names a root and a set of tones as a triad with a functionality tag
### (quality, extensions and inversion), and renders it as a slash chord.

from .notes import NoteName, pitch_class_of, sharp_of, flat_of
from .pitchclass import pc, integers
from .pcsets import zero_form, prime_form
from .consonance import most_consonant, possible_triads
from .qualities import (functionality, inversion_suffix, strip_inversion,
                        INVERSION_ARCHETYPES, INVERSION_SHAPES,
                        ROOT_POSITION, FIRST_INVERSION, SECOND_INVERSION)
from .util import log, MusicError
from . import _settings

from dataclasses import dataclass
import math


@dataclass(frozen=True, order=True)
class Chord:
    """a static pitch structure: a spelled root, a functionality tag such as
    'maj' or 'min7' or 'maj_1stInv', and the chord's tones as ints in [0,11]
    starting from its fundamental (bass) note.
    Chords are built by to_triad and compare as (root, functionality, tones)."""
    root: NoteName
    functionality: str
    tones: tuple

    def __post_init__(self):
        object.__setattr__(self, 'tones', tuple(int(t) for t in self.tones))

    @property
    def name(self):
        return f'{self.root}_{self.functionality}'

    @property
    def inversion(self):
        """the inversion suffix of this chord's functionality, '' in root position"""
        return inversion_suffix(self.functionality)

    def __str__(self):
        return f'{self._marker}{self.name}'

    def __repr__(self):
        return f'{str(self)} {list(self.tones)}'

    # Chord object unicode identifier:
    _marker = _settings.MARKERS['Chord']


def _anchored_triad(xs):
    """zero form of the tones (sorted high to low) above the fundamental,
    transposed back up to the fundamental's absolute pitch"""
    fund = int(xs[0])
    tones = sorted([int(t) for t in xs[1:]], reverse=True)
    return [fund + int(z) for z in zero_form([fund] + tones)]

def _set_class(xs):
    """the pitch classes of the prime form of xs, ignoring their order"""
    return frozenset(integers(prime_form(xs)))

_archetype_classes = {_set_class(a) for a in INVERSION_ARCHETYPES}

def _find_inversion(triad):
    """reads the voicing of a triad above its bass and returns
    the absolute pitch of its root and its inversion suffix"""
    shape = tuple(sorted(integers(zero_form(triad))))
    voicing = [triad[0] + offset for offset in shape]
    if shape not in INVERSION_SHAPES:
        log(f'No inversion shape matches voicing {shape}, treating as root position')
        return triad[0], ROOT_POSITION
    root_place, suffix = INVERSION_SHAPES[shape]
    return voicing[root_place], suffix

def to_triad(spelling, xs):
    """recognises a chord from a fundamental followed by its candidate tones,
    e.g. [0,4,7] is C major and [4,0,7] is C major in first inversion.

    spelling is a function from PitchClass to NoteName, such as sharp_of or flat_of.
    xs can be ints (of any size), PitchClasses or NoteNames.

    if the tones contain more than three pitch classes, the most consonant
    triad built over the same fundamental is recognised instead. the search
    covers every pair of the remaining tones, so it grows quadratically with
    the number of tones given."""
    xs = list(xs)
    if len(xs) == 0:
        raise ValueError('cannot recognise a chord from an empty tone sequence')

    triad = _anchored_triad(xs)

    # reduce over-specified input to its most consonant triad:
    max_reductions = max(1, math.comb(len(xs) - 1, 2))
    num_reductions = 0
    while len(triad) > 3:
        if num_reductions >= max_reductions:
            raise MusicError(f'Could not reduce {xs} to a triad in {max_reductions} steps')
        candidates = possible_triads(xs[0], xs[1:])
        log(f'{len(triad)} pitch classes in {xs}, choosing between {len(candidates)} candidate triads')
        xs = most_consonant(candidates)
        triad = _anchored_triad(xs)
        num_reductions += 1

    fund = int(xs[0])
    if _set_class(xs) in _archetype_classes:
        root, suffix = _find_inversion(triad)
        # name the chord from its root, not from its bass:
        tag = functionality(zero_form([root] + xs)) + suffix
    else:
        root = fund
        tag = functionality(zero_form(xs))

    chord = Chord(spelling(pc(root)), tag, [t % 12 for t in triad])
    log(f'Recognised {xs} as {chord!r}')
    return chord

def flat_triad(xs):
    """to_triad with flat spelling"""
    return to_triad(flat_of, xs)

def sharp_triad(xs):
    """to_triad with sharp spelling"""
    return to_triad(sharp_of, xs)


#### display:

def show_triad(spelling, chord):
    """renders a Chord as readable text, writing inversions as slash chords:
    e.g. 'C maj', 'C maj/E', 'F sus2'"""
    tag = chord.functionality
    suffix = inversion_suffix(tag)
    base = strip_inversion(tag)
    root_pc = pitch_class_of(chord.root)
    root = spelling(root_pc)

    def over(semitones):
        bass = spelling(root_pc + semitones)
        return f'{root} {base}/{bass}'

    if 'sus4' in tag and suffix == ROOT_POSITION:
        return f'{root} {tag}'
    elif suffix == FIRST_INVERSION:
        # bass is the third:
        if 'maj' in tag:
            return over(4)
        elif 'min' in tag:
            return over(3)
        elif 'sus4' in tag:
            # a sus4 with its fourth in the bass is the sus2 chord on that fourth:
            return f'{spelling(root_pc + 5)} sus2'
        elif 'dim' in tag:
            return over(3)
    elif suffix == SECOND_INVERSION:
        # bass is the fifth:
        if 'maj' in tag or 'min' in tag:
            return over(7)
        elif 'sus4' in tag:
            return over(7)
        elif 'dim' in tag:
            return over(6)
    return f'{root} {tag}'

def show_flat_triad(chord):
    """show_triad with flat spelling"""
    return show_triad(flat_of, chord)

def show_sharp_triad(chord):
    """show_triad with sharp spelling"""
    return show_triad(sharp_of, chord)

def root_note(chord):
    """the pitch class of a chord's fundamental (its first tone)"""
    return pc(chord.tones[0])
