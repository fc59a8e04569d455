### harmonic motion between chords: the Movement of one chord root to another,
### Transitions between pairs of chords, and Cadences, which are Transitions
### stripped of their starting chord so that they can be replayed from any root.

from .chords import Chord, to_triad
from .pitchclass import PitchClass, pc, integers
from .pcsets import zero_form
from .util import log
from . import _settings

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
class Movement:
    """directed movement between two pitch classes, by the shorter way round:
    ascending or descending by up to 5 semitones, unison (no movement),
    or the tritone, which is 6 semitones either way and so has no direction."""

    # in order of comparison:
    directions = ('asc', 'desc', 'unison', 'tritone')

    def __init__(self, direction, distance=0):
        if direction not in self.directions:
            raise ValueError(f'Movement direction must be one of {self.directions}, not {direction!r}')
        self.direction = direction
        self.distance = PitchClass(distance)

    @property
    def ascending(self):
        return self.direction == 'asc'

    @property
    def descending(self):
        return self.direction == 'desc'

    @property
    def unison(self):
        return self.direction == 'unison'

    @property
    def tritone(self):
        return self.direction == 'tritone'

    @property
    def semitones(self):
        """the upward distance in semitones that this movement covers"""
        return from_movement(self)

    def _key(self):
        return (self.directions.index(self.direction), self.distance)

    def __eq__(self, other):
        if isinstance(other, Movement):
            return self._key() == other._key()
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, Movement):
            return self._key() < other._key()
        return NotImplemented

    def __hash__(self):
        return hash(self._key())

    @property
    def arrow(self):
        if self.ascending:
            return self._up_arrow
        elif self.descending:
            return self._down_arrow
        return ''

    def __str__(self):
        if self.ascending:
            return f'asc {int(self.distance)}'
        elif self.descending:
            return f'desc {int(self.distance)}'
        elif self.unison:
            return 'pedal'
        else:
            return 'tritone'

    def __repr__(self):
        return f'{self.arrow}{str(self)}'

    _up_arrow = _settings.MARKERS['up']
    _down_arrow = _settings.MARKERS['down']


class Ascending(Movement):
    """upward movement by a number of semitones"""
    def __init__(self, distance):
        Movement.__init__(self, 'asc', distance)

class Descending(Movement):
    """downward movement by a number of semitones"""
    def __init__(self, distance):
        Movement.__init__(self, 'desc', distance)

Unison = Movement('unison')
Tritone = Movement('tritone', 6)


def to_movement(start, end):
    """the Movement from one pitch class (or int, or NoteName) to another"""
    up = zero_form([start, end])[-1]
    down = zero_form([end, start])[-1]
    if up < down:
        return Ascending(up)
    elif down < up:
        return Descending(down)
    elif up == 0 and down == 0:
        return Unison
    else:
        return Tritone

def from_movement(movement):
    """the upward distance, as a PitchClass, covered by a Movement"""
    if not isinstance(movement, Movement):
        raise TypeError(f'from_movement expected a Movement but got: {type(movement)}')
    if movement.ascending:
        return pc(movement.distance)
    elif movement.descending:
        return PitchClass(12 - int(movement.distance))
    elif movement.unison:
        return PitchClass(0)
    else:
        return PitchClass(6)


@dataclass(frozen=True, order=True)
class Transition:
    """the change of functionality between two chords, with the movement
    between their fundamentals and the zero form of the second chord's tones"""
    previous: str
    new: str
    movement: Movement
    tones: tuple

    def __post_init__(self):
        object.__setattr__(self, 'tones', tuple(int(t) for t in self.tones))

    def __str__(self):
        return f'{self.movement} {self._arrow}({self.previous} {self._arrow}{self.new})'

    def __repr__(self):
        return f'{self._marker}{str(self)}'

    _arrow = _settings.MARKERS['right']
    _marker = _settings.MARKERS['Transition']


@dataclass(frozen=True, order=True)
class Cadence:
    """a reusable resolution: the functionality arrived at, the movement
    that gets there, and the tones of the arrival chord in zero form"""
    functionality: str
    movement: Movement
    tones: tuple

    def __post_init__(self):
        object.__setattr__(self, 'tones', tuple(pc(t) for t in self.tones))

    def __str__(self):
        return f'( {self.movement} {self._arrow}{self.functionality} )'

    def __repr__(self):
        return f'{self._marker}{str(self)}'

    _arrow = _settings.MARKERS['right']
    _marker = _settings.MARKERS['Cadence']


def _check_chords(*chords):
    for chord in chords:
        if not isinstance(chord, Chord):
            raise TypeError(f'expected a Chord but got: {type(chord)}')

def to_transition(chord_a, chord_b):
    """the Transition from one Chord to another"""
    _check_chords(chord_a, chord_b)
    movement = to_movement(chord_a.tones[0], chord_b.tones[0])
    return Transition(chord_a.functionality, chord_b.functionality, movement, integers(zero_form(chord_b.tones)))

def to_cadence(chord_a, chord_b):
    """the Cadence that resolves one Chord to another,
    forgetting the functionality of the first"""
    _check_chords(chord_a, chord_b)
    movement = to_movement(chord_a.tones[0], chord_b.tones[0])
    return Cadence(chord_b.functionality, movement, zero_form(chord_b.tones))

def movement_from_cadence(cadence):
    """the upward distance covered by a Cadence's movement"""
    return from_movement(cadence.movement)

def from_cadence(spelling, root, cadence):
    """replays a Cadence from a chord whose fundamental is root,
    returning the Chord it resolves to"""
    offset = pc(root) + movement_from_cadence(cadence)
    tones = [int(t + offset) for t in cadence.tones]
    log(f'Replaying {cadence} from {pc(root)!r} with tones {tones}')
    return to_triad(spelling, tones)

def transpose_cadence(spelling, root, cadence):
    """builds the arrival chord of a Cadence directly on root,
    ignoring the cadence's movement"""
    tones = [int(t + pc(root)) for t in cadence.tones]
    return to_triad(spelling, tones)
