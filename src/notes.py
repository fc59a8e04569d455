### this module contains the NoteName class and the enharmonic spelling functions.
### NoteNames are the 17 accepted spellings of the 12 pitch classes:
### the seven naturals, plus five black notes that each have a sharp
### and a flat spelling, such as C# and Db.

from .pitchclass import PitchClass, pc, integer
from .util import log
from . import parsing, _settings

from functools import total_ordering


@total_ordering
class NoteName:
    """a spelled pitch class, such as C or D# or Eb.
    equality is by spelling, so C# and Db are distinct NoteNames;
    use the & operator (or .enharmonic) to compare by pitch class instead."""
    def __init__(self, name):
        """name must be one of the 17 recognised spellings, using either
        ascii ('#', 'b') or unicode ('♯', '♭') accidentals."""
        if isinstance(name, NoteName):
            # accept re-casting:
            name = name.name
        self.name = parsing.parse_note_name(name)
        self.position = parsing.note_positions[self.name]
        # place in the canonical ordering of all 17 names:
        self.index = parsing.note_names.index(self.name)

    @staticmethod
    def from_cache(name):
        """efficient NoteName retrieval for a spelling"""
        if type(name) is NoteName:
            return name
        return cached_note_names[parsing.parse_note_name(name)]

    @property
    def pitch_class(self):
        return PitchClass(self.position)

    @property
    def sharp(self):
        return sharpen(self)

    @property
    def flat(self):
        return flatten(self)

    #### transposition returns pitch classes, since the spelling is unknown:
    def __add__(self, other):
        if isinstance(other, (int, PitchClass)):
            return self.pitch_class + other
        else:
            raise TypeError(f'NoteNames can only be transposed by ints or PitchClasses, not {type(other)}')

    def __sub__(self, other):
        if isinstance(other, (int, PitchClass)):
            return self.pitch_class - other
        else:
            raise TypeError(f'NoteNames can only be transposed by ints or PitchClasses, not {type(other)}')

    def __int__(self):
        return self.position

    ## comparison operators:
    def __eq__(self, other):
        """equality by spelling. strings are cast to NoteName where possible"""
        if isinstance(other, str) and parsing.is_valid_note_name(other):
            other = NoteName.from_cache(other)
        if isinstance(other, NoteName):
            return self.name == other.name
        return NotImplemented

    def __lt__(self, other):
        """NoteNames are ordered C, C#, Db, D ... Bb, B"""
        if isinstance(other, NoteName):
            return self.index < other.index
        return NotImplemented

    def __and__(self, other):
        """enharmonic equivalence: True if both names spell the same pitch class"""
        if isinstance(other, str):
            other = NoteName.from_cache(other)
        if isinstance(other, NoteName):
            return self.position == other.position
        raise TypeError(f'Enharmonic equivalence operator & not defined between NoteName and: {type(other)}')

    def enharmonic(self, other):
        return self & other

    def __hash__(self):
        # hash-equivalent to the spelling string:
        return hash(self.name)

    @property
    def natural(self):
        return self.name in parsing.natural_note_names

    def __str__(self):
        return parsing.display_name(self.name)

    def __repr__(self):
        return f'{self._marker}{str(self)}'

    # NoteName object unicode identifier:
    _marker = _settings.MARKERS['NoteName']


# predefined NoteName objects:
C = NoteName('C')
Csh, Db = NoteName('C#'), NoteName('Db')
D = NoteName('D')
Dsh, Eb = NoteName('D#'), NoteName('Eb')
E = NoteName('E')
F = NoteName('F')
Fsh, Gb = NoteName('F#'), NoteName('Gb')
G = NoteName('G')
Gsh, Ab = NoteName('G#'), NoteName('Ab')
A = NoteName('A')
Ash, Bb = NoteName('A#'), NoteName('Bb')
B = NoteName('B')

all_note_names = [C, Csh, Db, D, Dsh, Eb, E, F, Fsh, Gb, G, Gsh, Ab, A, Ash, Bb, B]
cached_note_names = {n.name: n for n in all_note_names}

# all chromatic pitch classes by preferred spelling:
chromatic_sharp_names = [C, Csh, D, Dsh, E, F, Fsh, G, Gsh, A, Ash, B]
chromatic_flat_names = [C, Db, D, Eb, E, F, Gb, G, Ab, A, Bb, B]


#### enharmonic spelling functions:

def pitch_class_of(name):
    """the pitch class a NoteName (or note name string) spells"""
    return NoteName.from_cache(name).pitch_class

def sharpen(name):
    """returns the sharp spelling of a flat NoteName, or the same NoteName otherwise"""
    name = NoteName.from_cache(name)
    if name.name in parsing.flat_to_sharp:
        return cached_note_names[parsing.flat_to_sharp[name.name]]
    return name

def flatten(name):
    """returns the flat spelling of a sharp NoteName, or the same NoteName otherwise"""
    name = NoteName.from_cache(name)
    if name.name in parsing.sharp_to_flat:
        return cached_note_names[parsing.sharp_to_flat[name.name]]
    return name

def sharp_of(x):
    """sharp-preferring spelling function: maps a PitchClass or int onto its
    sharp NoteName. a NoteName is re-spelled with sharps."""
    if isinstance(x, NoteName):
        return sharpen(x)
    return chromatic_sharp_names[integer(x)]

def flat_of(x):
    """flat-preferring spelling function: maps a PitchClass or int onto its
    flat NoteName. a NoteName is re-spelled with flats."""
    if isinstance(x, NoteName):
        return flatten(x)
    return chromatic_flat_names[integer(x)]

def default_spelling(prefer_sharps=None):
    """the spelling function matching a sharp/flat preference,
    falling back on the global default in _settings"""
    if prefer_sharps is None:
        prefer_sharps = _settings.DEFAULT_SHARPS
    return sharp_of if prefer_sharps else flat_of

def read_note_name(text):
    """parse a textual note name like 'F#' into its NoteName"""
    name = NoteName.from_cache(text)
    log(f'Read note name {text!r} as {name!r}')
    return name


#### transposition by semitones, spelled with sharps or flats:

def add_sharp(x, n):
    """transpose a NoteName or PitchClass up by n semitones, spelled with sharps"""
    return sharp_of(pc(x) + n)

def sub_sharp(x, n):
    """transpose a NoteName or PitchClass down by n semitones, spelled with sharps"""
    return sharp_of(pc(x) - n)

def add_flat(x, n):
    """transpose a NoteName or PitchClass up by n semitones, spelled with flats"""
    return flat_of(pc(x) + n)

def sub_flat(x, n):
    """transpose a NoteName or PitchClass down by n semitones, spelled with flats"""
    return flat_of(pc(x) - n)
