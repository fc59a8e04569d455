#### string parsing functions for note names
from .util import replace, reverse_dict, unpack_and_reverse_dict
from . import _settings

################### accidentals

# map semitone offset values to accidental character aliases:
offset_accidentals = {-1: ['♭', 'b'],
                       0: ['', '♮'],
                       1: ['♯', '#']}
# map accidental aliases to offsets:
accidental_offsets = unpack_and_reverse_dict(offset_accidentals)

# mapping of accidental aliases to canonical ascii strings (i.e. # and b)
accidentals_to_ascii = {char: offset_accidentals[offset][-1] for char, offset in accidental_offsets.items()}

if _settings.PREFER_UNICODE_ACCIDENTALS:
    fl = '♭'
    sh = '♯'
else:
    fl = 'b'
    sh = '#'

def is_sharp(char):
    """returns True for accidentals that parse as sharps"""
    assert len(char) == 1, f'is_sharp should not be called on non-char strings'
    return (char in offset_accidentals[1])
def is_flat(char):
    """returns True for accidentals that parse as flats"""
    assert len(char) == 1, f'is_flat should not be called on non-char strings'
    return (char in offset_accidentals[-1])


################### note names

natural_note_names = ['C', 'D', 'E', 'F', 'G', 'A', 'B']

# the preferred spelling of each of the twelve chromatic positions:
sharp_note_names = ['C', 'C#', 'D', 'D#', 'E', 'F', 'F#', 'G', 'G#', 'A', 'A#', 'B']
flat_note_names =  ['C', 'Db', 'D', 'Eb', 'E', 'F', 'Gb', 'G', 'Ab', 'A', 'Bb', 'B']

# all 17 accepted spellings, in ascending order of position,
# with sharp spellings before their flat enharmonics:
note_names = []
for sharp_name, flat_name in zip(sharp_note_names, flat_note_names):
    note_names.append(sharp_name)
    if flat_name != sharp_name:
        note_names.append(flat_name)

# map note names to keyboard positions (where C is 0):
note_positions = {name: pos for pos, name in enumerate(sharp_note_names)}
note_positions.update({name: pos for pos, name in enumerate(flat_note_names)})

# the enharmonic pairs, in both directions:
flat_to_sharp = {fname: sname for sname, fname in zip(sharp_note_names, flat_note_names) if sname != fname}
sharp_to_flat = reverse_dict(flat_to_sharp)

valid_note_names = set(note_positions.keys())


def cast_accidentals(text):
    """swaps any unicode accidentals in a note name for their ascii equivalents"""
    for char, ascii_char in accidentals_to_ascii.items():
        if char != ascii_char and char != '':
            text = replace(char, ascii_char, text)
    return text

def parse_note_name(text):
    """reads a string like 'C#', 'D♭' or 'E' and returns the canonical
    ascii spelling of that note name, one of the 17 in note_names.
    raises ValueError for anything else."""
    if not isinstance(text, str):
        raise TypeError(f'expected a note name string but received {type(text)}')
    name = cast_accidentals(text.strip())
    if name not in valid_note_names:
        raise ValueError(f'{text!r} is not one of the {len(note_names)} recognised note names: {note_names}')
    return name

def is_valid_note_name(text):
    """True if text is one of the recognised note name spellings, False otherwise"""
    if not isinstance(text, str):
        return False
    return cast_accidentals(text.strip()) in valid_note_names

def display_name(name):
    """the on-screen form of a canonical note name, respecting the unicode setting"""
    if len(name) > 1:
        if is_sharp(name[1]):
            return name[0] + sh
        elif is_flat(name[1]):
            return name[0] + fl
    return name
