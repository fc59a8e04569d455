from .pitchclass import PitchClass, pc, pc_set, integer, integers
from .notes import (NoteName, pitch_class_of, sharpen, flatten, sharp_of, flat_of,
                    read_note_name)
from .pcsets import (rotations, zero_form, sorted_zero_form, inversions,
                     normal_form, prime_form, interval_vector)
from .consonance import dissonance_level, most_consonant, overtone_sets, possible_triads
from .qualities import functionality
from .chords import (Chord, to_triad, sharp_triad, flat_triad,
                     show_triad, show_sharp_triad, show_flat_triad, root_note)
from .progressions import (Movement, Ascending, Descending, Unison, Tritone,
                           Transition, Cadence, to_movement, from_movement,
                           to_transition, to_cadence, movement_from_cadence,
                           from_cadence, transpose_cadence)
from .util import log, MusicError
