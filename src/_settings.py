############# preference settings:

### DEFAULT_SHARPS controls whether accidental ('black') notes are spelled
### with sharps or flats by default in the absence of other information.
### the chord engine always takes an explicit spelling function, but
### notes.default_spelling() falls back on this setting.
DEFAULT_SHARPS = True

### PREFER_UNICODE_ACCIDENTALS controls whether the default behaviour
### when printing sharp and flat signs are the normal keyboard-typable
### characters '#' and 'b' (if False)
### or the unicode characters '♯' and '♭' (if True)
PREFER_UNICODE_ACCIDENTALS = False
### both are treated as valid input options in either case,
### this only affects what the program outputs to screen


# pitchset objects use little unicode MARKERS in their repr methods
# to identify them at a glance. the default markers are defined here, so you
# can change them if you don't like them:
MARKERS = { # class markers used to identify object types:
           'NoteName': '♩',
         'PitchClass': 'ᴾ',
              'Chord': '♬ ',
         'Transition': '⇄ ',
            'Cadence': '𝄐 ',

             # root-movement markers:
             'right': '⇾ ',
             'up': '↿',
             'down': '⇃',
            }


############# canonicalisation settings:

### NORMAL_FORM_MAX_SIZE is the largest set for which the normal form
### tie-break (which only looks at the last three positions) is known to be
### canonical. larger sets still get a normal form, but a note is logged
### to say that it may not be the canonical one.
NORMAL_FORM_MAX_SIZE = 4
