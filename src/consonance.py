### dissonance scoring of pitch class sets from their interval vectors,
### and selection of the most consonant triad from a pool of candidate tones.

from .pcsets import interval_vector
from .pitchclass import integer, integers
from .notes import read_note_name
from .util import log, choose, count_elem

import numpy as np

# interval class weights, based on the work of Paul Hindemith.
# indexed by interval class (minor second, major second, minor third,
# major third, perfect fourth, tritone), not by consonance rank:
DISSONANCE_WEIGHTS = (16, 8, 4, 2, 1, 24)

# score given to sets whose intervals all fall into a single interval class:
DEGENERATE_SCORE = 27

# semitones from a root to its perfect fifth:
FIFTH = 7


def dissonance_level(seq):
    """returns a (score, seq) pair, where score is the Hindemith-weighted
    dissonance of the interval vector of seq. lower is more consonant.

    sets with five empty interval vector buckets all score DEGENERATE_SCORE.
    otherwise, a set containing the pitch a perfect fifth above its first
    element gets one point off. pitches are compared as given, so the
    fifth above 7 is 14, not 2."""
    vector = interval_vector(seq)
    if count_elem(vector, 0) == 5:
        return DEGENERATE_SCORE, seq

    score = int(np.dot(DISSONANCE_WEIGHTS, vector))
    values = [int(x) for x in seq]
    if values[0] + FIFTH in values:
        score -= 1
    return score, seq

def most_consonant(candidates):
    """returns the candidate sequence with the lowest dissonance level.
    ties go to whichever candidate came first"""
    candidates = list(candidates)
    if len(candidates) == 0:
        raise ValueError('most_consonant needs at least one candidate set')
    scored = [dissonance_level(c) for c in candidates]
    # sorting is stable, so the earliest candidate wins a tie:
    ranked = sorted(scored, key=lambda s: s[0])
    best_score, best = ranked[0]
    log(f'Most consonant of {len(candidates)} candidates is {best} (score: {best_score})')
    return best


#### candidate sets built from fundamentals and overtones:

def overtone_sets(n, fundamentals, tones):
    """every n-element set made of one fundamental followed by a sorted
    (n-1)-combination of tones, leaving out any combination that already
    contains the fundamental's pitch class"""
    sets = []
    for fund in fundamentals:
        for combo in choose(n-1, tones):
            combo = sorted(combo)
            if integer(fund) not in integers(combo):
                sets.append([fund] + combo)
    return sets

def possible_triads(root, tones):
    """all the triads that can be built over a root (a NoteName, note name string,
    PitchClass or int) from a pool of candidate tones"""
    if isinstance(root, str):
        root = read_note_name(root)
    return overtone_sets(3, [integer(root)], tones)
