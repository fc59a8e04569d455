### canonical forms of pitch class sets:
### zero form, rotations, normal form, prime form and interval vector.
### every function here accepts a sequence of ints, PitchClasses or NoteNames,
### and treats its order as meaningful (the first element is the reference pitch).

from .pitchclass import PitchClass, integers
from .util import log, rotate_list, unique
from . import _settings

import numpy as np


def _values(seq):
    """casts a sequence of ints, PitchClasses or NoteNames to raw ints"""
    return [int(x) for x in seq]

def rotations(seq):
    """returns all n cyclic rotations of an n-element sequence,
    where rotation k starts from the k-th element and wraps the first k round to the end"""
    seq = list(seq)
    return [rotate_list(seq, k) for k in range(len(seq))]

def zero_form(seq):
    """transposes a sequence so that its first element is 0, keeping the order of
    the rest, and drops any repeated pitch classes after their first occurrence"""
    values = _values(seq)
    if len(values) == 0:
        raise ValueError('zero form is undefined for an empty sequence')
    first = values[0]
    return unique([PitchClass(x - first) for x in values])

def sorted_zero_form(seq):
    """the untrimmed, ascending version of zero_form: returns plain ints in [0,11]
    without removing repeats"""
    values = _values(seq)
    if len(values) == 0:
        raise ValueError('zero form is undefined for an empty sequence')
    first = values[0]
    # wraparound subtraction of the first element:
    return sorted([(x - first) if first <= x else (x + 12 - first) for x in values])

def inversions(seq):
    """the zero form of every rotation of seq, in rotation order"""
    return [zero_form(r) for r in rotations(seq)]

def normal_form(seq):
    """the 'most compact' of the inversions of seq: the one with the smallest
    last element, with ties broken on the second-to-last and then the
    third-to-last element. any remaining tie goes to the earliest rotation.

    only the last three positions are compared, so this is only guaranteed
    to be canonical for sets of up to four pitch classes."""
    candidates = inversions(seq)
    set_size = len(candidates[0]) if len(candidates) > 0 else 0
    if set_size > _settings.NORMAL_FORM_MAX_SIZE:
        log(f'Normal form of a {set_size}-element set is not guaranteed to be canonical: {integers(seq)}')

    # compare from the last position backwards, at most three places:
    for place in range(1, min(3, set_size) + 1):
        lowest = min(c[-place] for c in candidates)
        candidates = [c for c in candidates if c[-place] == lowest]
    return candidates[0]

def prime_form(seq):
    """the normal form of seq, or the normal form of its mirror image
    (each element subtracted from 12), whichever has the lower sum.
    the unmirrored normal form wins a tie"""
    normal = normal_form(seq)
    mirrored = normal_form([12 - x for x in _values(normal)])
    # sorted is stable, so the original form stays first on a tie:
    candidates = sorted([normal, mirrored], key=lambda form: sum(_values(form)))
    return candidates[0]

def interval_class(x):
    """folds a semitone distance into the interval class range 1-6"""
    x = int(PitchClass(x))
    return x if x <= 6 else 12 - x

def interval_vector(seq):
    """histogram of the interval classes 1 to 6 between every pair of
    pitch classes in the prime form of seq, as a list of six ints"""
    prime = prime_form(seq)
    # the 'difference triangle': each element subtracted from every later element
    differences = [later - earlier for i, earlier in enumerate(prime) for later in prime[i+1:]]
    classes = np.asarray([interval_class(d) for d in differences], dtype=int)
    counts = np.bincount(classes, minlength=7)
    return [int(c) for c in counts[1:7]]
