from .util import compare, log
from pitchset.pcsets import *
from pitchset.pitchclass import integers
from pitchset.notes import C, E, G

import pytest

def test_zero_form(verbose=False):
    log.verbose = verbose
    compare(zero_form([4, 7, 11]), [0, 3, 7])
    # order after the first element is kept, and repeats are dropped:
    compare(zero_form([7, 2, 7, 11]), [0, 7, 4])
    compare(zero_form([16, 19, 23]), [0, 3, 7])
    # NoteNames are read as their pitch classes:
    compare(zero_form([E, G, C]), [0, 3, 8])

    compare(sorted_zero_form([4, 0, 7, 4]), [0, 0, 3, 8])
    compare(sorted_zero_form([0, 4, 7]), [0, 4, 7])

    with pytest.raises(ValueError):
        zero_form([])
    with pytest.raises(ValueError):
        sorted_zero_form([])
    log.verbose = False

def test_zero_form_properties():
    for seq in [[0, 4, 7], [3, 7, 10, 2], [11, 0, 1], [5, 5, 5], [9, 2, 6, 11, 4]]:
        z = zero_form(seq)
        compare(z[0], 0)
        # idempotent:
        compare(zero_form(z), z)
        # transposition invariant:
        for t in range(12):
            compare(zero_form([x + t for x in seq]), z)

def test_rotations():
    compare(rotations([0, 4, 7]), [[0, 4, 7], [4, 7, 0], [7, 0, 4]])
    compare(rotations([]), [])
    compare(inversions([0, 4, 7]), [[0, 4, 7], [0, 3, 8], [0, 5, 9]])
    compare(len(inversions([0, 2, 4, 5, 7])), 5)

    # n rotations, each a reordering of the same pitches:
    for seq in [[0], [0, 4, 7], [3, 3, 8], [11, 2, 5, 9], [0, 2, 4, 5, 7, 9, 11]]:
        rots = rotations(seq)
        compare(len(rots), len(seq))
        for r in rots:
            compare(sorted(r), sorted(seq))
        compare(rots[0], seq)

def test_normal_form():
    compare(normal_form([4, 0, 7]), [0, 8, 3])
    compare(normal_form([7, 0, 4]), [0, 4, 7])
    compare(normal_form([0, 3, 7]), [0, 3, 7])
    compare(normal_form([0, 3, 6]), [0, 3, 6])
    compare(normal_form([0, 1, 2]), [0, 1, 2])

    # the normal form is one of the inversions:
    for seq in [[0, 4, 7], [2, 9, 5], [0, 1, 4, 8], [0, 7]]:
        assert normal_form(seq) in inversions(seq)

def test_prime_form():
    compare(prime_form([0, 4, 7]), [0, 7, 3])
    compare(prime_form([0, 3, 7]), [0, 3, 7])
    compare(prime_form([0, 3, 6]), [0, 3, 6])
    # major and minor triads share a set class:
    compare(set(integers(prime_form([2, 6, 9]))), set(integers(prime_form([9, 0, 4]))))

    # prime form does not depend on which rotation it starts from:
    for seq in [[0, 4, 7], [2, 9, 5], [0, 1, 5], [0, 2, 7], [4, 8, 11, 2], [0, 1, 4, 8], [9, 0, 3, 6], [0, 7]]:
        prime = prime_form(seq)
        for rotated in rotations(seq):
            compare(prime_form(rotated), prime)

    # prime form never sums to more than the normal form:
    for seq in [[0, 4, 7], [0, 1, 5], [0, 2, 7], [4, 8, 11, 2]]:
        assert sum(integers(prime_form(seq))) <= sum(integers(normal_form(seq)))

def test_interval_vector():
    compare(interval_vector([0, 1, 2]), [2, 1, 0, 0, 0, 0])
    compare(interval_vector([0, 4, 7]), [0, 0, 1, 1, 1, 0])
    compare(interval_vector([0, 3, 7]), [0, 0, 1, 1, 1, 0])
    compare(interval_vector([0, 3, 6, 9]), [0, 0, 4, 0, 0, 2])
    compare(interval_vector([0]), [0, 0, 0, 0, 0, 0])

    # every pair of pitch classes counts exactly once:
    for seq in [[0, 4, 7], [0, 1, 4, 8], [0, 2, 4, 7, 9], [0, 6]]:
        n = len(seq)
        compare(sum(interval_vector(seq)), n * (n - 1) // 2)

def test_interval_class():
    compare([interval_class(x) for x in range(12)], [0, 1, 2, 3, 4, 5, 6, 5, 4, 3, 2, 1])
    compare(interval_class(-1), 1)
