import time
import inspect
import itertools

VERBOSE = False

global_init_time = time.time()

class Log:
    """logging class for detailed info from nested function execution"""
    def __init__(self, verbose=VERBOSE):
        self.verbose=verbose

    def __call__(self, msg):
        if self.verbose:
            cur_frame = inspect.currentframe()
            call_frame = inspect.getouterframes(cur_frame, 2)
            wall_time = time.time() - global_init_time

            context = f'[{wall_time:.06f}]({call_frame[1][3]}) '
            print(context + msg)

log = Log()


class MusicError(Exception):
    """raised when a musically undefined result is requested of an otherwise valid input"""
    pass


# generically useful functions used across modules:
def rotate_list(lst, num_steps, N=None):
    """Accepts a list, and returns the wrapped-around list
    that begins num_steps up from the beginning of the original.
    used for set rotations, i.e. rotation 1 of [0,4,7] is [4,7,0].
    N uses the length of the list by default,  """
    if N is None:
        N = len(lst)
    rotated_start_place = num_steps
    rotated_idxs = [(rotated_start_place + i) % N for i in range(N)]
    rotated_lst= [lst[i] for i in rotated_idxs]
    return rotated_lst

def unique(iterable):
    """returns the items of an iterable as a list, without repeats,
    keeping each item at the place of its first occurrence"""
    seen = set()
    output = []
    for item in iterable:
        if item not in seen:
            seen.add(item)
            output.append(item)
    return output

def choose(k, iterable):
    """all the k-item combinations of an iterable, as lists.
    items keep their original relative order inside each combination"""
    return [list(combo) for combo in itertools.combinations(iterable, k)]

def count_elem(iterable, value):
    """how many times value occurs in iterable"""
    return sum(1 for item in iterable if item == value)

def replace(pattern, replacement, text):
    """literal (non-regex) substring substitution"""
    return text.replace(pattern, replacement)

def reverse_dict(dct):
    """accepts a dict whose values and keys are both unique,
    and returns the reversed dict where keys are values and vice versa"""
    rev_dct = {}
    for k,v in dct.items():
        if isinstance(v, list):
            v = tuple(v)
        rev_dct[v] = k
    return rev_dct

def unpack_and_reverse_dict(dct, include_keys=False):
    """accepts a dict whose values are iterables, the items of which are all unique,
    and returns the reversed dict that maps each item to its corresponding parent key"""
    rev_dct = {}
    for k, v_list in dct.items():
        if not isinstance(v_list, (tuple, list)):
            raise TypeError(f"unpack_and_reverse_dict expects dict values to be tuples or lists of strings")
        for v_item in v_list:
            rev_dct[v_item] = k
        if include_keys:
            # map original dict key back into itself, e.g. for aliases
            rev_dct[k] = k
    return rev_dct
