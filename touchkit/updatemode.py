'''
Decide which half of the TimestampPair gets written: access, modification,
or both. This is derived once from the -a, -m and --time flags and then
applied identically to every file.
'''
from touchkit import vlogging

log = vlogging.get_logger(__name__)

ACCESS_WORDS = {'access', 'atime', 'use'}
MODIFICATION_WORDS = {'modify', 'mtime'}

class UpdateMode:
    def __init__(self, name, *, access, modification):
        self.name = name
        self.access = access
        self.modification = modification

    def __repr__(self):
        return f'UpdateMode({repr(self.name)})'

    def __str__(self):
        return self.name

BOTH = UpdateMode('both', access=True, modification=True)
ACCESS_ONLY = UpdateMode('access_only', access=True, modification=False)
MODIFICATION_ONLY = UpdateMode('modification_only', access=False, modification=True)

def normalize_time_word(time_word):
    if time_word is None:
        return None
    return time_word.strip().lower()

def resolve_update_mode(only_atime=False, only_mtime=False, time_word=None) -> UpdateMode:
    '''
    Narrow down to ACCESS_ONLY or MODIFICATION_ONLY only when exactly one side
    was asked for. Asking for neither side, or for both sides at once
    (for example -a --time=mtime), updates both.

    An unknown time_word is ignored with a warning.
    '''
    word = normalize_time_word(time_word)
    if word and word not in ACCESS_WORDS and word not in MODIFICATION_WORDS:
        log.warning('Ignoring unknown --time word %s.', repr(time_word))

    wants_access = bool(only_atime) or word in ACCESS_WORDS
    wants_modification = bool(only_mtime) or word in MODIFICATION_WORDS

    if wants_access and not wants_modification:
        return ACCESS_ONLY
    if wants_modification and not wants_access:
        return MODIFICATION_ONLY
    return BOTH
