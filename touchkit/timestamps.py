'''
Work out the one (access, modification) pair that a touch invocation will
apply to all of its files.

The sources, in order of precedence:
1. A reference file, whose times are copied exactly. If it can't be stat'ed
   we move on to the next source without complaint.
2. A [[CC]YY]MMDDhhmm[.ss] stamp string, see stampstring.
3. The current time.
'''
import os

from touchkit import sentinel
from touchkit import stampstring
from touchkit import timetools
from touchkit import vlogging

log = vlogging.get_logger(__name__)

NOW = sentinel.Sentinel('NOW')
REFERENCE = sentinel.Sentinel('REFERENCE')
STAMP = sentinel.Sentinel('STAMP')

class TimestampPair:
    '''
    Both times are integer nanoseconds since the epoch. They are always set
    together; it is up to the UpdateMode to decide which of them actually gets
    written.
    '''
    def __init__(self, access, modification, source=NOW):
        self.access = access
        self.modification = modification
        self.source = source

    def __eq__(self, other):
        if not isinstance(other, TimestampPair):
            return NotImplemented
        return (self.access, self.modification) == (other.access, other.modification)

    def __hash__(self):
        return hash((self.access, self.modification))

    def __iter__(self):
        return iter((self.access, self.modification))

    def __repr__(self):
        return f'TimestampPair(access={self.access}, modification={self.modification}, source={self.source})'

    @classmethod
    def from_datetime(cls, moment, source=NOW):
        ns = timetools.to_nanoseconds(moment)
        return cls(access=ns, modification=ns, source=source)

def pair_from_reference(reference):
    '''
    Return the TimestampPair of the reference file, or None if the file
    can't be used.
    '''
    try:
        stat = os.stat(reference)
    except OSError as exc:
        log.debug('Ignoring reference %s: %s', reference, exc)
        return None
    return TimestampPair(stat.st_atime_ns, stat.st_mtime_ns, source=REFERENCE)

def pair_from_stamp(stamp, now):
    fields = stampstring.parse_stamp(stamp, now=now)
    try:
        return TimestampPair.from_datetime(fields.to_datetime(), source=STAMP)
    except (OverflowError, OSError, ValueError) as exc:
        log.warning('Stamp %s can\'t be used as a timestamp (%s), using the current time.', repr(stamp), exc)
        return None

def resolve_timestamp_pair(*, reference=None, stamp=None, now=None) -> TimestampPair:
    '''
    reference:
        Path of a file whose times should be copied. Empty string and None
        both mean no reference.

    stamp:
        A [[CC]YY]MMDDhhmm[.ss] string. Note that the empty string is still a
        stamp, it just happens to be all defaults.

    now:
        A datetime to use as the current time. If None, the local clock is read
        once right here.
    '''
    if now is None:
        now = timetools.now_local()

    pair = None
    if reference:
        pair = pair_from_reference(reference)

    if pair is None and stamp is not None:
        pair = pair_from_stamp(stamp, now=now)

    if pair is None:
        pair = TimestampPair.from_datetime(now, source=NOW)

    log.debug('Resolved %s.', pair)
    return pair
