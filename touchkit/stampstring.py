'''
This module parses the compact timestamp accepted by `touch -t`:

    [[CC]YY]MMDDhhmm[.ss]

The parser is deliberately forgiving. It never raises; every field that is
missing, non-numeric, or out of range quietly falls back to its default and
the rest of the fields are still used. Existing scripts depend on this
behavior, so please don't "fix" it by raising.

Fields are located by counting from the end of the integer part (everything
before the first dot), so in '1230' only the '30' is used: hours, days and
months are only read once there are at least eight characters. See
FIELD_WINDOWS for the exact rules.
'''
import collections
import datetime
import re
import sys

from touchkit import pipeable
from touchkit import sentinel
from touchkit import timetools
from touchkit import vlogging

log = vlogging.get_logger(__name__)

DIGITS = re.compile(r'[0-9]+')

CURRENT_YEAR = sentinel.Sentinel('CURRENT_YEAR')

FieldWindow = collections.namedtuple(
    'FieldWindow',
    ['name', 'start', 'stop', 'min_length', 'low', 'high', 'default'],
)

# start and stop are slice indices counted from the end of the integer part.
# A field is only read when the integer part has at least min_length
# characters, otherwise it takes the default. Values outside low..high also
# take the default.
# Day and month also reject 00, even though only the upper bound is part of
# the traditional rules. No calendar has a day or month zero.
FIELD_WINDOWS = [
    FieldWindow('minute', -2, None, 0, 0, 59, 0),
    FieldWindow('hour', -4, -2, 8, 0, 23, 0),
    FieldWindow('day', -6, -4, 8, 1, 31, 1),
    FieldWindow('month', -8, -6, 8, 1, 12, 1),
]

SECOND_WINDOW = FieldWindow('second', 0, 2, 0, 0, 59, 0)

YearRule = collections.namedtuple('YearRule', ['width', 'base', 'fallback'])

FOUR_DIGIT_YEAR = YearRule(width=4, base=0, fallback=0)
TWO_DIGIT_YEAR = YearRule(width=2, base=2000, fallback=CURRENT_YEAR)

# Total string lengths which mean CCYY even when the integer part is not 12
# characters long. 15 is CCYYMMDDhhmm.ss, 13 is the same with one digit
# shaved off somewhere.
FOUR_DIGIT_STRING_LENGTHS = {13, 15}

class StampFields(collections.namedtuple(
        'StampFields',
        ['year', 'month', 'day', 'hour', 'minute', 'second'],
    )):
    __slots__ = ()

    def to_datetime(self):
        '''
        Return a naive datetime in local time.

        The day is only checked against 1..31, so Feb 31 is possible. Rather
        than fail, excess days roll over into the following month the way
        mktime does it. Years outside of what datetime supports are clamped.
        '''
        year = min(max(self.year, datetime.MINYEAR), datetime.MAXYEAR)
        moment = datetime.datetime(year, self.month, 1, self.hour, self.minute, self.second)
        return moment + datetime.timedelta(days=self.day - 1)

def parse_window(text, low, high, default) -> int:
    '''
    Return the integer in text if it is made of ascii digits and falls within
    low..high inclusive, otherwise the default.
    '''
    if not DIGITS.fullmatch(text):
        return default
    value = int(text)
    if value < low or value > high:
        return default
    return value

def pick_year_rule(stamp, integer_part):
    '''
    Return the YearRule that applies to this stamp, or None if the year should
    be the current year.
    '''
    if len(integer_part) == 12 or len(stamp) in FOUR_DIGIT_STRING_LENGTHS:
        return FOUR_DIGIT_YEAR
    if len(integer_part) == 10:
        return TWO_DIGIT_YEAR
    return None

def parse_year(stamp, integer_part, current_year) -> int:
    rule = pick_year_rule(stamp, integer_part)
    if rule is None:
        return current_year

    token = stamp[:rule.width]
    if len(token) == rule.width and DIGITS.fullmatch(token):
        return rule.base + int(token)

    if rule.fallback is CURRENT_YEAR:
        return current_year
    return rule.fallback

def parse_seconds(suffix) -> int:
    text = suffix[SECOND_WINDOW.start:SECOND_WINDOW.stop]
    # '.5' means 50 seconds, not 5.
    if len(text) == 1:
        text += '0'
    return parse_window(text, SECOND_WINDOW.low, SECOND_WINDOW.high, SECOND_WINDOW.default)

def parse_stamp(stamp, now=None) -> StampFields:
    '''
    Parse a [[CC]YY]MMDDhhmm[.ss] string into StampFields.

    now:
        A datetime used when the stamp does not carry a year. If None, the
        local clock is read.

    >>> parse_stamp('201302020230.45')
    StampFields(year=2013, month=2, day=2, hour=2, minute=30, second=45)
    >>> parse_stamp('1234', now=datetime.datetime(2024, 6, 1))
    StampFields(year=2024, month=1, day=1, hour=0, minute=34, second=0)
    '''
    if now is None:
        now = timetools.now_local()

    (integer_part, dot, suffix) = stamp.partition('.')

    fields = {}
    if dot:
        fields['second'] = parse_seconds(suffix)
    else:
        fields['second'] = SECOND_WINDOW.default

    for window in FIELD_WINDOWS:
        if len(integer_part) < window.min_length:
            fields[window.name] = window.default
            continue
        text = integer_part[window.start:window.stop]
        fields[window.name] = parse_window(text, window.low, window.high, window.default)

    fields['year'] = parse_year(stamp, integer_part, current_year=now.year)

    result = StampFields(**fields)
    log.debug('Parsed stamp %s as %s.', repr(stamp), result)
    return result

def main(argv):
    stamps = pipeable.input_many(argv, strip=True, skip_blank=True)
    for stamp in stamps:
        pipeable.stdout(parse_stamp(stamp).to_datetime().isoformat(sep=' '))
    return 0

if __name__ == '__main__':
    raise SystemExit(main(sys.argv[1:]))
