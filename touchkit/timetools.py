import datetime

EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
NANOSECONDS = 1_000_000_000

def now():
    return datetime.datetime.now(tz=datetime.timezone.utc)

def now_local():
    return datetime.datetime.now().astimezone()

def to_nanoseconds(moment) -> int:
    '''
    Convert a datetime into integer nanoseconds since the unix epoch.
    Naive datetimes are taken to be in local time.

    Going through timedelta instead of .timestamp() keeps us away from float
    rounding, so the microseconds come out exact.
    '''
    if moment.tzinfo is None:
        moment = moment.astimezone()
    delta = moment - EPOCH
    seconds = (delta.days * 86400) + delta.seconds
    return (seconds * NANOSECONDS) + (delta.microseconds * 1000)
