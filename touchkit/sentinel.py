class Sentinel:
    '''
    A named placeholder object for values that must never be confused with
    real data, like "which tier produced this timestamp" or "use the current
    year".

    Plain `object()`s would work too, but they print as an anonymous address,
    and when you are reading a log line you want to know what you're
    looking at.

    Sentinels are compared by identity. Two sentinels with the same name are
    still different sentinels.
    '''
    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f'<Sentinel {repr(self.name)}>'

    def __str__(self):
        return self.name
