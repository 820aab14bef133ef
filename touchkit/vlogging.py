'''
vlogging
========

Everything from the logging module, plus two levels I kept wishing it had:
LOUD, for the chatter below debug, and SILENT, above everything. Loggers from
get_logger come with a `loud` method.

It also owns the --loud / --debug / --warning / --quiet / --silent flags, so
I don't have to teach every argparser about log levels.
'''
from logging import *

_getLogger = getLogger

# Out of the box the root logger sits at WARNING, and then none of its
# handlers ever get to see info or debug. I'd rather the root have no level at
# all and let each handler decide.
root = getLogger()
root.setLevel(NOTSET)

LOUD = 1
SILENT = 99999999999

# In order of precedence. If you somehow pass both --loud and --debug, you
# get loud.
LEVEL_ARGS = {
    '--loud': LOUD,
    '--debug': DEBUG,
    '--warning': WARNING,
    '--quiet': ERROR,
    '--silent': SILENT,
}

BETTERHELP_EPILOGUE = '''
This program uses vlogging. Add one of these flags to control how much it
prints to stderr:
--loud, --debug, --warning, --quiet, --silent.
The default level is info.
'''

def add_loud(log):
    def loud(self, message, *args, **kwargs):
        if self.isEnabledFor(LOUD):
            self._log(LOUD, message, args, **kwargs)

    addLevelName(LOUD, 'LOUD')
    log.loud = loud.__get__(log, log.__class__)

def basic_config(level):
    '''
    I put one stderr handler at the given level on the root logger. If the
    root already has handlers, I assume you set things up yourself and do
    nothing.
    '''
    if root.handlers:
        return

    handler = StreamHandler()
    handler.setFormatter(Formatter('{levelname}:{name}:{message}', style='{'))
    handler.setLevel(level)
    root.addHandler(handler)

def get_level_by_argv(argv):
    '''
    Return (level, argv). The level comes from the first of the LEVEL_ARGS
    flags that is present, or INFO if none are. The argv you get back is a
    copy with that flag taken out, so your argparser must not define options
    with the same names.
    '''
    argv = list(argv)
    level = INFO
    for (flag, flag_level) in LEVEL_ARGS.items():
        if flag in argv:
            argv.remove(flag)
            level = flag_level
            break
    return (level, argv)

def get_logger(name=None, main_fallback=None):
    '''
    A module that's run directly has the __name__ "__main__", and log lines
    that say __main__ don't tell me much. Pass main_fallback to say what the
    logger should be called in that case.
    '''
    if name == '__main__' and main_fallback is not None:
        name = main_fallback
    log = _getLogger(name)
    add_loud(log)
    return log

getLogger = get_logger

def main_level_by_argv(argv):
    (level, argv) = get_level_by_argv(argv)
    basic_config(level)
    return argv

def main_decorator(main):
    '''
    Put this on your main(argv) and the log level flags will be applied, and
    removed from argv, before your argparser ever sees them.
    '''
    def wrapped(argv):
        return main(main_level_by_argv(argv))
    return wrapped
