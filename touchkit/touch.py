'''
touch
=====

Update the access and modification times of files, creating any that don't
exist yet.

By default both times are set to the current time. Use -r to copy the times
of another file, or -t to give a specific time as [[CC]YY]MMDDhhmm[.ss].
Use -a or -m (or --time) to change only one of the two.

A file that can't be touched is reported and the rest are still processed.
The exit status is 1 if any file failed.
'''
import argparse
import os
import sys

from touchkit import betterhelp
from touchkit import configlayers
from touchkit import pipeable
from touchkit import timestamps
from touchkit import updatemode
from touchkit import vlogging
from touchkit import winglob

log = vlogging.get_logger(__name__, 'touch')

DEFAULT_CONFIG = {
    'no_create': False,
    'glob': True,
    'time': None,
}

CONFIG_ENVIRONMENT_VARIABLE = 'TOUCHKIT_CONFIG'
DEFAULT_CONFIG_PATH = os.path.join('~', '.touchkit.json')

def file_exists(path):
    return os.path.exists(path)

def read_metadata(path):
    '''
    Return (atime, mtime) of the path in nanoseconds.
    '''
    stat = os.stat(path)
    return (stat.st_atime_ns, stat.st_mtime_ns)

def apply_times(path, pair, mode):
    '''
    Write the parts of the pair that the mode asks for. The other part is
    read from the file and written back as it was.
    '''
    if mode.access and mode.modification:
        times = (pair.access, pair.modification)
    else:
        (atime, mtime) = read_metadata(path)
        times = (
            pair.access if mode.access else atime,
            pair.modification if mode.modification else mtime,
        )
    os.utime(path, ns=times)

def create_empty_file(path):
    # Append mode, so a file that appeared in the meantime is not truncated.
    with open(path, 'a'):
        pass

def touch(path, pair, mode, *, no_create=False) -> bool:
    '''
    Touch a single path. Return True if it went fine (including the case of
    a missing file with no_create), False if the OS refused. Errors are
    logged, never raised, so one bad file doesn't stop a batch.

    Newly created files also receive the pair, so -r and -t apply to them.
    '''
    try:
        if not file_exists(path):
            if no_create:
                log.debug('Not creating %s.', path)
                return True
            log.debug('Creating %s.', path)
            create_empty_file(path)
        apply_times(path, pair, mode)
    except OSError as exc:
        log.error('Can\'t touch %s: %s', path, exc)
        return False

    log.loud('Touched %s.', path)
    return True

def expand_paths(patterns, *, use_glob=True):
    '''
    Yield the files matching each glob pattern. A pattern that matches
    nothing, or isn't a glob at all, is yielded as-is so that it gets
    created.
    '''
    for pattern in patterns:
        if use_glob and winglob.is_glob(pattern):
            matches = winglob.glob(pattern)
            if matches:
                yield from matches
                continue
        yield pattern

def touch_many(paths, pair, mode, *, no_create=False, use_glob=True) -> int:
    '''
    Touch every path in order and return the number that failed.
    '''
    failures = 0
    for path in expand_paths(paths, use_glob=use_glob):
        if not touch(path, pair, mode, no_create=no_create):
            failures += 1
    return failures

def load_config():
    filepath = os.environ.get(CONFIG_ENVIRONMENT_VARIABLE, DEFAULT_CONFIG_PATH)
    filepath = os.path.expanduser(filepath)
    (config, needs_rewrite) = configlayers.load_file(filepath, DEFAULT_CONFIG)
    if needs_rewrite and os.path.isfile(filepath):
        log.debug('Config %s is missing some keys, defaults were used for them.', filepath)
    return config

def touch_argparse(args):
    config = load_config()

    no_create = args.no_create or bool(config['no_create'])
    use_glob = bool(config['glob']) and not args.no_glob
    time_word = args.time if args.time is not None else config['time']

    pair = timestamps.resolve_timestamp_pair(reference=args.reference, stamp=args.stamp)
    mode = updatemode.resolve_update_mode(
        only_atime=args.only_atime,
        only_mtime=args.only_mtime,
        time_word=time_word,
    )
    log.debug('Applying %s with mode %s.', pair, mode)

    try:
        paths = pipeable.input_many_required(args.files, skip_blank=True)
    except pipeable.NoArguments:
        log.error('No filenames were given, is the clipboard or pipe empty?')
        return 1

    failures = touch_many(paths, pair, mode, no_create=no_create, use_glob=use_glob)
    if failures:
        return 1
    return 0

@pipeable.ctrlc_return1
@vlogging.main_decorator
def main(argv):
    betterhelp.HELPTEXT_EPILOGUES.add(vlogging.BETTERHELP_EPILOGUE)

    parser = argparse.ArgumentParser(description=__doc__)
    parser.examples = [
        {'args': 'notes.txt', 'comment': 'Create notes.txt or bump it to now.'},
        {'args': 'build.log -r source.c', 'comment': 'Give build.log the times of source.c.'},
        {'args': 'a.txt b.txt -m -t 202401311530.00'},
        {'args': '"*.log" --time atime -c'},
        {'args': '!c', 'comment': 'Touch every filename on the clipboard.'},
    ]

    parser.add_argument(
        'files',
        nargs='+',
        help='''
        Files to touch. Glob patterns are expanded; a pattern that matches
        nothing is created as a literal filename.
        Uses pipeable to support !c clipboard, !i stdin, one filename per line.
        ''',
    )
    parser.add_argument(
        '-r',
        '--reference',
        dest='reference',
        metavar='file',
        default=None,
        help='''
        Use this file's times instead of the current time. If the file doesn't
        exist, this is ignored.
        ''',
    )
    parser.add_argument(
        '-t',
        dest='stamp',
        metavar='stamp',
        default=None,
        help='''
        Use this time instead of the current time, written as
        [[CC]YY]MMDDhhmm[.ss]. Fields that are missing or out of range take
        their defaults instead of failing.
        ''',
    )
    parser.add_argument(
        '--time',
        dest='time',
        metavar='word',
        default=None,
        help='''
        access, atime, or use: same as -a.
        modify or mtime: same as -m.
        ''',
    )
    parser.add_argument(
        '-a',
        dest='only_atime',
        action='store_true',
        help='''
        Change only the access time.
        ''',
    )
    parser.add_argument(
        '-m',
        dest='only_mtime',
        action='store_true',
        help='''
        Change only the modification time.
        ''',
    )
    parser.add_argument(
        '-c',
        '--no_create',
        '--no-create',
        dest='no_create',
        action='store_true',
        help='''
        Don't create files that don't exist.
        ''',
    )
    parser.add_argument(
        '--no_glob',
        '--no-glob',
        dest='no_glob',
        action='store_true',
        help='''
        Take every filename literally instead of expanding glob patterns.
        ''',
    )
    parser.add_argument(
        '-f',
        dest='force',
        action='store_true',
        help='''
        Ignored, for compatibility.
        ''',
    )
    parser.set_defaults(func=touch_argparse)

    return betterhelp.go(parser, argv)

def entry():
    raise SystemExit(main(sys.argv[1:]))

if __name__ == '__main__':
    raise SystemExit(main(sys.argv[1:]))
