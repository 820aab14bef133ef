'''
This module lets command line arguments stand for something other than their
literal text:

!c, !clip, !clipboard  -> the contents of the clipboard
!i, !in, !input, !stdin -> lines typed or piped into stdin

Traditional unix tools turn on stdin reading in all sorts of ways: sometimes
when they detect a pipe, sometimes when you pass "-", sometimes just because
you gave no arguments. I prefer a consistent argparser where !i says it out
loud. So `touch !c` touches every filename I copied, and
`find . -name "*.log" | touch !i` works the way you'd hope.

There are also stdout / stderr helpers, because under pythonw those streams
are None and I don't want every program to check for that.
'''
# import pyperclip moved to stay lazy.
import sys

CLIPBOARD_STRINGS = ['!c', '!clip', '!clipboard']
INPUT_STRINGS = ['!i', '!in', '!input', '!stdin']
EOF = '\x1a'

class PipeableException(Exception):
    pass

class NoArguments(PipeableException):
    pass

def ctrlc_return1(function):
    '''
    Put this on your main function, and if I press ctrl+c the program returns
    status 1 instead of dumping a stacktrace on me.

    Don't use it if you have cleanup to do on ctrl+c.
    '''
    def wrapped(*args, **kwargs):
        try:
            return function(*args, **kwargs)
        except KeyboardInterrupt:
            return 1
    return wrapped

def _multi_line_input(prompt=None):
    if prompt is not None and not stdin_pipe():
        sys.stderr.write(prompt)
        sys.stderr.flush()

    while True:
        (line, has_eof, _) = sys.stdin.readline().partition(EOF)

        # Hitting enter on a blank line still gives '\n', so an empty string
        # means EOF came first on the line and there's nothing left to yield.
        if line == '':
            break

        yield line.rstrip('\n')

        if has_eof:
            break

def multi_line_input(prompt=None):
    '''
    Yield lines from stdin until EOF, which is ctrl+d on linux and ctrl+z on
    windows. The prompt is only shown when a human is typing, so callers
    don't need to treat pipes differently.
    '''
    lines = _multi_line_input(prompt=prompt)
    if stdin_tty():
        # If I'm typing the lines by hand, I don't want the program to start
        # printing in between them. Wait until I'm done.
        lines = list(lines)
    return lines

def input(
        arg,
        *,
        input_prompt=None,
        skip_blank=False,
        strip=False,
    ):
    '''
    Resolve one argument into an iterable of lines.

    !c reads the clipboard, !i reads stdin, and anything else is taken
    literally. This isn't recursive: if the clipboard has a filename in it,
    you get the filename, not its contents.

    If you're keeping the structure of the input, leave strip and skip_blank
    False. If you're crunching a list of names, you probably want both.
    '''
    if not isinstance(arg, str):
        raise TypeError(f'arg should be {str}, not {type(arg)}.')

    arg_lower = arg.lower()

    if arg_lower in INPUT_STRINGS:
        lines = multi_line_input(prompt=input_prompt)

    elif arg_lower in CLIPBOARD_STRINGS:
        import pyperclip
        lines = pyperclip.paste().splitlines()

    else:
        lines = arg.splitlines()

    if strip:
        lines = (line.strip() for line in lines)
    if skip_blank:
        lines = (line for line in lines if line)

    return lines

def input_many(args, *input_args, **input_kwargs):
    '''
    Yield input() of every argument, so you don't have to write the double
    loop yourself for an argparse argument with nargs='+'.
    '''
    if isinstance(args, str):
        args = [args]

    for arg in args:
        yield from input(arg, *input_args, **input_kwargs)

def input_many_required(args, *input_args, **input_kwargs):
    '''
    Return input_many as a list, or raise NoArguments if the arguments
    resolved to nothing at all. That's what happens with an empty clipboard
    or an empty pipe, and I'd rather hear about it than have the program
    silently do nothing.
    '''
    lines = list(input_many(args, *input_args, **input_kwargs))
    if not lines:
        raise NoArguments(args)
    return lines

def output(stream, line, *, end):
    line = str(line)
    if not line.endswith(end):
        line += end
    stream.write(line)
    if stream.isatty():
        stream.flush()

def stdout(line='', end='\n'):
    if sys.stdout is not None:
        output(sys.stdout, line, end=end)

def stderr(line='', end='\n'):
    if sys.stderr is not None:
        output(sys.stderr, line, end=end)

def _stream_if(stream, tty):
    if stream is not None and stream.isatty() == tty:
        return stream
    return None

def stdin_tty():
    return _stream_if(sys.stdin, tty=True)

def stdout_tty():
    return _stream_if(sys.stdout, tty=True)

def stderr_tty():
    return _stream_if(sys.stderr, tty=True)

def stdin_pipe():
    return _stream_if(sys.stdin, tty=False)
