'''
betterhelp
==========

Replaces argparse's own help output with something easier to read: the
program description first, then one block per argument with its invocation
colorized by kind (positional, named, flag), then example invocations.

Use it by ending your main with `return betterhelp.go(parser, argv)` and
giving the parser a `func` default. The helptext goes to stderr, and go()
returns 1 whenever it shows the help instead of running.
'''
import argparse
import os
import re
import shlex
import sys
import textwrap

import colorama

from touchkit import pipeable

# The presence of any of these strings in argv shows the helptext.
HELP_ARGS = {'-h', '--help'}

# Modules which change program behavior outside of the argparser (for example
# vlogging reading --debug out of argv) can register a paragraph here, and it
# will be printed underneath every helptext.
HELPTEXT_EPILOGUES = set()

FLAG_TYPES = {argparse._StoreTrueAction, argparse._StoreFalseAction, argparse._StoreConstAction}

def get_colors(do_colors):
    # Only colorize when both stdout and stderr are terminals. As soon as a
    # pipe is involved the escape codes end up in somebody's text file.
    if do_colors and pipeable.stdout_tty() and pipeable.stderr_tty():
        colorama.init()
        return {
            'positional': colorama.Style.BRIGHT + colorama.Fore.CYAN,
            'named': colorama.Style.BRIGHT + colorama.Fore.GREEN,
            'flag': colorama.Style.BRIGHT + colorama.Fore.MAGENTA,
            'reset': colorama.Style.RESET_ALL,
        }
    return {'positional': '', 'named': '', 'flag': '', 'reset': ''}

def get_program_name():
    program_name = os.path.basename(sys.argv[0])
    program_name = re.sub(r'\.pyw?$', '', program_name)
    return program_name

def is_required(action):
    # Positional nargs='*' arguments call themselves required, but the
    # program can clearly run without them.
    if action.option_strings == [] and action.nargs == '*':
        return False
    return action.required

def can_use_bare(parser) -> bool:
    '''
    Return True if the parser has a func and no required arguments, so
    running the program with no arguments should run it rather than show
    the help.
    '''
    has_func = bool(parser.get_default('func'))
    has_required_args = any(is_required(action) for action in parser._actions)
    return has_func and not has_required_args

def classify_actions(parser):
    positional_actions = []
    named_actions = []
    flag_actions = []
    for action in parser._actions:
        if type(action) is argparse._HelpAction:
            continue
        if type(action) is argparse._StoreAction:
            if action.option_strings == []:
                positional_actions.append(action)
            else:
                named_actions.append(action)
        elif type(action) in FLAG_TYPES:
            flag_actions.append(action)
        else:
            raise TypeError(f'betterhelp doesn\'t know what to do with {action}.')
    return (positional_actions, named_actions, flag_actions)

def render_nargs(argname, nargs):
    if nargs is None:
        return argname
    elif isinstance(nargs, int):
        return ' '.join([argname] * nargs)
    elif nargs == '?':
        return f'[{argname}]'
    elif nargs == '*':
        return f'[{argname}, {argname}, ...]'
    elif nargs == '+':
        return f'{argname} [{argname}, ...]'
    return f'[{argname}, ...]'

def render_example(example, program_name):
    if isinstance(example, dict):
        args = example['args']
        comment = example.get('comment')
    else:
        args = example
        comment = None

    if not isinstance(args, str):
        args = ' '.join(shlex.quote(arg) for arg in args)

    invocation = f'> {program_name} {args}'
    if comment:
        invocation = f'# {comment}\n{invocation}'
    return invocation

def make_helptext(parser, *, do_colors=True, program_name=None):
    color = get_colors(do_colors)
    if program_name is None:
        program_name = get_program_name()

    (positional_actions, named_actions, flag_actions) = classify_actions(parser)

    invocations = {}
    main_invocation = [program_name]

    for action in positional_actions:
        argname = action.metavar or action.dest
        inv = render_nargs(argname, action.nargs)
        inv = f'{color["positional"]}{inv}{color["reset"]}'
        invocations[action] = [inv]
        main_invocation.append(inv)

    for action in named_actions:
        argname = action.metavar or action.dest
        invocations[action] = [
            f'{color["named"]}{alias} {render_nargs(argname, action.nargs)}{color["reset"]}'
            for alias in action.option_strings
        ]
        if action.required:
            main_invocation.append(invocations[action][0])

    if any(not action.required for action in named_actions):
        main_invocation.append(f'{color["named"]}[options]{color["reset"]}')

    for action in flag_actions:
        invocations[action] = [
            f'{color["flag"]}{alias}{color["reset"]}'
            for alias in action.option_strings
        ]

    if flag_actions:
        main_invocation.append(f'{color["flag"]}[flags]{color["reset"]}')

    argument_helps = []
    for action in (positional_actions + named_actions + flag_actions):
        arghelp = []
        if action.help is not None:
            arghelp.append(textwrap.dedent(action.help).strip())
        if type(action) is argparse._StoreAction and action.default is not None:
            arghelp.append(f'Default: {repr(action.default)}')
        if action.option_strings and action.required:
            arghelp.append('(*) Required')
        arghelp = textwrap.indent('\n'.join(arghelp), '    ')
        inv = '\n'.join(invocations[action])
        argument_helps.append(f'{inv}\n{arghelp}'.strip())

    examples = [
        render_example(example, program_name)
        for example in getattr(parser, 'examples', [])
    ]
    if examples:
        examples = 'Examples:\n' + '\n\n'.join(examples)

    description = textwrap.dedent(parser.description or '').strip()

    parts = [
        program_name + '\n' + ('=' * len(program_name)),
        description,
        '> ' + ' '.join(main_invocation),
        '\n\n'.join(argument_helps),
        examples,
    ]
    parts = [part.strip() for part in parts if part]
    return '\n\n'.join(part for part in parts if part)

def print_helptext(text) -> None:
    '''
    Print the text to stderr along with any registered epilogues.
    '''
    fulltext = [text.strip()]
    epilogues = {textwrap.dedent(epi).strip() for epi in HELPTEXT_EPILOGUES}
    fulltext.extend(sorted(epilogues))
    separator = '\n' + ('-' * 80) + '\n'
    pipeable.stderr()
    pipeable.stderr(separator.join(fulltext))

def go(parser, argv):
    needs_help = (
        any(arg.lower() in HELP_ARGS for arg in argv) or
        (len(argv) == 0 and not can_use_bare(parser))
    )
    if needs_help:
        do_colors = os.environ.get('NO_COLOR', None) is None
        print_helptext(make_helptext(parser, do_colors=do_colors))
        return 1

    args = parser.parse_args(argv)
    return args.func(args)
