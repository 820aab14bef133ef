'''
On Windows, square brackets are ordinary filename characters, but python's
glob treats them as character classes. Filenames like "report [final].txt"
are common there, so on Windows we escape the brackets and leave * and ?
alone. Everywhere else this is plain glob.
'''
import glob as python_glob
import os
import re

if os.name == 'nt':
    GLOB_SYMBOLS = {'*', '?'}
else:
    GLOB_SYMBOLS = {'*', '?', '['}

def fix(pattern):
    if os.name == 'nt':
        pattern = re.sub(r'(\[|\])', r'[\1]', pattern)
    return pattern

def glob(pathname, *, recursive=False):
    return python_glob.glob(fix(pathname), recursive=recursive)

def is_glob(pattern):
    return len(set(pattern).intersection(GLOB_SYMBOLS)) > 0
