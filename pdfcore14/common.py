#!/usr/bin/env python3

import inspect, sys

# ========================================================= MESSAGES

def eprint(*args, **kwargs):
    print(*args, file=sys.stderr, **kwargs)

def caller_name(depth:int = 2):
    '''
    Returns 'class.func' for the function that is `depth` frames up the stack;
    the class part is 'global' if the function is not a method.
    '''
    frame = inspect.stack()[depth][0]
    the_class = frame.f_locals["self"].__class__.__name__ if "self" in frame.f_locals else 'global'
    return f'{the_class}.{frame.f_code.co_name}'

def warn(msg):
    '''Prints a warning message in the form: 'class.func(): warning: msg', where func() is the function that called warn().'''
    eprint(f'{caller_name()}(): warning: {msg}')

# ========================================================================== Glyph names

def bare_glyphname(gname:str):
    '''
    Returns the glyph name without the leading slash: both 'A' and PdfName('A') == '/A' give 'A'.
    '''
    return gname[1:] if isinstance(gname, str) and gname[:1] == '/' else gname
