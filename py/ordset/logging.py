# © 2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

# This module handles errors and warnings

__all__ = (
    'report',

    'ignore_warning',
    'warning_is_ignored',
    'enable_warning',
    'suppress_errors',

    'LogMessage',
    'SetError',
    'SetWarning',
    'ArgumentError',
    'FrozenStateError',
    'ArityError',

    'dbg',
    )

import sys
import contextlib

import ordset.globals

# A set of ignored warnings
ignored_warnings = {}
def ignore_warning(tag):
    ignored_warnings[tag] = True

def enable_warning(tag):
    ignored_warnings[tag] = False

def warning_is_ignored(tag):
    return (ordset.globals.ignore_all_warnings
            or ignored_warnings.get(tag, False))

# Messages
#
# There are two kinds of messages, errors and warnings. All messages
# are represented as instances of LogMessage, or one of its
# subclasses. Errors are also exceptions, and are raised where they
# are detected; warnings are passed to report().
#
class LogMessage(object):
    # The kind is for example 'error' or 'warning'.
    kind = None

    outfile = sys.stderr

    def __init__(self, *msgargs):
        # The msg is the message to print.
        self.msg = self.fmt % msgargs

    def tag(self):
        return self.__class__.__name__

    def preprocess(self):
        '''Call before log when reporting. Return True to actually log
        or False to abort'''
        return True

    # This method can be overridden
    def log(self):
        lines = self.msg.splitlines() or ['']
        self.outfile.write('%s: %s\n' % (self.kind, lines[0]))
        for l in lines[1:]:
            self.outfile.write('  %s\n' % (l,))

    def postprocess(self):
        pass

# This is a base class for warning messages
#
class SetWarning(LogMessage):
    kind = "warning"

    def preprocess(self):
        # Don't print anything if the user asked us not to
        return not warning_is_ignored(self.tag())

# This is a base class for error messages
#
class SetError(Exception, LogMessage):
    kind = "error"

    def __init__(self, *msgargs):
        LogMessage.__init__(self, *msgargs)
        Exception.__init__(self, self.msg)

# Wrong-shape input: a non-set operand, a non-enumerable source, or a
# reference cycle found while flattening
class ArgumentError(SetError, ValueError):
    pass

# A mutating call on a frozen set
class FrozenStateError(SetError, RuntimeError):
    pass

# Too many positional arguments to a constructor
class ArityError(SetError, TypeError):
    pass

store_errors = None

def report(logmessage):
    if store_errors is not None and isinstance(logmessage,
                                               (SetError, SetWarning)):
        store_errors.append(logmessage)
        return

    if logmessage.preprocess():
        logmessage.log()
        logmessage.postprocess()

def dbg(*args):
    sys.stderr.write("%s\n" % (" ".join(map(str, args))))

@contextlib.contextmanager
def suppress_errors():
    '''Collect reported messages in the yielded list instead of
    printing them. A SetError raised inside the block is also added to
    the list, and does not propagate. Used by the unit tests.'''
    global store_errors
    orig = store_errors
    store_errors = []
    try:
        yield store_errors
    except SetError as e:
        store_errors.append(e)
    finally:
        store_errors = orig
