"""
brake.utils.stacks
~~~~~~~~~~~~~~~~~~

:copyright: (c) 2026 by the Brake Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import inspect

from brake.models import BacktraceLine
from brake.utils.encoding import to_unicode


def _getitem_from_frame(f_locals, key, default=None):
    """
    f_locals is not guaranteed to have .get(), but it will always
    support __getitem__. Even if it doesnt, we return ``default``.
    """
    try:
        return f_locals[key]
    except Exception:
        return default


def iter_traceback_frames(tb):
    """
    Given a traceback object, it will iterate over all
    frames that do not contain the ``__traceback_hide__``
    local variable.
    """
    while tb:
        # support for __traceback_hide__ which is used by a few libraries
        # to hide internal frames.
        f_locals = getattr(tb.tb_frame, 'f_locals', {})
        if not _getitem_from_frame(f_locals, '__traceback_hide__'):
            yield tb.tb_frame, getattr(tb, 'tb_lineno', None)
        tb = tb.tb_next


def iter_stack_frames(frames=None):
    """
    Given an optional list of frames (defaults to current stack),
    iterates over all frames that do not contain the ``__traceback_hide__``
    local variable, oldest call first.
    """
    if not frames:
        frames = inspect.stack(0)[1:]
        frames.reverse()

    for frame, lineno in ((f[0], f[2]) for f in frames):
        f_locals = getattr(frame, 'f_locals', {})
        if _getitem_from_frame(f_locals, '__traceback_hide__'):
            continue
        yield frame, lineno


def iter_exception_chain(exc):
    """
    Yields ``exc`` followed by each exception it was raised from or while
    handling. Stops at the first exception already seen.
    """
    seen = set()
    while exc is not None and id(exc) not in seen:
        seen.add(id(exc))
        yield exc

        cause = getattr(exc, '__cause__', None)
        if cause is None and not getattr(exc, '__suppress_context__', False):
            cause = getattr(exc, '__context__', None)
        exc = cause


def get_exception_name(exc):
    exc_type = type(exc)
    module = getattr(exc_type, '__module__', None)
    name = getattr(exc_type, '__qualname__', None) or exc_type.__name__
    if module and module != 'builtins':
        return '%s.%s' % (module, name)
    return name


def get_exception_message(exc):
    name = type(exc).__name__
    value = to_unicode(exc)
    if value:
        return '%s: %s' % (name, value)
    return name


def get_backtrace(frames):
    """
    Given ``(frame, lineno)`` pairs, returns a list of
    :class:`BacktraceLine`.

    We have to be careful here as certain implementations of the
    _Frame class do not contain the nescesary data to lookup all
    of the information we want.
    """
    __traceback_hide__ = True  # NOQA

    results = []
    for frame, lineno in frames:
        f_code = getattr(frame, 'f_code', None)
        if f_code:
            abs_path = f_code.co_filename
            function = f_code.co_name
        else:
            abs_path = None
            function = None

        if lineno is None:
            lineno = getattr(frame, 'f_lineno', None)

        results.append(BacktraceLine(
            file=to_unicode(abs_path),
            number=to_unicode(lineno),
            method=to_unicode(function),
        ))
    return results


def get_culprit(tb):
    """
    Returns ``(module, function)`` for the frame that raised, the last one in
    ``tb``.
    """
    culprit = ('', '')
    for frame, _ in iter_traceback_frames(tb):
        f_globals = getattr(frame, 'f_globals', {})
        f_code = getattr(frame, 'f_code', None)
        culprit = (
            to_unicode(_getitem_from_frame(f_globals, '__name__')),
            to_unicode(getattr(f_code, 'co_name', None)),
        )
    return culprit
