from brake.utils.stacks import (
    get_backtrace, get_culprit, get_exception_message, get_exception_name,
    iter_exception_chain, iter_stack_frames, iter_traceback_frames)
from brake.utils.testutils import TestCase


class CustomError(Exception):
    pass


def fail(message='boom'):
    raise ValueError(message)


def hidden_fail():
    __traceback_hide__ = True  # NOQA
    fail()


def make_chain(depth):
    """
    Returns a RuntimeError raised from ``depth - 1`` others, the innermost
    being a ValueError.
    """
    try:
        raise ValueError('level 0')
    except ValueError as exc:
        error = exc
    for level in range(1, depth + 1):
        try:
            raise RuntimeError('level %d' % level) from error
        except RuntimeError as exc:
            error = exc
    return error


class IterExceptionChainTest(TestCase):
    def test_explicit_causes(self):
        chain = list(iter_exception_chain(make_chain(3)))
        assert [str(e) for e in chain] == [
            'level 3', 'level 2', 'level 1', 'level 0']

    def test_implicit_context(self):
        try:
            try:
                raise ValueError()
            except ValueError:
                raise KeyError()
        except KeyError as exc:
            chain = list(iter_exception_chain(exc))

        assert [type(e) for e in chain] == [KeyError, ValueError]

    def test_suppressed_context(self):
        try:
            try:
                raise ValueError()
            except ValueError:
                raise KeyError() from None
        except KeyError as exc:
            chain = list(iter_exception_chain(exc))

        assert [type(e) for e in chain] == [KeyError]

    def test_self_referencing(self):
        exc = ValueError()
        exc.__cause__ = exc
        assert list(iter_exception_chain(exc)) == [exc]

    def test_cycle(self):
        first, second = ValueError(), KeyError()
        first.__cause__ = second
        second.__cause__ = first
        assert list(iter_exception_chain(first)) == [first, second]

    def test_non_exception(self):
        assert list(iter_exception_chain('oops')) == ['oops']


class ExceptionNameTest(TestCase):
    def test_builtin(self):
        assert get_exception_name(ValueError()) == 'ValueError'

    def test_custom(self):
        assert get_exception_name(CustomError()) == '%s.CustomError' % (__name__,)

    def test_message(self):
        assert get_exception_message(ValueError('foo')) == 'ValueError: foo'

    def test_empty_message(self):
        assert get_exception_message(ValueError()) == 'ValueError'


class GetBacktraceTest(TestCase):
    def test_oldest_call_first(self):
        try:
            fail()
        except ValueError as exc:
            lines = get_backtrace(iter_traceback_frames(exc.__traceback__))

        assert [line.method for line in lines] == ['test_oldest_call_first', 'fail']
        assert lines[-1].file == fail.__code__.co_filename
        assert lines[-1].number == str(fail.__code__.co_firstlineno + 1)

    def test_hidden_frames_are_skipped(self):
        try:
            hidden_fail()
        except ValueError as exc:
            lines = get_backtrace(iter_traceback_frames(exc.__traceback__))

        assert [line.method for line in lines] == ['test_hidden_frames_are_skipped', 'fail']

    def test_no_traceback(self):
        assert get_backtrace(iter_traceback_frames(None)) == []

    def test_current_stack(self):
        lines = get_backtrace(iter_stack_frames())
        assert lines[-1].method == 'test_current_stack'
        assert lines[-1].file == fail.__code__.co_filename


class GetCulpritTest(TestCase):
    def test_raising_frame(self):
        try:
            fail()
        except ValueError as exc:
            assert get_culprit(exc.__traceback__) == (__name__, 'fail')

    def test_no_traceback(self):
        assert get_culprit(None) == ('', '')
