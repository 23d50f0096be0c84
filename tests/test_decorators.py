"""Tests for the failure adapters and the lifting decorators."""

import pytest

from optionkit import (
    CapturedError,
    Nothing,
    Some,
    add_log_hook,
    configure_logging,
    init,
    require_none,
    require_some,
    wrap_call,
    wrap_call_async,
    wrap_error_code,
    wrap_error_code_async,
    wrap_exception,
    wrap_exception_async,
)


def parse_int(text):
    return int(text)


class TestWrapCall:
    """@wrap_call turns raised exceptions into Nothing."""

    def test_success(self):
        assert wrap_call(parse_int)('10') == Some(10)

    def test_failure(self):
        assert wrap_call(parse_int)('bob') is Nothing

    def test_decorator_form(self):
        @wrap_call
        def divide(a, b):
            return a / b

        assert divide(6, 3) == Some(2.0)
        assert divide(1, 0) is Nothing

    def test_specific_exceptions(self):
        @wrap_call(exceptions=(ValueError,))
        def lookup(mapping, key):
            return int(mapping[key])

        assert lookup({'a': 'x'}, 'a') is Nothing
        with pytest.raises(KeyError):
            lookup({}, 'missing')

    def test_base_exceptions_propagate(self):
        @wrap_call
        def interrupted():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            interrupted()

    def test_none_result_is_present(self):
        assert wrap_call(lambda: None)() == Some(None)

    def test_option_result_is_flattened(self):
        assert wrap_call(lambda: Nothing)() is Nothing
        assert wrap_call(lambda: Some(1))() == Some(1)

    def test_preserves_metadata(self):
        wrapped = wrap_call(parse_int)
        assert wrapped.__name__ == 'parse_int'

    def test_method(self):
        class Parser:
            base = 10

            @wrap_call
            def parse(self, text):
                return int(text, self.base)

        assert Parser().parse('12') == Some(12)
        assert Parser().parse('zz') is Nothing

    @pytest.mark.asyncio
    async def test_async(self):
        @wrap_call_async
        async def fetch(value):
            if value is None:
                raise LookupError('no value')
            return value

        assert await fetch(3) == Some(3)
        assert await fetch(None) is Nothing

    @pytest.mark.asyncio
    async def test_async_specific_exceptions(self):
        @wrap_call_async(exceptions=(LookupError,))
        async def fetch():
            raise TypeError('bad')

        with pytest.raises(TypeError):
            await fetch()


class TestWrapException:
    """@wrap_exception returns the raised exception as the present value."""

    def test_success_is_nothing(self):
        calls = []
        assert wrap_exception(calls.append)(1) is Nothing
        assert calls == [1]

    def test_failure_is_captured(self):
        error = ValueError('bad input')

        @wrap_exception
        def save():
            raise error

        match save():
            case Some(CapturedError() as captured):
                assert captured.message == 'bad input'
                assert captured.error_type == 'ValueError'
                assert captured.to_exception() is error
            case other:
                pytest.fail(f'expected a captured error, got {other!r}')

    def test_specific_exceptions(self):
        @wrap_exception(exceptions=(OSError,))
        def fail():
            raise ValueError('not captured')

        with pytest.raises(ValueError):
            fail()

    def test_combines_with_either(self):
        from optionkit import either

        assert either(wrap_exception(parse_int)('1').map(lambda e: e.error_type), 'ok') == 'ok'
        assert either(wrap_exception(parse_int)('x').map(lambda e: e.error_type), 'ok') == 'ValueError'

    @pytest.mark.asyncio
    async def test_async(self):
        @wrap_exception_async
        async def work(fail):
            if fail:
                raise RuntimeError('boom')

        assert await work(False) is Nothing
        result = await work(True)
        assert result.is_some()
        assert result.value.message == 'boom'


class TestWrapErrorCode:
    """@wrap_error_code maps status 0 to Nothing."""

    def test_zero_is_nothing(self):
        assert wrap_error_code(lambda: 0)() is Nothing

    def test_nonzero_is_some(self):
        assert wrap_error_code(lambda code: code)(2) == Some(2)
        assert wrap_error_code(lambda code: code)(-1) == Some(-1)

    @pytest.mark.asyncio
    async def test_async(self):
        @wrap_error_code_async
        async def run(code):
            return code

        assert await run(0) is Nothing
        assert await run(127) == Some(127)


class TestRequireSome:
    """@require_some unwraps optional arguments or skips the call."""

    def test_all_present(self):
        @require_some
        def total(a, b, c=Some(10)):
            return a + b + c

        assert total(Some(10), Some(100)) == Some(120)

    def test_absent_argument_skips_body(self, counter):
        @require_some
        def total(a, b):
            counter.calls += 1
            return a + b

        assert total(Some(10), Nothing) is Nothing
        assert counter.calls == 0

    def test_absent_default(self):
        @require_some
        def greet(name, title=Nothing):
            return f'{title} {name}'

        assert greet(Some('Ada')) is Nothing
        assert greet(Some('Ada'), title='Dr') == Some('Dr Ada')

    def test_bare_arguments_pass_through(self):
        @require_some
        def scale(value, factor):
            return value * factor

        assert scale(Some(2), 3) == Some(6)

    def test_varargs_and_kwargs(self):
        @require_some
        def collect(*items, **named):
            return (items, named)

        assert collect(Some(1), 2, key=Some('v')) == Some(((1, 2), {'key': 'v'}))
        assert collect(Some(1), Nothing) is Nothing
        assert collect(key=Nothing) is Nothing

    def test_option_result_is_flattened(self):
        @require_some
        def half(n):
            return Some(n // 2) if n % 2 == 0 else Nothing

        assert half(Some(4)) == Some(2)
        assert half(Some(3)) is Nothing

    def test_method(self):
        class Account:
            def __init__(self, balance):
                self.balance = balance

            @require_some
            def deposit(self, amount):
                return self.balance + amount

        assert Account(5).deposit(Some(10)) == Some(15)
        assert Account(5).deposit(Nothing) is Nothing


class TestRequireNone:
    """@require_none runs only when every optional argument is absent."""

    def test_all_absent(self):
        @require_none
        def fallback(cached):
            return 10

        assert fallback(Nothing) == Some(10)

    def test_present_argument_skips_body(self, counter):
        @require_none
        def fallback(cached):
            counter.calls += 1
            return 10

        assert fallback(Some(100)) is Nothing
        assert counter.calls == 0

    def test_present_default(self):
        @require_none
        def fallback(cached=Some(1)):
            return 0

        assert fallback() is Nothing
        assert fallback(Nothing) == Some(0)

    def test_bare_arguments_do_not_count(self):
        @require_none
        def build(name, cached):
            return name

        assert build('x', Nothing) == Some('x')

    def test_varargs(self):
        @require_none
        def first_missing(*options):
            return len(options)

        assert first_missing(Nothing, Nothing) == Some(2)
        assert first_missing(Nothing, Some(1)) is Nothing


class TestAbsorbedLogging:
    """Absorbed exceptions are logged at debug level when enabled."""

    @pytest.fixture
    def events(self, monkeypatch):
        monkeypatch.delenv('OPTIONKIT_LOG_ABSORBED', raising=False)
        monkeypatch.delenv('OPTIONKIT_LOG_LEVEL', raising=False)
        captured = []
        add_log_hook(captured.append)
        return captured

    def test_logged_after_init(self, events):
        init('DEBUG', json_logs=False)
        assert wrap_call(parse_int)('bob') is Nothing

        absorbed = [e for e in events if e.get('event') == 'exception absorbed']
        assert len(absorbed) == 1
        assert absorbed[0]['adapter'] == 'wrap_call'
        assert absorbed[0]['function'] == 'parse_int'
        assert absorbed[0]['error_type'] == 'ValueError'
        assert absorbed[0]['level'] == 'debug'

    def test_exception_adapter_logged(self, events):
        init('DEBUG')
        wrap_exception(parse_int)('x')
        assert [e['adapter'] for e in events if e.get('event') == 'exception absorbed'] == ['wrap_exception']

    def test_not_logged_when_disabled(self, events):
        init('DEBUG', log_absorbed=False)
        assert wrap_call(parse_int)('bob') is Nothing
        assert not [e for e in events if e.get('event') == 'exception absorbed']

    def test_not_logged_without_init(self, events):
        configure_logging('DEBUG')
        assert wrap_call(parse_int)('bob') is Nothing
        assert not [e for e in events if e.get('event') == 'exception absorbed']
