"""Tests for the Reader type."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from safe_monads import Reader, Some, maybe, reader


class TestReaderRun:
    """Tests for reader() and run()."""

    def test_run(self):
        assert reader(lambda env: env * 2).run(21) == 42

    def test_run_is_not_memoized(self):
        """Each run re-invokes the wrapped function."""
        calls = []

        def fn(env):
            calls.append(env)
            return env

        r = reader(fn)
        assert r.run(1) == 1
        assert r.run(2) == 2
        assert r.run(1) == 1
        assert calls == [1, 2, 1]

    def test_reader_is_frozen(self):
        r = reader(lambda env: env)
        with pytest.raises(AttributeError):
            r.fn = lambda env: 0  # type: ignore[misc]


class TestReaderMap:
    """Tests for map() and flat_map()."""

    def test_map(self):
        assert reader(lambda cfg: cfg['port']).map(str).run({'port': 8080}) == '8080'

    def test_flat_map_threads_same_env(self):
        """The inner reader receives the identical environment object."""
        seen = []
        env = {'host': 'localhost', 'port': 8080}

        def inner(port):
            def fn(e):
                seen.append(e)
                return f"{e['host']}:{port}"

            return reader(fn)

        def outer(e):
            seen.append(e)
            return e['port']

        assert reader(outer).flat_map(inner).run(env) == 'localhost:8080'
        assert len(seen) == 2
        assert seen[0] is env
        assert seen[1] is env

    def test_flat_map_runs_outer_once(self):
        calls = []

        def outer(env):
            calls.append(env)
            return env + 1

        r = reader(outer).flat_map(lambda v: reader(lambda env: v + env))
        assert r.run(10) == 21
        assert calls == [10]

    def test_reader_producing_option(self):
        """A common shape: configuration lookups that may be missing."""
        lookup = reader(lambda cfg: maybe(cfg.get('token')))
        assert lookup.run({'token': 'abc'}) == Some('abc')
        assert lookup.run({}).value_or('anon') == 'anon'

    @given(st.integers())
    def test_functor_identity(self, env: int):
        r = reader(lambda e: e * 3)
        assert r.map(lambda x: x).run(env) == r.run(env)

    @given(st.integers())
    def test_monad_associativity(self, env: int):
        m = reader(lambda e: e + 1)

        def f(x):
            return reader(lambda e: x * e)

        def g(y):
            return reader(lambda e: y - e)

        left = m.flat_map(f).flat_map(g)
        right = m.flat_map(lambda x: f(x).flat_map(g))
        assert left.run(env) == right.run(env)


class TestReaderConstructors:
    """Tests for the class-level constructors."""

    def test_of(self):
        assert Reader.of(5).run('ignored') == 5

    def test_ask(self):
        env = object()
        assert Reader.ask().run(env) is env

    def test_asks(self):
        assert Reader.asks(lambda cfg: cfg['debug']).run({'debug': True}) is True

    def test_sequence(self):
        readers = [reader(lambda e: e + 1), reader(lambda e: e * 2)]
        assert Reader.sequence(readers).run(3) == [4, 6]

    def test_sequence_accepts_generator(self):
        r = Reader.sequence(reader(lambda e, i=i: e + i) for i in range(3))
        assert r.run(10) == [10, 11, 12]
        assert r.run(0) == [0, 1, 2]

    def test_traverse(self):
        readers = [reader(lambda e: e), reader(lambda e: e * 10)]
        r = Reader.traverse(readers, lambda acc, value, index: [*acc, (index, value)], [])
        assert r.run(2) == [(0, 2), (1, 20)]

    def test_combine(self):
        r = Reader.combine(
            [reader(lambda c: c['host']), reader(lambda c: c['port'])],
            lambda host, port: f'{host}:{port}',
        )
        assert r.run({'host': 'h', 'port': 1}) == 'h:1'


class TestReaderOperators:
    """Tests for the remaining combinators."""

    def test_map_to(self):
        assert reader(lambda e: e).map_to('fixed').run(1) == 'fixed'

    def test_local(self):
        r = reader(lambda port: port + 1).local(lambda cfg: cfg['port'])
        assert r.run({'port': 1}) == 2

    def test_zip_with(self):
        r = reader(lambda e: e + 1).zip_with(reader(lambda e: e * 2), lambda a, b: (a, b))
        assert r.run(3) == (4, 6)

    def test_tap(self):
        seen = []
        assert reader(lambda e: e * 2).tap(seen.append).run(4) == 8
        assert seen == [8]

    def test_and_then(self):
        seen = []
        first = reader(lambda e: seen.append(('first', e)))
        second = reader(lambda e: e + 1)
        assert first.and_then(second).run(1) == 2
        assert seen == [('first', 1)]

    def test_and_finally(self):
        order = []
        main = reader(lambda e: order.append('main') or e)
        after = reader(lambda e: order.append('after'))
        assert main.and_finally(after).run(7) == 7
        assert order == ['main', 'after']

    def test_with_env(self):
        r = reader(lambda e: e['a']).with_env(lambda env, value: value + env['b'])
        assert r.run({'a': 1, 'b': 2}) == 3

    def test_filter(self):
        r = reader(lambda e: e).filter(lambda v: v > 0, 0)
        assert r.run(5) == 5
        assert r.run(-5) == 0

    def test_fanout(self):
        r = reader(lambda e: e).fanout(str, lambda v: v * 2)
        assert r.run(3) == ('3', 6)
