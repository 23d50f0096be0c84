"""Smoke tests: the package imports and exposes a safe surface."""

import importlib
import tomllib
from pathlib import Path

import pytest

import optionkit
import optionkit.safe
import optionkit.unsafe
from optionkit import Nothing, Some


class TestImports:
    """Every public name resolves."""

    @pytest.mark.parametrize('name', optionkit.__all__)
    def test_top_level_exports(self, name):
        assert getattr(optionkit, name) is not None

    @pytest.mark.parametrize(
        'module',
        [
            'optionkit.types',
            'optionkit.compose',
            'optionkit.combinators',
            'optionkit.decorators',
            'optionkit.convert',
            'optionkit.errors',
        ],
    )
    def test_submodules_import(self, module):
        assert importlib.import_module(module) is not None

    def test_safe_is_subset_of_top_level(self):
        assert set(optionkit.safe.__all__) <= set(optionkit.__all__)

    def test_safe_names_are_the_same_objects(self):
        for name in optionkit.safe.__all__:
            assert getattr(optionkit.safe, name) is getattr(optionkit, name)


class TestSafeSurface:
    """Unchecked extraction is only reachable through optionkit.unsafe."""

    @pytest.mark.parametrize('name', ['unwrap', 'expect'])
    def test_not_exported_from_safe_modules(self, name):
        assert not hasattr(optionkit, name)
        assert name not in optionkit.safe.__all__
        assert not hasattr(optionkit.safe, name)

    def test_unsafe_unwrap(self):
        assert optionkit.unsafe.unwrap(Some(3)) == 3

    def test_unsafe_unwrap_nothing_raises(self):
        with pytest.raises(optionkit.UnwrapError) as exc_info:
            optionkit.unsafe.unwrap(Nothing)
        assert exc_info.value.code == 'unwrap_nothing'

    def test_unsafe_expect_message(self):
        assert optionkit.unsafe.expect(Some('x'), 'missing') == 'x'
        with pytest.raises(optionkit.UnwrapError, match='config file missing'):
            optionkit.unsafe.expect(Nothing, 'config file missing')


class TestPackaging:
    """Project metadata only points at files that ship with the project."""

    def test_readme_is_not_an_internal_document(self):
        pyproject = Path(__file__).resolve().parent.parent / 'pyproject.toml'
        project = tomllib.loads(pyproject.read_text())['project']
        assert project.get('readme') != 'SPEC_FULL.md'
        assert project['name'] == 'optionkit'
