"""Tests for score.webpackmanifest._manifest: loading and classification."""

import os
from collections import OrderedDict
from types import SimpleNamespace
from unittest.mock import Mock, patch

import pytest
from score.init import ConfigurationError
from score.webpackmanifest._manifest import (
    ArgumentError,
    ConfigError,
    ResolvedAssets,
    classify,
    load,
    resolve,
    resolve_path,
)


def _config(manifest):
    return SimpleNamespace(manifest=manifest)


# ===================================================================
# classify
# ===================================================================


class TestClassify:
    def test_sorts_css_and_js_in_order(self) -> None:
        entries = OrderedDict([
            ('app.css', 'app.1.css'),
            ('app.js', 'app.1.js'),
            ('vendor.css', 'vendor.1.css'),
            ('vendor.js', 'vendor.1.js'),
        ])
        assets = classify(entries)
        assert assets.css == ['app.1.css', 'vendor.1.css']
        assert assets.js == ['app.1.js', 'vendor.1.js']
        assert len(assets.css) + len(assets.js) == len(entries)

    def test_other_extensions_are_dropped(self) -> None:
        assets = classify({
            'app.js.map': 'app.1.js.map',
            'runtime.json': 'runtime.1.json',
            'logo.svg': 'logo.1.svg',
        })
        assert assets == ResolvedAssets([], [])

    def test_chunk_without_dot_is_dropped(self) -> None:
        assets = classify({'bundle': 'bundle.1.js', 'app.js': 'app.1.js'})
        assert assets.js == ['app.1.js']
        assert assets.css == []

    def test_chunk_without_dot_compares_whole_name(self) -> None:
        assets = classify({'js': 'main.js', 'css': 'main.css'})
        assert assets.js == ['main.js']
        assert assets.css == ['main.css']

    def test_extension_is_case_sensitive(self) -> None:
        assets = classify({'app.CSS': 'app.css', 'app.Js': 'app.js'})
        assert assets == ResolvedAssets([], [])

    def test_only_last_extension_counts(self) -> None:
        assets = classify({'app.min.js': 'app.min.1.js', 'app.js.css': 'x.css'})
        assert assets.js == ['app.min.1.js']
        assert assets.css == ['x.css']


# ===================================================================
# resolve_path
# ===================================================================


class TestResolvePath:
    def test_alias_is_resolved(self) -> None:
        resolve_alias = Mock(return_value='/var/www/public/manifest.json')
        path = resolve_path('@public/manifest.json', resolve_alias)
        assert path == '/var/www/public/manifest.json'
        resolve_alias.assert_called_once_with('@public/manifest.json')

    def test_plain_path_is_used_verbatim(self) -> None:
        resolve_alias = Mock()
        assert resolve_path('build/manifest.json', resolve_alias) == \
            'build/manifest.json'
        resolve_alias.assert_not_called()

    def test_alias_errors_propagate(self) -> None:
        resolve_alias = Mock(side_effect=KeyError('@nope'))
        with pytest.raises(KeyError):
            resolve_path('@nope/manifest.json', resolve_alias)


# ===================================================================
# load
# ===================================================================


class TestLoad:
    def test_returns_entries(self, write_manifest) -> None:
        path = write_manifest({'app.js': 'app.1.js'})
        assert load(path) == {'app.js': 'app.1.js'}

    def test_missing_file(self, tmp_path) -> None:
        path = str(tmp_path / 'missing.json')
        with pytest.raises(ConfigError) as excinfo:
            load(path)
        assert excinfo.value.path == path
        assert path in str(excinfo.value)

    def test_directory_is_not_a_manifest(self, tmp_path) -> None:
        with pytest.raises(ConfigError):
            load(str(tmp_path))

    def test_invalid_utf8(self, tmp_path) -> None:
        file = tmp_path / 'manifest.json'
        file.write_bytes(b'{"app.js": "\xff\xfe"}')
        with pytest.raises(ConfigError) as excinfo:
            load(str(file))
        assert excinfo.value.path == str(file)
        assert str(file) in str(excinfo.value)

    def test_invalid_json(self, write_manifest) -> None:
        path = write_manifest('{"app.js": ')
        with pytest.raises(ConfigError) as excinfo:
            load(path)
        assert path in str(excinfo.value)

    @pytest.mark.parametrize('content', ['[]', '"app.js"', '42', 'null'])
    def test_not_an_object(self, write_manifest, content) -> None:
        path = write_manifest(content)
        with pytest.raises(ConfigError):
            load(path)

    def test_non_string_value(self, write_manifest) -> None:
        path = write_manifest({'app.js': 'app.1.js', 'app.css': ['a.css']})
        with pytest.raises(ConfigError) as excinfo:
            load(path)
        assert "'app.css'" in str(excinfo.value)

    def test_file_removed_before_read(self, write_manifest) -> None:
        path = write_manifest({'app.js': 'app.1.js'})
        with patch('score.webpackmanifest._manifest.open', create=True,
                   side_effect=FileNotFoundError(path)):
            with pytest.raises(ConfigError) as excinfo:
                load(path)
        assert excinfo.value.path == path

    def test_config_error_is_configuration_error(self, tmp_path) -> None:
        with pytest.raises(ConfigurationError):
            load(str(tmp_path / 'missing.json'))


# ===================================================================
# resolve
# ===================================================================


class TestResolve:
    def test_example_manifest(self, write_manifest, no_alias) -> None:
        path = write_manifest(OrderedDict([
            ('app.css', 'app.a1b2.css'),
            ('app.js', 'app.a1b2.js'),
            ('vendor.js.map', 'vendor.a1b2.js.map'),
        ]))
        assets = resolve(_config(path), no_alias)
        assert assets.css == ['app.a1b2.css']
        assert assets.js == ['app.a1b2.js']

    def test_keeps_manifest_order(self, write_manifest, no_alias) -> None:
        path = write_manifest(OrderedDict([
            ('zeta.js', 'zeta.js'),
            ('alpha.js', 'alpha.js'),
            ('mid.css', 'mid.css'),
            ('beta.js', 'beta.js'),
        ]))
        assets = resolve(_config(path), no_alias)
        assert assets.js == ['zeta.js', 'alpha.js', 'beta.js']

    def test_missing_aliased_manifest(self) -> None:
        resolved = '/var/www/public/manifest.json'
        resolve_alias = Mock(return_value=resolved)
        with patch('score.webpackmanifest._manifest.os.path.isfile',
                   return_value=False):
            with pytest.raises(ConfigError) as excinfo:
                resolve(_config('@public/manifest.json'), resolve_alias)
        assert resolved in str(excinfo.value)
        assert excinfo.value.path == resolved

    def test_aliased_manifest(self, write_manifest) -> None:
        path = write_manifest({'app.css': 'app.css'})
        resolve_alias = Mock(return_value=path)
        assets = resolve(_config('@build/manifest.json'), resolve_alias)
        assert assets.css == ['app.css']

    def test_empty_manifest(self, write_manifest, no_alias) -> None:
        path = write_manifest({})
        assert resolve(_config(path), no_alias) == ResolvedAssets([], [])


# ===================================================================
# errors
# ===================================================================


class TestArgumentError:
    def test_message_names_asset_type(self) -> None:
        error = ArgumentError('xml')
        assert error.asset_type == 'xml'
        assert 'xml' in str(error)
        assert isinstance(error, ValueError)


def test_relative_path_is_relative_to_cwd(write_manifest, no_alias,
                                          monkeypatch) -> None:
    path = write_manifest({'app.js': 'app.js'})
    monkeypatch.chdir(os.path.dirname(path))
    assert resolve(_config('manifest.json'), no_alias).js == ['app.js']
