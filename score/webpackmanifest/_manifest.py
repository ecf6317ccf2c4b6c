# Copyright © 2015-2018 STRG.AT GmbH, Vienna, Austria
#
# This file is part of the The SCORE Framework.
#
# The SCORE Framework and all its parts are free software: you can redistribute
# them and/or modify them under the terms of the GNU Lesser General Public
# License version 3 as published by the Free Software Foundation which is in the
# file named COPYING.LESSER.txt.
#
# The SCORE Framework and all its parts are distributed without any WARRANTY;
# without even the implied warranty of MERCHANTABILITY or FITNESS FOR A
# PARTICULAR PURPOSE. For more details see the GNU Lesser General Public
# License.
#
# If you have not received a copy of the GNU Lesser General Public License see
# http://www.gnu.org/licenses/.
#
# The License-Agreement realised between you as Licensee and STRG.AT GmbH as
# Licenser including the issue of its valid conclusion and its pre- and
# post-contractual effects is governed by the laws of Austria. Any disputes
# concerning this License-Agreement including the issue of its valid conclusion
# and its pre- and post-contractual effects are exclusively decided by the
# competent court, in whose district STRG.AT GmbH has its registered seat, at
# the discretion of STRG.AT GmbH also the competent court, in whose district the
# Licensee has his registered seat, an establishment or assets.

"""
Loading and classification of webpack manifest files.

A manifest is a JSON object mapping :term:`chunk` names to the file names
the build produced for them::

    {
        "app.css": "app.a1b2.css",
        "app.js": "app.a1b2.js",
        "app.js.map": "app.a1b2.js.map"
    }

The extension of each chunk name decides whether the file ends up in the
list of css files, in the list of javascript files or nowhere at all.
"""

from score.init import ConfigurationError
from collections import namedtuple
import json
import logging
import os


log = logging.getLogger(__name__)

ALIAS = '@'
EXT_CSS = 'css'
EXT_JS = 'js'

ResolvedAssets = namedtuple('ResolvedAssets', ('css', 'js'))


def resolve_path(manifest, resolve_alias):
    """
    Returns the file system path of given *manifest*. Values starting with
    an ``@`` are passed to *resolve_alias*, all others are returned as-is.
    """
    if manifest.startswith(ALIAS):
        return resolve_alias(manifest)
    return manifest


def load(path):
    """
    Reads the manifest file at given *path* and returns its decoded content.
    Raises :class:`ConfigError` if the file does not exist, cannot be read or
    does not contain a JSON object mapping strings to strings.
    """
    if not os.path.isfile(path):
        raise ConfigError(path, 'Webpack manifest not found: %s' % path)
    log.debug('Loading webpack manifest %s', path)
    try:
        with open(path, encoding='UTF-8') as fp:
            content = fp.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(
            path, 'Could not read webpack manifest %s: %s' % (path, e))
    try:
        entries = json.loads(content)
    except ValueError as e:
        raise ConfigError(
            path, 'Invalid JSON in webpack manifest %s: %s' % (path, e))
    if not isinstance(entries, dict):
        raise ConfigError(
            path, 'Webpack manifest %s must contain a JSON object' % path)
    for chunk, file in entries.items():
        if not isinstance(file, str):
            raise ConfigError(
                path, 'Invalid file for chunk %r in webpack manifest %s' %
                (chunk, path))
    return entries


def classify(entries):
    """
    Sorts the files of given manifest *entries* into css and javascript
    files, keeping their order. Chunks with any other extension are ignored.
    """
    css = []
    js = []
    for chunk, file in entries.items():
        # a chunk name without any dot is compared as a whole
        extension = chunk[chunk.rfind('.') + 1:]
        if extension == EXT_CSS:
            css.append(file)
        elif extension == EXT_JS:
            js.append(file)
    return ResolvedAssets(css, js)


def resolve(bundle, resolve_alias):
    """
    Loads the manifest configured in *bundle* and returns its
    :class:`ResolvedAssets`. Only the bundle's ``manifest`` attribute is
    used, aliases are resolved with the *resolve_alias* callable.
    """
    path = resolve_path(bundle.manifest, resolve_alias)
    assets = classify(load(path))
    log.debug('Found %d css and %d js files in %s',
              len(assets.css), len(assets.js), path)
    return assets


class ConfigError(ConfigurationError):
    """
    Thrown when a webpack manifest is missing or malformed. The offending
    file is available as *path*.
    """

    def __init__(self, path, message):
        self.path = path
        super().__init__(__package__, message)


class ArgumentError(ValueError):
    """
    Thrown when an asset type other than ``css`` or ``js`` is requested.
    """

    def __init__(self, asset_type):
        self.asset_type = asset_type
        super().__init__('Invalid asset type: %s - must be either %s or %s' %
                         (asset_type, EXT_CSS, EXT_JS))
