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

from score.init import (
    ConfiguredModule, ConfigurationError, parse_list, parse_bool)
import os

from ._aliases import Aliases
from ._bundle import WebpackManifestBundle
from ._html import css_tag, js_tag, join_url
from ._manifest import resolve_path, EXT_CSS, EXT_JS


defaults = {
    'manifest': '@public/manifest.json',
    'base_url': None,
    'base_path': None,
    'depends': [],
    'webassets.type': 'js',
}


def init(confdict, tpl=None):
    """
    Initializes this module according to :ref:`our module initialization
    guidelines <module_initialization>` with the following configuration keys:

    :confkey:`manifest` :confdefault:`@public/manifest.json`
        Path to the manifest file written by webpack. Values starting with an
        ``@`` are resolved using the configured aliases.

    :confkey:`base_url` :confdefault:`None`
        URL to prepend to the relative file names found in the manifest.

    :confkey:`base_path` :confdefault:`None`
        The folder containing the files listed in the manifest. Only needed
        for serving the files through :mod:`score.webassets`.

    :confkey:`depends` :confdefault:`[]`
        A list of bundles this one depends on. This module does not interpret
        this value in any way.

    :confkey:`alias.*`
        Any number of aliases to use while resolving the manifest path. The
        configuration ``alias.public = /var/www/public`` will resolve
        ``@public/manifest.json`` to ``/var/www/public/manifest.json``.

    :confkey:`css.*` and :confkey:`js.*`
        Additional attributes of the generated ``<link>`` and ``<script>``
        tags, like ``js.defer = true``.

    :confkey:`webassets.type` :confdefault:`js`
        The type of files - ``css`` or ``js`` - this module provides to
        :mod:`score.webassets`. Configure a second module with the same
        manifest to serve the other type, too.

    """
    conf = dict(defaults.items())
    conf.update(confdict)
    if conf['base_path'] and not os.path.isdir(conf['base_path']):
        raise ConfigurationError(
            'score.webpackmanifest', 'Configured base_path does not exist')
    if conf['webassets.type'] not in (EXT_CSS, EXT_JS):
        raise ConfigurationError(
            'score.webpackmanifest',
            'Invalid webassets.type: %s' % conf['webassets.type'])
    aliases = Aliases(_extract(conf, 'alias.'))
    bundle = WebpackManifestBundle(
        aliases.resolve, conf['manifest'],
        base_path=conf['base_path'],
        base_url=conf['base_url'],
        css_options=_parse_options(_extract(conf, 'css.')),
        js_options=_parse_options(_extract(conf, 'js.')),
        depends=parse_list(conf['depends']))
    return ConfiguredWebpackManifestModule(
        tpl, aliases, bundle, conf['webassets.type'])


def _extract(conf, prefix):
    return dict((key[len(prefix):], value)
                for key, value in conf.items()
                if key.startswith(prefix))


def _parse_options(options):
    result = {}
    for name, value in options.items():
        try:
            result[name] = parse_bool(value)
        except ValueError:
            result[name] = value
    return result


class ConfiguredWebpackManifestModule(ConfiguredModule):
    """
    This module's :class:`configuration class
    <score.init.ConfiguredModule>`.
    """

    def __init__(self, tpl, aliases, bundle, webassets_type=EXT_JS):
        super().__init__(__package__)
        self.tpl = tpl
        self.aliases = aliases
        self.bundle = bundle
        self.webassets_type = webassets_type
        if tpl:
            self._register_tpl_globals()

    def _register_tpl_globals(self):
        self.tpl.filetypes['text/html'].add_global(
            'webpack_css', self.css_tags, escape=False)
        self.tpl.filetypes['text/html'].add_global(
            'webpack_js', self.js_tags, escape=False)

    @property
    def manifest_path(self):
        """
        The file system path of the manifest.
        """
        return resolve_path(self.bundle.manifest, self.bundle.resolve_alias)

    def url(self, file):
        """
        Returns the URL of a *file* listed in the manifest.
        """
        return join_url(self.bundle.base_url, file)

    def css_tags(self):
        """
        Renders a <link> tag for each css file in the manifest.
        """
        return ''.join(css_tag(self.url(file), self.bundle.css_options)
                       for file in self.bundle.css)

    def js_tags(self):
        """
        Renders a <script> tag for each javascript file in the manifest.
        """
        return ''.join(js_tag(self.url(file), self.bundle.js_options)
                       for file in self.bundle.js)

    def score_webassets_proxy(self, asset_type=None):
        """
        Provides the :class:`score.webassets.WebassetsProxy` serving the files
        of this module's manifest. The proxy serves files of the configured
        ``webassets.type``, unless another *asset_type* is given.
        """
        from .proxy import ManifestWebassetsProxy
        return ManifestWebassetsProxy(
            self.bundle, asset_type or self.webassets_type)
