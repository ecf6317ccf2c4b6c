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

import threading

from ._manifest import resolve, ArgumentError, EXT_CSS, EXT_JS


class WebpackManifestBundle:
    """
    A bundle of css and javascript files described by a webpack manifest.

    All public attributes may be changed until one of the file lists is
    accessed for the first time. The manifest is parsed exactly once at that
    point, even if it turns out to contain neither css nor javascript files.

    The *resolve_alias* callable receives :attr:`manifest` if it starts with
    an ``@`` and must return the path of the file on the file system.
    """

    def __init__(self, resolve_alias, manifest='@public/manifest.json', *,
                 base_path=None, base_url=None, css_options=None,
                 js_options=None, depends=None, source_path=None,
                 publish_options=None):
        self.resolve_alias = resolve_alias
        self.manifest = manifest
        self.base_path = base_path
        self.base_url = base_url
        self.css_options = dict(css_options or {})
        self.js_options = dict(js_options or {})
        self.depends = list(depends or [])
        self.source_path = source_path
        self.publish_options = dict(publish_options or {})
        self._assets = None
        self._lock = threading.Lock()

    @property
    def resolved(self):
        """
        Whether the manifest was already parsed.
        """
        return self._assets is not None

    @property
    def css(self):
        """
        List of css files in this bundle.
        """
        return self._resolve().css

    @property
    def js(self):
        """
        List of javascript files in this bundle.
        """
        return self._resolve().js

    def get(self, asset_type):
        """
        Returns the list of files of given *asset_type*, which must be either
        ``css`` or ``js``.
        """
        if asset_type not in (EXT_CSS, EXT_JS):
            raise ArgumentError(asset_type)
        assets = self._resolve()
        return {EXT_CSS: assets.css, EXT_JS: assets.js}[asset_type]

    def _resolve(self):
        if self._assets is None:
            with self._lock:
                if self._assets is None:
                    self._assets = resolve(self, self.resolve_alias)
        return self._assets
