from score.webassets import WebassetsProxy, AssetNotFound
import os
import xxhash

from ._html import css_tag, js_tag
from ._manifest import ArgumentError, EXT_CSS, EXT_JS

mimetypes = {
    EXT_CSS: 'text/css',
    EXT_JS: 'application/javascript',
}


class ManifestWebassetsProxy(WebassetsProxy):
    """
    A :class:`WebassetsProxy <score.webassets.WebassetsProxy>` providing the
    files of one *asset_type* (``css`` or ``js``) listed in the manifest of a
    :class:`WebpackManifestBundle`. The files are read from the bundle's
    ``base_path``.

    Webpack already puts content hashes into the names of the generated
    files, so the :term:`asset hash` of a file is derived from its name alone.
    """

    def __init__(self, bundle, asset_type, name='webpackmanifest'):
        if asset_type not in mimetypes:
            raise ArgumentError(asset_type)
        self.bundle = bundle
        self.asset_type = asset_type
        self.name = name

    def iter_default_paths(self):
        yield from self.bundle.get(self.asset_type)

    def validate_path(self, path):
        return path in self.bundle.get(self.asset_type)

    def hash(self, path):
        return xxhash.xxh64(path.encode('UTF-8')).hexdigest()

    def render(self, path):
        if not self.bundle.base_path:
            raise RuntimeError(
                'Cannot render %s: no base_path configured' % path)
        file = os.path.join(self.bundle.base_path, path.lstrip('/'))
        try:
            with open(file, encoding='UTF-8') as fp:
                return fp.read()
        except FileNotFoundError:
            raise AssetNotFound(self.name, path)

    def mimetype(self, path):
        return mimetypes[self.asset_type]

    def render_url(self, url):
        if self.asset_type == EXT_CSS:
            return css_tag(url, self.bundle.css_options)
        return js_tag(url, self.bundle.js_options)

    def create_bundle(self, paths):
        return '\n'.join(self.render(path) for path in paths)

    def bundle_mimetype(self, paths):
        return mimetypes[self.asset_type]
