from ._manifest import ALIAS


class Aliases:
    """
    A registry of path aliases. An alias is a name starting with an ``@``,
    that may be used as the first segment of a path:

    >>> aliases = Aliases({'@public': '/var/www/public'})
    >>> aliases.resolve('@public/manifest.json')
    '/var/www/public/manifest.json'

    The target of an alias may be another alias:

    >>> aliases = Aliases({'@web': '/var/www', '@public': '@web/public'})
    >>> aliases.resolve('@public/manifest.json')
    '/var/www/public/manifest.json'
    """

    def __init__(self, aliases=None):
        self.aliases = {}
        for name, path in (aliases or {}).items():
            self.add(name, path)

    def add(self, name, path):
        """
        Registers a new alias *name* for given *path*. The leading ``@`` of
        the *name* is optional.
        """
        if not name.startswith(ALIAS):
            name = ALIAS + name
        self.aliases[name] = path.rstrip('/')

    def resolve(self, alias, *, _seen=()):
        """
        Translates given *alias* into a path. Strings not starting with an
        ``@`` are returned unaltered.
        """
        if not alias.startswith(ALIAS):
            return alias
        root, sep, rest = alias.partition('/')
        if root in _seen:
            raise RecursiveAlias(root)
        try:
            path = self.aliases[root]
        except KeyError:
            raise AliasNotFound(root)
        path = self.resolve(path, _seen=_seen + (root,))
        if rest:
            path += '/' + rest
        return path


class AliasNotFound(Exception):
    """
    Thrown when a path starts with an alias, that was never registered.
    """

    def __init__(self, alias):
        self.alias = alias
        super().__init__('Unknown alias: %s' % alias)


class RecursiveAlias(ValueError):
    """
    Thrown when an alias is defined in terms of itself, directly or through
    other aliases.
    """

    def __init__(self, alias):
        self.alias = alias
        super().__init__('Recursive alias definition: %s' % alias)
