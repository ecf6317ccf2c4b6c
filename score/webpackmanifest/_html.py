from html import escape


def _attributes(options):
    parts = []
    for name, value in options.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(' %s' % escape(name))
        else:
            parts.append(' %s="%s"' % (escape(name), escape(str(value))))
    return ''.join(parts)


def css_tag(url, options=None):
    """
    Returns the <link> tag loading the stylesheet at *url*. The *options*
    are added as additional attributes.
    """
    options = dict(options or {})
    options.setdefault('rel', 'stylesheet')
    options['href'] = url
    return '<link%s>' % _attributes(options)


def js_tag(url, options=None):
    """
    Returns the <script> tag loading the javascript at *url*.
    """
    options = dict(options or {})
    options['src'] = url
    return '<script%s></script>' % _attributes(options)


def join_url(base_url, file):
    """
    Prefixes *file* with *base_url*, unless it is an absolute path or a full
    URL already.
    """
    if not base_url or file.startswith('/') or '://' in file:
        return file
    return base_url.rstrip('/') + '/' + file
