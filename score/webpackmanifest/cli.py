import click


@click.group()
def main():
    """
    Inspects webpack manifests.
    """
    pass


@main.command()
@click.pass_context
def css(clickctx):
    """
    Lists the css files in the manifest
    """
    webpackmanifest = clickctx.obj['conf'].load('webpackmanifest')
    for file in webpackmanifest.bundle.css:
        print(file)


@main.command()
@click.pass_context
def js(clickctx):
    """
    Lists the javascript files in the manifest
    """
    webpackmanifest = clickctx.obj['conf'].load('webpackmanifest')
    for file in webpackmanifest.bundle.js:
        print(file)


@main.command()
@click.option('-u', '--urls', 'urls', is_flag=True,
              help='Print URLs instead of file names')
@click.pass_context
def files(clickctx, urls):
    """
    Lists all files in the manifest, css files first
    """
    webpackmanifest = clickctx.obj['conf'].load('webpackmanifest')
    bundle = webpackmanifest.bundle
    for file in bundle.css + bundle.js:
        if urls:
            file = webpackmanifest.url(file)
        print(file)


@main.command()
@click.pass_context
def manifest(clickctx):
    """
    Provides the path to the manifest file
    """
    webpackmanifest = clickctx.obj['conf'].load('webpackmanifest')
    print(webpackmanifest.manifest_path)


if __name__ == '__main__':
    main()
