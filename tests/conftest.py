import json

import pytest


@pytest.fixture
def write_manifest(tmp_path):
    def write(entries, name='manifest.json'):
        file = tmp_path / name
        if isinstance(entries, str):
            file.write_text(entries, encoding='UTF-8')
        else:
            file.write_text(json.dumps(entries), encoding='UTF-8')
        return str(file)
    return write


@pytest.fixture
def no_alias():
    def resolve_alias(alias):
        raise AssertionError('unexpected alias lookup: %s' % alias)
    return resolve_alias
