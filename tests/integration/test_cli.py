import logging

import pytest

from urlshort import main as cli
from urlshort.resolver import Redirect


@pytest.fixture
def served(monkeypatch):
    """Capture uvicorn.run instead of starting a server"""
    calls = []
    monkeypatch.setattr(cli.uvicorn, 'run', lambda app, **kwargs: calls.append((app, kwargs)))
    return calls


def test_cli_serves_chain_from_flags(served, yaml_file, json_file):
    status = cli.main(['--yaml', str(yaml_file), '--json', str(json_file), '--port', '9090'])

    assert status == 0
    app, kwargs = served[0]
    assert kwargs['port'] == 9090
    assert app.state.chain.serve('/shared') == Redirect('https://example.com/from-json')
    assert app.state.chain.serve('/yaml-godoc') == Redirect('https://godoc.org/gopkg.in/yaml.v2')


def test_cli_missing_file_exits_nonzero(served, tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger='urlshort'):
        status = cli.main(['--yaml', str(tmp_path / 'missing.yaml')])

    assert status == 1
    assert served == []
    assert 'Could not build redirects' in caplog.text


def test_cli_malformed_file_exits_nonzero(served, tmp_path):
    broken = tmp_path / 'broken.yaml'
    broken.write_text('- path: [/a\n')

    assert cli.main(['--yaml', str(broken)]) == 1
    assert served == []


def test_flags_override_env(monkeypatch, yaml_file):
    monkeypatch.setenv('URLSHORT_YAML', '/from/env.yaml')
    monkeypatch.setenv('URLSHORT_JSON', '/from/env.json')

    config = cli.load_settings(cli.parse_args(['--yaml', str(yaml_file)]))

    assert config.yaml_path == str(yaml_file)
    assert config.json_path == '/from/env.json'


def test_cli_unusable_path_exits_nonzero(served):
    assert cli.main(['--json', 'bad\0path']) == 1
    assert served == []
