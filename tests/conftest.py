from pathlib import Path

import pytest

from fxmanifest import config_loader


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    monkeypatch.delenv("FXMANIFEST_CONFIG", raising=False)
    config_loader.reset_config_cache()
    yield
    config_loader.reset_config_cache()


@pytest.fixture
def make_resource(tmp_path):
    """Crée un dossier de ressource à partir d'un dict {chemin relatif: contenu}."""
    def _make(files, name="my_resource"):
        root = tmp_path / name
        root.mkdir()
        for relative_path, content in files.items():
            path = root / relative_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root
    return _make


@pytest.fixture
def example_resource(make_resource) -> Path:
    return make_resource({
        "client/main.lua": "print('hello')\n",
        "server/sv_init.lua": "dependency 'oxmysql'\n",
        "shared/sh_utils.lua": "Utils = {}\n",
        "html/ui.html": "<html></html>\n",
        "html/app.js": "console.log('ui')\n",
    })


EXAMPLE_MANIFEST = """fx_version 'cerulean'
game 'gta5'

author 'Auto-Generated'
description 'my_resource'
version '1.0.0'

dependency 'oxmysql'

shared_scripts {
    'shared/sh_utils.lua',
}

client_scripts {
    'client/main.lua',
}

server_scripts {
    'server/sv_init.lua',
}

ui_page {
    'html/ui.html',
}

files {
    'html/app.js',
    'html/ui.html',
}
"""

HEADER_ONLY_MANIFEST = """fx_version 'cerulean'
game 'gta5'

author 'Auto-Generated'
description 'my_resource'
version '1.0.0'

"""
