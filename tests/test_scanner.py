import builtins
import os
import sys

import pytest

from fxmanifest import scanner
from fxmanifest.scanner import FileCategories, read_script_dependencies, scan_directory


def test_example_resource_is_categorized(example_resource):
    categories = scan_directory(example_resource)

    assert categories.client_scripts == ["client/main.lua"]
    assert categories.server_scripts == ["server/sv_init.lua"]
    assert categories.shared_scripts == ["shared/sh_utils.lua"]
    assert categories.ui_pages == ["html/ui.html"]
    assert sorted(categories.files) == ["html/app.js", "html/ui.html"]
    assert categories.dependencies == {"oxmysql"}


def test_existing_manifests_are_skipped(make_resource):
    root = make_resource({
        "fxmanifest.lua": "dependency 'should_not_appear'\n",
        "sub/FXManifest.LUA": "",
        "__resource.lua": "",
        "client.lua": "",
    })
    categories = scan_directory(root)

    assert categories.client_scripts == ["client.lua"]
    assert categories.shared_scripts == []
    assert categories.server_scripts == []
    assert categories.dependencies == set()


def test_only_manifest_gives_empty_categories(make_resource):
    root = make_resource({"fxmanifest.lua": "fx_version 'cerulean'\n"})
    categories = scan_directory(root)

    assert categories.counts() == {
        "client_scripts": 0, "server_scripts": 0, "shared_scripts": 0,
        "ui_pages": 0, "files": 0, "dependencies": 0,
    }


def test_dependencies_deduplicated_across_files(make_resource):
    root = make_resource({
        "client/cl_main.lua": "dependency 'oxmysql'\n",
        "server/sv_main.lua": "dependency 'oxmysql'\ndependency 'ox_lib'\n",
    })
    assert scan_directory(root).dependencies == {"oxmysql", "ox_lib"}


def test_dependencies_only_read_from_scripts(make_resource):
    root = make_resource({
        "html/app.js": "// dependency 'not_a_script'\n",
        "notes.txt": "dependency 'ignored'\n",
    })
    categories = scan_directory(root)

    assert categories.dependencies == set()
    assert categories.files == ["html/app.js"]


def test_nested_paths_use_forward_slashes(make_resource):
    root = make_resource({"client/modules/deep/cl_a.lua": ""})
    assert scan_directory(root).client_scripts == ["client/modules/deep/cl_a.lua"]


def test_unmarked_lua_defaults_to_shared(make_resource):
    root = make_resource({"utils.lua": ""})
    assert scan_directory(root).shared_scripts == ["utils.lua"]


def test_callback_sees_every_accepted_file(make_resource):
    root = make_resource({
        "fxmanifest.lua": "",
        "client/main.lua": "",
        "README.md": "",
    })
    seen = []
    scan_directory(root, on_file=seen.append)

    assert seen == ["README.md", "client/main.lua"]


def test_custom_reserved_names(make_resource):
    root = make_resource({"generated.lua": "", "client/main.lua": ""})
    categories = scan_directory(root, reserved_names=["Generated.lua"])

    assert categories.shared_scripts == []
    assert categories.client_scripts == ["client/main.lua"]


def test_unreadable_script_contributes_nothing(tmp_path):
    assert read_script_dependencies(tmp_path / "missing.lua") == set()


def test_undecodable_bytes_do_not_abort(make_resource):
    root = make_resource({})
    (root / "sv_binary.lua").write_bytes(b"\xff\xfe dependency 'ox_lib'\n")
    categories = scan_directory(root)

    assert categories.server_scripts == ["sv_binary.lua"]
    assert categories.dependencies == {"ox_lib"}


def test_html_goes_to_both_lists():
    categories = FileCategories()
    categories.add("html/ui.html", "ui_page")

    assert categories.ui_pages == ["html/ui.html"]
    assert categories.files == ["html/ui.html"]


def test_script_that_cannot_be_opened_keeps_its_category(make_resource, monkeypatch):
    root = make_resource({
        "server/sv_locked.lua": "dependency 'oxmysql'\n",
        "client/cl_main.lua": "",
    })
    locked = root / "server" / "sv_locked.lua"
    real_open = builtins.open

    def guarded_open(path, *args, **kwargs):
        if os.fspath(path) == os.fspath(locked):
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_open(path, *args, **kwargs)

    monkeypatch.setattr(scanner, "open", guarded_open, raising=False)
    categories = scan_directory(root)

    assert categories.server_scripts == ["server/sv_locked.lua"]
    assert categories.client_scripts == ["client/cl_main.lua"]
    assert categories.dependencies == set()


@pytest.mark.skipif(sys.platform != "linux", reason="noms de fichiers non UTF-8")
def test_non_utf8_filename_is_kept(make_resource):
    root = make_resource({})
    (root / os.fsdecode(b"img_\xe9.png")).write_bytes(b"")

    assert scan_directory(root).files == [os.fsdecode(b"img_\xe9.png")]
