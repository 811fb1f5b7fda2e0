import os
import textwrap

import pytest
import requests

from conftest import SAMPLE_EXTENSION, write_extension
from edinit.core.package_store import PackageLoadError, PackageNotFoundError, module_name

SOURCE = textwrap.dedent(SAMPLE_EXTENSION)


def test_module_name():
    assert module_name("fill-column-indicator") == "fill_column_indicator"


def test_locates_bundled_extension(store, builtin_dir):
    path = write_extension(builtin_dir, "sample", SAMPLE_EXTENSION)

    assert store.locate("sample") == path
    assert store.is_installed("sample")
    assert not store.is_installed("sample", version="v2_0")


def test_install_tries_archives_in_order(store, session):
    session.files["https://archive.test/community/sample.py"] = SOURCE

    target = store.install("sample")

    assert session.requested == [
        "https://archive.test/stable/sample.py",
        "https://archive.test/community/sample.py",
    ]
    assert target == os.path.join(store.install_dir, "sample.py")
    assert store.is_installed("sample")


def test_install_stops_at_first_archive_with_package(store, session):
    session.files["https://archive.test/stable/sample.py"] = SOURCE
    session.files["https://archive.test/community/sample.py"] = SOURCE

    store.install("sample")

    assert session.requested == ["https://archive.test/stable/sample.py"]


def test_install_raises_when_no_archive_has_it(store):
    with pytest.raises(PackageNotFoundError) as excinfo:
        store.install("ghost")
    assert excinfo.value.package == "ghost"
    assert not store.is_installed("ghost")


def test_server_errors_propagate(store, session):
    session.files["https://archive.test/stable/sample.py"] = 500

    with pytest.raises(requests.HTTPError):
        store.install("sample")
    assert session.requested == ["https://archive.test/stable/sample.py"]


def test_network_errors_propagate(store, session):
    session.error = requests.ConnectionError("offline")

    with pytest.raises(requests.ConnectionError):
        store.install("sample")


def test_install_keeps_utf8_source(store, session):
    source = 'MARK = "→ ✅"\n\ndef register():\n    return {"commands": {}, "mark": MARK}\n'
    session.files["https://archive.test/stable/u8.py"] = source.encode("utf-8")

    store.install("u8")

    assert store.load("u8")["mark"] == "→ ✅"


def test_load_returns_registration(store, builtin_dir):
    write_extension(builtin_dir, "sample", SAMPLE_EXTENSION)

    registration = store.load("sample")

    assert set(registration["commands"]) == {"sample-command"}


def test_load_requires_register(store, builtin_dir):
    write_extension(builtin_dir, "broken", "VALUE = 1\n")

    with pytest.raises(PackageLoadError, match="register"):
        store.load("broken")


def test_load_requires_dict_registration(store, builtin_dir):
    write_extension(builtin_dir, "broken", "def register():\n    return ['nope']\n")

    with pytest.raises(PackageLoadError, match="required dict"):
        store.load("broken")


def test_load_missing_package(store):
    with pytest.raises(PackageLoadError, match="not installed"):
        store.load("ghost")
