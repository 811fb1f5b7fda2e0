import os

import pytest

import app_constants

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def test_features_dir_sits_beside_constants():
    assert app_constants.FEATURES_DIR == os.path.join(os.path.dirname(os.path.abspath(app_constants.__file__)), "features")
    assert os.path.isfile(os.path.join(app_constants.FEATURES_DIR, "declare", "v1_0", "declare.py"))


def test_bundled_extensions_are_installed():
    tomllib = pytest.importorskip("tomllib")
    with open(os.path.join(ROOT, "pyproject.toml"), "rb") as fh:
        config = tomllib.load(fh)

    find = config["tool"]["setuptools"]["packages"]["find"]
    assert "features*" in find["include"]
    assert find["namespaces"] is True
    assert "app_constants" in config["tool"]["setuptools"]["py-modules"]
