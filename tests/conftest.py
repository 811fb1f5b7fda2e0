import os
import subprocess
import textwrap
from types import SimpleNamespace

import pytest
import requests

from edinit.core.defaults import DEFAULTS
from edinit.core.host import EditorHost
from edinit.core.package_store import PackageStore

REPO_FEATURES_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "features")


class FakeResponse:
    """Mimics requests for a text/* reply without a charset: .text is decoded as ISO-8859-1."""

    def __init__(self, status_code=200, body=b""):
        self.status_code = status_code
        self.content = body.encode("utf-8") if isinstance(body, str) else body
        self.text = self.content.decode("iso-8859-1")

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class FakeSession:
    """Serves archive files from a dict of url -> source (str or bytes); everything else is a 404."""

    def __init__(self, files=None, error=None):
        self.files = dict(files or {})
        self.error = error
        self.requested = []

    def get(self, url, timeout=None):
        self.requested.append(url)
        if self.error is not None:
            raise self.error
        if url not in self.files:
            return FakeResponse(404)
        value = self.files[url]
        if isinstance(value, int):
            return FakeResponse(value)
        return FakeResponse(200, value)


class RecordingHost(EditorHost):
    """EditorHost that never touches the shell, the browser or stdin."""

    def __init__(self, store, executables=(), answers=(), failing_hints=()):
        self.trace = []
        self.available = set(executables)
        self.answers = list(answers)
        self.failing_hints = set(failing_hints)
        self.opened = []
        super().__init__(store)

    def executable_found(self, name):
        self.trace.append(("executable", name))
        return name in self.available

    def shell_command(self, command):
        self.trace.append(("shell", command))
        if command in self.failing_hints:
            raise subprocess.CalledProcessError(1, command)
        return ""

    def install_package(self, package):
        self.trace.append(("install", package))
        super().install_package(package)

    def load_package(self, package, version="v1_0"):
        self.trace.append(("load", package))
        return super().load_package(package, version)

    def set_option(self, name, value):
        self.trace.append(("set", name))
        super().set_option(name, value)

    def call(self, name, *args):
        self.trace.append(("call", name))
        return super().call(name, *args)

    def browse_url(self, url):
        self.opened.append(url)

    def read_string(self, prompt, default=""):
        self.trace.append(("prompt", prompt))
        return self.answers.pop(0) if self.answers else default


def write_extension(directory, name, source, version="v1_0"):
    module = name.replace("-", "_")
    path = os.path.join(str(directory), module, version, f"{module}.py")
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(textwrap.dedent(source))
    return path


SAMPLE_EXTENSION = """
    def register():
        return {"commands": {"sample-command": sample_command}}

    def sample_command(host):
        host.buffer = "sample ran"
        return "sample ran"
"""


@pytest.fixture
def builtin_dir(tmp_path):
    path = tmp_path / "features"
    path.mkdir()
    return path


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def store(builtin_dir, tmp_path, session):
    return PackageStore(str(builtin_dir), str(tmp_path / "packages"), {"stable": "https://archive.test/stable/", "community": "https://archive.test/community/"}, session=session)


@pytest.fixture
def host(store):
    return RecordingHost(store)


@pytest.fixture
def constants(tmp_path):
    return SimpleNamespace(
        FEATURES_DIR=REPO_FEATURES_DIR,
        PACKAGE_DIR=str(tmp_path / "packages"),
        CUSTOM_FILE=str(tmp_path / "custom.json"),
        LINKS_FILE=str(tmp_path / "links.json"),
        ARCHIVES={},
        BOOTSTRAP_PACKAGE="declare",
        TICKET_BASE_URL="https://issues.test/browse/",
        SETTINGS=[("bell-style", "visible"), ("fill-column", 80)],
        DEFAULTS=DEFAULTS,
        APP_FEATURES={
            "editor": {
                "builtin": True,
                "bindings": [("C-c t", "browse-ticket"), ("C-c d", "describe-bindings")],
            },
        },
    )
