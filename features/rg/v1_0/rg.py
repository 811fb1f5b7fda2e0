import os
import re
import shutil
import subprocess
from dataclasses import dataclass
from typing import Dict, List, Optional

from jinja2 import Template

# path:line:column:text, where the path may itself contain ':' on Windows
_VIMGREP_LINE = re.compile(r"^(.+?):(\d+):(\d+):(.*)$")


def register():
    instance = Feature()

    return {
        "commands": {
            "rg": instance.search,
            "rg-html": instance.search_html,
        },
        "self_test": instance.self_test,
        "shutdown": instance.shutdown,
    }


@dataclass
class RgMatch:
    path: str
    line: int
    column: int
    text: str

    def to_dict(self) -> Dict:
        return {"path": self.path, "line": self.line, "column": self.column, "text": self.text}


def _parse_vimgrep(output: str) -> List[RgMatch]:
    matches = []
    for line in output.splitlines():
        m = _VIMGREP_LINE.match(line)
        if m:
            matches.append(RgMatch(m.group(1), int(m.group(2)), int(m.group(3)), m.group(4)))
    return matches


_HTML_TEMPLATE = Template("""
    <h2>rg {{ pattern }}</h2>
    {% if matches %}
    <table>
        <thead><tr><th>File</th><th>Line</th><th>Text</th></tr></thead>
        <tbody>
        {% for m in matches %}
            <tr><td>{{ m.path }}</td><td>{{ m.line }}</td><td><code>{{ m.text }}</code></td></tr>
        {% endfor %}
        </tbody>
    </table>
    {% else %}
    <p><i>No matches.</i></p>
    {% endif %}
""")


class Feature:
    def self_test(self) -> bool:
        # rg may still be installing through its system dependency hint
        return True

    def shutdown(self):
        print("Shutting down rg...")

    def search(self, host, pattern: Optional[str] = None, directory: Optional[str] = None) -> List[RgMatch]:
        if pattern is None:
            pattern = host.read_string("Search for: ")
        exe = shutil.which("rg")
        if not exe:
            raise FileNotFoundError("rg not found on PATH")

        result = subprocess.run(
            [exe, "--vimgrep", "--no-heading", pattern, directory or os.getcwd()],
            capture_output=True,
            text=True,
            stdin=subprocess.DEVNULL,
        )
        # rg exits 1 when nothing matched
        if result.returncode not in (0, 1):
            raise subprocess.CalledProcessError(result.returncode, result.args, result.stdout, result.stderr)
        return _parse_vimgrep(result.stdout)

    def search_html(self, host, pattern: Optional[str] = None, directory: Optional[str] = None) -> str:
        if pattern is None:
            pattern = host.read_string("Search for: ")
        matches = self.search(host, pattern, directory)
        return _HTML_TEMPLATE.render(pattern=pattern, matches=[m.to_dict() for m in matches])
