import re


def register():
    return {
        "commands": {
            "whitespace-cleanup": whitespace_cleanup,
            "whitespace-cleanup-mode": whitespace_cleanup_mode,
        },
    }


def whitespace_cleanup(host):
    """Trim trailing blanks, drop blank lines at the end and untabify when tabs are off."""
    text = re.sub(r"[ \t]+$", "", host.buffer, flags=re.MULTILINE)
    text = text.rstrip("\n")
    if text:
        text += "\n"
    if not host.settings.indent_tabs:
        text = text.replace("\t", " " * 8)
    host.buffer = text
    host.point = min(host.point, len(text))


def whitespace_cleanup_mode(host):
    host.add_hook("before-save-hook", "whitespace-cleanup")
