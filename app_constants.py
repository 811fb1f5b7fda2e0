import os

from edinit.core.defaults import DEFAULTS

APP_NAME = "edinit"
APP_VERSION = "0.1"

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
CONFIG_DIR = os.environ.get("EDINIT_HOME", os.path.join(os.path.expanduser("~"), ".edinit"))

FEATURES_DIR = os.path.join(BASE_DIR, "features")
PACKAGE_DIR = os.path.join(CONFIG_DIR, "packages")
CUSTOM_FILE = os.path.join(CONFIG_DIR, "custom.json")
LINKS_FILE = os.path.join(CONFIG_DIR, "links.json")

DEFAULT_WINDOW_DIMENSIONS = (900, 700)
MIN_WINDOW_DIMENSIONS = (600, 400)

# searched in order
ARCHIVES = {
    "stable": "https://archive.edinit.dev/stable/",
    "community": "https://archive.edinit.dev/community/",
}

BOOTSTRAP_PACKAGE = "declare"

TICKET_BASE_URL = "https://issues.edinit.dev/browse/"

SETTINGS = [
    ("line-numbers", True),
    ("bell-style", "visible"),
    ("trim-whitespace", True),
    ("theme", "modus-vivendi"),
    ("fill-column", 80),
    ("indent-tabs", False),
    ("startup-screen", False),
]

# Registered top to bottom. Later declarations rely on commands defined by
# earlier ones (turn-on-fci-mode is used by whitespace-cleanup's hook list).
APP_FEATURES = {
    "editor": {
        "builtin": True,
        "description": "Built-in commands and helpers",
        "bindings": [
            ("C-c t", "browse-ticket"),
            ("C-c l", "browse-link"),
            ("C-c w", "delete-trailing-whitespace"),
        ],
    },

    "fill-column-indicator": {
        "description": "Draw a rule at the fill column in programming modes",
        "config": [
            ("hook", "prog-mode-hook", "turn-on-fci-mode"),
        ],
        "bindings": [
            ("C-c f", "fci-mode"),
        ],
    },

    "whitespace-cleanup": {
        "description": "Clean up whitespace on save",
        "config": [
            ("run", "whitespace-cleanup-mode"),
            ("hook", "text-mode-hook", "turn-on-fci-mode"),
        ],
        "bindings": [
            ("C-c w", "whitespace-cleanup"),
        ],
    },

    "rg": {
        "description": "Search the project with ripgrep",
        "conditions": ["platform:darwin"],
        "system_deps": [
            ("rg", "brew install ripgrep"),
        ],
        "bindings": [
            ("C-c s", "rg"),
        ],
    },
}
