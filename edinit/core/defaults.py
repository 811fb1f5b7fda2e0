from typing import Any, Dict

#defaults are applied first; per-feature overrides replace these keys.
DEFAULTS: Dict[str, Any] = {
    "enabled": True,
    "builtin": False,         #configures the editor itself, nothing to install or load
    "package": None,          #extension name when it differs from the feature name
    "version": "v1_0",        #directory name under features/<name>/<version>/
    "ensure": None,           #None follows the bootstrap always-ensure policy
    "description": "",
    "conditions": (),
    "system_deps": (),        #(executable, install hint) pairs
    "init": (),
    "config": (),
    "bindings": (),           #(key sequence, command) pairs
}
