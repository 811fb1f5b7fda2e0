import argparse
import json
import sys
from contextlib import redirect_stdout

from edinit.startup import run_startup


def load_constants():
    import app_constants
    return app_constants


def list_payload(host, manager):
    return {
        "ok": True,
        "features": manager.get_available_features(),
        "skipped": [name for name, result in manager.results.items() if not result.registered],
        "bindings": host.keymap.as_dict(),
        "settings": host.settings.as_dict(),
    }


def run_key(host, key: str):
    command = host.keymap.lookup(key)
    if command is None:
        return 1, {"ok": False, "error": f"{key} is undefined"}

    out = host.call(command)
    if isinstance(out, (dict, list)):
        return 0, {"ok": True, "command": command, "json": out}
    return 0, {"ok": True, "command": command, "result": None if out is None else str(out)}


def main(argv=None, constants=None, host=None):
    parser = argparse.ArgumentParser(prog="edinit-bridge")
    parser.add_argument("--list", action="store_true", help="List features, bindings and settings as JSON")
    parser.add_argument("--key", type=str, help="Run the command bound to a key sequence, e.g. 'C-c t'")
    parser.add_argument("--ticket", type=str, help="Open a ticket in the issue tracker")
    parser.add_argument("--link", type=str, help="Open a named link from the links file")
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args(argv)

    # startup chatter goes to stderr so stdout stays one JSON document
    with redirect_stdout(sys.stderr):
        host, manager = run_startup(constants or load_constants(), debug=args.debug, host=host)

    try:
        if args.list:
            payload = list_payload(host, manager)
            print(json.dumps(payload, ensure_ascii=False, default=str))
            return 0

        if args.key:
            code, payload = run_key(host, args.key)
            print(json.dumps(payload, ensure_ascii=False, default=str))
            return code

        if args.ticket:
            url = host.call("browse-ticket", args.ticket)
            print(json.dumps({"ok": True, "url": url}))
            return 0

        if args.link:
            try:
                url = host.call("browse-link", args.link)
            except KeyError as e:
                print(json.dumps({"ok": False, "error": str(e.args[0])}))
                return 1
            print(json.dumps({"ok": True, "url": url}))
            return 0
    finally:
        with redirect_stdout(sys.stderr):
            manager.shutdown()

    print(json.dumps({"ok": False, "error": "No command given (--list/--key/--ticket/--link)"}))
    return 2


if __name__ == "__main__":
    sys.exit(main())
