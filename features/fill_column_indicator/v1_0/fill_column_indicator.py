MODE = "fci-mode"


def register():
    return {
        "commands": {
            "fci-mode": fci_mode,
            "turn-on-fci-mode": turn_on_fci_mode,
            "turn-off-fci-mode": turn_off_fci_mode,
        },
    }


def fci_mode(host, column=None):
    """Toggle the indicator; a column argument always turns it on at that column."""
    if column is None and MODE in host.modes:
        turn_off_fci_mode(host)
    else:
        turn_on_fci_mode(host, column)


def turn_on_fci_mode(host, column=None):
    if column is not None:
        host.set_option("fill-column", int(column))
    host.modes.add(MODE)


def turn_off_fci_mode(host):
    host.modes.discard(MODE)
