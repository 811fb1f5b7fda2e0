import json
import os
import re
from functools import partial
from typing import Dict, Optional

from edinit.core.contracts.host_interface import BaseHost

TICKET_PATTERN = re.compile(r"[A-Z0-9]+-[0-9]+")
FLASH_DELAY = 0.1


def flash_mode_line(host: BaseHost) -> None:
    host.invert_face("mode-line")
    host.run_with_timer(FLASH_DELAY, host.invert_face, "mode-line")


def ticket_at_point(host: BaseHost) -> Optional[str]:
    match = TICKET_PATTERN.search(host.text_at_point())
    return match.group(0) if match else None


def browse_ticket(host: BaseHost, base_url: str, ticket: Optional[str] = None) -> str:
    """Open ``ticket`` in the issue tracker.

    Without a ticket the identifier at point is reused, and the user is only
    prompted when nothing there looks like one. Identifiers are not validated.
    """
    if not ticket:
        ticket = ticket_at_point(host) or host.read_string("Ticket: ")
    url = base_url + ticket
    host.browse_url(url)
    return url


def load_links(path: str) -> Dict[str, str]:
    if not path or not os.path.isfile(path):
        return {}

    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)

    if not isinstance(data, dict):
        raise ValueError(f"Links file {path} must hold a JSON object of name/URL pairs")
    return {str(name): str(url) for name, url in data.items()}


def browse_link(host: BaseHost, links: Dict[str, str], name: Optional[str] = None) -> str:
    if not name:
        name = host.read_string("Link: ")
    if name not in links:
        raise KeyError(f"No link named '{name}'")
    url = links[name]
    host.browse_url(url)
    return url


def install_helpers(host: BaseHost, ticket_base_url: str, links: Dict[str, str]) -> None:
    host.define_command("flash-mode-line", flash_mode_line)
    host.define_command("browse-ticket", partial(_browse_ticket_command, base_url=ticket_base_url))
    host.define_command("browse-link", partial(_browse_link_command, links=links))


def _browse_ticket_command(host, ticket=None, *, base_url):
    return browse_ticket(host, base_url, ticket)


def _browse_link_command(host, name=None, *, links):
    return browse_link(host, links, name)
