import os
import sys

from edinit.core.contracts.host_interface import BaseHost

CONDITION_KINDS = ("platform", "executable", "env", "feature")


def evaluate_condition(condition, host: BaseHost) -> bool:
    """Evaluate one declaration condition.

    Accepts a bool, a callable taking the host, or a ``kind:argument``
    string. A leading ``!`` negates a string condition.
    """
    if isinstance(condition, bool):
        return condition
    if callable(condition):
        return bool(condition(host))
    if not isinstance(condition, str):
        raise ValueError(f"Unsupported condition {condition!r}")

    negate = condition.startswith("!")
    text = condition[1:] if negate else condition
    kind, sep, argument = text.partition(":")
    if not sep or not argument:
        raise ValueError(f"Condition must look like 'kind:argument', got '{condition}'")

    if kind == "platform":
        result = sys.platform.startswith(argument)
    elif kind == "executable":
        result = host.executable_found(argument)
    elif kind == "env":
        result = bool(os.environ.get(argument))
    elif kind == "feature":
        result = host.featurep(argument)
    else:
        raise ValueError(f"Unknown condition kind '{kind}', expected one of {', '.join(CONDITION_KINDS)}")

    return not result if negate else result


def conditions_met(conditions, host: BaseHost) -> bool:
    # short-circuits so later conditions never run once one fails
    return all(evaluate_condition(condition, host) for condition in conditions)
