"""Template variable substitution for reminder messages."""

import re
from collections.abc import Mapping


def render(template: str, variables: Mapping[str, object]) -> str:
    """Replace `{key}` placeholders with values from `variables`.

    Placeholders whose key is absent stay as literal text. Substitution is a
    single pass over the template, so a value that itself contains `{...}`
    is never expanded again.

    Example:
        >>> render("Hi {name}, {x}", {"name": "Ann"})
        'Hi Ann, {x}'
    """
    if not template or not variables:
        return template

    keys = list(variables)
    pattern = re.compile("|".join(re.escape("{" + key + "}") for key in keys))

    return pattern.sub(lambda match: str(variables[match.group(0)[1:-1]]), template)
