"""
Name conversion helpers shared by the marshaller and the wrapper generator.

WSDL property and method names are lowerCamelCase; the library exposes them as
snake_case by default and converts back before talking to the SOAP layer.
"""

import keyword
import re

_LOWER_UPPER = re.compile(r"[a-z0-9][A-Z]")
_UNDERSCORE_WORD = re.compile(r"_\w")


def snake_case(text: str) -> str:
    """Convert camelCase names to underscore_separated names.

    Only a lowercase letter or digit followed by a capital starts a new word,
    so a leading capital is kept: ``ApiError`` becomes ``Api_error``.
    """
    return _LOWER_UPPER.sub(lambda match: match.group(0)[0] + "_" + match.group(0)[1].lower(), text)


def camel_case(text: str) -> str:
    """Convert underscore_separated names to camelCase names."""
    return _UNDERSCORE_WORD.sub(lambda match: match.group(0)[1:].upper(), text)


def fix_case_up(name: str) -> str:
    """Upper-case the first character of a name (``mutate`` -> ``Mutate``)."""
    return name[:1].upper() + name[1:]


def safe_identifier(name: str) -> str:
    """Snake-case a WSDL name and make it usable as a Python parameter."""
    identifier = snake_case(name).replace(".", "_").replace("-", "_")
    if keyword.iskeyword(identifier):
        identifier += "_"
    return identifier
