"""Resolve property names from class members.

Lets rules be registered against ``Person.age`` instead of the string
``"age"``, so a renamed property breaks loudly instead of silently.
"""

from __future__ import annotations

from functools import cached_property
from typing import Any

from ryandata_data_errors.core.errors import DataErrorsArgumentError


def name_of(member: Any) -> str:
    """Get the name of a property object.

    Args:
        member: A ``property`` or ``functools.cached_property`` taken from a
            class, e.g. ``Person.age``.

    Returns:
        The property name.

    Raises:
        DataErrorsArgumentError: If member is None, is not a property, or its
            getter does not carry a name.
    """
    if member is None:
        raise DataErrorsArgumentError.for_argument("member", "Member can not be null.")

    if isinstance(member, property):
        getter = member.fget
    elif isinstance(member, cached_property):
        getter = member.func
    else:
        raise DataErrorsArgumentError.for_argument(
            "member",
            "Member is not a property.",
            {"member_type": type(member).__name__},
        )

    name = getattr(getter, "__name__", None)
    if not isinstance(name, str) or not name or name == "<lambda>":
        raise DataErrorsArgumentError.for_argument(
            "member", "Member does not contain a property name."
        )
    return name
