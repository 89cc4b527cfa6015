"""Extract the asset type from a generic Move type instantiation."""

import re

# One level of generics only: the argument may not contain '>'
COIN_TYPE_PATTERN = re.compile(r"(?:coin::Coin|balance::Balance)<([^>]+)>")


def extract_coin_type(type_str: str) -> str:
    """Return the coin type wrapped by a Coin<T> or Balance<T> type.

    Handles the bare wrapper and wrappers nested inside other generics, e.g.
    "0x2::dynamic_field::Field<0x1::type_name::TypeName, 0x2::balance::Balance<0x2::sui::SUI>>".
    Strings without a recognized wrapper are returned unchanged.
    """
    match = COIN_TYPE_PATTERN.search(type_str)
    if match is None:
        return type_str
    return match.group(1)
