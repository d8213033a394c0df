import re

from app.domain.exceptions import InputError

ADDRESS_PREFIX = "0x"
NAME_PREFIX = "User"
NAME_CHARS = 4

_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{4,}$")

def validate_address(value) -> str:
    """
    Returns the stripped address or raises InputError.

    Only the shape needed to derive a display name is checked here; a long
    but invalid address is left for the balance oracle to reject.
    """
    if not isinstance(value, str):
        raise InputError("Address is required")
    address = value.strip()
    if not address:
        raise InputError("Address is required")
    if not _ADDRESS_RE.match(address):
        raise InputError(f"Not a wallet address: {address!r}")
    return address

def generate_user_name(address: str) -> str:
    """
    Display name from the four characters after the 0x prefix.

    Two addresses sharing those characters get the same name.
    """
    chars = address[len(ADDRESS_PREFIX):len(ADDRESS_PREFIX) + NAME_CHARS]
    if len(chars) < NAME_CHARS:
        raise InputError(f"Address too short to derive a name: {address!r}")
    return f"{NAME_PREFIX}{chars}"
