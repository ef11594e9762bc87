"""
Drive letter normalization.

Paths on lettered volumes compare equal regardless of drive letter case,
but strings do not. Upper-casing the letter makes "c:\\src" and
"C:\\src" the same string. A leading '*' wildcard is allowed.
"""


def _upper_char(ch: str) -> str:
    # Some characters upper-case to more than one (e.g. 'ß' -> 'SS')
    upper = ch.upper()
    return upper if len(upper) == 1 else ch


def normalize_drive_letter_case(path: str) -> str:
    """
    Upper-case a leading drive letter, leaving every other character alone.

    Args:
        path: File name to normalize

    Returns:
        The normalized string if path starts with a drive letter
        (optionally after '*'), otherwise the original string.
    """
    if len(path) > 2 and path[1] == ":":
        return _upper_char(path[0]) + path[1:]
    if len(path) > 3 and path[0] == "*" and path[2] == ":":
        return path[0] + _upper_char(path[1]) + path[2:]
    return path
