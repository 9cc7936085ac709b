from typing import Iterable, Mapping


def reformat_map(input_map: Mapping[str, Iterable[str]]) -> dict[str, str]:
    """Convert a name -> list-of-values mapping into a name -> string mapping.

    Each list of values is joined with commas. The result can be passed as
    ``headers`` or ``query`` of a ``RequestSpec``, which makes it easy to
    forward response headers or parsed query strings.

    Args:
        input_map: A mapping such as the one filled by ``response_headers``
            or the result of ``urllib.parse.parse_qs``.

    Returns:
        dict[str, str]: A new mapping with comma-joined values.

    Examples:
        >>> reformat_map({"Accept": ["text/html", "application/json"]})
        {'Accept': 'text/html,application/json'}
    """
    result: dict[str, str] = {}
    for key, values in input_map.items():
        # httpx.Headers.items() already yields joined strings
        if isinstance(values, str):
            result[key] = values
        else:
            result[key] = ",".join(values)
    return result
