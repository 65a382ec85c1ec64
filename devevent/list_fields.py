"""
List field parsing for multi-item form fields (tags, agenda).

Clients submit these fields in several shapes: a JSON array string, a
newline-separated string, a ``||``-separated string, a comma-separated
string, or the same field name repeated several times. Every shape is
reduced to a plain list of trimmed, non-empty strings.
"""
import json
from typing import Any, Iterable, List, Optional, Sequence, Union

# None (field absent) | str (single entry) | sequence (repeated entries)
RawFieldValue = Optional[Union[str, Sequence[str]]]

# Checked in order; the first delimiter present in the text is used.
# Anything left over is split on commas.
_DELIMITERS = ('\n', '||')
_FALLBACK_DELIMITER = ','

# Past this magnitude JavaScript switches to exponent notation
_MAX_PLAIN_NUMBER = 1e21


def _clean(items: Iterable[str]) -> List[str]:
    """Trim every item and drop the empty ones, keeping order."""
    return [item.strip() for item in items if item.strip()]


def _stringify(value: Any) -> str:
    """Text form of a decoded JSON array element; numbers print as a JavaScript client prints them."""
    if isinstance(value, str):
        return value
    # 1.0 and 1e3 are plain integers to a JavaScript client
    if isinstance(value, float) and value.is_integer() and abs(value) < _MAX_PLAIN_NUMBER:
        return str(int(value))
    return json.dumps(value)


def _decode_json_array(text: str) -> Optional[list]:
    """Return the decoded list if text is a JSON array, otherwise None."""
    try:
        decoded = json.loads(text)
    except (ValueError, RecursionError):
        return None
    return decoded if isinstance(decoded, list) else None


def _decode_text(text: str) -> List[str]:
    decoded = _decode_json_array(text)
    if decoded is not None:
        return _clean(_stringify(item) for item in decoded)

    for delimiter in _DELIMITERS:
        if delimiter in text:
            return _clean(text.split(delimiter))

    # Items that contain commas get split here; clients that need commas
    # inside an item must use JSON, newlines or ||.
    return _clean(text.split(_FALLBACK_DELIMITER))


def normalize_list_field(raw: RawFieldValue) -> List[str]:
    """
    Normalize a raw multi-item field value into a list of strings.

    - ``None`` gives an empty list.
    - A list or tuple (repeated form entries) is trimmed item by item.
    - A string goes through the decoding chain: JSON array, then
      newline-separated, then ``||``-separated, then comma-separated.

    Never raises; malformed JSON simply falls through to the next rule.
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        return _decode_text(raw)
    if isinstance(raw, (list, tuple)):
        return _clean(str(item) for item in raw)
    return []


def form_list_value(form, name: str) -> RawFieldValue:
    """
    Pull the raw value of a multi-item field out of a submitted form.

    ``form`` is a werkzeug ``MultiDict`` (``request.form``) or anything
    with a compatible ``getlist``.
    """
    values = form.getlist(name)
    if not values:
        return None
    if len(values) == 1:
        return values[0]
    return list(values)


def read_list_field(form, name: str) -> List[str]:
    """Read and normalize a multi-item field from a submitted form."""
    return normalize_list_field(form_list_value(form, name))
