"""Query string construction for the Custom Search endpoint."""

from typing import Any, Mapping, Optional
from urllib.parse import urlencode


def merge_parameters(
    api_key: str,
    phrase: str,
    parameters: Optional[Mapping[str, Any]] = None,
) -> dict[str, Any]:
    """Merge credentials, phrase and caller parameters.

    Later entries win, so caller parameters may override ``key`` and ``q``.
    An overridden key keeps its original position in the query string.
    """
    merged: dict[str, Any] = {"key": api_key, "q": phrase}
    merged.update(parameters or {})
    return merged


def _normalize(value: Any) -> Any:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (list, tuple)):
        return [_normalize(v) for v in value if v is not None]
    return value


def build_query(engine_id: str, parameters: Mapping[str, Any]) -> str:
    """Build ``?cx=<engine_id>&<form-encoded parameters>``.

    ``None`` values are dropped and booleans become ``1``/``0``. Sequences
    are sent as repeated parameters (``siteSearch=a&siteSearch=b``), the
    form Google accepts for multi-valued fields. Spaces are encoded as ``+``.
    """
    pairs = [(k, _normalize(v)) for k, v in parameters.items() if v is not None]
    encoded = urlencode(pairs, doseq=True)
    cx = urlencode({"cx": engine_id})
    return f"?{cx}&{encoded}" if encoded else f"?{cx}"
