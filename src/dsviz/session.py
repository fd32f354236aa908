"""
Session-sharing payload and user input parsing.

A session is the input sequence, the selected tree algorithm and the number
of vertices to generate. It travels as Base64-encoded compact JSON inside the
``data`` query parameter of a share link.
"""

from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from urllib.parse import parse_qs, urlencode, urlsplit

from dsviz.logging_config import get_logger
from dsviz.trees.base import TreeAlgorithm
from dsviz.utils import compact_json

logger = get_logger("Session")

MAX_VERTICES = 100
DEFAULT_VERTICES = 7
QUERY_PARAM = "data"


@dataclass
class SessionPayload:
    random_values: List[int] = field(default_factory=list)
    selected_algorithm: str = TreeAlgorithm.BST.value
    num_vertices: int = DEFAULT_VERTICES

    def to_dict(self) -> dict:
        return {
            "randomValues": list(self.random_values),
            "selectedAlgorithm": self.selected_algorithm,
            "numVertices": self.num_vertices,
        }


def encode_session(payload: SessionPayload) -> str:
    return base64.b64encode(compact_json(payload.to_dict()).encode("utf-8")).decode("ascii")


def _is_int(x) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def decode_session(token: str) -> Optional[SessionPayload]:
    """
    Decode a share token.

    Returns:
        SessionPayload, or None when the token is not a valid link. The reason
        is logged; callers should report an invalid link and keep their state.
    """
    try:
        raw = base64.b64decode(token, validate=True)
        data = json.loads(raw.decode("utf-8"))
    except (binascii.Error, ValueError, TypeError) as e:
        logger.warning("Invalid share link: %s", e)
        return None

    if not isinstance(data, dict):
        logger.warning("Invalid share link: payload is %s, not an object", type(data).__name__)
        return None

    values = data.get("randomValues")
    algorithm = data.get("selectedAlgorithm")
    num_vertices = data.get("numVertices")
    if not isinstance(values, list) or not all(_is_int(v) for v in values):
        logger.warning("Invalid share link: randomValues must be a list of integers")
        return None
    if TreeAlgorithm.parse(algorithm) is None:
        logger.warning("Invalid share link: unknown algorithm %r", algorithm)
        return None
    if not _is_int(num_vertices) or not validate_num_vertices(num_vertices):
        logger.warning("Invalid share link: bad numVertices %r", num_vertices)
        return None

    return SessionPayload(
        random_values=values,
        selected_algorithm=algorithm,
        num_vertices=num_vertices,
    )


def build_share_url(origin: str, payload: SessionPayload) -> str:
    return f"{origin}?{urlencode({QUERY_PARAM: encode_session(payload)})}"


def session_from_url(url: str) -> Optional[SessionPayload]:
    """Extract and decode the payload of a share link; None if absent or invalid."""
    params = parse_qs(urlsplit(url).query)
    tokens = params.get(QUERY_PARAM)
    if not tokens:
        return None
    # Links built without percent-encoding carry raw "+" characters.
    return decode_session(tokens[0].replace(" ", "+"))


def validate_num_vertices(n: int) -> bool:
    """Vertex counts are limited to [0, MAX_VERTICES]."""
    return 0 <= n <= MAX_VERTICES


def parse_int(text: str) -> Optional[int]:
    """Parse a single integer; None for blank or non-numeric input."""
    text = text.strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def parse_int_values(text: str) -> Tuple[List[int], List[str]]:
    """
    Split comma-separated input into integers.

    Returns:
        (values, rejected): parsed integers in input order, and the non-empty
        tokens that were not integers.
    """
    values: List[int] = []
    rejected: List[str] = []
    for token in text.split(","):
        token = token.strip()
        if not token:
            continue
        v = parse_int(token)
        if v is None:
            rejected.append(token)
        else:
            values.append(v)
    if rejected:
        logger.info("Rejected non-numeric input: %s", ", ".join(rejected))
    return values, rejected
