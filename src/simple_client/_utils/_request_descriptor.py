from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class RequestDescriptor:
    """Everything a transport needs to send one request.

    ``headers`` keeps key case as given. ``extras`` holds the transport
    specific overrides that are neither method, body nor headers.
    """

    method: str
    headers: dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None
    extras: dict[str, Any] = field(default_factory=dict)
