# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Base class for resource facades.

A facade maps each method to one HTTP verb, path and JSON body, and hands it
to the client's dispatcher. Facades are written once for both modes: methods
return whatever ``dispatcher.request()`` returns, i.e. an awaitable with the
async ``Dispatcher`` and the decoded value with ``BlockingDispatcher``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from pydantic import BaseModel

if TYPE_CHECKING:
    from ..dispatcher import BlockingDispatcher, Dispatcher


def path_segment(value: Any) -> str:
    """Percent-encode a value for use as a single path segment.

    Raises:
        ValueError: If the value is empty or a dot segment, which URL
            resolution would collapse into a different path.
    """
    text = str(value)
    if text in ("", ".", ".."):
        raise ValueError(f"Invalid path parameter {text!r}")
    return quote(text, safe="@")


def dump_body(body: Any) -> Any:
    """Convert pydantic models (or lists of them) into JSON-ready data."""
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(body, (list, tuple)):
        return [dump_body(item) for item in body]
    return body


class ResourceAPI:
    """Base class for all resource facades.

    Attributes:
        name: Resource family name, used in ``repr()``.
    """

    name: str = ""

    def __init__(self, dispatcher: Dispatcher | BlockingDispatcher):
        self._dispatcher = dispatcher

    @property
    def dispatcher(self) -> Dispatcher | BlockingDispatcher:
        """The dispatcher shared with every other facade of the client."""
        return self._dispatcher

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        model: type[BaseModel] | None = None,
    ) -> Any:
        return self._dispatcher.request(
            method, path, json=dump_body(json), params=params, model=model
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}: {self._dispatcher!r}>"
