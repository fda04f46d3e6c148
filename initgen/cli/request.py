"""
FixRequest — JSON description of a document and its host-side facts.

Format::

    {
      "types":    [{"name": "Person", "members": [{"name": "Name", "type": "string"}]},
                   {"name": "Gender", "kind": "enum", "values": ["Male", "Female"]}],
      "document": "var p = new Person() { };",
      "sites":    [{"type": "Person", "arguments": [],
                    "span": [8, 24], "initializer_span": [21, 24],
                    "lambda": {"parameters": [{"name": "c", "type": "Customer"}]}}],
      "scopes":   [{"span": [0, 25], "bindings": [{"name": "name", "type": "string"}]}]
    }

"arguments" null means the creation has no argument list.  A scope without
"span" covers the whole document.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from initgen.exceptions import InitGenError, RequestError
from initgen.fixer.adapters import ScopeFrame, SiteTable, StaticScopeProvider, TextDocumentEditor
from initgen.fixer.models import FixHost
from initgen.model.registry import TypeRegistry
from initgen.resolver.models import LocalBinding
from initgen.syntax.models import InitializerSite, LambdaInfo, ObjectCreation, Parameter, Span

__all__ = ["FixRequest", "load_request"]

logger = logging.getLogger(__name__)


@dataclass
class FixRequest:
    document: str
    host:     FixHost
    sites:    list[InitializerSite]

    def default_location(self) -> Optional[int]:
        """Start of the first reported site, used when no offset is given."""
        return self.sites[0].span.start if self.sites else None

    @classmethod
    def from_dict(cls, data: dict) -> "FixRequest":
        try:
            registry = TypeRegistry.from_dicts(data.get("types", []))
            document = data["document"]
            sites = [_site_from_dict(s) for s in data.get("sites", [])]
            frames = [
                ScopeFrame(
                    bindings=[LocalBinding(b["name"], b["type"]) for b in f.get("bindings", [])],
                    span=_span(f["span"]) if "span" in f else None,
                )
                for f in data.get("scopes", [])
            ]
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise RequestError(f"Malformed fix request: {exc!r}") from exc
        except InitGenError as exc:
            raise RequestError(f"Invalid fix request: {exc}") from exc

        if not isinstance(document, str):
            raise RequestError("'document' must be a string")

        table = SiteTable(sites, registry)
        host = FixHost(
            type_model=registry,
            scopes=StaticScopeProvider(frames),
            locator=table,
            symbols=table,
            editor=TextDocumentEditor(),
        )
        return cls(document=document, host=host, sites=sites)


def load_request(path: str | Path) -> FixRequest:
    """
    Read a FixRequest from a JSON file.

    Raises:
        RequestError: unreadable file, invalid JSON or missing fields.
    """
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except OSError as exc:
        raise RequestError(f"Cannot read request {p}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise RequestError(f"Invalid JSON in {p}: {exc}") from exc
    if not isinstance(data, dict):
        raise RequestError(f"Request {p} must contain a JSON object")
    logger.debug("Loaded request %s", p)
    return FixRequest.from_dict(data)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _span(raw) -> Span:
    start, end = raw
    return Span(int(start), int(end))


def _site_from_dict(d: dict) -> InitializerSite:
    args = d.get("arguments", [])
    lam = d.get("lambda")
    return InitializerSite(
        creation=ObjectCreation(
            type_name=d["type"],
            arguments=None if args is None else tuple(str(a) for a in args),
        ),
        span=_span(d["span"]),
        initializer_span=_span(d["initializer_span"]),
        enclosing_lambda=None if lam is None else LambdaInfo(
            parameters=tuple(Parameter(p["name"], p.get("type")) for p in lam.get("parameters", []))
        ),
    )
