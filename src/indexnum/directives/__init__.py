"""Marker directives for indexnum.

Provides the two directives a host parser must recognize and a registry
to look them up by name:

- ``index-num``: ``IndexNumDirective``
- ``show-index-num``: ``ShowIndexNumDirective``

Example:
    >>> from indexnum.directives import create_default_registry
    >>> registry = create_default_registry()
    >>> registry.get("index-num").parse("index-num", "force", "", loc)
    IndexMarker(location=..., raw='force', target_id=None)
"""

from indexnum.directives.builtins import IndexNumDirective, ShowIndexNumDirective
from indexnum.directives.protocol import DirectiveHandler
from indexnum.directives.registry import (
    DirectiveRegistry,
    DirectiveRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
)

__all__ = [
    "DirectiveHandler",
    "DirectiveRegistry",
    "DirectiveRegistryBuilder",
    "IndexNumDirective",
    "ShowIndexNumDirective",
    "create_default_registry",
    "create_registry_with_defaults",
]
