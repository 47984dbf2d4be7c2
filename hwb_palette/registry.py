"""Render auto-discovery and registration.

Scans hwb_palette/renders/ for modules that define a `render` object
of type Render. Collects them into a dict keyed by name.
"""

import importlib
import pkgutil

from hwb_palette.core.types import Render

_registry: dict[str, Render] = {}


def discover() -> dict[str, Render]:
    """Import all render modules and return the registry."""
    if _registry:
        return _registry

    import hwb_palette.renders as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]

    for modname in found_modules:
        module = importlib.import_module(f'hwb_palette.renders.{modname}')
        render = getattr(module, 'render', None)
        if isinstance(render, Render):
            _registry[render.name] = render

    return _registry


def get(name: str) -> Render:
    """Get a render by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown render: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_renders() -> dict[str, Render]:
    """Return all registered renders."""
    return discover()


def module_for(name: str) -> object:
    """Load the module behind a render name (for docstring access)."""
    return importlib.import_module(f'hwb_palette.renders.{name.replace("-", "_")}')
