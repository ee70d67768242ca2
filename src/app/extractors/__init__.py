"""
Extraction adapters. Extend by implementing ExtractionAdapter and registering it
with the registry (config key extractor.kind selects one).
"""

from app.extractors.base import ExtractionAdapter
from app.extractors.subprocess_adapter import SubprocessExtractionAdapter, build_payload

# Registry: kind -> adapter class (for orchestration)
ADAPTER_REGISTRY = {
    "subprocess": SubprocessExtractionAdapter,
}


def get_adapter(kind: str, **kwargs) -> ExtractionAdapter | None:
    """Return an adapter instance for the given kind, or None."""
    cls = ADAPTER_REGISTRY.get(kind)
    return cls(**kwargs) if cls else None


def register_adapter(kind: str, adapter_class: type) -> None:
    """Register a new extraction adapter under a kind (e.g. 'http')."""
    ADAPTER_REGISTRY[kind] = adapter_class


__all__ = [
    "ExtractionAdapter",
    "SubprocessExtractionAdapter",
    "build_payload",
    "ADAPTER_REGISTRY",
    "get_adapter",
    "register_adapter",
]
