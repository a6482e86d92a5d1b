"""
Filter registry and transform pipeline.

Hooks are held by explicit registry instances handed to the operations that
need them; there is no process-wide event dispatcher.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from .config import get_config
from .logging_config import get_logger


if TYPE_CHECKING:
    from .document import Document


logger = get_logger(__name__)

DEFAULT_PRIORITY = 10
SEPARATOR_FILTER = "postchunks_separator"

SeparatorResolver = Callable[[str, "Document"], str]
Transform = Callable[[str], str]


@dataclass
class _Callback:
    priority: int
    order: int
    callback: Callable[..., Any]


@dataclass
class FilterRegistry:
    """
    Named, prioritised filter callbacks.

    Callbacks registered under a name run in ascending priority; ties keep
    registration order. Each receives the running value followed by any extra
    arguments passed to ``apply_filters`` and returns the new value.
    """

    _filters: dict[str, list[_Callback]] = field(default_factory=dict)
    _counter: int = 0

    def add_filter(self, name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> None:
        if not callable(callback):
            raise TypeError(f"callback for {name!r} must be callable")

        self._counter += 1
        callbacks = self._filters.setdefault(name, [])
        callbacks.append(_Callback(priority, self._counter, callback))
        callbacks.sort(key=lambda c: (c.priority, c.order))

    def remove_filter(self, name: str, callback: Callable[..., Any]) -> bool:
        """Remove the first registration of ``callback``; False if absent."""
        callbacks = self._filters.get(name, [])
        for i, entry in enumerate(callbacks):
            if entry.callback is callback:
                del callbacks[i]
                if not callbacks:
                    del self._filters[name]
                return True
        return False

    def has_filter(self, name: str) -> bool:
        return bool(self._filters.get(name))

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        """Run ``value`` through every callback registered under ``name``."""
        for entry in list(self._filters.get(name, [])):
            value = entry.callback(value, *args)
        return value

    def resolver(self, name: str = SEPARATOR_FILTER) -> SeparatorResolver:
        """Adapt the filters registered under ``name`` into a separator resolver."""

        def resolve(default: str, document: "Document") -> str:
            return self.apply_filters(name, default, document)

        return resolve


class TransformPipeline:
    """
    Named text transforms applied to chunks before display.

    Calling the pipeline as ``pipeline(name, text)`` runs every transform
    registered under ``name``. Names with nothing registered, including the
    default ``"render"`` on a fresh pipeline, return the text unchanged.
    """

    def __init__(self, registry: FilterRegistry | None = None):
        self.registry = registry if registry is not None else FilterRegistry()

    def register(self, name: str, transform: Transform, priority: int = DEFAULT_PRIORITY) -> "TransformPipeline":
        self.registry.add_filter(name, transform, priority)
        return self

    def __call__(self, name: str, text: str) -> str:
        return self.registry.apply_filters(name, text)


def resolve_separator(
    document: "Document",
    default: str | None = None,
    resolver: SeparatorResolver | None = None,
) -> str:
    """
    Pick the separator used to split ``document``.

    Args:
        document: Document about to be split
        default: Base separator; falls back to the configured separator
        resolver: Optional per-document override, called with the default
            and the document

    Returns:
        The separator string to split on
    """
    separator = default if default is not None else get_config().separator

    if resolver is not None:
        resolved = resolver(separator, document)
        if resolved != separator:
            logger.debug(f"Separator for {document.doc_id!r} resolved to {resolved!r}")
        separator = resolved

    return separator


def resolve_transform(transform: str | None = None) -> str:
    """
    Pick the transform a chunk is run through.

    ``None`` means the caller did not choose and falls back to the configured
    transform (``"render"`` unless ``POSTCHUNKS_TRANSFORM`` says otherwise).
    An empty string is returned as-is and means "no transform".
    """
    return get_config().transform if transform is None else transform
