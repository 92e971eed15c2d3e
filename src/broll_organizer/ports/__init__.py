"""Ports (interfaces) – depend on these, implement in adapters."""

from broll_organizer.ports.interfaces import IFootageSearch, IScriptSegmenter

__all__ = ["IFootageSearch", "IScriptSegmenter"]
