"""
Rastreabilidade de traduções: Manifest v1 e Event Log.
"""

from .manifest import (
    TranslationManifest,
    add_context_events,
    add_event,
    create_manifest,
    load_manifest,
    record_failure,
    record_translation,
    save_manifest,
)

__all__ = [
    "TranslationManifest",
    "add_context_events",
    "add_event",
    "create_manifest",
    "load_manifest",
    "record_failure",
    "record_translation",
    "save_manifest",
]
