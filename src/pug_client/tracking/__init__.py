"""Dirty tracking and JSON Patch generation for resource attributes."""

from pug_client.tracking.changes import Added, ChangeRecord, Removed, Replaced, apply, diff, same_value
from pug_client.tracking.patch import (
    PatchGenerator,
    PatchKeyStyle,
    PatchOperation,
    generate_patch,
)
from pug_client.tracking.tracked import Notifiable, TrackedDict, TrackedList, to_plain, wrap
from pug_client.tracking.translator import camelize, from_api, to_api, underscore

__all__ = [
    "Added",
    "Removed",
    "Replaced",
    "ChangeRecord",
    "diff",
    "apply",
    "same_value",
    "PatchGenerator",
    "PatchKeyStyle",
    "PatchOperation",
    "generate_patch",
    "Notifiable",
    "TrackedDict",
    "TrackedList",
    "to_plain",
    "wrap",
    "camelize",
    "underscore",
    "from_api",
    "to_api",
]
