"""Device error classification.

Maps a capture device and the symbolic name of its failure to the identifier
of the message shown to the user. Unknown names map to ``None``; callers fall
back to ``fallback_key`` for the device.
"""

from __future__ import annotations
from typing import Dict, Optional

from core.models import DeviceKind, ErrorKind


class TrackAcquisitionError(Exception):
    """Structured failure raised when a camera or microphone cannot be started."""

    GENERAL = ErrorKind.GENERAL.value
    PERMISSION_DENIED = ErrorKind.PERMISSION_DENIED.value
    NOT_FOUND = ErrorKind.NOT_FOUND.value
    CONSTRAINT_FAILED = ErrorKind.CONSTRAINT_FAILED.value
    NO_DATA_FROM_SOURCE = ErrorKind.NO_DATA_FROM_SOURCE.value
    UNSUPPORTED_RESOLUTION = ErrorKind.UNSUPPORTED_RESOLUTION.value

    def __init__(self, name: str, message: str | None = None):
        super().__init__(message or name)
        self.name = str(name) if name else ""
        self.message = message


class InviteServiceError(Exception):
    """A directory search or invite request did not succeed."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


_CAMERA_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.UNSUPPORTED_RESOLUTION: "dialog.cameraUnsupportedResolutionError",
    ErrorKind.GENERAL: "dialog.cameraUnknownError",
    ErrorKind.PERMISSION_DENIED: "dialog.cameraPermissionDeniedError",
    ErrorKind.NOT_FOUND: "dialog.cameraNotFoundError",
    ErrorKind.CONSTRAINT_FAILED: "dialog.cameraConstraintFailedError",
    ErrorKind.NO_DATA_FROM_SOURCE: "dialog.cameraNotSendingData",
}

_MIC_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.GENERAL: "dialog.micUnknownError",
    ErrorKind.PERMISSION_DENIED: "dialog.micPermissionDeniedError",
    ErrorKind.NOT_FOUND: "dialog.micNotFoundError",
    ErrorKind.CONSTRAINT_FAILED: "dialog.micConstraintFailedError",
    ErrorKind.NO_DATA_FROM_SOURCE: "dialog.micNotSendingData",
}

_TABLES: Dict[DeviceKind, Dict[ErrorKind, str]] = {
    DeviceKind.CAMERA: _CAMERA_MESSAGES,
    DeviceKind.MICROPHONE: _MIC_MESSAGES,
}


def classify(device: DeviceKind, name: ErrorKind | str | None) -> Optional[str]:
    kind = ErrorKind.lookup(name)
    if kind is None:
        return None
    return _TABLES.get(device, {}).get(kind)


def fallback_key(device: DeviceKind) -> str:
    return _TABLES[device][ErrorKind.GENERAL]


__all__ = [
    "classify",
    "fallback_key",
    "TrackAcquisitionError",
    "InviteServiceError",
]
