from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class DeviceKind(str, Enum):
    CAMERA = "camera"
    MICROPHONE = "mic"

    def __str__(self) -> str:
        return str(self.value)


class ErrorKind(str, Enum):
    """Symbolic reasons a capture device can fail to start.

    Values are the names carried by ``TrackAcquisitionError`` and embedded
    verbatim in suppression storage keys.
    """

    GENERAL = "General"
    PERMISSION_DENIED = "PermissionDenied"
    NOT_FOUND = "NotFound"
    CONSTRAINT_FAILED = "ConstraintFailed"
    NO_DATA_FROM_SOURCE = "NoDataFromSource"
    UNSUPPORTED_RESOLUTION = "UnsupportedResolution"  # camera only

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def lookup(cls, name) -> Optional["ErrorKind"]:
        if isinstance(name, cls):
            return name
        if not name:
            return None
        try:
            return cls(str(name))
        except ValueError:
            return None


class DialogTitle(str, Enum):
    GENERIC_ERROR = "dialog.error"
    PERMISSION_DENIED = "dialog.permissionDenied"

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TrackError:
    device: DeviceKind
    name: Optional[str] = None
    message: Optional[str] = None

    @property
    def is_recognized(self) -> bool:
        return False

    @property
    def kind(self) -> Optional[ErrorKind]:
        return None

    def for_device(self, device: DeviceKind) -> "TrackError":
        if self.device == device:
            return self
        return type(self)(device=device, name=self.name, message=self.message)

    @staticmethod
    def from_exception(device: DeviceKind, exc: BaseException) -> "TrackError":
        """Wrap an exception raised while starting a capture device.

        Only the structured device-error family yields a recognized error;
        anything else becomes opaque and keeps its class name for the storage key.
        """
        from core.errors import TrackAcquisitionError

        if isinstance(exc, TrackAcquisitionError):
            return StructuredTrackError(device, exc.name, exc.message)
        return OpaqueTrackError(device, type(exc).__name__, str(exc) or None)


@dataclass(frozen=True)
class StructuredTrackError(TrackError):
    @property
    def is_recognized(self) -> bool:
        return bool(self.name)

    @property
    def kind(self) -> Optional[ErrorKind]:
        return ErrorKind.lookup(self.name)


@dataclass(frozen=True)
class OpaqueTrackError(TrackError):
    pass


@dataclass(frozen=True)
class MessageSection:
    header_key: str
    body_key: str
    raw_detail: Optional[str] = None


@dataclass(frozen=True)
class SuppressionPreference:
    storage_key: str
    prompt_key: str


@dataclass(frozen=True)
class DialogPresentation:
    title_key: DialogTitle = DialogTitle.GENERIC_ERROR
    sections: Tuple[MessageSection, ...] = field(default_factory=tuple)
    suppression: Optional[SuppressionPreference] = None
    # Always built, even when suppression is not offered
    storage_key: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.sections
