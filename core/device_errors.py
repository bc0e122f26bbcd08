"""Compose the device error dialog from camera/microphone failures.

``compose`` is a pure function: given the two optional errors it decides the
dialog title, one message section per failing device (microphone first) and
whether the user may opt out of seeing the same combination again.
"""

from __future__ import annotations
from typing import List, Optional

from core.errors import classify, fallback_key
from core.logging import logger
from core.models import (
    DeviceKind,
    DialogPresentation,
    DialogTitle,
    ErrorKind,
    MessageSection,
    SuppressionPreference,
    TrackError,
)

STORAGE_KEY_BASE = "doNotShowErrorAgain"
PROMPT_KEY = "dialog.doNotShowWarningAgain"

_HEADER_KEYS = {
    DeviceKind.MICROPHONE: "dialog.micErrorPresent",
    DeviceKind.CAMERA: "dialog.cameraErrorPresent",
}

_log = logger.getChild("device_errors")


def _section(error: TrackError) -> MessageSection:
    classified = classify(error.device, error.kind)
    raw_detail = None
    if classified is None and error.message:
        raw_detail = error.message
    return MessageSection(
        header_key=_HEADER_KEYS[error.device],
        body_key=classified or fallback_key(error.device),
        raw_detail=raw_detail,
    )


def _is_permission_denied(error: Optional[TrackError]) -> bool:
    return error is not None and error.kind == ErrorKind.PERMISSION_DENIED


def select_title(
    camera_error: Optional[TrackError], mic_error: Optional[TrackError]
) -> DialogTitle:
    # A denied camera always wins; a denied mic only when there is no camera error
    if _is_permission_denied(camera_error) or (
        camera_error is None and _is_permission_denied(mic_error)
    ):
        return DialogTitle.PERMISSION_DENIED
    return DialogTitle.GENERIC_ERROR


def build_storage_key(
    camera_error: Optional[TrackError], mic_error: Optional[TrackError]
) -> str:
    key = STORAGE_KEY_BASE
    if mic_error is not None:
        key += f"-mic-{mic_error.name or 'unknown'}"
    if camera_error is not None:
        key += f"-camera-{camera_error.name or 'unknown'}"
    return key


def is_suppression_eligible(*errors: Optional[TrackError]) -> bool:
    present = [e for e in errors if e is not None]
    return bool(present) and all(e.is_recognized for e in present)


def compose(
    camera_error: Optional[TrackError] = None,
    mic_error: Optional[TrackError] = None,
) -> DialogPresentation:
    if camera_error is not None:
        camera_error = camera_error.for_device(DeviceKind.CAMERA)
    if mic_error is not None:
        mic_error = mic_error.for_device(DeviceKind.MICROPHONE)

    sections: List[MessageSection] = []
    if mic_error is not None:
        sections.append(_section(mic_error))
    if camera_error is not None:
        sections.append(_section(camera_error))

    storage_key = build_storage_key(camera_error, mic_error)
    eligible = is_suppression_eligible(camera_error, mic_error)
    title = select_title(camera_error, mic_error)

    _log.debug(
        "Device error dialog: title=%s sections=%d key=%s suppressible=%s",
        title,
        len(sections),
        storage_key,
        eligible,
    )
    return DialogPresentation(
        title_key=title,
        sections=tuple(sections),
        suppression=(
            SuppressionPreference(storage_key=storage_key, prompt_key=PROMPT_KEY)
            if eligible
            else None
        ),
        storage_key=storage_key,
    )


__all__ = [
    "compose",
    "select_title",
    "build_storage_key",
    "is_suppression_eligible",
    "STORAGE_KEY_BASE",
    "PROMPT_KEY",
]
