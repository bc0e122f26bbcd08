"""English strings for every identifier the dialogs display.

``translate`` is the only lookup; unknown identifiers come back unchanged so a
missing string shows its key instead of an empty label.
"""

from __future__ import annotations
from typing import Dict

_STRINGS: Dict[str, str] = {
    # Device error dialog
    "dialog.error": "Error",
    "dialog.permissionDenied": "Permission Denied",
    "dialog.doNotShowWarningAgain": "Don't show this warning again",
    "dialog.ok": "OK",
    "dialog.micErrorPresent": "There is an error connecting to your microphone.",
    "dialog.cameraErrorPresent": "There is an error connecting to your camera.",
    "dialog.micUnknownError": "Cannot use microphone for an unknown reason.",
    "dialog.micPermissionDeniedError": (
        "You have not granted permission to use your microphone. You can still "
        "join the conference but others won't hear you. Grant microphone "
        "access in your system settings to fix this."
    ),
    "dialog.micNotFoundError": "Requested microphone was not found.",
    "dialog.micConstraintFailedError": (
        "Your microphone does not satisfy some of the required constraints."
    ),
    "dialog.micNotSendingData": (
        "We are unable to access your microphone. Please select another device "
        "from the settings menu or try to restart the application."
    ),
    "dialog.cameraUnknownError": "Cannot use camera for an unknown reason.",
    "dialog.cameraPermissionDeniedError": (
        "You have not granted permission to use your camera. You can still join "
        "the conference but others won't see you. Grant camera access in your "
        "system settings to fix this."
    ),
    "dialog.cameraNotFoundError": "Requested camera was not found.",
    "dialog.cameraConstraintFailedError": (
        "Your camera does not satisfy some of the required constraints."
    ),
    "dialog.cameraUnsupportedResolutionError": (
        "Your camera does not support the required video resolution."
    ),
    "dialog.cameraNotSendingData": (
        "We are unable to access your camera. Please check if another "
        "application is using this device, select another device from the "
        "settings menu or try to restart the application."
    ),
    # Inline failure (directory search / invite)
    "inlineDialogFailure.msg": "We stumbled a bit.",
    "inlineDialogFailure.retry": "Try again",
    "inlineDialogFailure.support": "support",
    "inlineDialogFailure.supportMsg": "If this keeps happening, reach out to",
}


def translate(key: str, **kwargs) -> str:
    text = _STRINGS.get(str(key), str(key))
    if kwargs:
        try:
            return text.format(**kwargs)
        except (KeyError, IndexError, ValueError):
            return text
    return text


__all__ = ["translate"]
