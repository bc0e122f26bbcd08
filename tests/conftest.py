"""Shared pytest fixtures."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from core.errors import TrackAcquisitionError  # noqa: E402
from core.models import DeviceKind, OpaqueTrackError, TrackError  # noqa: E402
from core.settings import SettingsManager  # noqa: E402


def camera(name, message=None):
    return TrackError.from_exception(
        DeviceKind.CAMERA, TrackAcquisitionError(name, message)
    )


def mic(name, message=None):
    return TrackError.from_exception(
        DeviceKind.MICROPHONE, TrackAcquisitionError(name, message)
    )


def opaque(device, message="boom"):
    return OpaqueTrackError(device, "RuntimeError", message)


@pytest.fixture
def settings_mgr(tmp_path):
    return SettingsManager(str(tmp_path / "settings.json"))
