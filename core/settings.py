import json
import os
from dataclasses import dataclass, asdict, field, fields
from typing import List, Optional

from core.logging import logger


def _user_config_dir() -> str:
    base = os.getenv("APPDATA") or os.path.expanduser("~")
    return os.path.join(base, "MeetDesk")


SETTINGS_DIR = _user_config_dir()
SETTINGS_PATH = os.path.join(SETTINGS_DIR, "settings.json")

_log = logger.getChild("settings")


@dataclass
class ServiceSettings:
    search_url: str = ""
    invite_url: str = ""
    # Shown in the inline failure widget; empty hides the support link
    support_url: str = ""
    jwt: str = ""
    request_timeout: int = 15


@dataclass
class UISettings:
    log_level: str = "INFO"


@dataclass
class AppSettings:
    services: ServiceSettings = field(default_factory=ServiceSettings)
    ui: UISettings = field(default_factory=UISettings)
    # Storage keys of device error dialogs the user opted out of
    suppressed_dialogs: List[str] = field(default_factory=list)


def _known(cls, raw) -> dict:
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in (raw or {}).items() if k in names}


class SettingsManager:
    def __init__(self, path: Optional[str] = None):
        self.path = path or SETTINGS_PATH

    def load(self) -> AppSettings:
        if not os.path.exists(self.path):
            return AppSettings()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)

            services = ServiceSettings(**_known(ServiceSettings, data.get("services")))
            try:
                services.request_timeout = int(services.request_timeout)
            except (TypeError, ValueError):
                services.request_timeout = ServiceSettings().request_timeout
            if services.request_timeout <= 0:
                services.request_timeout = ServiceSettings().request_timeout
            ui = UISettings(**_known(UISettings, data.get("ui")))
            suppressed = [
                str(k) for k in (data.get("suppressed_dialogs") or []) if k
            ]
            return AppSettings(services=services, ui=ui, suppressed_dialogs=suppressed)
        except (OSError, ValueError, TypeError, AttributeError) as e:
            _log.warning("Ignoring unreadable settings file %s: %r", self.path, e)
            return AppSettings()

    def save(self, settings: AppSettings):
        data = asdict(settings)
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def is_dialog_suppressed(self, storage_key: str) -> bool:
        return bool(storage_key) and storage_key in self.load().suppressed_dialogs

    def suppress_dialog(self, storage_key: str):
        if not storage_key:
            return
        settings = self.load()
        if storage_key in settings.suppressed_dialogs:
            return
        settings.suppressed_dialogs.append(storage_key)
        self.save(settings)
        _log.info("Dialog suppressed: %s", storage_key)
