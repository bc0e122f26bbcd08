"""Directory search and invitation requests.

Both helpers issue exactly one HTTP request and never retry. Failures raise
``InviteServiceError`` carrying a short reason; the QThread workers turn the
outcome into a single ``finished_ok`` or ``finished_fail`` signal.
"""

from __future__ import annotations
import json
from typing import Iterable

import requests
from PyQt6.QtCore import QThread, pyqtSignal

from core.errors import InviteServiceError
from core.logging import logger

QUERY_TYPES = ["conferenceRooms", "user", "room"]

_log = logger.getChild("invite")


def _decode(r: requests.Response):
    if r.status_code >= 400:
        reason = r.reason or f"HTTP {r.status_code}"
        _log.warning("Invite service %s -> %s: %s", r.url, r.status_code, r.text[:200])
        raise InviteServiceError(reason)
    try:
        return r.json()
    except ValueError as e:
        raise InviteServiceError(f"Invalid JSON response: {e}") from e


def search_people(service_url: str, jwt: str, text: str, timeout: float = 15):
    params = {
        "query": text,
        "queryTypes": json.dumps(QUERY_TYPES, separators=(",", ":")),
        "jwt": jwt,
    }
    try:
        r = requests.get(service_url, params=params, timeout=timeout)
    except (requests.exceptions.RequestException, ValueError) as e:
        _log.warning("Directory search failed: %r", e)
        raise InviteServiceError(str(e) or type(e).__name__) from e
    return _decode(r)


def invite_people(
    invite_service_url: str,
    invite_url: str,
    jwt: str,
    invite_items: Iterable,
    timeout: float = 15,
):
    payload = {"invited": list(invite_items), "url": invite_url}
    try:
        r = requests.post(
            invite_service_url,
            params={"token": jwt},
            data=json.dumps(payload),
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except (requests.exceptions.RequestException, ValueError) as e:
        _log.warning("Invite request failed: %r", e)
        raise InviteServiceError(str(e) or type(e).__name__) from e
    return _decode(r)


class SearchWorker(QThread):
    finished_ok = pyqtSignal(object)
    finished_fail = pyqtSignal(str)

    def __init__(self, service_url: str, jwt: str, text: str, timeout: float = 15, parent=None):
        super().__init__(parent)
        self.service_url = service_url
        self.jwt = jwt
        self.text = text
        self.timeout = timeout

    def run(self):
        try:
            result = search_people(self.service_url, self.jwt, self.text, self.timeout)
        except InviteServiceError as e:
            self.finished_fail.emit(e.reason)
            return
        except Exception as e:
            _log.exception("%s crashed", type(self).__name__)
            self.finished_fail.emit(str(e) or type(e).__name__)
            return
        self.finished_ok.emit(result)


class InviteWorker(QThread):
    finished_ok = pyqtSignal(object)
    finished_fail = pyqtSignal(str)

    def __init__(
        self,
        invite_service_url: str,
        invite_url: str,
        jwt: str,
        invite_items: Iterable,
        timeout: float = 15,
        parent=None,
    ):
        super().__init__(parent)
        self.invite_service_url = invite_service_url
        self.invite_url = invite_url
        self.jwt = jwt
        self.invite_items = list(invite_items)
        self.timeout = timeout

    def run(self):
        try:
            result = invite_people(
                self.invite_service_url,
                self.invite_url,
                self.jwt,
                self.invite_items,
                self.timeout,
            )
        except InviteServiceError as e:
            self.finished_fail.emit(e.reason)
            return
        except Exception as e:
            _log.exception("%s crashed", type(self).__name__)
            self.finished_fail.emit(str(e) or type(e).__name__)
            return
        self.finished_ok.emit(result)
