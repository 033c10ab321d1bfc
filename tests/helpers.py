"""Test doubles and builders shared by the Entra user import tests."""

import base64
import json
from unittest.mock import MagicMock

from EntraUserImport.UserImportModels import UserRecord


class RecordingReporter:
    """Reporter double that keeps every event in memory."""

    def __init__(self):
        self.events = []

    def log(self, message, level="INFO"):
        self.events.append(("log", level, message))

    def info(self, message):
        self.log(message, "INFO")

    def error(self, message):
        self.log(message, "ERROR")

    def showProgress(self, activity, status, percent, currentOperation, completed=False):
        self.events.append(("progress", percent, currentOperation, completed))

    def status(self, message):
        self.events.append(("status", message))

    def logs(self, level=None):
        result = []
        for event in self.events:
            if event[0] == "log" and (level is None or event[1] == level):
                result.append((event[1], event[2]))
        return result


def makeAccessToken(claims):
    def encode(part):
        return base64.urlsafe_b64encode(json.dumps(part).encode("utf-8")).decode("ascii").rstrip("=")

    return f"{encode({'alg': 'RS256', 'typ': 'JWT'})}.{encode(claims)}.signature"


def fakeResponse(statusCode, body=None, text=""):
    response = MagicMock()
    response.status_code = statusCode
    response.json.return_value = body if body is not None else {}
    response.text = text or json.dumps(body or {})
    return response


def makeRecord(index=1, **overrides):
    values = {
        "displayName": f"User {index}",
        "userPrincipalName": f"user{index}@contoso.com",
        "password": "P@ss1234",
        "givenName": "User",
        "surname": str(index),
    }
    values.update(overrides)
    return UserRecord(**values)
