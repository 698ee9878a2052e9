"""Pushover alerts for failed series builds."""

from __future__ import annotations

import os

import requests

PUSHOVER_URL = "https://api.pushover.net/1/messages.json"


def pushover_credentials() -> tuple[str, str] | None:
    """Read (user key, API token) from the environment, or None if unset."""
    user_key = os.environ.get("PUSHOVER_USER_KEY", "")
    api_token = os.environ.get("PUSHOVER_API_TOKEN", "")
    if not user_key or not api_token:
        return None
    return user_key, api_token


def format_error_report(errors: list[str], context: str = "Series build") -> str:
    """Summarize collected error messages into one notification body."""
    if len(errors) == 1:
        return f"{context} failed:\n\n{errors[0]}"
    return f"{context} finished with {len(errors)} error(s):\n\n" + "\n".join(
        f"- {e}" for e in errors
    )


def send_error_notification(message: str, title: str = "Series Builder Error") -> bool:
    """Send an error notification via Pushover.

    Returns True if sent, False if credentials are missing or the send
    failed; HTTP errors are reported, not raised.
    """
    credentials = pushover_credentials()
    if credentials is None:
        print("  Pushover not configured (set PUSHOVER_USER_KEY and PUSHOVER_API_TOKEN)")
        return False

    user_key, api_token = credentials
    try:
        resp = requests.post(
            PUSHOVER_URL,
            data={
                "token": api_token,
                "user": user_key,
                "title": title,
                "message": message,
                "priority": 0,
            },
            timeout=10,
        )
        resp.raise_for_status()
    except requests.RequestException as e:
        print(f"  Failed to send Pushover notification: {e}")
        return False

    print(f"  Pushover notification sent: {title}")
    return True
