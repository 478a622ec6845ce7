"""
Decoding of Discourse response bodies into result envelopes.

All assumptions about the platform's JSON schema live here.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from ..exceptions import DomainError
from .models import Result, Honeypot, NOT_FOUND

logger = logging.getLogger(__name__)


def parse_json(body: Optional[str]) -> Any:
    """
    Parse a response body.

    Returns:
        Decoded JSON, or None for an empty body

    Raises:
        ValueError: If the body is not valid JSON
    """
    if body is None or not body.strip():
        return None
    return json.loads(body)


def extract_errors(payload: Any) -> List[str]:
    """Extract error messages from an API error payload."""
    if not isinstance(payload, dict):
        return []

    messages: List[str] = []
    errors = payload.get("errors")

    if isinstance(errors, list):
        messages.extend(str(err) for err in errors if err)
    elif isinstance(errors, dict):
        # field -> [messages] as returned by user creation
        for field_name, field_errors in errors.items():
            if isinstance(field_errors, list):
                for err in field_errors:
                    messages.append(f"{field_name}: {err}")
            else:
                messages.append(f"{field_name}: {field_errors}")
    elif errors:
        messages.append(str(errors))

    if not messages and payload.get("error"):
        messages.append(str(payload["error"]))

    if not messages and ("error_type" in payload or payload.get("success") is False):
        message = payload.get("message") or payload.get("error_type")
        if message:
            messages.append(str(message))

    return messages


def is_error_payload(payload: Any) -> bool:
    if not isinstance(payload, dict):
        return False
    if payload.get("errors") or payload.get("error") or "error_type" in payload:
        return True
    return payload.get("success") is False


def _load(body: Optional[str], operation: str) -> Any:
    """Parse JSON, raising DomainError naming the operation on garbage."""
    try:
        return parse_json(body)
    except ValueError:
        logger.debug(f"Unparseable response for {operation}: {body[:200]!r}")
        raise DomainError(f"Unexpected response from {operation}", details=body)


def decode_status(body: Optional[str], operation: str) -> Result:
    """
    Decode the response of a mutation (activate, approve, suspend, ...).

    An empty body counts as success; an error payload or an unparseable
    body becomes a failure envelope.
    """
    try:
        payload = _load(body, operation)
    except DomainError as e:
        return Result.fail(e.message)

    if payload is None:
        return Result.ok({})

    if is_error_payload(payload):
        return Result.fail(*(extract_errors(payload) or [f"{operation} failed"]))

    return Result.ok(payload)


def decode_user(body: Optional[str], username: str) -> Result:
    """
    Decode GET users/{username}.json into the user record.

    Only an empty or unparseable body, or an error_type of "not_found",
    counts as a missing user. Any other error payload (rate limit, bad
    API key, server error) is a lookup failure with its own error_type.
    """
    try:
        payload = _load(body, f"user lookup for {username}")
    except DomainError:
        payload = None

    if payload is None:
        return Result.fail(f"User not found: {username}", error_type=NOT_FOUND)

    user = payload.get("user") if isinstance(payload, dict) else None
    if isinstance(user, dict) and user.get("id") is not None:
        return Result.ok(user)

    errors = extract_errors(payload)
    error_type = payload.get("error_type") if isinstance(payload, dict) else None

    if error_type == NOT_FOUND:
        return Result.fail(f"User not found: {username}", *errors, error_type=NOT_FOUND)

    return Result.fail(
        f"Could not look up user: {username}",
        *errors,
        error_type=error_type or "lookup_failed",
    )


def decode_user_id(body: Optional[str], username: str) -> Result:
    """Decode GET users/{username}.json into the numeric user id."""
    result = decode_user(body, username)
    if not result.success:
        return result

    try:
        return Result.ok(int(result.data["id"]))
    except (TypeError, ValueError):
        return Result.fail(f"Could not look up user: {username} (invalid id)", error_type="lookup_failed")


def decode_honeypot(body: Optional[str]) -> Result:
    """Decode GET users/hp.json into a Honeypot."""
    try:
        payload = _load(body, "honeypot fetch")
    except DomainError as e:
        return Result.fail(e.message)

    if not isinstance(payload, dict):
        return Result.fail("Honeypot response is empty")

    challenge = payload.get("challenge")
    value = payload.get("value")
    if not isinstance(challenge, str) or not isinstance(value, str):
        return Result.fail(
            "Honeypot response is missing challenge or value",
            *extract_errors(payload),
        )

    return Result.ok(Honeypot(challenge=challenge, value=value))


def decode_created_user(body: Optional[str], username: str) -> Result:
    """Decode POST users into {user_active, user_id, message}."""
    generic = f"User was not created: {username}"

    try:
        payload = _load(body, f"user creation for {username}")
    except DomainError:
        return Result.fail(generic)

    if not isinstance(payload, dict) or payload.get("success") is not True:
        return Result.fail(*(extract_errors(payload) or [generic]))

    return Result.ok({
        "user_active": bool(payload.get("active")),
        "user_id": payload.get("user_id"),
        "message": payload.get("message", ""),
    })


def decode_category(body: Optional[str], name: str) -> Result:
    """Decode POST categories.json into the category record."""
    result = decode_status(body, f"category creation for {name}")
    if not result.success:
        return result

    category = result.data.get("category") if isinstance(result.data, dict) else None
    if not isinstance(category, dict):
        return Result.fail(f"Category was not created: {name}")

    return Result.ok(category)


def decode_post(body: Optional[str], operation: str) -> Result:
    """Decode POST posts.json (topics and replies) into the post record."""
    result = decode_status(body, operation)
    if not result.success:
        return result

    post: Dict[str, Any] = result.data if isinstance(result.data, dict) else {}
    if post.get("id") is None:
        return Result.fail(f"{operation} returned no post")

    return Result.ok(post)


def decode_latest_topics(body: Optional[str]) -> Result:
    """Decode GET latest.json into topic_list.topics, order preserved."""
    result = decode_status(body, "latest topics")
    if not result.success:
        return result

    topic_list = result.data.get("topic_list") if isinstance(result.data, dict) else None
    topics = topic_list.get("topics") if isinstance(topic_list, dict) else None
    if not isinstance(topics, list):
        return Result.fail("Latest topics response has no topic_list.topics")

    return Result.ok(topics)
