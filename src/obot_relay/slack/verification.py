"""Optional Slack request signature verification."""

from fastapi import HTTPException, Request
from slack_sdk.signature import SignatureVerifier


def verify_slack_signature(request: Request, body: bytes, signing_secret: str) -> None:
    """Verify the Slack signature headers against the raw body.

    Does nothing when no signing secret is configured. Must be given the exact
    bytes Slack signed, before any JSON parsing.

    Raises HTTPException(403) if the headers are missing or the signature is invalid.
    """
    if not signing_secret:
        return

    timestamp = request.headers.get("X-Slack-Request-Timestamp", "")
    signature = request.headers.get("X-Slack-Signature", "")

    verifier = SignatureVerifier(signing_secret=signing_secret)

    try:
        valid = bool(timestamp and signature) and verifier.is_valid(
            body=body, timestamp=timestamp, signature=signature
        )
    except ValueError:
        # Non-numeric timestamp header
        valid = False

    if not valid:
        raise HTTPException(status_code=403, detail="Invalid Slack signature")
