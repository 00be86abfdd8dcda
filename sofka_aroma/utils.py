import hmac
import hashlib
import logging
import re
import time
import unicodedata
from random import choices
from string import ascii_uppercase, digits

from sofka_aroma.catalog.catalog import CatalogManager
from sofka_aroma.errors import InvalidInput, RecordNotFound, SignatureInvalid
from sofka_aroma.models.base_model import CatalogRecord, ValidationRequest, ValidationResult


CODE_PREFIX = "SOFKA"
CODE_SUFFIX_LENGTH = 6
MS_PER_DAY = 24 * 60 * 60 * 1000

_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")
_WHITESPACE = re.compile(r"[\s\ufeff]+")


def normalize(text: str = "") -> str:
    """
    Canonical form used to compare guesses: accents stripped, whitespace
    collapsed and trimmed, lowercased.
    """
    # lowercase first: lower() can emit combining marks (e.g. U+0130)
    text = unicodedata.normalize("NFD", (text or "").lower())
    text = _COMBINING_MARKS.sub("", text)
    return _WHITESPACE.sub(" ", text).strip()


def matches(guess: str, record: CatalogRecord) -> bool:
    """
    True if the guess equals the record's aroma or one of its synonyms
    once both sides are normalized.
    """
    wanted = normalize(guess)
    if wanted == normalize(record.aroma):
        return True
    if record.synonyms:
        return wanted in [normalize(s) for s in record.synonyms]
    return False


def sign_id(record_id: str, secret: str) -> str:
    """
    Hex HMAC-SHA256 of the id under the secret, as printed on signed QR links.
    """
    return hmac.new(secret.encode("utf-8"), record_id.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_signature(record_id, sig, secret) -> bool:
    """
    Verify the optional signature of an id using HMAC-SHA256.
    Always passes when no secret is configured.
    """
    if not secret:
        return True
    if not record_id or not sig:
        return False
    return hmac.compare_digest(sign_id(record_id, secret).encode("utf-8"), sig.encode("utf-8"))


def generate_code(record_id: str) -> str:
    """
    Generate a redemption code for the matched id.
    Returns a string like 'SOFKA-vanilla-7QK2ZD'.
    """
    random_string = ''.join(choices(ascii_uppercase + digits, k=CODE_SUFFIX_LENGTH))
    return f"{CODE_PREFIX}-{record_id}-{random_string}"


def now_ms() -> int:
    return int(time.time() * 1000)


def compute_expiry(valid_days, issued_at_ms: int = None) -> int:
    """
    Absolute epoch-millisecond timestamp `valid_days` after issuance.
    """
    if issued_at_ms is None:
        issued_at_ms = now_ms()
    return int(issued_at_ms + valid_days * MS_PER_DAY)


def parse_validation_request(data) -> ValidationRequest:
    """
    Build a ValidationRequest from a decoded JSON body.
    Raises InvalidInput when id or guess is missing, empty or not a string.
    """
    if not isinstance(data, dict):
        raise InvalidInput()
    record_id = data.get("id")
    guess = data.get("guess")
    if not (isinstance(record_id, str) and record_id) or not (isinstance(guess, str) and guess):
        raise InvalidInput()
    sig = data.get("sig")
    return ValidationRequest(id=record_id, guess=guess, sig=sig if isinstance(sig, str) else None)


def validate_guess(payload: ValidationRequest, catalog: CatalogManager, secret: str = "", issued_at_ms: int = None) -> ValidationResult:
    """
    Check the signature, look the id up and compare the guess.
    Returns a negative result when the guess does not match.
    Raises SignatureInvalid or RecordNotFound.
    """
    if not verify_signature(payload.id, payload.sig, secret):
        raise SignatureInvalid()

    record = catalog.get(payload.id)
    if record is None:
        raise RecordNotFound()

    if not matches(payload.guess, record):
        logging.info(f"No match for id={payload.id}")
        return ValidationResult(ok=False)

    code = generate_code(payload.id)
    expires_at = compute_expiry(record.effective_valid_days, issued_at_ms)
    logging.info(f"Code issued for id={payload.id}: {code}, expires at {expires_at}")
    return ValidationResult(
        ok=True,
        discount=record.effective_discount,
        code=code,
        expiresAt=expires_at,
    )
