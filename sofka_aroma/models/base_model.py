from pydantic import BaseModel, ConfigDict
from typing import List, Optional, Union


DEFAULT_DISCOUNT = 10
DEFAULT_VALID_DAYS = 7


class CatalogRecord(BaseModel):
    """
    A scent entry of the catalog.
    Unknown keys in the catalog asset are ignored.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    aroma: str
    synonyms: Optional[List[str]] = None
    discount: Optional[Union[int, float]] = None
    validDays: Optional[Union[int, float]] = None

    @property
    def effective_discount(self) -> Union[int, float]:
        # 0 and null fall back to the default, same as an absent key
        return self.discount or DEFAULT_DISCOUNT

    @property
    def effective_valid_days(self) -> Union[int, float]:
        return self.validDays or DEFAULT_VALID_DAYS


class ValidationRequest(BaseModel):
    """
    Body of a validation request.
    """
    id: str
    guess: str
    sig: Optional[str] = None


class ValidationResult(BaseModel):
    """
    Outcome of a validation. Only `ok` is set on a negative result.
    """
    ok: bool
    discount: Optional[Union[int, float]] = None
    code: Optional[str] = None
    expiresAt: Optional[int] = None

    def to_body(self) -> dict:
        if not self.ok:
            return {"ok": False}
        return {
            "ok": True,
            "discount": self.discount,
            "code": self.code,
            "expiresAt": self.expiresAt,
        }
