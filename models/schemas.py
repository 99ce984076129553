"""Data models for companies, users and aggregation results."""
from enum import Enum
from typing import Any, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator, model_validator


class EmailStatus(str, Enum):
    """Tri-state email flag of a user record."""
    SENT = "sent"
    NOT_SENT = "not_sent"
    UNKNOWN = "unknown"

    @classmethod
    def from_json(cls, value: Any) -> "EmailStatus":
        """Map a JSON ``true``/``false``/``null`` onto the enum.

        Raises:
            ValueError: For any other value, including plain strings
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.UNKNOWN
        if value is True:
            return cls.SENT
        if value is False:
            return cls.NOT_SENT
        raise ValueError(f"email_status must be true, false or null, got {value!r}")


class Company(BaseModel):
    """Company record."""
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    top_up: int = Field(..., ge=0)
    email_status: Optional[StrictBool] = None

    def emails_enabled(self) -> bool:
        """Email goes out only when email_status is exactly ``true``."""
        return self.email_status is True


class User(BaseModel):
    """User record with a running token balance."""
    model_config = ConfigDict(extra="ignore")

    id: int
    first_name: str
    last_name: str
    email: str
    company_id: int
    email_status: EmailStatus = EmailStatus.UNKNOWN
    active_status: StrictBool
    tokens: int
    new_token_balance: Optional[int] = None

    @field_validator('email_status', mode='before')
    @classmethod
    def parse_email_status(cls, v):
        """Accept only JSON booleans or null."""
        return EmailStatus.from_json(v)

    @model_validator(mode='after')
    def init_token_balance(self):
        """Start the running balance at the initial token count."""
        if self.new_token_balance is None:
            self.new_token_balance = self.tokens
        return self

    def is_active(self) -> bool:
        """True only when active_status is exactly ``true``."""
        return self.active_status is True

    def opted_out(self) -> bool:
        """Only an explicit ``false`` counts as opting out of email."""
        return self.email_status == EmailStatus.NOT_SENT

    def reset_balance(self) -> None:
        """Drop any earlier top-ups, back to the initial token count."""
        self.new_token_balance = self.tokens

    def top_up(self, amount: int) -> None:
        """Add ``amount`` to the running balance."""
        self.new_token_balance += amount


class AggregationResult(BaseModel):
    """Per-company outcome of one aggregation pass."""
    model_config = ConfigDict(frozen=True)

    company: Company
    users_emailed: Tuple[User, ...] = ()
    users_not_emailed: Tuple[User, ...] = ()
    total_tops_up: int = 0


class ProcessingOutcome(BaseModel):
    """Either the ordered aggregation results or the load errors, never both."""
    results: List[AggregationResult] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)

    @model_validator(mode='after')
    def check_exclusive(self):
        """Reject an outcome carrying both results and errors."""
        if self.results and self.errors:
            raise ValueError("An outcome cannot carry both results and errors")
        return self

    @classmethod
    def success(cls, results: List[AggregationResult]) -> "ProcessingOutcome":
        """Outcome of a pass that loaded both inputs."""
        return cls(results=results)

    @classmethod
    def failure(cls, *errors: str) -> "ProcessingOutcome":
        """Outcome of a pass that stopped on a load error."""
        return cls(errors=list(errors))

    @property
    def has_errors(self) -> bool:
        """True when loading failed."""
        return bool(self.errors)
