"""Models do extrator de transferências.

CandidateTransfer: saída bruta da LLM (campos opcionais, sem tipo garantido).
NormalizedTransfer: registro validado que cruza a fronteira de persistência.
ExtractionOutcome: nenhum / um / vários registros por mensagem.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from collections.abc import Iterable

# Campos de transferência na ordem de exibição no ledger
TRANSFER_FIELDS: tuple[str, ...] = (
    "date",
    "amount",
    "cuit",
    "dni",
    "recipient_name",
    "sender_name",
    "transaction_number",
    "cbu",
    "account_number",
    "alias",
    "bank_name",
    "branch",
    "reference",
    "transfer_type",
)

IDENTIFIER_FIELDS: frozenset[str] = frozenset({"cuit", "dni", "cbu", "account_number"})

# Pelo menos um destes deve existir para o candidato ser considerado real
REQUIRED_ANY_FIELDS: tuple[str, ...] = ("amount", "recipient_name", "transaction_number")


class TransferType(str, Enum):
    """Base de pagamento da transferência (mutuamente exclusivas)."""

    DIRECT = "Barrani"
    INVOICED = "Con Factura"


class ExtractionRequest(BaseModel):
    """Request imutável de extração (um por mensagem)."""

    model_config = ConfigDict(frozen=True)

    source_text: str


class CandidateTransfer(BaseModel):
    """Transferência como reportada pela LLM (sem validação)."""

    model_config = ConfigDict(extra="ignore")

    amount: Any = None
    cuit: Any = None
    dni: Any = None
    cbu: Any = None
    account_number: Any = None
    recipient_name: Any = None
    sender_name: Any = None
    date: Any = None
    transaction_number: Any = None
    reference: Any = None
    alias: Any = None
    branch: Any = None
    bank_name: Any = None
    transfer_type: Any = None


class NormalizedTransfer(BaseModel):
    """Transferência normalizada, pronta para o ledger."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    amount: int | None = Field(default=None, ge=0)
    cuit: str | None = None
    dni: str | None = None
    cbu: str | None = None
    account_number: str | None = None
    recipient_name: str | None = None
    sender_name: str | None = None
    date: str | None = None
    transaction_number: str | None = None
    reference: str | None = None
    alias: str | None = None
    branch: str | None = None
    bank_name: str | None = None
    transfer_type: TransferType = TransferType.DIRECT

    @field_validator("cuit", "dni", "cbu", "account_number")
    @classmethod
    def _digits_only(cls, value: str | None) -> str | None:
        if value is not None and not value.isdigit():
            raise ValueError("identificador deve conter apenas dígitos")
        return value

    def has_identifying_fields(self) -> bool:
        """True se possui valor, nome principal ou número de operação."""
        return any(getattr(self, name) is not None for name in REQUIRED_ANY_FIELDS)

    def as_row_values(self) -> list[str | int]:
        """Valores na ordem de TRANSFER_FIELDS (ausente -> "")."""
        values: list[str | int] = []
        for name in TRANSFER_FIELDS:
            value = getattr(self, name)
            if isinstance(value, TransferType):
                values.append(value.value)
            elif value is None:
                values.append("")
            else:
                values.append(value)
        return values


OutcomeKind = Literal["none", "one", "many"]


@dataclass(frozen=True, slots=True)
class ExtractionOutcome:
    """Resultado da extração de uma mensagem."""

    kind: OutcomeKind
    records: tuple[NormalizedTransfer, ...] = field(default_factory=tuple)

    @classmethod
    def no_transfer_found(cls) -> ExtractionOutcome:
        return cls(kind="none")

    @classmethod
    def from_records(cls, records: Iterable[NormalizedTransfer]) -> ExtractionOutcome:
        """Monta One/Many/None a partir da lista (ordem preservada)."""
        items = tuple(records)
        if not items:
            return cls.no_transfer_found()
        if len(items) == 1:
            return cls(kind="one", records=items)
        return cls(kind="many", records=items)

    @property
    def is_empty(self) -> bool:
        return self.kind == "none"
