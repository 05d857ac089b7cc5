# models/schemas.py
from enum import Enum
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, AliasChoices, field_validator


class Severity(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


SEVERITY_ALIASES = {
    "baja": Severity.low,
    "low": Severity.low,
    "media": Severity.medium,
    "medium": Severity.medium,
    "alta": Severity.high,
    "high": Severity.high,
}


class StoreRecord(BaseModel):
    # store documents carry extra keys (ids, timestamps) we do not model,
    # and numeric phones or ids arrive as numbers
    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)


class Client(StoreRecord):
    name: Optional[str] = Field(None, validation_alias=AliasChoices("name", "nombre"))
    email: Optional[str] = None
    phone: Optional[str] = Field(None, validation_alias=AliasChoices("phone", "telefono"))


class AuditMeta(StoreRecord):
    id: Optional[str] = None
    date: Optional[str] = Field(None, validation_alias=AliasChoices("date", "fecha"))
    auditor: Optional[str] = None
    facility_type: Optional[str] = Field(
        None, validation_alias=AliasChoices("facility_type", "facilityType", "tipo_instalacion")
    )

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, v):
        return str(v) if v is not None else None


class Finding(StoreRecord):
    description: str = Field(validation_alias=AliasChoices("description", "descripcion"))
    severity: Severity = Field(validation_alias=AliasChoices("severity", "criticidad"))
    location: str = Field("", validation_alias=AliasChoices("location", "ubicacion"))

    @field_validator("severity", mode="before")
    @classmethod
    def _normalize_severity(cls, v):
        if isinstance(v, Severity):
            return v
        key = str(v or "").strip().lower()
        if key not in SEVERITY_ALIASES:
            raise ValueError(f"unknown severity: {v!r}")
        return SEVERITY_ALIASES[key]


class Recommendation(StoreRecord):
    title: str = Field(validation_alias=AliasChoices("title", "titulo"))
    description: str = Field("", validation_alias=AliasChoices("description", "descripcion"))
    estimated_savings: str = Field(
        "", validation_alias=AliasChoices("estimated_savings", "estimatedSavings", "ahorro_estimado")
    )


class AuditRecord(BaseModel):
    client: Optional[Client] = None
    audit: Optional[AuditMeta] = None
    findings: List[Finding] = []
    recommendations: List[Recommendation] = []


class ProjectedDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    document_number: str
    document_type: str
    generation_date: str
    generation_time: str

    client_name: str
    client_email: str = ""
    client_phone: str = ""

    audit_id: str
    audit_date: str
    auditor: str
    facility_type: str

    total_findings: int = 0
    total_recommendations: int = 0
    summary: str = ""

    findings: List[Finding] = []
    recommendations: List[Recommendation] = []


class RenderResult(BaseModel):
    success: bool = True
    content: bytes
    filename: str
    media_type: str
    format: str
    fallback: bool = False
    url: Optional[str] = None


class ProbeStatus(str, Enum):
    ok = "ok"
    unavailable = "unavailable"
    unknown = "unknown"


class ProbeResult(BaseModel):
    system: str
    status: ProbeStatus
    reachable: bool
    detail: str = ""


class GenerateRequest(BaseModel):
    api_key: str = ""
    audit_id: str = ""
    document_type: str = ""


class GeneratedDocument(BaseModel):
    filename: str
    document_type: str
    format: str
    url: Optional[str] = None
    size_bytes: int
    created_at: datetime
