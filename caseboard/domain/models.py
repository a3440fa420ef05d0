"""
models.py - Domain models
Single responsibility: typed containers for marketplace records, validated
from API payloads at the boundary.
"""
from dataclasses import dataclass
from typing import Any, Optional


def _pick(payload: dict, *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = payload.get(key)
        if value is not None:
            return value
    return default


def _as_str(value: Any, default: str = "") -> str:
    """Scalars become text; objects, lists and booleans fall back to the default."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return default


def _pick_str(payload: dict, *keys: str, default: str = "") -> str:
    return _as_str(_pick(payload, *keys), default)


def _pick_timestamp(payload: dict, *keys: str) -> str | None:
    # ISO strings only; epoch numbers and objects are dropped
    value = _pick(payload, *keys)
    if isinstance(value, str) and value.strip():
        return value
    return None


def _require_mapping(payload: Any, kind: str) -> dict:
    if not isinstance(payload, dict):
        raise ValueError(f"{kind} payload must be an object, got {type(payload).__name__}")
    return payload


def _require_id(payload: dict, kind: str) -> str:
    value = _as_str(_pick(payload, "_id", "id"))
    if value == "":
        raise ValueError(f"{kind} payload has no id")
    return value


def _person_name(value: Any) -> str:
    """Populated refs arrive as {"_id", "name", "email"}; bare ids as strings."""
    if isinstance(value, dict):
        return _pick_str(value, "name") or _pick_str(value, "email")
    return ""


def _case_ref(value: Any) -> tuple[str, str]:
    """(title, caseNumber) of a populated case ref."""
    if isinstance(value, dict):
        return _pick_str(value, "title"), _pick_str(value, "caseNumber")
    return "", ""


def _as_float(value: Any, default: float = 0.0) -> float:
    if isinstance(value, bool):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _as_int(value: Any, default: int = 0) -> int:
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_bool(value: Any, default: bool) -> bool:
    return value if isinstance(value, bool) else default


@dataclass
class Case:
    id: str
    title: str
    case_number: str = ""
    description: str = ""
    status: str = "pending"
    priority: str = "medium"
    case_type: str = ""
    progress: int = 0
    client_name: str = ""
    lawyer_name: str = ""
    next_hearing: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    def __getitem__(self, key):
        return getattr(self, key)

    @classmethod
    def from_dict(cls, payload: Any) -> "Case":
        payload = _require_mapping(payload, "case")
        hearing = payload.get("nextHearing")
        hearing = _pick_timestamp(hearing, "date") if isinstance(hearing, dict) else _pick_timestamp(payload, "nextHearing")
        return cls(
            id=_require_id(payload, "case"),
            title=_pick_str(payload, "title"),
            case_number=_pick_str(payload, "caseNumber", "case_number"),
            description=_pick_str(payload, "description"),
            status=_pick_str(payload, "status", default="pending"),
            priority=_pick_str(payload, "priority", default="medium"),
            case_type=_pick_str(payload, "caseType", "case_type"),
            progress=_as_int(payload.get("progress")),
            client_name=_person_name(payload.get("client")),
            lawyer_name=_person_name(payload.get("lawyer")),
            next_hearing=hearing,
            created_at=_pick_timestamp(payload, "createdAt", "created_at"),
            updated_at=_pick_timestamp(payload, "updatedAt", "updated_at"),
        )


@dataclass
class Client:
    id: str
    name: str
    email: str = ""
    status: str = "Active"
    phone: str = ""
    case_count: int = 0

    def __getitem__(self, key):
        return getattr(self, key)

    @classmethod
    def from_dict(cls, payload: Any) -> "Client":
        payload = _require_mapping(payload, "client")
        return cls(
            id=_require_id(payload, "client"),
            name=_pick_str(payload, "name"),
            email=_pick_str(payload, "email"),
            status=_pick_str(payload, "status", default="Active"),
            phone=_pick_str(payload, "phone"),
            case_count=_as_int(_pick(payload, "caseCount", "cases", "case_count")),
        )


@dataclass
class Document:
    id: str
    name: str
    type: str = ""
    status: str = "pending"
    uploaded_at: str | None = None
    case_id: Optional[str] = None
    size: int = 0

    def __getitem__(self, key):
        return getattr(self, key)

    @classmethod
    def from_dict(cls, payload: Any) -> "Document":
        payload = _require_mapping(payload, "document")
        case_ref = _pick(payload, "caseId", "case")
        if isinstance(case_ref, dict):
            case_ref = _pick(case_ref, "_id", "id")
        return cls(
            id=_require_id(payload, "document"),
            name=_pick_str(payload, "name", "originalName", "filename"),
            type=_pick_str(payload, "type", "documentType", "mimeType"),
            status=_pick_str(payload, "status", default="pending"),
            uploaded_at=_pick_timestamp(payload, "uploadedAt", "createdAt"),
            case_id=_as_str(case_ref) or None,
            size=_as_int(payload.get("size")),
        )


@dataclass
class Order:
    id: str
    title: str = ""
    status: str = "created"
    amount_cents: int = 0
    currency: str = "inr"
    client_name: str = ""
    lawyer_name: str = ""
    case_number: str = ""
    created_at: str | None = None

    def __getitem__(self, key):
        return getattr(self, key)

    @classmethod
    def from_dict(cls, payload: Any) -> "Order":
        payload = _require_mapping(payload, "order")
        case_title, case_number = _case_ref(payload.get("caseId"))
        return cls(
            id=_require_id(payload, "order"),
            title=_pick_str(payload, "title", "description") or case_title,
            status=_pick_str(payload, "status", default="created"),
            amount_cents=_as_int(_pick(payload, "amountCents", "amount_cents")),
            currency=_pick_str(payload, "currency", default="inr"),
            client_name=_person_name(_pick(payload, "clientId", "client")),
            lawyer_name=_person_name(_pick(payload, "lawyerId", "lawyer")),
            case_number=case_number,
            created_at=_pick_timestamp(payload, "createdAt", "created_at"),
        )


@dataclass
class RateCard:
    id: str
    title: str
    practice_area: str = ""
    service_type: str = ""
    base_rate: float = 0.0
    is_active: bool = True
    average_rating: float = 0.0
    total_bookings: int = 0

    def __getitem__(self, key):
        return getattr(self, key)

    @property
    def availability(self) -> str:
        return "active" if self.is_active else "inactive"

    @classmethod
    def from_dict(cls, payload: Any) -> "RateCard":
        payload = _require_mapping(payload, "rate card")
        availability = payload.get("availability")
        metrics = payload.get("metrics")
        is_active = availability.get("isActive") if isinstance(availability, dict) else None
        if not isinstance(is_active, bool):
            is_active = _as_bool(payload.get("isActive"), True)
        return cls(
            id=_require_id(payload, "rate card"),
            title=_pick_str(payload, "title"),
            practice_area=_pick_str(payload, "practiceArea", "practice_area"),
            service_type=_pick_str(payload, "serviceType", "service_type"),
            base_rate=_as_float(_pick(payload, "baseRate", "base_rate")),
            is_active=is_active,
            average_rating=_as_float(payload.get("averageRating")),
            total_bookings=_as_int(metrics.get("totalBookings") if isinstance(metrics, dict) else None),
        )


@dataclass
class Hearing:
    id: str
    title: str
    case_title: str = ""
    case_number: str = ""
    type: str = "hearing"
    status: str = "scheduled"
    date: str | None = None
    time: str = ""
    duration: int = 60
    location: str = ""
    is_virtual: bool = False

    def __getitem__(self, key):
        return getattr(self, key)

    @classmethod
    def from_dict(cls, payload: Any) -> "Hearing":
        payload = _require_mapping(payload, "hearing")
        case_title, case_number = _case_ref(payload.get("case"))
        return cls(
            id=_require_id(payload, "hearing"),
            title=_pick_str(payload, "title"),
            case_title=case_title,
            case_number=case_number,
            type=_pick_str(payload, "type", default="hearing"),
            status=_pick_str(payload, "status", default="scheduled"),
            date=_pick_timestamp(payload, "date"),
            time=_pick_str(payload, "time"),
            duration=_as_int(payload.get("duration"), 60),
            location=_pick_str(payload, "location", "courtroom"),
            is_virtual=_as_bool(payload.get("isVirtual"), False),
        )


@dataclass
class Notification:
    id: str
    title: str
    message: str = ""
    type: str = "system"
    priority: str = "medium"
    is_read: bool = False
    case_title: str = ""
    action_required: bool = False
    created_at: str | None = None

    def __getitem__(self, key):
        return getattr(self, key)

    @property
    def read_state(self) -> str:
        return "read" if self.is_read else "unread"

    @classmethod
    def from_dict(cls, payload: Any) -> "Notification":
        payload = _require_mapping(payload, "notification")
        case_title, _ = _case_ref(payload.get("relatedCase"))
        return cls(
            id=_require_id(payload, "notification"),
            title=_pick_str(payload, "title"),
            message=_pick_str(payload, "message"),
            type=_pick_str(payload, "type", default="system"),
            priority=_pick_str(payload, "priority", default="medium"),
            is_read=_as_bool(payload.get("isRead"), False),
            case_title=case_title,
            action_required=_as_bool(payload.get("actionRequired"), False),
            created_at=_pick_timestamp(payload, "createdAt", "created_at"),
        )
