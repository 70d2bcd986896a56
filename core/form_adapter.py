"""Editable field state for create/edit forms.

A `FormAdapter` maps an existing record (or nothing, when creating) to
field values, coerces what the widgets hand back, checks required fields and
emits a `FormIntent`. It never touches an `EntityStore`; applying the intent
is the caller's job.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field, is_dataclass
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from core.errors import ValidationFailed

TEXT = "text"
TEXTAREA = "textarea"
FLOAT = "float"
INT = "int"
DATE = "date"
CHOICE = "choice"


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    kind: str = TEXT
    required: bool = False
    options: Tuple[str, ...] = ()
    placeholder: str = ""

    def empty_value(self, today: Callable[[], date] = date.today) -> Any:
        if self.kind == FLOAT:
            return 0.0
        if self.kind == INT:
            return 0
        if self.kind == DATE:
            return today().isoformat()
        if self.kind == CHOICE and self.options:
            return self.options[0]
        return ""

    def coerce(self, raw: Any) -> Any:
        """Convert a widget value to the field's type.

        Numbers that fail to parse become 0 instead of being rejected.
        """
        if self.kind == FLOAT:
            try:
                return float(raw)
            except (TypeError, ValueError):
                return 0.0
        if self.kind == INT:
            try:
                return int(float(raw))
            except (TypeError, ValueError):
                return 0
        if self.kind == DATE:
            if hasattr(raw, "isoformat"):
                return raw.isoformat()
            return "" if raw is None else str(raw)
        return "" if raw is None else str(raw)


@dataclass(frozen=True)
class FormIntent:
    """What the form asks the page to do once submitted."""

    action: str
    draft: Dict[str, Any]
    record_id: Optional[int] = None

    @property
    def is_update(self) -> bool:
        return self.action == "update"


def record_values(record: Any) -> Dict[str, Any]:
    if is_dataclass(record):
        return asdict(record)
    return dict(record)


@dataclass
class FormAdapter:
    fields: Sequence[FieldSpec]
    record: Any = None
    id_field: str = "id"
    today: Callable[[], date] = date.today
    values: Dict[str, Any] = field(init=False)

    def __post_init__(self) -> None:
        self.values = self.initial_values()

    @property
    def record_id(self) -> Optional[int]:
        if self.record is None:
            return None
        return record_values(self.record)[self.id_field]

    @property
    def is_edit(self) -> bool:
        return self.record is not None

    def spec(self, name: str) -> FieldSpec:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise KeyError(name)

    def initial_values(self) -> Dict[str, Any]:
        source = record_values(self.record) if self.record is not None else {}
        values = {}
        for spec in self.fields:
            value = source.get(spec.name)
            values[spec.name] = spec.empty_value(self.today) if value is None else value
        return values

    def set(self, name: str, raw: Any) -> Any:
        value = self.spec(name).coerce(raw)
        self.values[name] = value
        return value

    def update(self, raw_values: Dict[str, Any]) -> None:
        for name, raw in raw_values.items():
            self.set(name, raw)

    def missing_fields(self) -> List[str]:
        missing = []
        for spec in self.fields:
            if not spec.required:
                continue
            value = self.values.get(spec.name)
            if isinstance(value, str) and not value.strip():
                missing.append(spec.name)
            elif value is None:
                missing.append(spec.name)
        return missing

    def submit(self) -> FormIntent:
        missing = self.missing_fields()
        if missing:
            raise ValidationFailed(missing)
        draft = {spec.name: self.values[spec.name] for spec in self.fields}
        if self.is_edit:
            return FormIntent("update", draft, self.record_id)
        return FormIntent("create", draft)

    def cancel(self) -> Dict[str, Any]:
        """Drop every edit and return the pristine values."""
        self.values = self.initial_values()
        return dict(self.values)
