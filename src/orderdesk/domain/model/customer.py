"""Customer aggregate: a named person with an ordered list of contacts."""

from __future__ import annotations

import re
from dataclasses import InitVar, dataclass, field

from orderdesk.domain.exceptions import ValidationError

MIN_CONTACT_LENGTH = 6

# Characters stripped from a contact before it is stored
_CONTACT_SEPARATORS = re.compile(r"[\"\t\n;',]")


@dataclass
class Customer:
    """Aggregate root for customers.

    ``Customer("Eric Meyer")`` derives first and last name from a single
    string (see ``set_name``).  The id is assigned once, usually by the
    sample-data builder or when loading from storage.
    """

    name: InitVar[str | None] = None
    id: int | None = None
    first_name: str = ""
    last_name: str = ""
    _contacts: list[str] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self, name: str | None) -> None:
        if self.id is not None and self.id < 0:
            raise ValidationError(f"Customer ID cannot be negative, got {self.id}")
        if name is not None:
            self.set_name(name)

    # --- Identity -------------------------------------------------------------

    def assign_id(self, customer_id: int) -> Customer:
        if customer_id < 0:
            raise ValidationError(f"Customer ID cannot be negative, got {customer_id}")
        if self.id is not None and self.id != customer_id:
            raise ValidationError(
                f"Customer ID already assigned ({self.id}), cannot change to {customer_id}"
            )
        self.id = customer_id
        return self

    # --- Names ----------------------------------------------------------------

    def set_name(self, name: str) -> Customer:
        """Split a single name string into first and last name.

        Supported forms:
          "Eric Meyer"                     -> first="Eric", last="Meyer"
          "Khaled Saad Mohamed Abdelalim"  -> first="Khaled Saad Mohamed", last="Abdelalim"
          "Bayer, Anne" / "Bayer; Anne"    -> first="Anne", last="Bayer"
          "Meyer"                          -> first="", last="Meyer"
        """
        if not name or not name.strip():
            raise ValidationError("Customer name is required")

        name = name.strip()
        if "," in name or ";" in name:
            last, first = re.split(r"[,;]", name, maxsplit=1)
        else:
            parts = name.split()
            first, last = " ".join(parts[:-1]), parts[-1]

        self.first_name = first.strip()
        self.last_name = last.strip()
        return self

    def set_name_parts(self, first: str | None, last: str | None) -> Customer:
        self.first_name = (first or "").strip()
        self.last_name = (last or "").strip()
        return self

    # --- Contacts -------------------------------------------------------------

    @property
    def contacts(self) -> tuple[str, ...]:
        return tuple(self._contacts)

    @property
    def contacts_count(self) -> int:
        return len(self._contacts)

    def add_contact(self, contact: str) -> Customer:
        """Add a contact (email, phone, ...); duplicates are ignored."""
        if not contact:
            raise ValidationError("Contact is required")
        cleaned = _CONTACT_SEPARATORS.sub("", contact).strip()
        if len(cleaned) < MIN_CONTACT_LENGTH:
            raise ValidationError(
                f"Contact must have at least {MIN_CONTACT_LENGTH} characters: {contact!r}"
            )
        if cleaned not in self._contacts:
            self._contacts.append(cleaned)
        return self

    def remove_contact(self, index: int) -> None:
        if 0 <= index < len(self._contacts):
            del self._contacts[index]

    def clear_contacts(self) -> None:
        self._contacts.clear()
