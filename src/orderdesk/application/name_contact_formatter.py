"""Customer name and contact formatting for reports."""

from __future__ import annotations

from orderdesk.domain.exceptions import InvalidArgumentError
from orderdesk.domain.model.customer import Customer

DEFAULT_NAME_STYLE = 0
DEFAULT_CONTACT_STYLE = 0

# Styles 10..15 render styles 0..5 upper-cased
UPPERCASE_STYLE_OFFSET = 10


class NameContactFormatter:

    def format_name(self, customer: Customer, style: int = DEFAULT_NAME_STYLE) -> str:
        """Render a customer name:

            0: "Meyer, Eric"    10: "MEYER, ERIC"
            1: "Eric Meyer"     11: "ERIC MEYER"
            2: "Meyer, E."      12: "MEYER, E."
            3: "E. Meyer"       13: "E. MEYER"
            4: "Meyer"          14: "MEYER"
            5: "Eric"           15: "ERIC"

        Unknown styles fall back to 0.
        """
        if customer is None:
            raise InvalidArgumentError("argument customer is None")

        last = customer.last_name
        first = customer.first_name
        initial = first[:1].upper()

        if style == 0:
            return f"{last}, {first}"
        if style == 1:
            return f"{first} {last}"
        if style == 2:
            return f"{last}, {initial}."
        if style == 3:
            return f"{initial}. {last}"
        if style == 4:
            return last
        if style == 5:
            return first
        if UPPERCASE_STYLE_OFFSET <= style <= UPPERCASE_STYLE_OFFSET + 5:
            return self.format_name(customer, style - UPPERCASE_STYLE_OFFSET).upper()
        return self.format_name(customer, DEFAULT_NAME_STYLE)

    def format_contacts(self, customer: Customer, style: int = DEFAULT_CONTACT_STYLE) -> str:
        """Render a customer's contacts:

            0: first contact only    "eric98@yahoo.com"
            1: first contact + count "eric98@yahoo.com, (+1 contacts)"
            2: all contacts          "eric98@yahoo.com, (030) 3945-642298"

        Unknown styles fall back to 0.
        """
        if customer is None:
            raise InvalidArgumentError("argument customer is None")

        contacts = customer.contacts
        if style == 1:
            extension = f", (+{len(contacts) - 1} contacts)" if len(contacts) > 1 else ""
            return self.format_contacts(customer, 0) + extension
        if style == 2:
            return ", ".join(contacts)
        return contacts[0] if contacts else ""
