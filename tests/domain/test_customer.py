"""Unit tests for the Customer aggregate."""

import pytest

from orderdesk.domain.exceptions import ValidationError
from orderdesk.domain.model.customer import Customer


class TestNameSplitting:

    def test_first_and_last(self):
        c = Customer("Eric Meyer")
        assert c.first_name == "Eric"
        assert c.last_name == "Meyer"

    def test_comma_form(self):
        c = Customer("Bayer, Anne")
        assert c.first_name == "Anne"
        assert c.last_name == "Bayer"

    def test_semicolon_form(self):
        c = Customer("Bayer; Anne")
        assert c.first_name == "Anne"
        assert c.last_name == "Bayer"

    def test_hyphenated_last_name(self):
        c = Customer("Tim Schulz-Mueller")
        assert c.first_name == "Tim"
        assert c.last_name == "Schulz-Mueller"

    def test_hyphenated_first_name(self):
        c = Customer("Nadine-Ulla Blumenfeld")
        assert c.first_name == "Nadine-Ulla"
        assert c.last_name == "Blumenfeld"

    def test_several_first_names(self):
        c = Customer("Khaled Saad Mohamed Abdelalim")
        assert c.first_name == "Khaled Saad Mohamed"
        assert c.last_name == "Abdelalim"

    def test_single_name_is_last_name(self):
        c = Customer("Meyer")
        assert c.first_name == ""
        assert c.last_name == "Meyer"

    def test_surrounding_whitespace_trimmed(self):
        c = Customer("  Eric   Meyer ")
        assert c.first_name == "Eric"
        assert c.last_name == "Meyer"

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Customer("   ")

    def test_set_name_parts(self):
        c = Customer().set_name_parts(" Eric ", None)
        assert c.first_name == "Eric"
        assert c.last_name == ""


class TestCustomerId:

    def test_id_unset_by_default(self):
        assert Customer("Eric Meyer").id is None

    def test_assign_id(self):
        c = Customer("Eric Meyer").assign_id(892474)
        assert c.id == 892474

    def test_negative_id_rejected(self):
        with pytest.raises(ValidationError, match="negative"):
            Customer("Eric Meyer").assign_id(-1)

    def test_negative_id_rejected_in_constructor(self):
        with pytest.raises(ValidationError, match="negative"):
            Customer("Eric Meyer", id=-5)

    def test_id_cannot_change(self):
        c = Customer("Eric Meyer", id=1)
        with pytest.raises(ValidationError, match="already assigned"):
            c.assign_id(2)

    def test_reassigning_same_id_is_noop(self):
        c = Customer("Eric Meyer", id=1)
        c.assign_id(1)
        assert c.id == 1


class TestContacts:

    def test_contacts_keep_insertion_order(self):
        c = Customer("Eric Meyer").add_contact("eric98@yahoo.com").add_contact("(030) 3945-642298")
        assert c.contacts == ("eric98@yahoo.com", "(030) 3945-642298")
        assert c.contacts_count == 2

    def test_duplicates_ignored(self):
        c = Customer("Eric Meyer").add_contact("eric98@yahoo.com").add_contact("eric98@yahoo.com")
        assert c.contacts == ("eric98@yahoo.com",)

    def test_separators_stripped(self):
        c = Customer("Eric Meyer").add_contact("  'eric98@yahoo.com';\t")
        assert c.contacts == ("eric98@yahoo.com",)

    def test_short_contact_rejected(self):
        with pytest.raises(ValidationError, match="at least 6"):
            Customer("Eric Meyer").add_contact("'abc',")

    def test_empty_contact_rejected(self):
        with pytest.raises(ValidationError, match="Contact is required"):
            Customer("Eric Meyer").add_contact("")

    def test_remove_contact(self):
        c = Customer("Eric Meyer").add_contact("eric98@yahoo.com").add_contact("(030) 3945-642298")
        c.remove_contact(0)
        assert c.contacts == ("(030) 3945-642298",)

    def test_remove_contact_out_of_range_ignored(self):
        c = Customer("Eric Meyer").add_contact("eric98@yahoo.com")
        c.remove_contact(5)
        assert c.contacts_count == 1

    def test_clear_contacts(self):
        c = Customer("Eric Meyer").add_contact("eric98@yahoo.com")
        c.clear_contacts()
        assert c.contacts == ()

    def test_contacts_is_a_copy(self):
        c = Customer("Eric Meyer").add_contact("eric98@yahoo.com")
        assert isinstance(c.contacts, tuple)
