"""Sample customers, articles and orders used to seed an empty data store."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from orderdesk.domain.lookup import find
from orderdesk.domain.model.article import Article
from orderdesk.domain.model.customer import Customer
from orderdesk.domain.model.order import Order
from orderdesk.domain.model.value_objects import Tax

logger = logging.getLogger(__name__)


@dataclass
class SampleData:
    customers: list[Customer]
    articles: list[Article]
    orders: list[Order]


def build() -> SampleData:
    data = SampleData(customers=[], articles=[], orders=[])
    _build_base(data)
    _build_more(data)
    logger.info(
        "Built sample data: %d customers, %d articles, %d orders",
        len(data.customers), len(data.articles), len(data.orders),
    )
    return data


def _build_base(data: SampleData) -> None:
    eric = (
        Customer("Eric Meyer", id=892474)
        .add_contact("eric98@yahoo.com")
        .add_contact("(030) 3945-642298")
    )
    anne = (
        Customer("Bayer, Anne", id=643270)
        .add_contact("(030) 3481-23352")
        .add_contact("fax: (030)23451356")
    )
    tim = Customer("Tim Schulz-Mueller", id=286516).add_contact("tim2346@gmx.de")
    nadine = Customer("Nadine-Ulla Blumenfeld", id=412396).add_contact("+49 152-92454")
    khaled = Customer("Khaled Saad Mohamed Abdelalim", id=456454).add_contact("+49 1524-12948210")
    data.customers.extend([eric, anne, tim, nadine, khaled])

    cup = Article("Tasse", 299, id="SKU-458362")
    mug = Article("Becher", 149, id="SKU-693856")
    pot = Article("Kanne", 1999, id="SKU-518957")
    plate = Article("Teller", 649, id="SKU-638035")
    # reduced tax rate on books
    book_java = Article('Buch "Java"', 4990, id="SKU-278530", tax=Tax.REDUCED_VAT)
    book_oop = Article('Buch "OOP"', 7995, id="SKU-425378", tax=Tax.REDUCED_VAT)
    data.articles.extend([cup, mug, pot, plate, book_java, book_oop])

    o8592 = (
        Order(eric, id="8592356245")
        .add_item(plate, 4)
        .add_item(mug, 8)
        .add_item(book_oop, 1)
        .add_item(cup, 4)
    )
    o3563 = Order(anne, id="3563561357").add_item(plate, 2).add_item(cup, 2)
    o5234 = Order(eric, id="5234968294").add_item(pot, 1)
    o6135 = (
        Order(nadine, id="6135735635")
        .add_item(plate, 12)
        .add_item(book_java, 1)
        .add_item(book_oop, 1)
    )
    data.orders.extend([o8592, o3563, o5234, o6135])


def _build_more(data: SampleData) -> None:
    """Extend the base set, resolving existing entities by id."""
    eric = find(data.customers, lambda c: c.id == 892474).get()
    cup = find(data.articles, lambda a: a.id == "SKU-458362").get()
    mug = find(data.articles, lambda a: a.id == "SKU-693856").get()
    pot = find(data.articles, lambda a: a.id == "SKU-518957").get()
    book_java = find(data.articles, lambda a: a.id == "SKU-278530").get()

    pan = Article("Pfanne", 4999, id="SKU-300926")
    helmet = Article("Fahrradhelm", 16900, id="SKU-663942")
    cycling_map = Article("Fahrradkarte", 695, id="SKU-583978", tax=Tax.REDUCED_VAT)

    lena = Customer("Lena Neumann", id=651286).add_contact("lena228@gmail.com")

    o7356 = Order(eric, id="7356613535").add_item(helmet, 1).add_item(cycling_map, 1)
    o4450 = (
        Order(eric, id="4450735661")
        .add_item(cup, 3)
        .add_item(mug, 3)
        .add_item(pot, 1)
    )
    o6173 = Order(lena, id="6173535635").add_item(book_java, 1).add_item(cycling_map, 1)

    data.customers.append(lena)
    data.articles.extend([pan, helmet, cycling_map])
    data.orders.extend([o7356, o4450, o6173])
