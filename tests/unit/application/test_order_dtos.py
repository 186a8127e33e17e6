"""Tests for the pydantic order DTOs."""
import pytest
from pydantic import ValidationError

from orderflow.application import LineItemDTO, OrderDTO, PlaceOrderRequest
from orderflow.domain import LineItem, Money, Order, OrderId


def test_place_order_request_builds_line_items():
    request = PlaceOrderRequest.model_validate(
        {"items": [{"name": "Book", "price_cents": 4999}, {"name": "Keyboard", "price_cents": 12999}]}
    )

    assert request.to_line_items() == [
        LineItem("Book", Money(4999)),
        LineItem("Keyboard", Money(12999)),
    ]


def test_empty_request_is_allowed():
    assert PlaceOrderRequest().to_line_items() == []


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "Book", "price_cents": 49.99},
        {"name": "Book", "price_cents": "4999"},
        {"name": "Book", "price_cents": -1},
        {"name": "", "price_cents": 100},
    ],
)
def test_line_item_dto_rejects_bad_input(payload):
    with pytest.raises(ValidationError):
        LineItemDTO.model_validate(payload)


def test_order_dto_from_order():
    order = Order.create(OrderId(1), [LineItem("Book", Money(4999)), LineItem("Keyboard", Money(12999))])

    dto = OrderDTO.from_order(order)

    assert dto.model_dump() == {
        "order_id": 1,
        "items": [
            {"name": "Book", "price_cents": 4999},
            {"name": "Keyboard", "price_cents": 12999},
        ],
        "total_cents": 17998,
        "total_display": "$179.98",
    }
