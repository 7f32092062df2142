"""Order schema validation — nested items and status enum."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from storefront.schemas.order import CreateOrder, PatchOrder


def _item(**override):
    return {"productId": str(uuid4()), "unitPrice": 10, "quantity": 2, **override}


def test_create_order_parses_items():
    order = CreateOrder.model_validate(
        {"userId": str(uuid4()), "orderItems": [_item(), _item(quantity=1)]},
    )
    assert len(order.order_items) == 2
    assert order.order_items[0].unit_price == 10.0


def test_create_order_allows_no_items():
    order = CreateOrder.model_validate({"userId": str(uuid4()), "orderItems": []})
    assert order.order_items == []


@pytest.mark.parametrize("override", [
    {"quantity": 0},
    {"quantity": "2"},
    {"unitPrice": -1},
    {"productId": "not-a-uuid"},
])
def test_invalid_items_rejected(override):
    with pytest.raises(ValidationError):
        CreateOrder.model_validate(
            {"userId": str(uuid4()), "orderItems": [_item(**override)]},
        )


def test_user_id_required():
    with pytest.raises(ValidationError):
        CreateOrder.model_validate({"orderItems": []})


def test_patch_order_status():
    assert PatchOrder.model_validate({"status": "COMPLETE"}).status == "COMPLETE"
    with pytest.raises(ValidationError):
        PatchOrder.model_validate({"status": "SHIPPED"})
