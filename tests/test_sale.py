import pytest
from fastapi import HTTPException

from app.services import sale_service
from helpers import SALE_FIELDS, create_admin, create_employee, create_product, error_of, gql

CREATE_SALE = f"""
mutation($input: CreateSaleInput!) {{
    createSale(createSaleInput: $input) {{ {SALE_FIELDS} }}
}}
"""


@pytest.fixture
def shop(make_client):
    admin_client = make_client()
    admin = create_admin(admin_client)
    employee = create_employee(admin_client)
    product = create_product(admin_client)
    return admin_client, admin, employee, product


def _sell(admin_client, employee, product, amount=49.98, quantity=2):
    body = gql(
        admin_client,
        CREATE_SALE,
        {"input": {"employeeId": employee["id"], "productId": product["id"], "amount": amount, "quantity": quantity}},
    )
    assert "errors" not in body, body
    return body["data"]["createSale"]


def test_create_sale(shop):
    admin_client, admin, employee, product = shop

    sale = _sell(admin_client, employee, product, amount=50, quantity=2)

    assert sale["businessId"] == admin["businessId"]
    assert sale["amount"] == 50.0
    assert sale["quantity"] == 2
    assert sale["employee"] == {"id": employee["id"]}
    assert sale["product"] == {"id": product["id"]}


def test_sale_must_reference_own_business(shop, make_client):
    admin_client, _, employee, _ = shop
    rival_client = make_client()
    create_admin(rival_client, email="rival@example.com", first_name="Bea")
    foreign_product = create_product(rival_client, name="Phone")

    body = gql(
        admin_client,
        CREATE_SALE,
        {"input": {"employeeId": employee["id"], "productId": foreign_product["id"], "amount": 10, "quantity": 1}},
    )

    error = error_of(body)
    assert error["message"] == "Product not found"
    assert error["extensions"]["statusCode"] == 404


def test_sale_quantity_must_be_positive(shop):
    admin_client, _, employee, product = shop

    body = gql(
        admin_client,
        CREATE_SALE,
        {"input": {"employeeId": employee["id"], "productId": product["id"], "amount": 10, "quantity": 0}},
    )
    assert error_of(body)["extensions"]["statusCode"] == 400


def test_sale_queries(shop):
    admin_client, _, employee, product = shop
    sale = _sell(admin_client, employee, product)

    assert [s["id"] for s in gql(admin_client, "{ getSales { id } }")["data"]["getSales"]] == [sale["id"]]

    single = gql(admin_client, "query($id: ID!) { getSale(id: $id) { amount } }", {"id": sale["id"]})
    assert single["data"]["getSale"]["amount"] == 49.98

    by_employee = gql(
        admin_client, "query($id: ID!) { getSalesByEmployee(employeeId: $id) { id } }", {"id": employee["id"]}
    )["data"]["getSalesByEmployee"]
    assert [s["id"] for s in by_employee] == [sale["id"]]

    by_product = gql(
        admin_client, "query($id: ID!) { getSalesByProduct(productId: $id) { id } }", {"id": product["id"]}
    )["data"]["getSalesByProduct"]
    assert [s["id"] for s in by_product] == [sale["id"]]


def test_sales_by_unknown_employee_is_empty(shop):
    admin_client = shop[0]

    body = gql(admin_client, "query($id: ID!) { getSalesByEmployee(employeeId: $id) { id } }", {"id": "nobody"})
    assert body["data"]["getSalesByEmployee"] == []


def test_sales_by_empty_id_is_a_bad_request(shop):
    admin_client = shop[0]

    body = gql(admin_client, "query($id: ID!) { getSalesByProduct(productId: $id) { id } }", {"id": ""})

    error = error_of(body)
    assert error["message"] == "Product Id required"
    assert error["extensions"]["statusCode"] == 400


def test_missing_sale(shop):
    admin_client = shop[0]

    body = gql(admin_client, "query($id: ID!) { getSale(id: $id) { id } }", {"id": "missing"})

    error = error_of(body)
    assert error["message"] == "Sale not found"
    assert error["extensions"]["statusCode"] == 404


def test_update_and_delete_sale(shop):
    admin_client, _, employee, product = shop
    sale = _sell(admin_client, employee, product)

    updated = gql(
        admin_client,
        "mutation($id: ID!, $input: UpdateSaleInput!) { updateSale(id: $id, updateSaleInput: $input) { amount quantity } }",
        {"id": sale["id"], "input": {"amount": 74.97, "quantity": 3}},
    )
    assert updated["data"]["updateSale"] == {"amount": 74.97, "quantity": 3}

    deleted = gql(admin_client, "mutation($id: ID!) { deleteSale(id: $id) }", {"id": sale["id"]})
    assert deleted["data"]["deleteSale"] is True

    again = gql(admin_client, "mutation($id: ID!) { deleteSale(id: $id) }", {"id": sale["id"]})
    assert error_of(again)["extensions"]["statusCode"] == 404


def test_get_sale_requires_id(db):
    with pytest.raises(HTTPException) as exc_info:
        sale_service.get_sale(db, "", "biz-1")
    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == "Sale id is required"
