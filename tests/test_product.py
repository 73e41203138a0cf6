import asyncio

from app.policies.ability import Principal
from app.schemas.products import ProductCreate
from app.services import product_service
from helpers import FakeStorage, FakeUpload, PRODUCT_FIELDS, create_admin, create_customer, create_product, error_of, gql


def test_create_product(make_client):
    admin_client = make_client()
    admin = create_admin(admin_client)

    product = create_product(admin_client, category="Electronics", price=19.999)

    assert product["businessId"] == admin["businessId"]
    assert product["updatedBy"] == admin["id"]
    assert product["price"] == 20.0
    assert product["image"] is None


def test_product_price_must_be_positive(make_client):
    admin_client = make_client()
    create_admin(admin_client)

    body = gql(
        admin_client,
        "mutation($input: CreateProductInput!) { createProduct(createProductInput: $input) { id } }",
        {"input": {"name": "Free lunch", "price": 0}},
    )
    assert error_of(body)["extensions"]["statusCode"] == 400


def test_product_price_below_one_cent_is_rejected(make_client):
    admin_client = make_client()
    create_admin(admin_client)

    body = gql(
        admin_client,
        "mutation($input: CreateProductInput!) { createProduct(createProductInput: $input) { id } }",
        {"input": {"name": "Gum", "price": 0.004}},
    )
    error = error_of(body)
    assert error["extensions"]["statusCode"] == 400
    assert "Price must be at least 0.01" in error["message"]


def test_admin_sees_only_own_catalogue(make_client):
    first_client, second_client = make_client(), make_client()
    create_admin(first_client)
    create_admin(second_client, email="rival@example.com", first_name="Bea")
    mine = create_product(first_client, name="Laptop")
    theirs = create_product(second_client, name="Phone")

    products = gql(first_client, "{ getProducts { id } }")["data"]["getProducts"]
    assert [p["id"] for p in products] == [mine["id"]]

    body = gql(first_client, "query($id: ID!) { getProduct(id: $id) { id } }", {"id": theirs["id"]})
    error = error_of(body)
    assert error["message"] == "Product not found"
    assert error["extensions"]["statusCode"] == 404


def test_customers_browse_every_business(make_client):
    first_client, second_client, customer_client = make_client(), make_client(), make_client()
    create_admin(first_client)
    create_admin(second_client, email="rival@example.com", first_name="Bea")
    laptop = create_product(first_client, name="Laptop")
    create_product(second_client, name="Phone")
    create_customer(customer_client)

    products = gql(customer_client, "{ getProducts { name } }")["data"]["getProducts"]
    assert [p["name"] for p in products] == ["Laptop", "Phone"]

    product = gql(customer_client, "query($id: ID!) { getProduct(id: $id) { name } }", {"id": laptop["id"]})
    assert product["data"]["getProduct"]["name"] == "Laptop"


def test_customers_cannot_create_products(make_client):
    customer_client = make_client()
    create_customer(customer_client)

    body = gql(
        customer_client,
        "mutation($input: CreateProductInput!) { createProduct(createProductInput: $input) { id } }",
        {"input": {"name": "Laptop", "price": 10}},
    )
    assert error_of(body)["extensions"]["statusCode"] == 403


def test_update_product(make_client):
    admin_client = make_client()
    create_admin(admin_client)
    product = create_product(admin_client)

    body = gql(
        admin_client,
        f"""
        mutation($id: ID!, $input: UpdateProductInput!) {{
            updateProduct(id: $id, updateProductInput: $input) {{ {PRODUCT_FIELDS} }}
        }}
        """,
        {"id": product["id"], "input": {"quantity": 0, "category": "Computers"}},
    )

    updated = body["data"]["updateProduct"]
    assert updated["quantity"] == 0
    assert updated["category"] == "Computers"
    assert updated["name"] == "Laptop"


def test_delete_product(make_client, storage):
    admin_client = make_client()
    create_admin(admin_client)
    product = create_product(admin_client)

    body = gql(admin_client, "mutation($id: ID!) { deleteProduct(id: $id) }", {"id": product["id"]})

    assert body["data"]["deleteProduct"] is True
    assert gql(admin_client, "{ getProducts { id } }")["data"]["getProducts"] == []
    missing = gql(admin_client, "mutation($id: ID!) { deleteProduct(id: $id) }", {"id": product["id"]})
    assert error_of(missing)["extensions"]["statusCode"] == 404


def test_product_image_upload_and_delete(db):
    storage = FakeStorage()
    principal = Principal(id="admin-1", role="ADMIN", email="owner@example.com", business_id="biz-1")
    db_product = product_service.create_product(db, ProductCreate(name="Laptop", price=999), principal)

    asyncio.run(product_service.update_product_image(
        db, db_product.id, FakeUpload(filename="laptop.png"), storage, "biz-1"
    ))
    assert db_product.image == "https://cdn.example.com/dynasty/product/image/laptop.png"

    product_service.delete_product_image(db, db_product.id, storage, "biz-1")
    assert db_product.image is None
    assert storage.deleted == ["https://cdn.example.com/dynasty/product/image/laptop.png"]


def test_delete_product_removes_stored_image(db):
    storage = FakeStorage()
    principal = Principal(id="admin-1", role="ADMIN", email="owner@example.com", business_id="biz-1")
    db_product = product_service.create_product(db, ProductCreate(name="Laptop", price=999), principal)
    asyncio.run(product_service.update_product_image(db, db_product.id, FakeUpload(), storage, "biz-1"))

    assert product_service.delete_product(db, db_product.id, storage, "biz-1")
    assert storage.deleted == ["https://cdn.example.com/dynasty/product/image/photo.png"]
