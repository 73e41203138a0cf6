ADMIN_FIELDS = "id businessId firstName userName email role avatar"
CUSTOMER_FIELDS = "id firstName userName email role avatar carts { id productId quantity }"
EMPLOYEE_FIELDS = "id businessId firstName email position salary avatar attendance { id clockIn clockOut note }"
PRODUCT_FIELDS = "id businessId name price quantity category image updatedBy"
SALE_FIELDS = "id businessId employeeId productId quantity amount employee { id } product { id }"


def gql(client, query: str, variables: dict = None) -> dict:
    response = client.post("/graphql", json={"query": query, "variables": variables or {}})
    return response.json()


def error_of(body: dict) -> dict:
    assert body.get("errors"), body
    return body["errors"][0]


def create_admin(client, email="owner@example.com", password="supersecret", first_name="Ada") -> dict:
    body = gql(
        client,
        f"""
        mutation CreateAdmin($input: CreateAdminInput!) {{
            createAdmin(createAdminInput: $input) {{ {ADMIN_FIELDS} }}
        }}
        """,
        {"input": {"firstName": first_name, "email": email, "password": password}},
    )
    assert "errors" not in body, body
    return body["data"]["createAdmin"]


def create_customer(client, email="shopper@example.com", password="supersecret", first_name="Kofi") -> dict:
    body = gql(
        client,
        f"""
        mutation CreateCustomer($input: CreateCustomerInput!) {{
            createCustomer(createCustomerInput: $input) {{ {CUSTOMER_FIELDS} }}
        }}
        """,
        {"input": {"firstName": first_name, "email": email, "password": password}},
    )
    assert "errors" not in body, body
    return body["data"]["createCustomer"]


def create_employee(client, first_name="Yaw", email="yaw@example.com", **extra) -> dict:
    body = gql(
        client,
        f"""
        mutation CreateEmployee($input: CreateEmployeeInput!) {{
            createEmployee(createEmployeeInput: $input) {{ {EMPLOYEE_FIELDS} }}
        }}
        """,
        {"input": {"firstName": first_name, "email": email, **extra}},
    )
    assert "errors" not in body, body
    return body["data"]["createEmployee"]


def create_product(client, name="Laptop", price=1499.99, quantity=5, **extra) -> dict:
    body = gql(
        client,
        f"""
        mutation CreateProduct($input: CreateProductInput!) {{
            createProduct(createProductInput: $input) {{ {PRODUCT_FIELDS} }}
        }}
        """,
        {"input": {"name": name, "price": price, "quantity": quantity, **extra}},
    )
    assert "errors" not in body, body
    return body["data"]["createProduct"]


class FakeStorage:
    """In-memory stand-in for the GCS storage service"""

    def __init__(self):
        self.uploaded = []
        self.deleted = []

    async def upload_file(self, file, folder: str) -> str:
        content = await file.read()
        if not content:
            raise ValueError("Uploaded file is empty")
        url = f"https://cdn.example.com/{folder}/{file.filename}"
        self.uploaded.append(url)
        return url

    def delete_image(self, image_url: str) -> bool:
        self.deleted.append(image_url)
        return True


class FakeUpload:
    def __init__(self, content: bytes = b"image-bytes", filename: str = "photo.png"):
        self.content = content
        self.filename = filename

    async def read(self) -> bytes:
        return self.content
