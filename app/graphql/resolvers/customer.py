from types import SimpleNamespace
from typing import List

import strawberry
from strawberry.file_uploads import Upload
from strawberry.types import Info

from app.core.security import clear_auth_cookie, issue_auth_cookie
from app.graphql.inputs import (
    CreateCartInput,
    CreateCustomerInput,
    LoginCustomerInput,
    UpdateCartInput,
    UpdateCustomerInput,
    to_schema,
)
from app.graphql.permissions import authorize, current_principal, guarded
from app.graphql.types import CustomerType
from app.policies.ability import Action, Subject
from app.policies.handlers import (
    CreateCartPolicyHandler,
    DeleteCartPolicyHandler,
    DeleteCustomerPolicyHandler,
    ManageCustomerPolicyHandler,
    ReadCustomerPolicyHandler,
    UpdateCartPolicyHandler,
    UpdateCustomerPolicyHandler,
)
from app.schemas.customer import CartCreate, CartUpdate, CustomerCreate, CustomerLogin, CustomerUpdate
from app.services import customer_service


def _customer_for(info: Info, customer_id: str, action: Action):
    """Load a customer and check the caller may perform action on it"""
    db_customer = customer_service.get_customer(info.context["db"], customer_id)
    authorize(info, action, Subject.CUSTOMER, db_customer)
    return db_customer


@strawberry.type
class CustomerQuery:
    @strawberry.field(name="getCustomers", permission_classes=guarded(ManageCustomerPolicyHandler))
    def customers(self, info: Info) -> List[CustomerType]:
        return customer_service.get_customers(info.context["db"])

    @strawberry.field(name="getCustomerProfile", permission_classes=guarded(ReadCustomerPolicyHandler))
    def profile(self, info: Info) -> CustomerType:
        principal = current_principal(info)
        return customer_service.get_customer(info.context["db"], principal.id)

    @strawberry.field(name="getCustomerById", permission_classes=guarded(ReadCustomerPolicyHandler))
    def customer(self, info: Info, id: strawberry.ID) -> CustomerType:
        return _customer_for(info, id, Action.READ)

    @strawberry.field(name="logoutCustomer")
    def logout_customer(self, info: Info) -> bool:
        clear_auth_cookie(info.context["response"])
        return True


@strawberry.type
class CustomerMutation:
    @strawberry.mutation(name="createCustomer")
    def create_customer(self, info: Info, create_customer_input: CreateCustomerInput) -> CustomerType:
        db_customer = customer_service.register_customer(
            info.context["db"], to_schema(CustomerCreate, create_customer_input)
        )
        issue_auth_cookie(info.context["response"], db_customer)
        return db_customer

    @strawberry.mutation(name="loginCustomer")
    def login_customer(self, info: Info, login_customer_input: LoginCustomerInput) -> CustomerType:
        db_customer = customer_service.login_customer(
            info.context["db"], to_schema(CustomerLogin, login_customer_input)
        )
        issue_auth_cookie(info.context["response"], db_customer)
        return db_customer

    @strawberry.mutation(name="updateCustomer", permission_classes=guarded(UpdateCustomerPolicyHandler))
    def update_customer(
        self, info: Info, id: strawberry.ID, update_customer_input: UpdateCustomerInput
    ) -> CustomerType:
        db_customer = _customer_for(info, id, Action.UPDATE)
        return customer_service.update_customer(
            info.context["db"], db_customer, to_schema(CustomerUpdate, update_customer_input)
        )

    @strawberry.mutation(name="updateCustomerAvatar", permission_classes=guarded(UpdateCustomerPolicyHandler))
    async def update_customer_avatar(self, info: Info, id: strawberry.ID, avatar: Upload) -> bool:
        db_customer = _customer_for(info, id, Action.UPDATE)
        return await customer_service.update_customer_avatar(
            info.context["db"], db_customer, avatar, info.context["storage"]
        )

    @strawberry.mutation(name="deleteCustomerAvatar", permission_classes=guarded(UpdateCustomerPolicyHandler))
    def delete_customer_avatar(self, info: Info, id: strawberry.ID) -> bool:
        db_customer = _customer_for(info, id, Action.UPDATE)
        return customer_service.delete_customer_avatar(info.context["db"], db_customer, info.context["storage"])

    @strawberry.mutation(name="deleteCustomer", permission_classes=guarded(DeleteCustomerPolicyHandler))
    def delete_customer(self, info: Info, id: strawberry.ID) -> bool:
        db_customer = _customer_for(info, id, Action.DELETE)
        deleted = customer_service.delete_customer(info.context["db"], db_customer)
        # A customer deleting their own account is signed out
        if current_principal(info).id == id:
            clear_auth_cookie(info.context["response"])
        return deleted

    @strawberry.mutation(name="addToCart", permission_classes=guarded(CreateCartPolicyHandler))
    def add_to_cart(self, info: Info, customer_id: strawberry.ID, cart_input: CreateCartInput) -> CustomerType:
        authorize(info, Action.CREATE, Subject.CART, SimpleNamespace(customer_id=customer_id))
        db_customer = customer_service.get_customer(info.context["db"], customer_id)
        return customer_service.add_to_cart(info.context["db"], db_customer, to_schema(CartCreate, cart_input))

    @strawberry.mutation(name="updateCart", permission_classes=guarded(UpdateCartPolicyHandler))
    def update_cart(
        self,
        info: Info,
        customer_id: strawberry.ID,
        cart_id: strawberry.ID,
        update_cart_input: UpdateCartInput,
    ) -> CustomerType:
        db = info.context["db"]
        db_customer = customer_service.get_customer(db, customer_id)
        db_cart = customer_service.get_cart(db, customer_id, cart_id)
        authorize(info, Action.UPDATE, Subject.CART, db_cart)
        return customer_service.update_cart(db, db_customer, db_cart, to_schema(CartUpdate, update_cart_input))

    @strawberry.mutation(name="removeFromCart", permission_classes=guarded(DeleteCartPolicyHandler))
    def remove_from_cart(self, info: Info, customer_id: strawberry.ID, cart_id: strawberry.ID) -> CustomerType:
        db = info.context["db"]
        db_customer = customer_service.get_customer(db, customer_id)
        db_cart = customer_service.get_cart(db, customer_id, cart_id)
        authorize(info, Action.DELETE, Subject.CART, db_cart)
        return customer_service.remove_from_cart(db, db_customer, db_cart)
