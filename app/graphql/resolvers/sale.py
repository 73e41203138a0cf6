from typing import List

import strawberry
from strawberry.types import Info

from app.graphql.inputs import CreateSaleInput, UpdateSaleInput, to_schema
from app.graphql.permissions import current_principal, guarded
from app.graphql.types import SaleType
from app.policies.handlers import (
    CreateSalePolicyHandler,
    DeleteSalePolicyHandler,
    ReadSalePolicyHandler,
    UpdateSalePolicyHandler,
)
from app.schemas.sales import SaleCreate, SaleUpdate
from app.services import sale_service


@strawberry.type
class SaleQuery:
    @strawberry.field(name="getSales", permission_classes=guarded(ReadSalePolicyHandler))
    def sales(self, info: Info) -> List[SaleType]:
        return sale_service.get_sales(info.context["db"], current_principal(info).business_id)

    @strawberry.field(name="getSale", permission_classes=guarded(ReadSalePolicyHandler))
    def sale(self, info: Info, id: strawberry.ID) -> SaleType:
        return sale_service.get_sale(info.context["db"], id, current_principal(info).business_id)

    @strawberry.field(name="getSalesByEmployee", permission_classes=guarded(ReadSalePolicyHandler))
    def sales_by_employee(self, info: Info, employee_id: strawberry.ID) -> List[SaleType]:
        return sale_service.get_sales_by_employee(
            info.context["db"], employee_id, current_principal(info).business_id
        )

    @strawberry.field(name="getSalesByProduct", permission_classes=guarded(ReadSalePolicyHandler))
    def sales_by_product(self, info: Info, product_id: strawberry.ID) -> List[SaleType]:
        return sale_service.get_sales_by_product(
            info.context["db"], product_id, current_principal(info).business_id
        )


@strawberry.type
class SaleMutation:
    @strawberry.mutation(name="createSale", permission_classes=guarded(CreateSalePolicyHandler))
    def create_sale(self, info: Info, create_sale_input: CreateSaleInput) -> SaleType:
        return sale_service.create_sale(
            info.context["db"], to_schema(SaleCreate, create_sale_input), current_principal(info).business_id
        )

    @strawberry.mutation(name="updateSale", permission_classes=guarded(UpdateSalePolicyHandler))
    def update_sale(self, info: Info, id: strawberry.ID, update_sale_input: UpdateSaleInput) -> SaleType:
        return sale_service.update_sale(
            info.context["db"], id, to_schema(SaleUpdate, update_sale_input), current_principal(info).business_id
        )

    @strawberry.mutation(name="deleteSale", permission_classes=guarded(DeleteSalePolicyHandler))
    def delete_sale(self, info: Info, id: strawberry.ID) -> bool:
        return sale_service.delete_sale(info.context["db"], id, current_principal(info).business_id)
