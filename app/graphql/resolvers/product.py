from typing import List

import strawberry
from strawberry.file_uploads import Upload
from strawberry.types import Info

from app.graphql.inputs import CreateProductInput, UpdateProductInput, to_schema
from app.graphql.permissions import current_principal, guarded
from app.graphql.types import ProductType
from app.policies.handlers import (
    CreateProductPolicyHandler,
    DeleteProductPolicyHandler,
    ReadProductPolicyHandler,
    UpdateProductPolicyHandler,
)
from app.schemas.products import ProductCreate, ProductUpdate
from app.services import product_service


@strawberry.type
class ProductQuery:
    @strawberry.field(name="getProducts", permission_classes=guarded(ReadProductPolicyHandler))
    def products(self, info: Info) -> List[ProductType]:
        """Admins see their own catalogue; customers browse every business"""
        principal = current_principal(info)
        return product_service.get_products(info.context["db"], principal.business_id)

    @strawberry.field(name="getProduct", permission_classes=guarded(ReadProductPolicyHandler))
    def product(self, info: Info, id: strawberry.ID) -> ProductType:
        principal = current_principal(info)
        return product_service.get_product(info.context["db"], id, principal.business_id)


@strawberry.type
class ProductMutation:
    @strawberry.mutation(name="createProduct", permission_classes=guarded(CreateProductPolicyHandler))
    def create_product(self, info: Info, create_product_input: CreateProductInput) -> ProductType:
        return product_service.create_product(
            info.context["db"], to_schema(ProductCreate, create_product_input), current_principal(info)
        )

    @strawberry.mutation(name="updateProduct", permission_classes=guarded(UpdateProductPolicyHandler))
    def update_product(self, info: Info, id: strawberry.ID, update_product_input: UpdateProductInput) -> ProductType:
        return product_service.update_product(
            info.context["db"], id, to_schema(ProductUpdate, update_product_input), current_principal(info)
        )

    @strawberry.mutation(name="updateProductImage", permission_classes=guarded(UpdateProductPolicyHandler))
    async def update_product_image(self, info: Info, id: strawberry.ID, image: Upload) -> bool:
        principal = current_principal(info)
        return await product_service.update_product_image(
            info.context["db"], id, image, info.context["storage"], principal.business_id
        )

    @strawberry.mutation(name="deleteProductImage", permission_classes=guarded(UpdateProductPolicyHandler))
    def delete_product_image(self, info: Info, id: strawberry.ID) -> bool:
        principal = current_principal(info)
        return product_service.delete_product_image(
            info.context["db"], id, info.context["storage"], principal.business_id
        )

    @strawberry.mutation(name="deleteProduct", permission_classes=guarded(DeleteProductPolicyHandler))
    def delete_product(self, info: Info, id: strawberry.ID) -> bool:
        principal = current_principal(info)
        return product_service.delete_product(
            info.context["db"], id, info.context["storage"], principal.business_id
        )
