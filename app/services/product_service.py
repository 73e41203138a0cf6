import logging
from typing import List, Optional

from fastapi import HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from app.core.config import PRODUCT_IMAGE_FOLDER
from app.models.products import Products
from app.policies.ability import Principal
from app.schemas.products import ProductCreate, ProductUpdate
from app.services.storage_service import StorageService
from app.services.uploads import replace_image, reset_image

logger = logging.getLogger(__name__)


def create_product(db: Session, product_data: ProductCreate, principal: Principal) -> Products:
    db_product = Products(
        business_id=principal.business_id,
        updated_by=principal.id,
        **product_data.model_dump(),
    )
    db.add(db_product)
    db.commit()
    db.refresh(db_product)
    logger.info(f"Product created: {db_product.name} (ID: {db_product.id}, Business ID: {db_product.business_id})")
    return db_product


def get_products(db: Session, business_id: Optional[str] = None) -> List[Products]:
    """List products; business_id narrows the list to one business, None lists every business"""
    query = db.query(Products)
    if business_id is not None:
        query = query.filter(Products.business_id == business_id)
    return query.order_by(Products.name).all()


def get_product(db: Session, product_id: str, business_id: Optional[str] = None) -> Products:
    query = db.query(Products).filter(Products.id == product_id)
    if business_id is not None:
        query = query.filter(Products.business_id == business_id)
    db_product = query.first()
    if db_product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return db_product


def update_product(db: Session, product_id: str, product_update: ProductUpdate, principal: Principal) -> Products:
    db_product = get_product(db, product_id, principal.business_id)

    for field, value in product_update.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(db_product, field, value)
    db_product.updated_by = principal.id

    db.commit()
    db.refresh(db_product)
    return db_product


async def update_product_image(
    db: Session,
    product_id: str,
    image: UploadFile,
    storage: Optional[StorageService],
    business_id: str,
) -> bool:
    db_product = get_product(db, product_id, business_id)
    return await replace_image(db, db_product, "image", image, PRODUCT_IMAGE_FOLDER, storage)


def delete_product_image(
    db: Session,
    product_id: str,
    storage: Optional[StorageService],
    business_id: str,
) -> bool:
    db_product = get_product(db, product_id, business_id)
    return reset_image(db, db_product, "image", None, storage)


def delete_product(db: Session, product_id: str, storage: Optional[StorageService], business_id: str) -> bool:
    db_product = get_product(db, product_id, business_id)
    if storage is not None and db_product.image:
        storage.delete_image(db_product.image)
    db.delete(db_product)
    db.commit()
    logger.info(f"Product deleted: {product_id}")
    return True
