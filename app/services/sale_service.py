import logging
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.models.employees import Employee
from app.models.products import Products
from app.models.sales import Sale
from app.schemas.sales import SaleCreate, SaleUpdate

logger = logging.getLogger(__name__)


def _ensure_references(db: Session, business_id: str, employee_id: str = None, product_id: str = None) -> None:
    """Sales may only point at employees and products of the same business"""
    if employee_id is not None:
        employee = db.query(Employee.id).filter(
            Employee.id == employee_id,
            Employee.business_id == business_id
        ).first()
        if employee is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")

    if product_id is not None:
        product = db.query(Products.id).filter(
            Products.id == product_id,
            Products.business_id == business_id
        ).first()
        if product is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")


def create_sale(db: Session, sale_data: SaleCreate, business_id: str) -> Sale:
    """
    Create a new sale
    amount and quantity arrive already coerced to float and int by the schema
    """
    _ensure_references(db, business_id, sale_data.employee_id, sale_data.product_id)

    db_sale = Sale(business_id=business_id, **sale_data.model_dump())
    db.add(db_sale)
    db.commit()
    db.refresh(db_sale)
    logger.info(f"Sale recorded: {db_sale.id} (employee {db_sale.employee_id}, product {db_sale.product_id})")
    return db_sale


def get_sales(db: Session, business_id: str) -> List[Sale]:
    return db.query(Sale).filter(Sale.business_id == business_id).order_by(Sale.created_at).all()


def get_sale(db: Session, sale_id: str, business_id: str) -> Sale:
    if not sale_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Sale id is required")

    db_sale = db.query(Sale).filter(Sale.id == sale_id, Sale.business_id == business_id).first()
    if db_sale is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sale not found")
    return db_sale


def get_sales_by_employee(db: Session, employee_id: str, business_id: str) -> List[Sale]:
    if not employee_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Employee Id required")

    return (
        db.query(Sale)
        .filter(Sale.employee_id == employee_id, Sale.business_id == business_id)
        .order_by(Sale.created_at)
        .all()
    )


def get_sales_by_product(db: Session, product_id: str, business_id: str) -> List[Sale]:
    if not product_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Product Id required")

    return (
        db.query(Sale)
        .filter(Sale.product_id == product_id, Sale.business_id == business_id)
        .order_by(Sale.created_at)
        .all()
    )


def update_sale(db: Session, sale_id: str, sale_update: SaleUpdate, business_id: str) -> Sale:
    db_sale = get_sale(db, sale_id, business_id)

    update_data = sale_update.model_dump(exclude_unset=True, exclude_none=True)
    _ensure_references(db, business_id, update_data.get("employee_id"), update_data.get("product_id"))

    for field, value in update_data.items():
        setattr(db_sale, field, value)

    db.commit()
    db.refresh(db_sale)
    return db_sale


def delete_sale(db: Session, sale_id: str, business_id: str) -> bool:
    db_sale = get_sale(db, sale_id, business_id)
    db.delete(db_sale)
    db.commit()
    logger.info(f"Sale deleted: {sale_id}")
    return True
