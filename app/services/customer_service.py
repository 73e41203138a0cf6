import logging
from typing import List, Optional

from fastapi import HTTPException, UploadFile, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import CUSTOMER_AVATAR_FOLDER, DEFAULT_AVATAR_URL
from app.core.security import hash_password, verify_password
from app.models.customer import Cart, Customer
from app.models.products import Products
from app.schemas.customer import CartCreate, CartUpdate, CustomerCreate, CustomerLogin, CustomerUpdate
from app.services.storage_service import StorageService
from app.services.uploads import replace_image, reset_image

logger = logging.getLogger(__name__)


def register_customer(db: Session, customer_data: CustomerCreate) -> Customer:
    existing_customer = db.query(Customer).filter(Customer.email == customer_data.email).first()
    if existing_customer:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already exists")

    db_customer = Customer(
        first_name=customer_data.first_name,
        last_name=customer_data.last_name,
        user_name=customer_data.user_name or customer_data.first_name,
        email=customer_data.email,
        phone=customer_data.phone,
        address=customer_data.address,
        password=hash_password(customer_data.password),
    )
    try:
        db.add(db_customer)
        db.commit()
        db.refresh(db_customer)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already exists")

    logger.info(f"Customer account created: {db_customer.email} (ID: {db_customer.id})")
    return db_customer


def login_customer(db: Session, login_data: CustomerLogin) -> Customer:
    db_customer = db.query(Customer).filter(Customer.email == login_data.email).first()
    if not db_customer:
        logger.warning(f"Customer login failed, unknown email: {login_data.email}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No record found for this email")

    if not verify_password(login_data.password, db_customer.password):
        logger.warning(f"Customer login failed, wrong password: {login_data.email}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid password")

    logger.info(f"Customer logged in: {db_customer.email}")
    return db_customer


def get_customers(db: Session) -> List[Customer]:
    return db.query(Customer).order_by(Customer.created_at).all()


def get_customer(db: Session, customer_id: str) -> Customer:
    db_customer = db.query(Customer).filter(Customer.id == customer_id).first()
    if db_customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return db_customer


def update_customer(db: Session, db_customer: Customer, customer_update: CustomerUpdate) -> Customer:
    # Check if email is being changed and if it's already taken
    if customer_update.email and customer_update.email != db_customer.email:
        email_exists = db.query(Customer).filter(Customer.email == customer_update.email).first()
        if email_exists:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already exists")

    update_data = customer_update.model_dump(exclude_unset=True, exclude_none=True)
    if "password" in update_data:
        update_data["password"] = hash_password(update_data["password"])

    for field, value in update_data.items():
        setattr(db_customer, field, value)

    db.commit()
    db.refresh(db_customer)
    return db_customer


async def update_customer_avatar(
    db: Session,
    db_customer: Customer,
    avatar: UploadFile,
    storage: Optional[StorageService],
) -> bool:
    return await replace_image(db, db_customer, "avatar", avatar, CUSTOMER_AVATAR_FOLDER, storage)


def delete_customer_avatar(db: Session, db_customer: Customer, storage: Optional[StorageService]) -> bool:
    return reset_image(db, db_customer, "avatar", DEFAULT_AVATAR_URL, storage)


def delete_customer(db: Session, db_customer: Customer) -> bool:
    customer_id = db_customer.id
    db.delete(db_customer)
    db.commit()
    logger.info(f"Customer deleted: {customer_id}")
    return True


# Cart

def _ensure_product_exists(db: Session, product_id: Optional[str]) -> None:
    if product_id and db.query(Products.id).filter(Products.id == product_id).first() is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")


def get_cart(db: Session, customer_id: str, cart_id: str) -> Cart:
    db_cart = db.query(Cart).filter(Cart.id == cart_id, Cart.customer_id == customer_id).first()
    if db_cart is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cart not found")
    return db_cart


def add_to_cart(db: Session, db_customer: Customer, cart_data: CartCreate) -> Customer:
    _ensure_product_exists(db, cart_data.product_id)
    db_customer.carts.append(Cart(product_id=cart_data.product_id, quantity=cart_data.quantity))
    db.commit()
    db.refresh(db_customer)
    return db_customer


def update_cart(db: Session, db_customer: Customer, db_cart: Cart, cart_update: CartUpdate) -> Customer:
    update_data = cart_update.model_dump(exclude_unset=True, exclude_none=True)
    _ensure_product_exists(db, update_data.get("product_id"))

    for field, value in update_data.items():
        setattr(db_cart, field, value)

    db.commit()
    db.refresh(db_customer)
    return db_customer


def remove_from_cart(db: Session, db_customer: Customer, db_cart: Cart) -> Customer:
    db_customer.carts.remove(db_cart)
    db.commit()
    db.refresh(db_customer)
    return db_customer
