# package marker for app.models

# Import all models to ensure relationships are properly initialized
from app.models.admin import Admin
from app.models.customer import Customer, Cart
from app.models.employees import Employee, Attendance
from app.models.products import Products
from app.models.sales import Sale

__all__ = [
    "Admin",
    "Customer",
    "Cart",
    "Employee",
    "Attendance",
    "Products",
    "Sale",
]
