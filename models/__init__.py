from models.users import User
from models.establishments import Establishment
from models.categories import Category
from models.products import Product
from models.hours import OperatingHours, DeliveryHours
from models.orders import Order
from models.order_items import OrderItem
from models.enums import UserRole, EstablishmentStatus, EstablishmentType, OrderStatus

__all__ = ["User", "Establishment", "Category", "Product", "OperatingHours", "DeliveryHours",
           "Order", "OrderItem", "UserRole", "EstablishmentStatus", "EstablishmentType", "OrderStatus"]
