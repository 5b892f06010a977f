from sqlalchemy.orm import Session
from core.exceptions import NotFoundError, ValidationError
from models.categories import Category
from models.products import Product
from models.order_items import OrderItem
from schemas.menu_schemas import CategoryRequest, ProductRequest
from utils.logger import get_logger

logger = get_logger(__name__)


class MenuService:
    """
    Category and product management for the calling establishment.
    Every lookup is filtered by establishment_id, so one tenant can never
    read or modify another tenant's menu.
    """

    @staticmethod
    def list_categories(db: Session, establishment_id: int) -> list[Category]:
        return (
            db.query(Category)
            .filter(Category.establishment_id == establishment_id)
            .order_by(Category.name.asc())
            .all()
        )

    @staticmethod
    def get_category(db: Session, establishment_id: int, category_id: int) -> Category:
        category = db.query(Category).filter(
            Category.id == category_id,
            Category.establishment_id == establishment_id
        ).one_or_none()
        if not category:
            raise NotFoundError("Category not found")
        return category

    @staticmethod
    def create_category(db: Session, establishment_id: int, body: CategoryRequest) -> Category:
        category = Category(establishment_id=establishment_id, name=body.name, description=body.description)
        db.add(category)
        db.commit()
        db.refresh(category)

        logger.info("Category created", extra={"establishment_id": establishment_id, "category_id": category.id})
        return category

    @staticmethod
    def update_category(db: Session, establishment_id: int, category_id: int, body: CategoryRequest) -> Category:
        category = MenuService.get_category(db, establishment_id, category_id)
        category.name = body.name
        category.description = body.description
        db.commit()
        db.refresh(category)
        return category

    @staticmethod
    def delete_category(db: Session, establishment_id: int, category_id: int) -> None:
        category = MenuService.get_category(db, establishment_id, category_id)
        if category.products:
            raise ValidationError("Category still has products; move or delete them first")

        db.delete(category)
        db.commit()
        logger.info("Category deleted", extra={"establishment_id": establishment_id, "category_id": category_id})

    @staticmethod
    def list_products(db: Session, establishment_id: int) -> list[Product]:
        return (
            db.query(Product)
            .filter(Product.establishment_id == establishment_id)
            .order_by(Product.category_id.asc(), Product.position.asc(), Product.name.asc())
            .all()
        )

    @staticmethod
    def get_product(db: Session, establishment_id: int, product_id: int) -> Product:
        product = db.query(Product).filter(
            Product.id == product_id,
            Product.establishment_id == establishment_id
        ).one_or_none()
        if not product:
            raise NotFoundError("Product not found")
        return product

    @staticmethod
    def create_product(db: Session, establishment_id: int, body: ProductRequest) -> Product:
        # the category must belong to the same establishment
        MenuService.get_category(db, establishment_id, body.category_id)

        product = Product(establishment_id=establishment_id, **body.model_dump())
        db.add(product)
        db.commit()
        db.refresh(product)

        logger.info("Product created", extra={"establishment_id": establishment_id, "product_id": product.id})
        return product

    @staticmethod
    def update_product(db: Session, establishment_id: int, product_id: int, body: ProductRequest) -> Product:
        product = MenuService.get_product(db, establishment_id, product_id)
        MenuService.get_category(db, establishment_id, body.category_id)

        for field, value in body.model_dump().items():
            setattr(product, field, value)

        db.commit()
        db.refresh(product)
        return product

    @staticmethod
    def delete_product(db: Session, establishment_id: int, product_id: int) -> bool:
        """
        Delete a product. Products that appear in past orders are only
        deactivated, so order history keeps its line items.

        Returns True when the row was deleted, False when it was deactivated.
        """
        product = MenuService.get_product(db, establishment_id, product_id)

        referenced = db.query(OrderItem.id).filter(OrderItem.product_id == product.id).first() is not None
        if referenced:
            product.is_active = False
            db.commit()
            logger.info("Product deactivated (referenced by orders)",
                        extra={"establishment_id": establishment_id, "product_id": product_id})
            return False

        db.delete(product)
        db.commit()
        logger.info("Product deleted", extra={"establishment_id": establishment_id, "product_id": product_id})
        return True
