from sqlmodel import Session, select
from app.core.config import settings
from app.core.logging import configure_logging, get_logger
from app.core.security import get_password_hash
from app.db.session import engine, create_db_and_tables
from app.models.product import Product
from app.models.user import User, UserRole

logger = get_logger("seed_data")

SAMPLE_PRODUCTS = [
    {
        "name": "Widget",
        "description": "A general purpose widget.",
        "price": 9.99,
        "category": "Tools",
        "stock_quantity": 100,
        "image_url": "https://via.placeholder.com/150",
    },
    {
        "name": "Cordless Drill",
        "description": "18V drill with two batteries and a charger.",
        "price": 89.00,
        "category": "Tools",
        "stock_quantity": 25,
        "image_url": "https://via.placeholder.com/150",
    },
    {
        "name": "Desk Lamp",
        "description": "Adjustable LED lamp with three brightness levels.",
        "price": 24.50,
        "category": "Home",
        "stock_quantity": 60,
        "image_url": "https://via.placeholder.com/150",
    },
]

def seed(session: Session):
    """Create the admin account and sample products. Safe to run repeatedly."""
    admin = session.exec(select(User).where(User.email == settings.ADMIN_EMAIL.lower())).first()
    if admin:
        logger.info("Admin %s already exists. Skipping.", admin.email)
    else:
        admin = User(
            name=settings.ADMIN_NAME,
            email=settings.ADMIN_EMAIL.lower(),
            password_hash=get_password_hash(settings.ADMIN_PASSWORD),
            role=UserRole.ADMIN,
        )
        session.add(admin)
        session.commit()
        session.refresh(admin)
        logger.info("Created admin %s", admin.email)

    # Check if products already exist to avoid duplicates
    existing_products = session.exec(select(Product)).all()
    if existing_products:
        logger.info("Database already contains %d products. Skipping product seed.", len(existing_products))
        return

    for data in SAMPLE_PRODUCTS:
        session.add(Product(**data, created_by=admin.id))
    session.commit()
    logger.info("Seeded %d products", len(SAMPLE_PRODUCTS))

if __name__ == "__main__":
    configure_logging()
    create_db_and_tables()
    with Session(engine) as session:
        seed(session)
