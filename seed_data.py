from sqlmodel import Session, select
from app.db.session import engine, create_db_and_tables
from app.models.product import Product
from app.models.support import Support

def seed_products(session: Session):
    existing_products = session.exec(select(Product)).all()
    if existing_products:
        print(f"Database already contains {len(existing_products)} products. Skipping seed.")
        return

    print("Seeding initial products...")
    products = [
        Product(pid="p1", name="Oversized Cotton Hoodie", image="/images/hoodie.webp", price=59000),
        Product(pid="p2", name="Wide Denim Pants", image="/images/denim.webp", price=45000),
        Product(pid="p3", name="Basic Crew Tee", image="/images/tee.webp", price=19000),
        Product(pid="p4", name="Wool Blend Coat", image="/images/coat.webp", price=189000),
    ]
    for product in products:
        session.add(product)
    session.commit()
    print(f"Successfully seeded {len(products)} products!")

def seed_support(session: Session):
    if session.exec(select(Support)).first():
        print("Support notices already present. Skipping seed.")
        return

    print("Seeding support notices...")
    session.add(Support(stype="notice", title="Shipping schedule", content="Orders placed before 2pm ship the same day."))
    session.add(Support(stype="faq", title="How do I change the size of a cart item?", content="Remove the line and add the new size."))
    session.commit()

if __name__ == "__main__":
    print("Creating database and tables...")
    create_db_and_tables()
    with Session(engine) as session:
        seed_products(session)
        seed_support(session)
