from ..core.seed import seed_demo_data, DEMO_EMAIL, DEMO_PASSWORD, DEMO_SELLER_NAME, DEMO_PRODUCTS
from ..models import User, Seller, Product, Inventory


def test_seed_populates_empty_database(client, db_session):
    assert seed_demo_data(db_session) is True

    user = db_session.query(User).filter(User.email == DEMO_EMAIL).one()
    assert user.seller.seller_name == DEMO_SELLER_NAME
    assert db_session.query(Product).count() == len(DEMO_PRODUCTS) == 5
    assert db_session.query(Inventory).count() == 5

    login = client.post("/api/auth/login", json={"email": DEMO_EMAIL, "password": DEMO_PASSWORD})
    assert login.status_code == 200
    assert login.json()["user"]["is_seller"] is True


def test_seed_skips_when_users_exist(db_session, make_user):
    make_user("existing@glyzier.io")
    assert seed_demo_data(db_session) is False
    assert db_session.query(Seller).count() == 0
