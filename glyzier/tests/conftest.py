import os

# Must be set before the application modules read their configuration
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CACHE_ENABLED"] = "false"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["EMAIL_API_URL"] = ""
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ..main import app
from ..models import Base, User
from ..core.database import get_db

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

DEFAULT_PASSWORD = "secret123"


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client, db_session):
    """Register a user and return (user json, auth headers)."""
    def _make_user(email, password=DEFAULT_PASSWORD, display_name=None, is_admin=False):
        response = client.post("/api/auth/register", json={
            "email": email,
            "password": password,
            "display_name": display_name or email.split("@")[0]
        })
        assert response.status_code == 201, response.text
        body = response.json()
        if is_admin:
            user = db_session.query(User).filter(User.user_id == body["user"]["user_id"]).first()
            user.is_admin = True
            db_session.commit()
        return body["user"], {"Authorization": f"Bearer {body['access_token']}"}
    return _make_user


@pytest.fixture
def make_seller(client, make_user):
    """Register a user who also owns a seller profile."""
    def _make_seller(email, seller_name="Test Studio"):
        user, headers = make_user(email)
        response = client.post("/api/sellers/register", json={"seller_name": seller_name}, headers=headers)
        assert response.status_code == 201, response.text
        return user, headers, response.json()
    return _make_seller


@pytest.fixture
def make_product(client):
    """Create a product as the given seller and set its stock."""
    def _make_product(headers, name="Mountain Print", price=20.0, stock=10, product_type="Print"):
        response = client.post("/api/products", json={
            "product_name": name,
            "type": product_type,
            "price": price
        }, headers=headers)
        assert response.status_code == 201, response.text
        product = response.json()
        if stock is not None:
            stock_response = client.post(f"/api/products/{product['product_id']}/inventory",
                                         json={"qty_on_hand": stock}, headers=headers)
            assert stock_response.status_code == 200, stock_response.text
        return product
    return _make_product
