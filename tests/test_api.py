"""HTTP tests for the dashboard routers."""

from app.api.dependencies import get_identity_provider
from app.core.exceptions import CredentialsSignin
from app.main import app
from app.models.users import UserOut

from conftest import CUSTOMER_ID, OTHER_CUSTOMER_ID

INVOICE_FORM = {"customerId": CUSTOMER_ID, "amount": "45.00", "status": "paid"}


def test_health(client) -> None:
    assert client.get("/health").json() == {"status": "ok"}


class TestInvoiceEndpoints:
    def test_create_redirects_to_list(self, client, cache) -> None:
        res = client.post(
            "/dashboard/invoices/create", data=INVOICE_FORM, follow_redirects=False
        )

        assert res.status_code == 303
        assert res.headers["location"] == "/dashboard/invoices"
        assert cache.revalidated == ["/dashboard/invoices"]

        listing = client.get("/dashboard/invoices").json()
        assert listing["total"] == 1
        item = listing["items"][0]
        assert item["amount"] == 4500
        assert item["customer_name"] == "Ada"
        assert item["status"] == "paid"

    def test_validation_errors_rendered(self, client, cache) -> None:
        res = client.post(
            "/dashboard/invoices/create",
            data={"amount": "0", "status": "paid"},
            follow_redirects=False,
        )

        assert res.status_code == 200
        assert res.json() == {
            "message": "Missing Fields. Failed to Create Invoice.",
            "error": {
                "customerId": ["Please select a customer."],
                "amount": ["Please enter an amount greater than $0."],
            },
        }
        assert cache.revalidated == []

    def test_list_is_cached_until_a_mutation(self, client) -> None:
        assert client.get("/dashboard/invoices").json()["total"] == 0
        client.post("/dashboard/invoices/create", data=INVOICE_FORM, follow_redirects=False)
        assert client.get("/dashboard/invoices").json()["total"] == 1

    def test_edit_then_delete(self, client) -> None:
        client.post("/dashboard/invoices/create", data=INVOICE_FORM, follow_redirects=False)
        invoice_id = client.get("/dashboard/invoices").json()["items"][0]["id"]

        res = client.post(
            f"/dashboard/invoices/{invoice_id}/edit",
            data={"customerId": CUSTOMER_ID, "amount": "10.50", "status": "pending"},
            follow_redirects=False,
        )
        assert res.status_code == 303
        assert client.get("/dashboard/invoices").json()["items"][0]["amount"] == 1050

        res = client.post(f"/dashboard/invoices/{invoice_id}/delete")
        assert res.json() == {"message": "Deleted Invoice.", "error": None}
        assert client.get("/dashboard/invoices").json()["total"] == 0

    def test_delete_unknown_id(self, client) -> None:
        res = client.post("/dashboard/invoices/missing/delete")
        assert res.json()["message"] == "Deleted Invoice."


class TestCustomerEndpoints:
    def test_create(self, client) -> None:
        res = client.post(
            "/dashboard/customers/create",
            data={"name": "Linus", "email": "linus@example.com", "imageUrl": "/img/l.png"},
            follow_redirects=False,
        )

        assert res.status_code == 303
        assert res.headers["location"] == "/dashboard/customers"
        names = [c["name"] for c in client.get("/dashboard/customers").json()["items"]]
        assert names == ["Ada", "Grace", "Linus"]

    def test_edit_invalid(self, client) -> None:
        res = client.post(
            f"/dashboard/customers/{CUSTOMER_ID}/edit",
            data={"name": "", "email": "ada@example.com", "imageUrl": "/img/ada.png"},
        )
        assert res.json() == {
            "message": "Missing Fields. Failed to Update Customer.",
            "error": {"name": ["Please enter a name."]},
        }

    def test_delete(self, client, cache) -> None:
        res = client.post(f"/dashboard/customers/{OTHER_CUSTOMER_ID}/delete")

        assert res.status_code == 200
        assert res.json() == {"message": "Deleted Customer.", "error": None}
        assert cache.revalidated == ["/dashboard/customers"]
        ids = [c["id"] for c in client.get("/dashboard/customers").json()["items"]]
        assert ids == [CUSTOMER_ID]


class TestLogin:
    class Provider:
        def __init__(self, error=None):
            self.error = error

        def sign_in(self, credentials):
            if self.error:
                raise self.error
            return UserOut(id="u1", name="User", email=credentials["email"])

    def test_success(self, client) -> None:
        app.dependency_overrides[get_identity_provider] = lambda: self.Provider()
        res = client.post(
            "/login",
            data={"email": "user@nextmail.com", "password": "123456"},
            follow_redirects=False,
        )
        assert res.status_code == 303
        assert res.headers["location"] == "/dashboard"

    def test_invalid_credentials(self, client) -> None:
        app.dependency_overrides[get_identity_provider] = lambda: self.Provider(
            CredentialsSignin("nope")
        )
        res = client.post("/login", data={"email": "x@example.com", "password": "bad"})
        assert res.json()["message"] == "Invalid credentials."
