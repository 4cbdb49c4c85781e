"""
Unit tests for the runnable principle examples.
"""
import pytest

from solidguide.principles.violations import srp as bad_srp
from solidguide.principles.violations import ocp as bad_ocp
from solidguide.principles.violations import lsp as bad_lsp
from solidguide.principles.violations import isp as bad_isp
from solidguide.principles.violations import dip as bad_dip
from solidguide.principles.compliant import srp as good_srp
from solidguide.principles.compliant import ocp as good_ocp
from solidguide.principles.compliant import lsp as good_lsp
from solidguide.principles.compliant import isp as good_isp
from solidguide.principles.compliant import dip as good_dip


class TestSingleResponsibility:
    """Tests for the SRP contrast pair."""

    def test_bad_service_fetches_and_emails(self):
        """Test the bad UserService does both jobs."""
        service = bad_srp.UserService()
        user = service.get_user(7)

        assert user["id"] == 7
        assert service.send_email(user, "hi") == "Sending 'hi' to user-7@example.com"

    def test_good_services_split_the_work(self):
        """Test each good class does one job."""
        user = good_srp.UserService().get_user(7)

        assert not hasattr(good_srp.UserService(), "send_email")
        assert good_srp.EmailService().send_email(user, "hi") == "Sending 'hi' to user-7@example.com"


class TestOpenClosed:
    """Tests for the OCP contrast pair."""

    def test_bad_service_branches_on_type(self):
        """Test the bad PaymentService handles the known type strings."""
        service = bad_ocp.PaymentService()

        assert service.process_payment("credit_card", 10) == "Processing credit card payment of 10"
        assert service.process_payment("paypal", 10) == "Processing PayPal payment of 10"

    def test_bad_service_rejects_new_types(self):
        """Test a new payment type needs a code change."""
        with pytest.raises(ValueError, match="Unsupported payment type: bitcoin"):
            bad_ocp.PaymentService().process_payment("bitcoin", 10)

    def test_good_service_accepts_new_implementations(self):
        """Test a new PaymentMethod works without touching PaymentService."""
        class BankTransferPayment(good_ocp.PaymentMethod):
            def pay(self, amount):
                return f"Transferring {amount}"

        service = good_ocp.PaymentService()

        assert service.process_payment(good_ocp.CreditCardPayment(), 5) == "Processing credit card payment of 5"
        assert service.process_payment(good_ocp.PayPalPayment(), 5) == "Processing PayPal payment of 5"
        assert service.process_payment(BankTransferPayment(), 5) == "Transferring 5"

    def test_payment_method_is_abstract(self):
        """Test the interface cannot be instantiated."""
        with pytest.raises(TypeError):
            good_ocp.PaymentMethod()


class TestLiskovSubstitution:
    """Tests for the LSP contrast pair."""

    def test_bad_penguin_breaks_bird_contract(self):
        """Test substituting the bad Penguin for a Bird fails."""
        birds = [bad_lsp.Bird(), bad_lsp.Penguin()]

        assert isinstance(birds[1], bad_lsp.Bird)
        with pytest.raises(NotImplementedError, match="Penguins cannot fly"):
            [bird.fly() for bird in birds]

    def test_good_birds_are_substitutable(self):
        """Test every good Bird honours the Bird contract."""
        birds = [good_lsp.Bird(), good_lsp.Sparrow(), good_lsp.Penguin()]

        assert [bird.eat() for bird in birds] == ["Eating"] * 3

    def test_only_flying_birds_fly(self):
        """Test fly() is only promised by FlyingBird."""
        assert good_lsp.Sparrow().fly() == "Flying"
        assert isinstance(good_lsp.Sparrow(), good_lsp.FlyingBird)
        assert not isinstance(good_lsp.Penguin(), good_lsp.FlyingBird)
        assert good_lsp.Penguin().swim() == "Swimming"


class TestInterfaceSegregation:
    """Tests for the ISP contrast pair."""

    def test_bad_robot_is_forced_to_eat(self):
        """Test the fat interface forces RobotWorker to refuse eat()."""
        robot = bad_isp.RobotWorker()

        assert robot.work() == "Working"
        with pytest.raises(NotImplementedError, match="Robots do not eat"):
            robot.eat()

    def test_good_robot_only_works(self):
        """Test RobotWorker implements only Workable."""
        robot = good_isp.RobotWorker()

        assert robot.work() == "Working"
        assert isinstance(robot, good_isp.Workable)
        assert not isinstance(robot, good_isp.Eatable)
        assert not hasattr(robot, "eat")

    def test_good_human_has_both_capabilities(self):
        """Test HumanWorker implements both narrow interfaces."""
        human = good_isp.HumanWorker()

        assert isinstance(human, good_isp.Workable)
        assert isinstance(human, good_isp.Eatable)
        assert human.eat() == "Eating lunch"


class TestDependencyInversion:
    """Tests for the DIP contrast pair."""

    def test_bad_service_builds_its_own_database(self):
        """Test the bad UserService is welded to MySQLDatabase."""
        service = bad_dip.UserService()

        assert isinstance(service.database, bad_dip.MySQLDatabase)
        assert service.create_user("ada") == "Saved ada to MySQL"

    def test_good_service_accepts_any_database(self):
        """Test the good UserService works with an injected fake."""
        class InMemoryDatabase(good_dip.Database):
            def __init__(self):
                self.rows = []

            def save(self, data):
                self.rows.append(data)
                return f"Saved {data} in memory"

        fake = InMemoryDatabase()
        service = good_dip.UserService(fake)

        assert service.create_user("ada") == "Saved ada in memory"
        assert fake.rows == ["ada"]
        assert good_dip.UserService(good_dip.MySQLDatabase()).create_user("ada") == "Saved ada to MySQL"
