"""
Tests for the discount code registry and loyalty code rules.
"""
import pytest

from storefront.core.errors import BusinessRuleViolation, ValidationError
from storefront.services.discount_service import DiscountService
from storefront.services.order_service import OrderService


class TestCodeGeneration:
    """Test discount code naming and the every-3rd-order rule."""

    @pytest.mark.parametrize("order_number,expected", [
        (3, "SAVE10_003"),
        (12, "SAVE10_012"),
        (999, "SAVE10_999"),
        (1002, "SAVE10_1002"),
    ])
    def test_code_name(self, order_number, expected):
        code = DiscountService.generate_discount_code(order_number)
        assert code.code == expected
        assert code.discount == 0.1
        assert code.is_used is False
        assert code.used_at is None
        assert code.created_for_order_number == order_number

    def test_should_generate_only_on_multiples_of_three(self):
        earning = [n for n in range(1, 13) if DiscountService.should_generate_discount(n)]
        assert earning == [3, 6, 9, 12]

    def test_zero_never_earns_a_code(self):
        assert DiscountService.should_generate_discount(0) is False


class TestCalculateDiscount:
    """Test discount amounts are rounded to cents."""

    @pytest.mark.parametrize("subtotal,expected", [
        (999, 99.9),
        (1299, 129.9),
        (498, 49.8),
        (12.34, 1.23),
        (0, 0),
    ])
    def test_ten_percent(self, subtotal, expected):
        assert DiscountService.calculate_discount(subtotal, 0.1) == expected

    def test_half_cent_rounds_up(self):
        assert DiscountService.calculate_discount(0.25, 0.5) == 0.13


class TestRegistry:
    """Test issue, lookup and redemption."""

    def test_issue_and_lookup(self, store):
        issued = DiscountService.issue(store, DiscountService.generate_discount_code(3))
        assert DiscountService.lookup(store, "SAVE10_003") is issued

    def test_lookup_unknown(self, store):
        assert DiscountService.lookup(store, "NOPE") is None

    def test_issue_duplicate_fails(self, store):
        """Test a second code with the same name is refused."""
        DiscountService.issue(store, DiscountService.generate_discount_code(3))
        with pytest.raises(BusinessRuleViolation) as exc_info:
            DiscountService.issue(store, DiscountService.generate_discount_code(3))
        assert exc_info.value.code == "DISCOUNT_CODE_EXISTS"
        assert exc_info.value.status_code == 409

    def test_mark_used(self, store):
        DiscountService.issue(store, DiscountService.generate_discount_code(3))
        used = DiscountService.mark_used(store, "SAVE10_003")
        assert used.is_used is True
        assert used.used_at is not None

    def test_mark_used_unknown(self, store):
        assert DiscountService.mark_used(store, "NOPE") is None

    def test_list_unused(self, store):
        for n in (3, 6, 9):
            DiscountService.issue(store, DiscountService.generate_discount_code(n))
        DiscountService.mark_used(store, "SAVE10_006")

        assert len(DiscountService.list_all(store)) == 3
        assert [c.code for c in DiscountService.list_unused(store)] == ["SAVE10_003", "SAVE10_009"]


class TestAdminIssuance:
    """Test manual discount code issuance."""

    def test_requires_force_flag(self, store):
        with pytest.raises(ValidationError) as exc_info:
            DiscountService.generate_admin_code(store, False)
        assert exc_info.value.code == "ADMIN_ONLY"
        assert store.discount_codes == {}

    def test_named_after_next_order_number(self, store):
        """Test the code is named after the counter plus one without creating an order."""
        OrderService.next_order_number(store)
        code = DiscountService.generate_admin_code(store, True)

        assert code.code == "SAVE10_002"
        assert code.created_for_order_number == 2
        assert store.order_counter == 1
        assert store.orders == {}

    def test_repeated_admin_issuance_collides(self, store):
        """Test a second manual issue before any order is refused."""
        DiscountService.generate_admin_code(store, True)
        with pytest.raises(BusinessRuleViolation) as exc_info:
            DiscountService.generate_admin_code(store, True)
        assert exc_info.value.code == "DISCOUNT_CODE_EXISTS"
