"""
Unit tests for models.srv_record module.

Tests:
- SrvRecord construction and validation
- Equality on (target, port) only
- Trailing-dot trimming and seed address formatting
- Immutability
"""

import pytest

from srvdiscovery.models import SrvRecord


# =============================================================================
# Construction Tests
# =============================================================================


class TestSrvRecordInit:
    """SrvRecord construction."""

    def test_defaults(self) -> None:
        record = SrvRecord("node1.example.com.", 27017)
        assert record.priority == 0
        assert record.weight == 0

    def test_all_fields(self) -> None:
        record = SrvRecord("node1.example.com.", 27018, priority=10, weight=5)
        assert record.target == "node1.example.com."
        assert record.port == 27018
        assert record.priority == 10
        assert record.weight == 5

    def test_has_slots(self) -> None:
        assert hasattr(SrvRecord, "__slots__")

    def test_frozen(self) -> None:
        record = SrvRecord("node1.example.com", 27017)
        with pytest.raises(AttributeError):
            record.port = 1  # type: ignore[misc]


class TestSrvRecordValidation:
    """Invalid SrvRecord fields are rejected."""

    def test_empty_target(self) -> None:
        with pytest.raises(ValueError, match="target must not be empty"):
            SrvRecord("", 27017)

    def test_target_null_byte(self) -> None:
        with pytest.raises(ValueError, match="null bytes"):
            SrvRecord("node\x00.example.com", 27017)

    def test_target_wrong_type(self) -> None:
        with pytest.raises(TypeError, match="target must be a str"):
            SrvRecord(123, 27017)  # type: ignore[arg-type]

    @pytest.mark.parametrize("port", [-1, 65536])
    def test_port_out_of_range(self, port: int) -> None:
        with pytest.raises(ValueError, match="port must be between 0 and 65535"):
            SrvRecord("node1.example.com", port)

    def test_port_bool_rejected(self) -> None:
        with pytest.raises(TypeError, match="port must be an int"):
            SrvRecord("node1.example.com", True)  # type: ignore[arg-type]

    def test_port_string_rejected(self) -> None:
        with pytest.raises(TypeError):
            SrvRecord("node1.example.com", "27017")  # type: ignore[arg-type]

    def test_negative_priority(self) -> None:
        with pytest.raises(ValueError, match="priority"):
            SrvRecord("node1.example.com", 27017, priority=-1)


# =============================================================================
# Behaviour Tests
# =============================================================================


class TestSrvRecordEquality:
    """Equality and matching ignore priority and weight."""

    def test_equal_ignores_priority_and_weight(self) -> None:
        assert SrvRecord("a.example.com", 1, priority=1, weight=2) == SrvRecord("a.example.com", 1)

    def test_different_port_not_equal(self) -> None:
        assert SrvRecord("a.example.com", 1) != SrvRecord("a.example.com", 2)

    def test_matches(self) -> None:
        assert SrvRecord("a.example.com.", 1).matches(SrvRecord("a.example.com.", 1, priority=9))

    def test_matches_is_exact_on_target(self) -> None:
        assert not SrvRecord("a.example.com.", 1).matches(SrvRecord("a.example.com", 1))


class TestSrvRecordFormatting:
    """Trailing-dot trimming and seed addresses."""

    def test_trims_single_trailing_dot(self) -> None:
        assert SrvRecord("node1.example.com.", 27017).trimmed_target == "node1.example.com"

    def test_trims_only_one_dot(self) -> None:
        assert SrvRecord("node1.example.com..", 27017).trimmed_target == "node1.example.com."

    def test_no_trailing_dot_unchanged(self) -> None:
        assert SrvRecord("node1.example.com", 27017).trimmed_target == "node1.example.com"

    def test_seed_address(self) -> None:
        assert SrvRecord("node1.example.com.", 27017).to_seed_address() == "node1.example.com:27017"
