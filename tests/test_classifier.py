"""
Tests for product code classification.
"""

import pytest
from structlog.testing import capture_logs

from product_codes.config import Settings
from product_codes.log import configure_logging
from product_codes.models import CodeClassification, ProductCodeType
from product_codes.validation.classifier import classify, describe_code


class TestClassifyNumeric:
    """Tests for numeric code classification."""

    def test_ean8(self):
        """Test EAN-8 detection."""
        assert classify("96385074") == ProductCodeType.EAN_8

    def test_isbn10(self):
        """Test ISBN-10 detection."""
        assert classify("0306406152") == ProductCodeType.ISBN_10
        assert classify("0000000000") == ProductCodeType.ISBN_10

    def test_upc(self):
        """Test UPC detection."""
        assert classify("036000291452") == ProductCodeType.UPC
        assert classify("012345678905") == ProductCodeType.UPC

    def test_ean13(self):
        """Test EAN-13 detection."""
        assert classify("4006381333931") == ProductCodeType.EAN_13

    def test_isbn13_reported_as_ean13(self):
        """Test that ISBN-13 codes are reported as EAN-13."""
        assert classify("9780201379624") == ProductCodeType.EAN_13

    def test_failed_checksum(self):
        """Test that numeric codes with a bad checksum are not classified."""
        assert classify("96385075") == ProductCodeType.NONE
        assert classify("0306406153") == ProductCodeType.NONE
        assert classify("036000291451") == ProductCodeType.NONE
        assert classify("4006381333932") == ProductCodeType.NONE

    def test_unsupported_length(self):
        """Test numeric codes of other lengths."""
        assert classify("1234567") == ProductCodeType.NONE
        assert classify("12345678901") == ProductCodeType.NONE
        assert classify("12345678901234") == ProductCodeType.NONE


class TestClassifyAlphanumeric:
    """Tests for alphanumeric code classification."""

    def test_sku(self):
        """Test SKU detection."""
        assert classify("ABC12345") == ProductCodeType.SKU
        assert classify("ABCDEFGH") == ProductCodeType.SKU

    def test_asin(self):
        """Test ASIN detection."""
        assert classify("B07X6C9RFK") == ProductCodeType.ASIN

    def test_isbn10_with_x_is_asin(self):
        """Test that an X check symbol makes the code alphanumeric."""
        assert classify("080442957X") == ProductCodeType.ASIN

    def test_unsupported_length(self):
        """Test alphanumeric codes of other lengths."""
        assert classify("ABC123") == ProductCodeType.NONE
        assert classify("ABC123456789") == ProductCodeType.NONE


class TestClassifyInput:
    """Tests for input handling."""

    def test_empty_and_none(self):
        """Test that missing input is not classified."""
        assert classify("") == ProductCodeType.NONE
        assert classify(None) == ProductCodeType.NONE

    def test_separator_tolerance(self):
        """Test that separators do not change the result."""
        assert classify("978-0-13-468599-1") == classify("9780134685991")
        assert classify("978-0-13-468599-1") == ProductCodeType.EAN_13

    def test_length_after_normalization(self):
        """Test that length is measured without separators."""
        assert classify("AB-CD-12-34") == ProductCodeType.SKU
        assert classify("0-306-40615-2") == ProductCodeType.ISBN_10

    def test_only_separators(self):
        """Test input that normalizes to nothing."""
        assert classify("--  --") == ProductCodeType.NONE

    @pytest.mark.parametrize(
        "code",
        ["", "x", "12345678", "ABCDEFGHIJ", "٣٤٥٦٧٨٩٠", "!!!", "0" * 13, "a1" * 20],
    )
    def test_result_is_known_variant(self, code):
        """Test that every result is a defined code type."""
        assert classify(code) in set(ProductCodeType)


class TestClassificationLogging:
    """Tests for classification debug events."""

    def test_disabled_by_default(self):
        """Test that nothing is logged unless enabled."""
        with capture_logs() as logs:
            classify("4006381333931")
        assert logs == []

    def test_environment_alone_does_not_enable(self, monkeypatch):
        """Test that the flag only takes effect through configure_logging."""
        monkeypatch.setenv("PRODUCT_CODES_LOG_CLASSIFICATIONS", "true")
        with capture_logs() as logs:
            classify("4006381333931")
        assert logs == []

    def test_enabled(self):
        """Test that a debug event is logged when enabled."""
        configure_logging(
            Settings(_env_file=None, log_level="DEBUG", log_classifications=True)
        )
        with capture_logs() as logs:
            classify("4006-3813-3393-1")

        assert len(logs) == 1
        assert logs[0]["event"] == "Classified code"
        assert logs[0]["log_level"] == "debug"
        assert logs[0]["normalized_code"] == "4006381333931"
        assert logs[0]["code_type"] == "EAN-13"


class TestClassifyIgnoresSettings:
    """Tests that classification does not depend on the environment."""

    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("PRODUCT_CODES_LOG_FORMAT", "xml"),
            ("PRODUCT_CODES_LOG_CLASSIFICATIONS", "maybe"),
            ("PRODUCT_CODES_ENVIRONMENT", "test"),
        ],
    )
    def test_bad_environment_variable(self, monkeypatch, name, value):
        """Test that invalid settings do not break classification."""
        monkeypatch.setenv(name, value)

        assert classify("4006381333931") == ProductCodeType.EAN_13
        assert describe_code("96385074").code_type == ProductCodeType.EAN_8

    def test_bad_env_file(self, monkeypatch, tmp_path):
        """Test that an invalid .env in the working directory is not read."""
        (tmp_path / ".env").write_text("PRODUCT_CODES_LOG_FORMAT=xml\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert classify("4006381333931") == ProductCodeType.EAN_13


class TestDescribeCode:
    """Tests for structured classification results."""

    def test_numeric_code(self):
        """Test a valid numeric code."""
        result = describe_code("978-0-13-468599-1")

        assert isinstance(result, CodeClassification)
        assert result.code == "978-0-13-468599-1"
        assert result.normalized_code == "9780134685991"
        assert result.code_type == ProductCodeType.EAN_13
        assert result.numeric_only
        assert result.checksum_valid
        assert result.is_recognized

    def test_invalid_checksum(self):
        """Test a numeric code that fails its checksum."""
        result = describe_code("036000291451")

        assert result.code_type == ProductCodeType.NONE
        assert result.numeric_only
        assert not result.checksum_valid
        assert not result.is_recognized

    def test_alphanumeric_code(self):
        """Test that shape-only types carry no checksum."""
        result = describe_code("B07X6C9RFK")

        assert result.code_type == ProductCodeType.ASIN
        assert not result.numeric_only
        assert not result.checksum_valid
        assert result.is_recognized

    def test_none(self):
        """Test that None is described as an empty code."""
        result = describe_code(None)

        assert result.code == ""
        assert result.normalized_code == ""
        assert result.code_type == ProductCodeType.NONE

    @pytest.mark.parametrize(
        "code", ["96385074", "0306406152", "ABC12345", "1234", "036000291452"]
    )
    def test_agrees_with_classify(self, code):
        """Test that describe_code reports the classify result."""
        assert describe_code(code).code_type == classify(code)
