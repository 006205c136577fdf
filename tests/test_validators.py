import pytest

from storefront.core.orders import AddressValidator, PhoneValidator


@pytest.mark.parametrize("phone", ["+12345678901", "1234567890", "+123456789012345", " 1234567890 "])
def test_valid_phones(phone):
    is_valid, normalized, error = PhoneValidator.validate(phone)
    assert is_valid
    assert normalized == phone.strip()
    assert error is None


@pytest.mark.parametrize("phone", ["abc", "", "123456789", "+1234567890123456", "++1234567890", "123-456-7890", "١٢٣٤٥٦٧٨٩٠"])
def test_invalid_phones(phone):
    is_valid, normalized, error = PhoneValidator.validate(phone)
    assert not is_valid
    assert normalized is None
    assert error.startswith("Invalid phone number")


def test_address_min_length():
    assert AddressValidator.validate("123 Main St") == (True, "123 Main St", None)
    assert AddressValidator.validate("12345")[0]
    assert not AddressValidator.validate("1234")[0]
    assert not AddressValidator.validate("")[0]
    assert not AddressValidator.validate("   ab   ")[0]
